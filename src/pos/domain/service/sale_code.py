"""Domain service: sale code generation.

Codes read like ``V1760889600123042``: the letter V, the checkout time
in Unix milliseconds, then three random digits.  The random suffix comes
from ``secrets`` so two registers started at the same instant do not
share a sequence.  Uniqueness is still checked against the ledger by
the checkout handler; this function only makes collisions unlikely.
"""

from __future__ import annotations

import secrets
from datetime import datetime, timezone

SALE_CODE_PREFIX = "V"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def generate_sale_code(now: datetime | None = None) -> str:
    moment = now or utc_now()
    millis = int(moment.timestamp() * 1000)
    return f"{SALE_CODE_PREFIX}{millis}{secrets.randbelow(1000):03d}"
