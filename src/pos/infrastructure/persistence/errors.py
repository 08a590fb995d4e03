"""Translation of SQLAlchemy errors into domain exceptions.

Nothing above the persistence package ever sees a driver exception.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from pos.domain.exceptions import DuplicateCodeError, ProductInUseError, StorageError

logger = logging.getLogger(__name__)


def is_unique_violation(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return "unique" in message or "duplicate key" in message


def is_foreign_key_violation(exc: IntegrityError) -> bool:
    return "foreign key" in str(exc.orig).lower()


@contextmanager
def translate_errors(
    action: str,
    duplicate_message: str | None = None,
    in_use_message: str | None = None,
) -> Iterator[None]:
    """Re-raise storage failures raised while performing ``action``.

    A unique-constraint clash becomes DuplicateCodeError when
    ``duplicate_message`` is given, a foreign-key clash becomes
    ProductInUseError when ``in_use_message`` is given; everything else
    becomes StorageError.  So does an integer the driver cannot bind.
    """
    try:
        yield
    except IntegrityError as exc:
        if duplicate_message is not None and is_unique_violation(exc):
            raise DuplicateCodeError(duplicate_message) from exc
        if in_use_message is not None and is_foreign_key_violation(exc):
            raise ProductInUseError(in_use_message) from exc
        logger.error("Integrity error while trying to %s: %s", action, exc.orig)
        raise StorageError(f"Could not {action}: {exc.orig}") from exc
    except SQLAlchemyError as exc:
        logger.error("Storage error while trying to %s: %s", action, exc)
        raise StorageError(f"Could not {action}: {exc}") from exc
    except OverflowError as exc:
        logger.error("Value out of range while trying to %s: %s", action, exc)
        raise StorageError(f"Could not {action}: {exc}") from exc
