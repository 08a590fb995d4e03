"""Unit tests for sale code generation."""

import re
from datetime import datetime, timezone

from pos.domain.service.sale_code import generate_sale_code

MOMENT = datetime(2026, 10, 19, 12, 0, 0, 123000, tzinfo=timezone.utc)


class TestGenerateSaleCode:

    def test_format(self):
        code = generate_sale_code(MOMENT)
        millis = int(MOMENT.timestamp() * 1000)
        assert re.fullmatch(rf"V{millis}\d{{3}}", code)

    def test_defaults_to_current_time(self):
        before = int(datetime.now(timezone.utc).timestamp() * 1000)
        code = generate_sale_code()
        after = int(datetime.now(timezone.utc).timestamp() * 1000)
        millis = int(code[1:-3])
        assert before <= millis <= after

    def test_random_suffix_varies(self):
        codes = {generate_sale_code(MOMENT) for _ in range(50)}
        assert len(codes) > 1
