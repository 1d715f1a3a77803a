"""Fixtures shared by httplog tests."""
from __future__ import annotations

import re

import pytest

from beaver.testing import RecordingSend


@pytest.fixture()
def line_re() -> re.Pattern[str]:
    """[prefix] timestamp duration ip status method path referer user-agent"""
    return re.compile(
        r"^(\w+ )?\d{4}(-\d{2}){2}T\d{2}(:\d{2}){2}\.\d{6}[+-]\d{2}:\d{2} "
        r"[\d.]+(ns|µs|ms|s) \d{1,3}(\.\d{1,3}){3} \d{1,3} GET /\w* .*\n$"
    )


@pytest.fixture()
def sent() -> RecordingSend:
    return RecordingSend()
