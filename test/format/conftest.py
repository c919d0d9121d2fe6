import pytest

from jsr56._types import ReleaseMatch

_TEST_MATCH_DATA = [
    ReleaseMatch("1.6.0_20", "1.6*"),
    ReleaseMatch("1.7.0-ea"),
    ReleaseMatch("1.8.0_202", "1.8+&1.8*"),
]


@pytest.fixture(autouse=True)
def match_data():
    return _TEST_MATCH_DATA


@pytest.fixture(autouse=True)
def no_match_data():
    return []
