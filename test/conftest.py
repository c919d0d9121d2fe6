import pytest


@pytest.fixture
def installed_releases():
    # A plausible set of runtimes found on a machine, oldest first, including
    # a milestone build and two spellings of the same release.
    return [
        "1.5.0_22",
        "1.6.0_20",
        "1.6.0_45",
        "1.7.0-ea",
        "1.7.0_80",
        "1.8",
        "1.8.0",
    ]
