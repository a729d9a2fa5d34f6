"""Shared test fixtures."""

import pytest

from pysagacal.config import CalendarKind, validate_config

EPOCH = 1_000_000_000
THIRD_AGE_START = -5_000_000_000


@pytest.fixture
def absolute_config():
    return validate_config({}, CalendarKind.ABSOLUTE)


@pytest.fixture
def dune_config():
    return validate_config(
        {"epoch_name": "AG", "epoch_timestamp": EPOCH},
        CalendarKind.EPOCH_RELATIVE,
    )


@pytest.fixture
def middle_earth_epoch_config():
    return validate_config(
        {
            "epoch_name": "TA",
            "epoch_timestamp": EPOCH,
            "age_offsets": {"TA": 0, "SA": -3441},
        },
        CalendarKind.EPOCH_RELATIVE,
    )


@pytest.fixture
def middle_earth_ages_config():
    return validate_config(
        {
            "ages": [
                {"name": "Second Age", "start_timestamp": -10_000_000_000, "end_timestamp": THIRD_AGE_START},
                {"name": "Third Age", "start_timestamp": THIRD_AGE_START},
            ]
        },
        CalendarKind.AGE_BASED,
    )
