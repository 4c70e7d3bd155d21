import pytest

from pyprofiler.motion import SampleStore

from sample_data import (
    S1_ROWS,
    CRUISE_ROWS,
    SHORT_BRAKE_ROWS,
    OFFSET_ROWS,
    OVERLAP_ROWS,
    FAST_START_ROWS
)


@pytest.fixture
def s1_store():
    return SampleStore.from_rows(S1_ROWS)


@pytest.fixture
def cruise_store():
    return SampleStore.from_rows(CRUISE_ROWS)


@pytest.fixture
def short_brake_store():
    return SampleStore.from_rows(SHORT_BRAKE_ROWS)


@pytest.fixture
def offset_store():
    return SampleStore.from_rows(OFFSET_ROWS)


@pytest.fixture
def overlap_store():
    return SampleStore.from_rows(OVERLAP_ROWS)


@pytest.fixture
def fast_start_store():
    return SampleStore.from_rows(FAST_START_ROWS)
