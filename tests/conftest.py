"""
Shared fixtures for the citybars test suite.

Provides:
- a headless matplotlib backend (Agg) for every test
- a small explorer layout (10 bars on screen, 2px context bars)
- a 25-city list with a few "spring" names in and out of the first window
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from citybars import CityRecord
from citybars.chartspec import ExplorerSpec
from citybars.state import ExplorerState

CITY_NAMES = [
    "Springfield", "Boston", "Austin", "Denver", "Springdale",
    "Miami", "Tampa", "Seattle", "Portland", "Phoenix",
    "Dallas", "Houston", "Chicago", "Detroit", "Atlanta",
    "Nashville", "Memphis", "Raleigh", "Tucson", "Omaha",
    "Palm Springs", "Fresno", "Boise", "Reno", "Madison",
]


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def cities():
    return [CityRecord(key=name, value=(i % 7) + 1) for i, name in enumerate(CITY_NAMES)]


@pytest.fixture
def spec():
    # main view 350x200 px -> 10 bars of 20px, viewport 20 context px
    return ExplorerSpec(window_width=600, window_height=350)


@pytest.fixture
def state(cities, spec):
    return ExplorerState.from_spec(cities, spec)
