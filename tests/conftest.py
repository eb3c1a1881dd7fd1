"""Shared test fixtures."""

import pytest

from gmaps_urls.paths import Path
from gmaps_urls.staticmaps import StaticMapsUrlBuilder
from gmaps_urls.timezone import TimeZoneUrlBuilder


@pytest.fixture
def builder():
    """Empty static map builder."""
    return StaticMapsUrlBuilder()


@pytest.fixture
def sized_builder():
    """Static map builder holding only the mandatory size and key."""
    return StaticMapsUrlBuilder().add_size(640, 480).add_key("key")


@pytest.fixture
def paris_path():
    """Two-point path across central Paris."""
    return Path().add_point(48.85, 2.35).add_point(48.86, 2.36)


@pytest.fixture
def timezone_builder():
    """Empty time zone builder."""
    return TimeZoneUrlBuilder()
