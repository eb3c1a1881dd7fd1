"""Tests for gmaps_urls.timezone."""

import datetime

import pytest

from gmaps_urls.errors import DuplicateParameterError, InvalidStateError, MissingParameterError
from gmaps_urls.options import TimeZoneOptions
from gmaps_urls.timezone import TimeZoneParameter, TimeZoneUrlBuilder

BASE = "https://maps.googleapis.com/maps/api/timezone/json?"


class TestAddParameters:
    @pytest.mark.parametrize("lat, lng", [(91, 0), (-91, 0), (0, 181), (0, -181)])
    def test_location_validated_immediately(self, timezone_builder, lat, lng):
        with pytest.raises(ValueError):
            timezone_builder.add_location(lat, lng)
        assert timezone_builder.parameters == {}

    def test_location_value(self, timezone_builder):
        timezone_builder.add_location(42.057399, 2.056392)
        assert timezone_builder.parameters[TimeZoneParameter.LOCATION] == "42.057399,2.056392"

    def test_timestamp_from_epoch_seconds(self, timezone_builder):
        timezone_builder.add_timestamp(1704067200)
        assert timezone_builder.parameters[TimeZoneParameter.TIMESTAMP] == "1704067200"

    def test_timestamp_from_aware_datetime(self, timezone_builder):
        timezone_builder.add_timestamp(datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc))
        assert timezone_builder.parameters[TimeZoneParameter.TIMESTAMP] == "1704067200"

    def test_timestamp_from_naive_datetime_uses_local_time(self, timezone_builder):
        moment = datetime.datetime(2024, 1, 1, 12, 30)
        timezone_builder.add_timestamp(moment)
        assert timezone_builder.parameters[TimeZoneParameter.TIMESTAMP] == "%d" % moment.timestamp()

    @pytest.mark.parametrize("moment", ["abc", "1704067200", None, True, datetime.date(2024, 1, 1)])
    def test_timestamp_rejects_other_types(self, timezone_builder, moment):
        with pytest.raises(TypeError):
            timezone_builder.add_timestamp(moment)
        assert TimeZoneParameter.TIMESTAMP not in timezone_builder.parameters

    @pytest.mark.parametrize("lat, lng", [(float("nan"), 0), (0, float("nan"))])
    def test_location_rejects_nan(self, timezone_builder, lat, lng):
        with pytest.raises(ValueError):
            timezone_builder.add_location(lat, lng)

    @pytest.mark.parametrize("language", ["", " ", "fra", None])
    def test_rejects_invalid_language(self, timezone_builder, language):
        with pytest.raises(ValueError):
            timezone_builder.add_language(language)

    def test_rejects_blank_key(self, timezone_builder):
        with pytest.raises(ValueError):
            timezone_builder.add_key("")

    def test_duplicate_parameter(self, timezone_builder):
        timezone_builder.add_key("key")
        with pytest.raises(DuplicateParameterError):
            timezone_builder.add_key("other")
        with pytest.raises(ValueError):
            timezone_builder.add_key("other")
        with pytest.raises(InvalidStateError):
            timezone_builder.add_key("other")


class TestBuild:
    def test_full_url(self, timezone_builder):
        url = (timezone_builder
               .add_location(42.057399, 2.056392)
               .add_timestamp(1704067200)
               .add_language("fr")
               .add_key("key")
               .build())
        assert url == BASE + "location=42.057399%2C2.056392&timestamp=1704067200&language=fr&key=key"

    def test_nothing_added(self, timezone_builder):
        with pytest.raises(MissingParameterError):
            timezone_builder.build()

    def test_missing_location(self, timezone_builder):
        timezone_builder.add_timestamp(0).add_key("key")
        with pytest.raises(MissingParameterError):
            timezone_builder.build()

    def test_missing_timestamp(self, timezone_builder):
        timezone_builder.add_location(0, 0).add_key("key")
        with pytest.raises(MissingParameterError):
            timezone_builder.build()

    def test_missing_key(self, timezone_builder):
        timezone_builder.add_location(0, 0).add_timestamp(0)
        with pytest.raises(MissingParameterError):
            timezone_builder.build()

    def test_disabled_key_check(self):
        builder = TimeZoneUrlBuilder({"disable_api_key_check": True})
        url = builder.add_location(0, 0).add_timestamp(0).build()
        assert url == BASE + "location=0%2C0&timestamp=0"

    def test_parameters_only_without_encoding(self):
        builder = TimeZoneUrlBuilder(TimeZoneOptions(return_parameters_only=True, disable_url_encoding=True))
        url = builder.add_location(1.5, 2.5).add_timestamp(10).add_key("key").build()
        assert url == "location=1.5,2.5&timestamp=10&key=key"

    def test_build_is_repeatable(self, timezone_builder):
        timezone_builder.add_location(0, 0).add_timestamp(0).add_key("key")
        assert timezone_builder.build() == timezone_builder.build()
