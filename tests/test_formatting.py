"""Tests for gmaps_urls.formatting."""

import pytest

from gmaps_urls.formatting import (
    STRATEGIES,
    ParameterKind,
    choose_strategy,
    format_fragments,
    merged,
    separated,
    simple,
    url_encoded,
)


class TestStrategies:
    def test_simple_keeps_first_value(self):
        assert simple(["640x480", "320x240"]) == ["640x480"]

    def test_separated_keeps_every_value(self):
        assert separated(["a", "b"]) == ["a", "b"]

    def test_merged_joins_with_pipes(self):
        assert merged(["Paris", "Lyon"]) == ["Paris|Lyon"]

    def test_url_encoded_merged_encodes_pipes(self):
        assert url_encoded(merged)(["Paris", "Lyon"]) == ["Paris%7CLyon"]

    def test_url_encoded_escapes_reserved_characters(self):
        assert url_encoded(simple)(["New York, NY"]) == ["New%20York%2C%20NY"]
        assert url_encoded(simple)(["a/b:c"]) == ["a%2Fb%3Ac"]


class TestChooseStrategy:
    def test_every_kind_has_a_strategy(self):
        assert set(STRATEGIES) == set(ParameterKind)

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (ParameterKind.CENTER, simple),
            (ParameterKind.KEY, simple),
            (ParameterKind.MARKERS, separated),
            (ParameterKind.PATH, separated),
            (ParameterKind.STYLE, separated),
            (ParameterKind.VISIBLE, merged),
        ],
    )
    def test_unencoded_strategy(self, kind, expected):
        assert choose_strategy(kind, encode=False) is expected

    def test_encoded_strategy(self):
        strategy = choose_strategy(ParameterKind.VISIBLE)
        assert strategy(["Paris", "Lyon"]) == ["Paris%7CLyon"]

    def test_unknown_kind_raises(self):
        with pytest.raises(LookupError):
            choose_strategy("center")


class TestFormatFragments:
    def test_one_fragment_per_value(self):
        fragments = format_fragments("markers", ["Paris", "Lyon"], separated)
        assert fragments == ["markers=Paris", "markers=Lyon"]

    def test_single_fragment(self):
        assert format_fragments("visible", ["Paris", "Lyon"], merged) == ["visible=Paris|Lyon"]
