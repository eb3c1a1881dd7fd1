"""Tests for gmaps_urls.markers."""

import pytest

from gmaps_urls.colors import HexColor, MapColor
from gmaps_urls.errors import InvalidStateError
from gmaps_urls.markers import (
    CoordinatesMarker,
    LocationMarker,
    MarkerAnchor,
    MarkerGroup,
    MarkerScale,
    MarkerSize,
    MarkerStyle,
    marker_style_tokens,
)

ICON = "http://example.com/icon.png"


class TestMarkerStyle:
    def test_defaults_render_no_tokens(self):
        assert marker_style_tokens(MarkerStyle()) == []

    def test_tokens_in_fixed_order(self):
        style = MarkerStyle(
            size=MarkerSize.MID,
            color=MapColor.RED,
            label="a",
            scale=MarkerScale.TWO,
            anchor=MarkerAnchor.TOP_LEFT,
            icon_url=ICON,
        )
        assert marker_style_tokens(style) == [
            "size:mid",
            "color:red",
            "label:A",
            "scale:2",
            "anchor:topleft",
            "icon:" + ICON,
        ]

    def test_accepts_plain_values(self):
        style = MarkerStyle(size="mid", color="0x00FF00", scale=4)
        assert style.size is MarkerSize.MID
        assert style.color == HexColor("0x00FF00")
        assert style.scale is MarkerScale.FOUR

    def test_rejects_alpha_color(self):
        with pytest.raises(ValueError):
            MarkerStyle(color="0x00FF0080")

    def test_accepts_opaque_alpha(self):
        assert MarkerStyle(color="0x00FF00FF").color == HexColor("0x00FF00FF")

    @pytest.mark.parametrize("size", [MarkerSize.TINY, MarkerSize.SMALL])
    def test_label_not_supported_on_small_sizes(self, size):
        with pytest.raises(ValueError):
            MarkerStyle(size=size, label="A")

    @pytest.mark.parametrize("label", ["AB", "", "#", "é"])
    def test_label_must_be_one_alphanumeric_character(self, label):
        with pytest.raises(ValueError):
            MarkerStyle(label=label)

    def test_digit_label(self):
        assert marker_style_tokens(MarkerStyle(label="7")) == ["label:7"]

    def test_anchor_requires_icon(self):
        with pytest.raises(InvalidStateError):
            MarkerStyle(anchor=MarkerAnchor.CENTER)

    def test_pixel_anchor(self):
        style = MarkerStyle(anchor=(10, 32), icon_url=ICON)
        assert marker_style_tokens(style) == ["anchor:10,32", "icon:" + ICON]

    def test_named_anchor_from_string(self):
        style = MarkerStyle(anchor="bottomright", icon_url=ICON)
        assert style.anchor is MarkerAnchor.BOTTOM_RIGHT

    @pytest.mark.parametrize("anchor", [(-1, 0), (0, -1), (65, 0), (0, 65)])
    def test_pixel_anchor_out_of_range(self, anchor):
        with pytest.raises(ValueError):
            MarkerStyle(anchor=anchor, icon_url=ICON)

    @pytest.mark.parametrize("anchor", [(0, 0), (64, 64)])
    def test_pixel_anchor_bounds(self, anchor):
        MarkerStyle(anchor=anchor, icon_url=ICON)


class TestLocationMarker:
    @pytest.mark.parametrize("location", ["Paris", "New York", "123 Main St, Springfield"])
    def test_ends_with_location(self, location):
        assert str(LocationMarker(location)).endswith(location)

    def test_without_style_has_no_leading_pipe(self):
        assert str(LocationMarker("Paris")) == "Paris"

    def test_with_style(self):
        marker = LocationMarker("Paris", size="mid", color="blue", label="p")
        assert str(marker) == "size:mid|color:blue|label:P|Paris"

    def test_with_style_object(self):
        marker = LocationMarker("Paris", style=MarkerStyle(color=MapColor.GREEN))
        assert str(marker) == "color:green|Paris"

    def test_style_object_and_keywords_conflict(self):
        with pytest.raises(TypeError):
            LocationMarker("Paris", style=MarkerStyle(), color="red")

    def test_counts_one_location(self):
        assert LocationMarker("Paris").location_count == 1

    def test_exposes_icon_url(self):
        assert LocationMarker("Paris", icon_url=ICON).icon_url == ICON

    @pytest.mark.parametrize("location", ["", "   ", None])
    def test_rejects_blank_location(self, location):
        with pytest.raises(ValueError):
            LocationMarker(location)


class TestCoordinatesMarker:
    @pytest.mark.parametrize("lat, lng", [(48.85, 2.35), (-90, -180), (90, 180)])
    def test_accepts_valid_coordinates(self, lat, lng):
        CoordinatesMarker(lat, lng)

    @pytest.mark.parametrize("lat, lng", [(91, 0), (-91, 0), (0, 181), (0, -181)])
    def test_rejects_out_of_range_coordinates(self, lat, lng):
        with pytest.raises(ValueError):
            CoordinatesMarker(lat, lng)

    @pytest.mark.parametrize("lat, lng", [(float("nan"), 0), (0, float("nan"))])
    def test_rejects_nan_coordinates(self, lat, lng):
        with pytest.raises(ValueError):
            CoordinatesMarker(lat, lng)

    def test_serialization(self):
        marker = CoordinatesMarker(48.85, 2.35, color=HexColor("0x00FF00"))
        assert str(marker) == "color:0x00FF00|48.85,2.35"

    def test_counts_no_location(self):
        assert CoordinatesMarker(0, 0).location_count == 0


class TestMarkerGroup:
    def test_mixed_positions_in_order(self):
        group = MarkerGroup(size="small", color="blue").add_location("Lyon").add_coordinates(45.75, 4.85)
        assert str(group) == "size:small|color:blue|Lyon|45.75,4.85"
        assert group.positions == ["Lyon", "45.75,4.85"]

    def test_counts_only_named_locations(self):
        group = MarkerGroup().add_location("Lyon").add_location("Nice").add_coordinates(0, 0)
        assert group.location_count == 2

    def test_empty_group_cannot_be_serialized(self):
        with pytest.raises(InvalidStateError):
            str(MarkerGroup(color="red"))

    def test_rejects_out_of_range_coordinates(self):
        with pytest.raises(ValueError):
            MarkerGroup().add_coordinates(0, 200)

    def test_rejects_blank_location(self):
        with pytest.raises(ValueError):
            MarkerGroup().add_location(" ")
