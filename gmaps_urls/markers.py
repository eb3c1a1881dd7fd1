#!/usr/bin/env python3
# Marker descriptors for the "markers" parameter of the Static Maps API

import enum
import math

from googlemaps import convert

from . import errors
from .colors import HexColor, color_token, parse_color
from .constants import MARKER_ANCHOR_MAX_PIXELS

class MarkerSize(enum.Enum):
    """ Sizes of the default marker icon """

    TINY = "tiny"
    MID = "mid"
    SMALL = "small"
    DEFAULT = "default"

class MarkerScale(enum.IntEnum):
    """ Pixel density multipliers of a custom marker icon """

    ONE = 1
    TWO = 2
    FOUR = 4

class MarkerAnchor(enum.Enum):
    """ Named anchor points of a custom marker icon """

    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"
    TOP_LEFT = "topleft"
    TOP_RIGHT = "topright"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_RIGHT = "bottomright"

def check_coordinates(latitude, longitude):
    """ Raises ValueError when a latitude/longitude pair is out of range """

    if (math.isnan(latitude) or latitude < -90 or latitude > 90):
        raise ValueError(errors.LATITUDE_OUT_OF_RANGE)
    if (math.isnan(longitude) or longitude < -180 or longitude > 180):
        raise ValueError(errors.LONGITUDE_OUT_OF_RANGE)

def _parse_anchor(anchor):
    if (isinstance(anchor, MarkerAnchor)):
        return anchor
    if (isinstance(anchor, str)):
        return MarkerAnchor(anchor.lower())

    x, y = anchor
    for axis, value in (("X", x), ("Y", y)):
        if (value < 0 or value > MARKER_ANCHOR_MAX_PIXELS):
            raise ValueError(errors.ANCHOR_OUT_OF_RANGE % axis)
    return (int(x), int(y))

class MarkerStyle(object):
    """ Styling shared by every kind of marker

    Everything is validated on construction so that an invalid marker can
    never reach a builder.

    Attributes:
        size: A MarkerSize.
        color: None, a MapColor or a HexColor without alpha.
        label: None or a single uppercase letter or digit.
        scale: A MarkerScale.
        anchor: None, a MarkerAnchor or an (x, y) pixel offset within the
            icon.
        icon_url: None or the URL of a custom icon.
    """

    def __init__(self, size = MarkerSize.DEFAULT, color = None, label = None,
                 scale = MarkerScale.ONE, anchor = None, icon_url = None):
        """ Initializes and validates a marker style

        Args:
            size: A MarkerSize or its name.
            color: A MapColor, a HexColor or a string accepted by
                colors.parse_color.
            label: A single letter or digit, shown upper-cased.
            scale: A MarkerScale or one of 1, 2 and 4.
            anchor: A MarkerAnchor, its name, or an (x, y) tuple of pixels
                between 0 and 64.
            icon_url: The URL of a custom icon.

        Raises:
            ValueError: A descriptor is malformed or out of range.
            errors.InvalidStateError: An anchor was given without an icon.
        """

        self.size = MarkerSize(size)
        self.scale = MarkerScale(scale)

        self.color = None
        if (color is not None):
            self.color = parse_color(color)
            if (isinstance(self.color, HexColor) and self.color.is_alpha_set):
                raise ValueError(errors.ALPHA_NOT_ALLOWED_FOR_MARKERS)

        self.label = None
        if (label is not None):
            if (not isinstance(label, str) or len(label) != 1
                    or not label.isalnum() or not label.isascii()):
                raise ValueError(errors.LABEL_MUST_BE_ONE_CHARACTER)
            if (self.size in (MarkerSize.TINY, MarkerSize.SMALL)):
                raise ValueError(errors.LABEL_NOT_SUPPORTED)
            self.label = label.upper()

        self.anchor = None
        if (anchor is not None):
            if (not icon_url):
                raise errors.InvalidStateError(errors.ANCHOR_REQUIRES_ICON)
            self.anchor = _parse_anchor(anchor)

        self.icon_url = icon_url or None

def marker_style_tokens(style):
    """ Renders a MarkerStyle as an ordered list of descriptor tokens

    Args:
        style: A MarkerStyle.

    Returns:
        A list such as ["size:mid", "color:red", "label:A"]. Descriptors left
            at their default are omitted.
    """

    tokens = []

    if (style.size is not MarkerSize.DEFAULT):
        tokens.append("size:%s" % style.size.value)
    if (style.color is not None):
        tokens.append(color_token("color", style.color))
    if (style.label is not None):
        tokens.append("label:%s" % style.label)
    if (style.scale is not MarkerScale.ONE):
        tokens.append("scale:%d" % style.scale)

    if (isinstance(style.anchor, MarkerAnchor)):
        tokens.append("anchor:%s" % style.anchor.value)
    elif (style.anchor is not None):
        tokens.append("anchor:%d,%d" % style.anchor)

    if (style.icon_url is not None):
        tokens.append("icon:%s" % style.icon_url)

    return tokens

def _make_style(style, style_options):
    if (style is None):
        return MarkerStyle(**style_options)
    if (style_options):
        raise TypeError("Pass either a MarkerStyle or style keywords, not both")
    return style

class LocationMarker(object):
    """ A marker placed on a geocodable location such as "Paris, France"

    Attributes:
        location: The location string.
        style: The MarkerStyle of the marker.
    """

    location_count = 1

    def __init__(self, location, style = None, **style_options):
        """ Initializes a location marker

        Args:
            location: A human-readable location.
            style: An optional MarkerStyle.
            **style_options: MarkerStyle keywords, when style is not given.
        """

        if (not isinstance(location, str) or not location.strip()):
            raise ValueError("Location cannot be empty")

        self.location = location
        self.style = _make_style(style, style_options)

    @property
    def icon_url(self):
        return self.style.icon_url

    def __str__(self):
        return "|".join(marker_style_tokens(self.style) + [self.location])

class CoordinatesMarker(object):
    """ A marker placed on a latitude/longitude pair

    Attributes:
        latitude: A float between -90 and 90.
        longitude: A float between -180 and 180.
        style: The MarkerStyle of the marker.
    """

    location_count = 0

    def __init__(self, latitude, longitude, style = None, **style_options):
        check_coordinates(latitude, longitude)

        self.latitude = latitude
        self.longitude = longitude
        self.style = _make_style(style, style_options)

    @property
    def icon_url(self):
        return self.style.icon_url

    def __str__(self):
        position = convert.latlng((self.latitude, self.longitude))
        return "|".join(marker_style_tokens(self.style) + [position])

class MarkerGroup(object):
    """ Several positions sharing one marker style

    Positions are kept in insertion order and can mix geocodable locations
    with coordinates. Only the locations count towards the quota of
    geocoded markers.

    Attributes:
        style: The MarkerStyle applied to every position.
    """

    def __init__(self, style = None, **style_options):
        self.style = _make_style(style, style_options)
        self._positions = []

    def add_location(self, location):
        """ Appends a geocodable location to the group

        Args:
            location: A human-readable location.

        Returns:
            The group, for chaining.
        """

        if (not isinstance(location, str) or not location.strip()):
            raise ValueError("Location cannot be empty")

        self._positions.append((location, True))
        return self

    def add_coordinates(self, latitude, longitude):
        """ Appends a latitude/longitude pair to the group

        Returns:
            The group, for chaining.
        """

        check_coordinates(latitude, longitude)
        self._positions.append((convert.latlng((latitude, longitude)), False))
        return self

    @property
    def positions(self):
        return [position for position, _ in self._positions]

    @property
    def location_count(self):
        return sum(1 for _, named in self._positions if named)

    @property
    def icon_url(self):
        return self.style.icon_url

    def __str__(self):
        if (len(self._positions) == 0):
            raise errors.InvalidStateError(errors.MARKER_GROUP_EMPTY)
        return "|".join(marker_style_tokens(self.style) + self.positions)

# Every kind of marker accepted by the static map builder
MARKER_TYPES = (LocationMarker, CoordinatesMarker, MarkerGroup)
