#!/usr/bin/env python3
# Map styling descriptors for the "style" parameter of the Static Maps API

import enum
from typing import Optional

from googlemaps import convert
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .colors import HexColor

class Visibility(enum.Enum):
    """ Visibility of the selected features and elements """

    ON = "on"
    OFF = "off"
    SIMPLIFIED = "simplified"

class _Selector(object):
    """ Immutable wrapper around a dotted selector name such as "road.local"

    Attributes:
        value: The selector string.
    """

    __slots__ = ("value",)

    def __init__(self, value):
        if (not isinstance(value, str) or not value.strip()):
            raise ValueError("%s cannot be empty" % type(self).__name__)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError("%s is immutable" % type(self).__name__)

    def __eq__(self, other):
        if (type(other) is type(self)):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash((type(self).__name__, self.value))

    def __str__(self):
        return self.value

    def __repr__(self):
        return "%s(%r)" % (type(self).__name__, self.value)

class Feature(_Selector):
    """ A map feature selector, such as roads or parks """

class Element(_Selector):
    """ A feature element selector, such as geometry or labels """

class StyleRule(BaseModel):
    """ Visual tweaks applied to the selected features and elements

    Every field is optional. Fields left at their default are omitted from
    the serialized rule, so an all-default rule renders as an empty string.
    """

    model_config = ConfigDict(frozen = True, arbitrary_types_allowed = True)

    hue: Optional[HexColor] = Field(default = None, description = "Basic color")
    lightness: float = Field(default = 0.0, ge = -100, le = 100)
    saturation: float = Field(default = 0.0, ge = -100, le = 100)
    gamma: float = Field(default = 1.0, ge = 0.01, le = 10.0)
    invert_lightness: bool = Field(default = False)
    visibility: Visibility = Field(default = Visibility.ON)
    color: Optional[HexColor] = Field(default = None,
                                      description = "Solid color")
    weight: int = Field(default = 0, description = "Line weight in pixels")

    @field_validator("hue", "color", mode = "before")
    @classmethod
    def _coerce_hex_color(cls, value):
        if (isinstance(value, str)):
            return HexColor(value)
        return value

    def __str__(self):
        rules = []

        if (self.hue is not None):
            rules.append("hue:%s" % self.hue)
        if (self.lightness != 0):
            rules.append("lightness:%s" % convert.format_float(self.lightness))
        if (self.saturation != 0):
            rules.append("saturation:%s"
                         % convert.format_float(self.saturation))
        if (self.gamma != 1):
            rules.append("gamma:%s" % convert.format_float(self.gamma))
        if (self.invert_lightness):
            rules.append("invert_lightness:true")
        if (self.visibility is not Visibility.ON):
            rules.append("visibility:%s" % self.visibility.value)
        if (self.color is not None):
            rules.append("color:%s" % self.color)
        if (self.weight != 0):
            rules.append("weight:%d" % self.weight)

        return "|".join(rules)

class MapStyle(object):
    """ A complete style descriptor: selectors plus the rule to apply

    Attributes:
        rule: The StyleRule to apply.
        feature: An optional Feature restricting the rule.
        element: An optional Element restricting the rule.
    """

    def __init__(self, rule, feature = None, element = None):
        if (not isinstance(rule, StyleRule)):
            raise TypeError("Expected a StyleRule, but got %s"
                            % type(rule).__name__)
        if (feature is not None and not isinstance(feature, Feature)):
            feature = Feature(feature)
        if (element is not None and not isinstance(element, Element)):
            element = Element(element)

        self.rule = rule
        self.feature = feature
        self.element = element

    def __str__(self):
        parts = []
        if (self.feature is not None):
            parts.append("feature:%s" % self.feature)
        if (self.element is not None):
            parts.append("element:%s" % self.element)

        rule = str(self.rule)
        if (rule):
            parts.append(rule)

        return "|".join(parts)

    def __repr__(self):
        return "MapStyle(%r)" % str(self)

class Features(object):
    """ Feature selectors documented at
    https://developers.google.com/maps/documentation/maps-static/styling#features
    """

    ALL = Feature("all")

    ADMINISTRATIVE = Feature("administrative")
    ADMINISTRATIVE_COUNTRY = Feature("administrative.country")
    ADMINISTRATIVE_LAND_PARCEL = Feature("administrative.land_parcel")
    ADMINISTRATIVE_LOCALITY = Feature("administrative.locality")
    ADMINISTRATIVE_NEIGHBORHOOD = Feature("administrative.neighborhood")
    ADMINISTRATIVE_PROVINCE = Feature("administrative.province")

    LANDSCAPE = Feature("landscape")
    LANDSCAPE_MAN_MADE = Feature("landscape.man_made")
    LANDSCAPE_NATURAL = Feature("landscape.natural")
    LANDSCAPE_NATURAL_LANDCOVER = Feature("landscape.natural.landcover")
    LANDSCAPE_NATURAL_TERRAIN = Feature("landscape.natural.terrain")

    POI = Feature("poi")
    POI_ATTRACTION = Feature("poi.attraction")
    POI_BUSINESS = Feature("poi.business")
    POI_GOVERNMENT = Feature("poi.government")
    POI_MEDICAL = Feature("poi.medical")
    POI_PARK = Feature("poi.park")
    POI_PLACE_OF_WORSHIP = Feature("poi.place_of_worship")
    POI_SCHOOL = Feature("poi.school")
    POI_SPORTS_COMPLEX = Feature("poi.sports_complex")

    ROAD = Feature("road")
    ROAD_ARTERIAL = Feature("road.arterial")
    ROAD_HIGHWAY = Feature("road.highway")
    ROAD_HIGHWAY_CONTROLLED_ACCESS = Feature("road.highway.controlled_access")
    ROAD_LOCAL = Feature("road.local")

    TRANSIT = Feature("transit")
    TRANSIT_LINE = Feature("transit.line")
    TRANSIT_STATION = Feature("transit.station")
    TRANSIT_STATION_AIRPORT = Feature("transit.station.airport")
    TRANSIT_STATION_BUS = Feature("transit.station.bus")
    TRANSIT_STATION_RAIL = Feature("transit.station.rail")

    WATER = Feature("water")

class Elements(object):
    """ Element selectors documented at
    https://developers.google.com/maps/documentation/maps-static/styling#elements
    """

    ALL = Element("all")
    GEOMETRY = Element("geometry")
    GEOMETRY_FILL = Element("geometry.fill")
    GEOMETRY_STROKE = Element("geometry.stroke")
    LABELS = Element("labels")
    LABELS_ICON = Element("labels.icon")
    LABELS_TEXT = Element("labels.text")
    LABELS_TEXT_FILL = Element("labels.text.fill")
    LABELS_TEXT_STROKE = Element("labels.text.stroke")
