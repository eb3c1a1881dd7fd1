#!/usr/bin/env python3
# Small library for generating Google Static Maps API URLs

from googlemaps import convert
import collections
import enum
import logging

from . import errors, formatting
from .constants import (
    CUSTOM_MARKER_ICONS_COUNT_LIMIT,
    LOCATION_MARKERS_COUNT_LIMIT,
    LOCATION_POINTS_FOR_PATHS_COUNT_LIMIT,
    LOCATIONS_COUNT_LIMIT,
    MAP_ID_MAX_LENGTH,
    STATIC_MAP_BASE_URL_HTTP,
    STATIC_MAP_BASE_URL_HTTPS,
    STATIC_MAP_URL_MAX_LENGTH,
    ZOOM_LEVELS_LINK,
    ZOOM_RANGE
)
from .formatting import ParameterKind
from .markers import MARKER_TYPES, MarkerGroup
from .options import StaticMapOptions
from .paths import Path
from .styles import MapStyle

logger = logging.getLogger(__name__)

# Parameters that let the service position the map on their own
POSITIONING_KINDS = (ParameterKind.CENTER, ParameterKind.ZOOM,
                     ParameterKind.MARKERS, ParameterKind.PATH,
                     ParameterKind.VISIBLE)

# One value of a parameter, with what it contributes to the service quotas
ParameterValue = collections.namedtuple("ParameterValue",
                                        ["text", "locations", "icon_url"])

class MapScale(enum.IntEnum):
    """ Pixel densities of the map image """

    ONE = 1
    TWO = 2

class MapFormat(enum.Enum):
    """ Image formats of the map """

    PNG = "png"
    PNG8 = "png8"
    PNG32 = "png32"
    GIF = "gif"
    JPG = "jpg"
    JPG_BASELINE = "jpg-baseline"

class MapType(enum.Enum):
    """ Base map types """

    ROADMAP = "roadmap"
    SATELLITE = "satellite"
    TERRAIN = "terrain"
    HYBRID = "hybrid"

def _check_not_blank(value, name):
    if (not isinstance(value, str) or not value.strip()):
        raise ValueError("%s cannot be empty" % name)

class StaticMapsUrlBuilder(object):
    """ Constructs Google Static Maps API URLs

    Parameters are added through the add_* methods, which all return the
    builder so calls can be chained:

        url = (StaticMapsUrlBuilder()
               .add_center_with_location("New York, NY")
               .add_zoom(12)
               .add_size(640, 480)
               .add_key("api-key")
               .build())

    Each value is stored raw, as the service expects it before URL encoding.
    Encoding, joining and quota checks all happen in build().

    Attributes:
        parameters: An ordered dictionary mapping each added ParameterKind to
            the list of ParameterValue tuples contributed so far.
        options: The StaticMapOptions in use.
    """

    def __init__(self, options = None):
        self.parameters = collections.OrderedDict()
        self.options = StaticMapOptions()
        if (options is not None):
            self.with_options(options)

    def _add_single(self, kind, text, locations = 0):
        if (kind in self.parameters):
            raise errors.DuplicateParameterError(
                errors.PARAMETER_ALREADY_ADDED % kind.value
            )
        self.parameters[kind] = [ParameterValue(text, locations, None)]
        return self

    def _append(self, kind, values):
        if (len(values) == 0):
            raise ValueError("At least one %s value is required" % kind.value)
        self.parameters.setdefault(kind, []).extend(values)
        return self

    def add_center_with_location(self, location):
        """ Centers the map on a geocodable location

        Args:
            location: A human-readable location such as
                "1 Rue de la Paix, Paris, France".

        Raises:
            ValueError: The location is empty.
            errors.DuplicateParameterError: A center was already added.
        """

        _check_not_blank(location, "Location")
        return self._add_single(ParameterKind.CENTER, location, locations = 1)

    def add_center_with_coordinates(self, latitude, longitude):
        """ Centers the map on a latitude/longitude pair

        The coordinates are passed through as given; the service itself
        rejects impossible positions.
        """

        return self._add_single(ParameterKind.CENTER,
                                convert.latlng((latitude, longitude)))

    def add_zoom(self, zoom):
        """ Sets the zoom level

        Levels outside [0, 22] are logged but kept: the service then picks
        zoom 0, or a zoom fitting the markers when there are some.
        """

        if (zoom < ZOOM_RANGE[0] or zoom > ZOOM_RANGE[1]):
            logger.warning("Zoom %d is outside of [%d, %d], the static map "
                           "will use either zoom 0 if there are no markers or "
                           "a scale-based zoom if there are markers, see %s",
                           zoom, ZOOM_RANGE[0], ZOOM_RANGE[1], ZOOM_LEVELS_LINK)

        return self._add_single(ParameterKind.ZOOM, "%d" % zoom)

    def add_size(self, width, height):
        """ Sets the size of the image in pixels, required for every map

        Raises:
            ValueError: A dimension is not strictly positive.
        """

        if (width <= 0):
            raise ValueError("Width should not be less than or equal to 0")
        if (height <= 0):
            raise ValueError("Height should not be less than or equal to 0")

        return self._add_single(ParameterKind.SIZE,
                                convert.size((width, height)))

    def add_scale(self, scale):
        """ Sets the pixel density, a MapScale or 1 or 2 """
        return self._add_single(ParameterKind.SCALE, "%d" % MapScale(scale))

    def add_format(self, map_format):
        """ Sets the image format, a MapFormat or its value """
        return self._add_single(ParameterKind.FORMAT,
                                MapFormat(map_format).value)

    def add_map_type(self, map_type):
        """ Sets the map type, a MapType or its value """
        return self._add_single(ParameterKind.MAP_TYPE, MapType(map_type).value)

    def add_language(self, language):
        """ Sets the language of the labels, as a two letter code """

        _check_not_blank(language, "Language")
        if (len(language) > 2):
            raise ValueError(errors.LANGUAGE_MUST_BE_TWO_LETTERS)

        return self._add_single(ParameterKind.LANGUAGE, language)

    def add_region(self, region):
        """ Sets the region used for borders, as a two letter code """

        _check_not_blank(region, "Region")
        if (len(region) > 2):
            raise ValueError(errors.REGION_MUST_BE_TWO_LETTERS)

        return self._add_single(ParameterKind.REGION, region)

    def add_map_id(self, map_id):
        """ Uses a map style configured in the Google Cloud console

        A map id cannot be combined with add_map_style.
        """

        _check_not_blank(map_id, "Map id")
        if (len(map_id) > MAP_ID_MAX_LENGTH):
            raise ValueError(errors.MAP_ID_TOO_LONG)

        return self._add_single(ParameterKind.MAP_ID, map_id)

    def add_marker_groups(self, *groups):
        """ Adds marker groups, each becoming one "markers" parameter

        Args:
            *groups: MarkerGroup objects.
        """

        for group in groups:
            if (not isinstance(group, MarkerGroup)):
                raise TypeError("Expected a MarkerGroup, but got %s"
                                % type(group).__name__)

        return self._append(ParameterKind.MARKERS, [
            ParameterValue(str(group), group.location_count, group.icon_url)
            for group in groups
        ])

    def add_markers(self, *markers):
        """ Adds single markers, each becoming one "markers" parameter

        Args:
            *markers: LocationMarker or CoordinatesMarker objects.

        Raises:
            errors.InvalidStateError: A MarkerGroup was given, those go
                through add_marker_groups.
        """

        for marker in markers:
            if (isinstance(marker, MarkerGroup)):
                raise errors.InvalidStateError(
                    errors.WRONG_METHOD_FOR_MARKER_GROUP
                )
            if (not isinstance(marker, MARKER_TYPES)):
                raise TypeError("Expected a marker, but got %s"
                                % type(marker).__name__)

        return self._append(ParameterKind.MARKERS, [
            ParameterValue(str(marker), marker.location_count, marker.icon_url)
            for marker in markers
        ])

    def add_paths(self, *paths):
        """ Adds paths, each becoming one "path" parameter

        Raises:
            errors.InvalidStateError: A path has fewer than two points and
                no polyline.
        """

        for path in paths:
            if (not isinstance(path, Path)):
                raise TypeError("Expected a Path, but got %s"
                                % type(path).__name__)

        return self._append(ParameterKind.PATH, [
            ParameterValue(str(path), path.location_count, None)
            for path in paths
        ])

    def add_viewport_with_location(self, *locations):
        """ Adds geocodable locations that must remain visible on the map """

        for location in locations:
            _check_not_blank(location, "Location")

        return self._append(ParameterKind.VISIBLE, [
            ParameterValue(location, 1, None) for location in locations
        ])

    def add_viewport_with_coordinates(self, *coordinates):
        """ Adds (latitude, longitude) pairs that must remain visible """

        return self._append(ParameterKind.VISIBLE, [
            ParameterValue(convert.latlng(coordinate), 0, None)
            for coordinate in coordinates
        ])

    def add_map_style(self, *styles):
        """ Adds styles, each becoming one "style" parameter

        Styles cannot be combined with add_map_id.
        """

        for style in styles:
            if (not isinstance(style, MapStyle)):
                raise TypeError("Expected a MapStyle, but got %s"
                                % type(style).__name__)

        return self._append(ParameterKind.STYLE, [
            ParameterValue(str(style), 0, None) for style in styles
        ])

    def add_key(self, key):
        """ Sets the API key, required unless the check is disabled """

        _check_not_blank(key, "Key")
        return self._add_single(ParameterKind.KEY, key)

    def with_options(self, options):
        """ Replaces the builder options

        Args:
            options: A StaticMapOptions, or a mapping of its fields.
        """

        self.options = StaticMapOptions.model_validate(options)
        return self

    def _count(self, *kinds):
        return sum(value.locations
                   for kind in kinds
                   for value in self.parameters.get(kind, []))

    def validate(self):
        """ Checks the parameters against the rules of the service

        Raises:
            errors.MissingParameterError: Nothing was added, or the center,
                size or key is missing.
            errors.QuotaExceededError: Too many geocoded markers, custom
                icons, geocoded path points or visible locations.
            errors.InvalidStateError: A map id is combined with styles.
        """

        if (len(self.parameters) == 0):
            raise errors.MissingParameterError(errors.NO_PARAMETERS_ADDED)

        if (not any(kind in self.parameters for kind in POSITIONING_KINDS)):
            raise errors.MissingParameterError(errors.CENTER_PARAMETER_MISSING)

        if (ParameterKind.SIZE not in self.parameters):
            raise errors.MissingParameterError(errors.SIZE_PARAMETER_MISSING)

        if (self._count(ParameterKind.MARKERS) > LOCATION_MARKERS_COUNT_LIMIT):
            raise errors.QuotaExceededError(errors.TOO_MANY_LOCATION_MARKERS)

        icons = set(value.icon_url
                    for value in self.parameters.get(ParameterKind.MARKERS, [])
                    if value.icon_url is not None)
        if (len(icons) > CUSTOM_MARKER_ICONS_COUNT_LIMIT):
            raise errors.QuotaExceededError(errors.TOO_MANY_CUSTOM_ICONS)

        if (self._count(ParameterKind.PATH)
                > LOCATION_POINTS_FOR_PATHS_COUNT_LIMIT):
            raise errors.QuotaExceededError(
                errors.TOO_MANY_LOCATION_POINTS_FOR_PATHS
            )

        if (self._count(ParameterKind.CENTER, ParameterKind.VISIBLE)
                > LOCATIONS_COUNT_LIMIT):
            raise errors.QuotaExceededError(errors.TOO_MANY_LOCATIONS)

        if (ParameterKind.MAP_ID in self.parameters
                and ParameterKind.STYLE in self.parameters):
            raise errors.InvalidStateError(errors.MAP_ID_AND_STYLE_COMBINED)

        if (not self.options.disable_api_key_check
                and ParameterKind.KEY not in self.parameters):
            raise errors.MissingParameterError(errors.KEY_PARAMETER_MISSING)

    def build(self):
        """ Validates the parameters and assembles the URL

        Returns:
            A string of the API request's URL, or only its query string when
                the return_parameters_only option is set.

        Raises:
            errors.InvalidStateError: See validate(); also raised when the
                URL is longer than the service accepts.
        """

        self.validate()

        fragments = []
        for kind, values in self.parameters.items():
            strategy = formatting.choose_strategy(
                kind, encode = not self.options.disable_url_encoding
            )
            fragments.extend(formatting.format_fragments(
                kind.value, [value.text for value in values], strategy
            ))

        url = "&".join(fragments)
        if (not self.options.return_parameters_only):
            if (self.options.use_http):
                url = "%s?%s" % (STATIC_MAP_BASE_URL_HTTP, url)
            else:
                url = "%s?%s" % (STATIC_MAP_BASE_URL_HTTPS, url)

        if (len(url) > STATIC_MAP_URL_MAX_LENGTH):
            raise errors.InvalidStateError(errors.URL_TOO_LONG)

        logger.debug("Built static map URL with %d fragments (%d characters)",
                     len(fragments), len(url))
        return url
