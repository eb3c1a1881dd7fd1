#!/usr/bin/env python3
# Exceptions raised by the URL builders and their value types

from .constants import (
    CUSTOM_ICONS_LINK,
    CUSTOM_MARKER_ICONS_COUNT_LIMIT,
    ENCODED_POLYLINES_LINK,
    LOCATION_MARKERS_COUNT_LIMIT,
    LOCATION_PARAMETERS_LINK,
    LOCATION_POINTS_FOR_PATHS_COUNT_LIMIT,
    LOCATIONS_COUNT_LIMIT,
    LOCATIONS_LINK,
    MAP_ID_MAX_LENGTH,
    MAP_PARAMETERS_LINK,
    MAP_STYLING_LINK,
    MARKER_ANCHOR_MAX_PIXELS,
    MARKER_LOCATIONS_LINK,
    MARKER_STYLES_LINK,
    REGION_CODES_LINK,
    STATIC_MAP_URL_MAX_LENGTH,
    URL_SIZE_RESTRICTION_LINK
)

# Malformed input
LATITUDE_OUT_OF_RANGE = "Latitude must be between -90 and 90"
LONGITUDE_OUT_OF_RANGE = "Longitude must be between -180 and 180"
LANGUAGE_MUST_BE_TWO_LETTERS = "Language must be in two letters"
REGION_MUST_BE_TWO_LETTERS = ("Region must be in two letters, see %s for the "
                              "available regions" % REGION_CODES_LINK)
MAP_ID_TOO_LONG = "Map id must be %d characters max" % MAP_ID_MAX_LENGTH
ALPHA_NOT_ALLOWED_FOR_MARKERS = ("Alpha cannot be set for marker colors, see %s"
                                 % MARKER_STYLES_LINK)
LABEL_NOT_SUPPORTED = "Label is not supported for tiny or small markers"
LABEL_MUST_BE_ONE_CHARACTER = ("Marker label must be a single uppercase "
                               "letter or digit")
ANCHOR_OUT_OF_RANGE = ("Marker anchor %%s must be between 0 and the size of "
                       "the icon (max %d pixels), see %s"
                       % (MARKER_ANCHOR_MAX_PIXELS, CUSTOM_ICONS_LINK))

# Invalid state
PARAMETER_ALREADY_ADDED = "The %s parameter can only be added once"
NO_PARAMETERS_ADDED = "No parameters have been added"
CENTER_PARAMETER_MISSING = ("Center parameter is mandatory if no markers, path "
                            "or viewports elements are added, see : %s for "
                            "more information" % LOCATION_PARAMETERS_LINK)
SIZE_PARAMETER_MISSING = ("Size parameter is mandatory, see : %s for more "
                          "information" % MAP_PARAMETERS_LINK)
KEY_PARAMETER_MISSING = ("Key parameter is missing, add it or disable the "
                         "check through the builder options")
URL_TOO_LONG = ("Static map url exceeded max allowed length of %d, see %s for "
                "more information"
                % (STATIC_MAP_URL_MAX_LENGTH, URL_SIZE_RESTRICTION_LINK))
TOO_MANY_LOCATIONS = ("Too many locations, only %d are allowed per map (the "
                      "paths and markers are not included but the center is), "
                      "see : %s" % (LOCATIONS_COUNT_LIMIT, LOCATIONS_LINK))
TOO_MANY_LOCATION_MARKERS = ("Too many location markers, only %d are allowed "
                             "per map, see : %s"
                             % (LOCATION_MARKERS_COUNT_LIMIT,
                                MARKER_LOCATIONS_LINK))
TOO_MANY_CUSTOM_ICONS = ("Too many distinct custom marker icons, only %d are "
                         "allowed per map, see : %s"
                         % (CUSTOM_MARKER_ICONS_COUNT_LIMIT, CUSTOM_ICONS_LINK))
TOO_MANY_LOCATION_POINTS_FOR_PATHS = ("Too many geocoded locations in paths, "
                                      "only %d are allowed per map"
                                      % LOCATION_POINTS_FOR_PATHS_COUNT_LIMIT)
MAP_ID_AND_STYLE_COMBINED = ("Don't combine map style and map id, choose "
                             "either one or the other, see : %s"
                             % MAP_STYLING_LINK)
ANCHOR_REQUIRES_ICON = "Anchor can be set only for custom icons"
PATH_POINTS_AND_POLYLINE = ("Path cannot be defined by points and polyline "
                            "simultaneously, see : %s" % ENCODED_POLYLINES_LINK)
PATH_NEEDS_TWO_POINTS = ("Path needs at least two points, add 2 points or more "
                         "or a polyline to define a correct path")
MARKER_GROUP_EMPTY = "Marker group needs at least one location"
WRONG_METHOD_FOR_MARKER_GROUP = ("add_markers should not be used for "
                                 "MarkerGroup objects, use add_marker_groups "
                                 "instead")

class UrlBuilderError(Exception):
    """ Base class of the errors raised while building a request URL """

class InvalidStateError(UrlBuilderError):
    """ The builder or a value type was used in an invalid sequence or
    combination, such as a map id combined with styles or an anchor without
    a custom icon.
    """

class DuplicateParameterError(InvalidStateError, ValueError):
    """ A single-value parameter was added a second time

    Also a ValueError: the static map builder reports duplicates as a bad
    argument.
    """

class MissingParameterError(InvalidStateError, ValueError):
    """ A parameter required by the service is absent at build time """

class QuotaExceededError(InvalidStateError):
    """ One of the documented per-request limits was exceeded """
