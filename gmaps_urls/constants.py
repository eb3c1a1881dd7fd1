#!/usr/bin/env python3
# Endpoints, service limits and documentation links for the Google Maps APIs

STATIC_MAP_PATH = "maps.googleapis.com/maps/api/staticmap"
STATIC_MAP_BASE_URL_HTTPS = "https://%s" % STATIC_MAP_PATH
STATIC_MAP_BASE_URL_HTTP = "http://%s" % STATIC_MAP_PATH

TIMEZONE_BASE_URL = "https://maps.googleapis.com/maps/api/timezone/json"

# Static Maps API limits
STATIC_MAP_URL_MAX_LENGTH = 16384
LOCATIONS_COUNT_LIMIT = 3
LOCATION_MARKERS_COUNT_LIMIT = 15
LOCATION_POINTS_FOR_PATHS_COUNT_LIMIT = 15
CUSTOM_MARKER_ICONS_COUNT_LIMIT = 5
MAP_ID_MAX_LENGTH = 16

# Ranges accepted by the API for various descriptors
ZOOM_RANGE = (0, 22)
PATH_WEIGHT_RANGE = (0, 500)
MARKER_ANCHOR_MAX_PIXELS = 64
DEFAULT_PATH_WEIGHT = 5

STATIC_MAP_START_LINK = "https://developers.google.com/maps/documentation/maps-static/start"
URL_SIZE_RESTRICTION_LINK = STATIC_MAP_START_LINK + "#url-size-restriction"
LOCATION_PARAMETERS_LINK = STATIC_MAP_START_LINK + "#location"
MAP_PARAMETERS_LINK = STATIC_MAP_START_LINK + "#map-parameters"
ZOOM_LEVELS_LINK = STATIC_MAP_START_LINK + "#Zoomlevels"
LOCATIONS_LINK = STATIC_MAP_START_LINK + "#Locations"
MARKER_LOCATIONS_LINK = STATIC_MAP_START_LINK + "#MarkerLocations"
MARKER_STYLES_LINK = STATIC_MAP_START_LINK + "#MarkerStyles"
PATH_STYLES_LINK = STATIC_MAP_START_LINK + "#PathStyles"
ENCODED_POLYLINES_LINK = STATIC_MAP_START_LINK + "#EncodedPolylines"
CUSTOM_ICONS_LINK = STATIC_MAP_START_LINK + "#CustomIcons"

MAP_STYLING_LINK = "https://developers.google.com/maps/documentation/maps-static/styling"

REGION_CODES_LINK = ("https://developers.google.com/maps/coverage"
                     "#countryregion-coverage-for-core-mapping-features")
