#!/usr/bin/env python3
# Small library for generating Google Time Zone API URLs

from googlemaps import convert
import collections
import datetime
import enum
import logging

from . import errors, formatting
from .constants import TIMEZONE_BASE_URL
from .markers import check_coordinates
from .options import TimeZoneOptions

logger = logging.getLogger(__name__)

class TimeZoneParameter(enum.Enum):
    """ Parameters of a Time Zone request, valued by their query name """

    LOCATION = "location"
    TIMESTAMP = "timestamp"
    LANGUAGE = "language"
    KEY = "key"

class TimeZoneUrlBuilder(object):
    """ Constructs Google Time Zone API URLs

    Every parameter takes a single value, so the values are formatted as
    they are, optionally URL encoded:

        url = (TimeZoneUrlBuilder()
               .add_location(48.8566, 2.3522)
               .add_timestamp(datetime.datetime.now(datetime.timezone.utc))
               .add_key("api-key")
               .build())

    Attributes:
        parameters: An ordered dictionary mapping each added
            TimeZoneParameter to its raw value.
        options: The TimeZoneOptions in use.
    """

    def __init__(self, options = None):
        self.parameters = collections.OrderedDict()
        self.options = TimeZoneOptions()
        if (options is not None):
            self.with_options(options)

    def _add(self, parameter, value):
        if (parameter in self.parameters):
            raise errors.DuplicateParameterError(
                errors.PARAMETER_ALREADY_ADDED % parameter.value
            )
        self.parameters[parameter] = value
        return self

    def add_location(self, latitude, longitude):
        """ Sets the position to look the time zone up for

        Raises:
            ValueError: The coordinates are out of range.
        """

        check_coordinates(latitude, longitude)
        return self._add(TimeZoneParameter.LOCATION,
                         convert.latlng((latitude, longitude)))

    def add_timestamp(self, moment):
        """ Sets the instant used to decide whether daylight saving applies

        Args:
            moment: A datetime.datetime, or seconds since the Unix epoch.
                Naive datetimes are read in local time.

        Raises:
            TypeError: The moment is neither a datetime nor a number.
        """

        if (isinstance(moment, bool)
                or not isinstance(moment, (datetime.datetime, int, float))):
            raise TypeError("Expected a datetime or seconds since the epoch, "
                            "but got %s" % type(moment).__name__)

        return self._add(TimeZoneParameter.TIMESTAMP, convert.time(moment))

    def add_language(self, language):
        """ Sets the language of the results, as a two letter code """

        if (not isinstance(language, str) or not language.strip()):
            raise ValueError("Language cannot be empty")
        if (len(language) > 2):
            raise ValueError(errors.LANGUAGE_MUST_BE_TWO_LETTERS)

        return self._add(TimeZoneParameter.LANGUAGE, language)

    def add_key(self, key):
        """ Sets the API key, required unless the check is disabled """

        if (not isinstance(key, str) or not key.strip()):
            raise ValueError("Key cannot be empty")

        return self._add(TimeZoneParameter.KEY, key)

    def with_options(self, options):
        """ Replaces the builder options

        Args:
            options: A TimeZoneOptions, or a mapping of its fields.
        """

        self.options = TimeZoneOptions.model_validate(options)
        return self

    def validate(self):
        """ Checks that every mandatory parameter was added

        Raises:
            errors.MissingParameterError: A mandatory parameter is missing.
        """

        if (len(self.parameters) == 0):
            raise errors.MissingParameterError(errors.NO_PARAMETERS_ADDED)
        if (TimeZoneParameter.LOCATION not in self.parameters):
            raise errors.MissingParameterError(
                "Location parameter is mandatory, use add_location"
            )
        if (TimeZoneParameter.TIMESTAMP not in self.parameters):
            raise errors.MissingParameterError(
                "Timestamp parameter is mandatory, use add_timestamp"
            )
        if (not self.options.disable_api_key_check
                and TimeZoneParameter.KEY not in self.parameters):
            raise errors.MissingParameterError(errors.KEY_PARAMETER_MISSING)

    def build(self):
        """ Validates the parameters and assembles the URL

        Returns:
            A string of the API request's URL, or only its query string when
                the return_parameters_only option is set.
        """

        self.validate()

        strategy = formatting.simple
        if (not self.options.disable_url_encoding):
            strategy = formatting.url_encoded(strategy)

        fragments = []
        for parameter, value in self.parameters.items():
            fragments.extend(formatting.format_fragments(
                parameter.value, [value], strategy
            ))

        url = "&".join(fragments)
        if (not self.options.return_parameters_only):
            url = "%s?%s" % (TIMEZONE_BASE_URL, url)

        logger.debug("Built time zone URL with %d fragments", len(fragments))
        return url
