#!/usr/bin/env python3
# Builder configuration

import os

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "GMAPS_URLS_"

class TimeZoneOptions(BaseModel):
    """ Options of the time zone URL builder """

    model_config = ConfigDict(frozen = True)

    disable_api_key_check: bool = Field(
        default = False,
        description = "Build the URL even when no key was added"
    )
    return_parameters_only: bool = Field(
        default = False,
        description = "Return the query string without scheme, host and path"
    )
    disable_url_encoding: bool = Field(
        default = False,
        description = "Leave parameter values unencoded"
    )

    @classmethod
    def from_env(cls, environ = None):
        """ Loads options from GMAPS_URLS_<FIELD> environment variables

        Variables that are not set keep the field default. Values are parsed
        by pydantic, so "1", "true" and "yes" all enable an option.

        Args:
            environ: A mapping to read instead of os.environ.
        """

        if (environ is None):
            environ = os.environ

        values = {}
        for name in cls.model_fields:
            variable = ENV_PREFIX + name.upper()
            if (variable in environ):
                values[name] = environ[variable]
        return cls(**values)

class StaticMapOptions(TimeZoneOptions):
    """ Options of the static map URL builder """

    use_http: bool = Field(
        default = False,
        description = "Use http instead of https for the base URL"
    )
