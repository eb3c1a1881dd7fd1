#!/usr/bin/env python3
# Turns the accumulated values of each request parameter into query fragments

from urllib.parse import quote
import enum

class ParameterKind(enum.Enum):
    """ Parameters of a Static Maps request, valued by their query name """

    CENTER = "center"
    ZOOM = "zoom"
    SIZE = "size"
    SCALE = "scale"
    FORMAT = "format"
    MAP_TYPE = "maptype"
    LANGUAGE = "language"
    REGION = "region"
    MAP_ID = "map_id"
    MARKERS = "markers"
    PATH = "path"
    VISIBLE = "visible"
    STYLE = "style"
    KEY = "key"

def simple(values):
    """ Single-value parameters: keeps the first value """
    return [values[0]]

def separated(values):
    """ Repeatable parameters: one name=value pair per value """
    return list(values)

def merged(values):
    """ Parameters taking a list: every value joined in a single pipe list """
    return ["|".join(values)]

def url_encoded(strategy):
    """ Wraps a strategy so that each value it produces is percent-encoded

    Encoding happens after the values are joined or split, so the pipes of a
    merged value are encoded along with its content.

    Args:
        strategy: One of simple, separated or merged.

    Returns:
        A strategy with the same signature.
    """

    def encoded(values):
        return [quote(value, safe = "") for value in strategy(values)]

    return encoded

STRATEGIES = {
    ParameterKind.CENTER: simple,
    ParameterKind.ZOOM: simple,
    ParameterKind.SIZE: simple,
    ParameterKind.SCALE: simple,
    ParameterKind.FORMAT: simple,
    ParameterKind.MAP_TYPE: simple,
    ParameterKind.LANGUAGE: simple,
    ParameterKind.REGION: simple,
    ParameterKind.MAP_ID: simple,
    ParameterKind.KEY: simple,
    ParameterKind.MARKERS: separated,
    ParameterKind.PATH: separated,
    ParameterKind.STYLE: separated,
    ParameterKind.VISIBLE: merged
}

def choose_strategy(kind, encode = True):
    """ Returns the formatting strategy of a parameter kind

    Args:
        kind: A ParameterKind.
        encode: Whether produced values should be percent-encoded.

    Raises:
        LookupError: The kind has no registered strategy.
    """

    if (kind not in STRATEGIES):
        raise LookupError("No formatting strategy for parameter %s" % kind)

    strategy = STRATEGIES[kind]
    if (encode):
        strategy = url_encoded(strategy)
    return strategy

def format_fragments(name, values, strategy):
    """ Formats the values of one parameter as name=value fragments

    Args:
        name: The query parameter name.
        values: The raw, unencoded values accumulated for the parameter.
        strategy: The function combining the values.

    Returns:
        A list of "name=value" strings.
    """

    return ["%s=%s" % (name, value) for value in strategy(values)]
