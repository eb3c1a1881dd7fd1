#!/usr/bin/env python3
# Color values accepted by markers, paths and map styles

import enum
import re

HEX_COLOR_PATTERN = re.compile(r"^0[xX]([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

class MapColor(enum.Enum):
    """ Named colors of the Static Maps palette """

    BLACK = "black"
    BROWN = "brown"
    GREEN = "green"
    PURPLE = "purple"
    YELLOW = "yellow"
    BLUE = "blue"
    GRAY = "gray"
    ORANGE = "orange"
    RED = "red"
    WHITE = "white"

    def __str__(self):
        return self.value

class HexColor(object):
    """ A 24-bit or 32-bit color written as 0xRRGGBB or 0xRRGGBBAA

    Attributes:
        value: The color string, exactly as it was given.
        is_alpha_set: True when an alpha byte is present and it is not FF.
    """

    __slots__ = ("value", "is_alpha_set")

    def __init__(self, value):
        """ Validates and stores a hex color string

        Args:
            value: A string such as "0xFF0000" or "0xFF000080".

        Raises:
            ValueError: The string is not in the 0xRRGGBB[AA] format.
        """

        if (not isinstance(value, str) or not HEX_COLOR_PATTERN.match(value)):
            raise ValueError("Invalid hex color format \"%s\", expected "
                             "0xRRGGBB or 0xRRGGBBAA" % value)

        object.__setattr__(self, "value", value)
        object.__setattr__(self, "is_alpha_set",
                           len(value) == 10 and value[8:].upper() != "FF")

    def __setattr__(self, name, value):
        raise AttributeError("HexColor is immutable")

    def __eq__(self, other):
        if (isinstance(other, HexColor)):
            return self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __str__(self):
        return self.value

    def __repr__(self):
        return "HexColor(%r)" % self.value

def parse_color(color):
    """ Coerces a color argument into a MapColor or a HexColor

    Args:
        color: A MapColor, a HexColor, a palette name such as "red" or a hex
            string such as "0x00FF00".

    Returns:
        A MapColor or HexColor instance.

    Raises:
        ValueError: The string is neither a palette name nor a hex color.
        TypeError: The argument is not a color or a string.
    """

    if (isinstance(color, (MapColor, HexColor))):
        return color

    if (isinstance(color, str)):
        if (color[:2].lower() == "0x"):
            return HexColor(color)
        try:
            return MapColor(color.lower())
        except ValueError:
            raise ValueError("Unknown color \"%s\", use a hex color or one of: "
                             "%s" % (color, ", ".join(c.value for c in MapColor)))

    raise TypeError("Expected a MapColor, a HexColor or a string, but got %s"
                    % type(color).__name__)

def color_token(name, color):
    """ Renders a color descriptor such as "color:red" or "fillcolor:0xFF0000"

    Args:
        name: The descriptor name.
        color: A MapColor or a HexColor.
    """

    if (isinstance(color, (MapColor, HexColor))):
        return "%s:%s" % (name, color.value)

    raise TypeError("Expected a MapColor or a HexColor, but got %s"
                    % type(color).__name__)
