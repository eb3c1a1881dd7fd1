#!/usr/bin/env python3
# Path descriptors for the "path" parameter of the Static Maps API

from googlemaps import convert
from shapely import geometry
import logging

from . import errors
from .colors import color_token, parse_color
from .constants import DEFAULT_PATH_WEIGHT, PATH_STYLES_LINK, PATH_WEIGHT_RANGE
from .markers import check_coordinates

logger = logging.getLogger(__name__)

class PathPoints(object):
    """ A path route given as an ordered list of points

    Attributes:
        points: A list of (text, named) tuples, where text is either a
            geocodable location or a "lat,lng" string and named tells which
            of the two it is.
    """

    def __init__(self):
        self.points = []

    def __len__(self):
        return len(self.points)

    @property
    def location_count(self):
        return sum(1 for _, named in self.points if named)

    def render(self):
        if (len(self.points) < 2):
            raise errors.InvalidStateError(errors.PATH_NEEDS_TWO_POINTS)
        return "|".join(text for text, _ in self.points)

class EncodedPolyline(object):
    """ A path route given as an encoded polyline

    Attributes:
        polyline: The encoded polyline string, without the "enc:" prefix.
    """

    location_count = 0

    def __init__(self, polyline):
        self.polyline = polyline

    def render(self):
        return "enc:%s" % self.polyline

class Path(object):
    """ A line, or a polygon when filled, drawn over the map

    The route is either a list of points or an encoded polyline. Once the
    first point or polyline is set the other representation is rejected.

    Attributes:
        weight: The thickness of the path in pixels.
        color: None, a MapColor or a HexColor.
        fill_color: None, a MapColor or a HexColor. Filling turns the path
            into a polygon.
        geodesic: Whether the path follows the curvature of the earth.
        route: None until the first point or polyline is added, then a
            PathPoints or an EncodedPolyline.
    """

    def __init__(self, weight = DEFAULT_PATH_WEIGHT, color = None,
                 fill_color = None, geodesic = False):
        """ Initializes an empty path

        Args:
            weight: The thickness in pixels. Values outside [0, 500] are
                logged and left to the service, which falls back to 5.
            color: A MapColor, a HexColor or a string accepted by
                colors.parse_color.
            fill_color: Same as color, for the inside of a closed path.
            geodesic: True to draw the path as a geodesic.
        """

        if (weight < PATH_WEIGHT_RANGE[0] or weight > PATH_WEIGHT_RANGE[1]):
            logger.warning("Path weight %d is outside of [%d, %d], the "
                           "service will use weight %d instead, see %s",
                           weight, PATH_WEIGHT_RANGE[0], PATH_WEIGHT_RANGE[1],
                           DEFAULT_PATH_WEIGHT, PATH_STYLES_LINK)

        self.weight = weight
        self.color = parse_color(color) if color is not None else None
        self.fill_color = (parse_color(fill_color)
                           if fill_color is not None else None)
        self.geodesic = geodesic
        self.route = None

    @classmethod
    def from_geometry(cls, shape, encode = False, **style):
        """ Creates a path from a shapely or GeoJSON geometry

        Coordinates are read in GeoJSON order, (longitude, latitude). A
        polygon contributes its exterior ring.

        Args:
            shape: A shapely LineString, LinearRing or Polygon, or a GeoJSON
                mapping of one of those.
            encode: True to store the coordinates as an encoded polyline,
                which keeps long outlines within the URL length limit.
            **style: Keyword arguments forwarded to the Path constructor.

        Returns:
            A new Path.

        Raises:
            TypeError: The geometry is not a line or a polygon.
        """

        if (isinstance(shape, dict)):
            shape = geometry.shape(shape)

        if (isinstance(shape, geometry.Polygon)):
            coords = shape.exterior.coords
        elif (isinstance(shape, geometry.LineString)):
            coords = shape.coords
        else:
            raise TypeError("Expected a LineString or a Polygon, but got %s"
                            % type(shape).__name__)

        path = cls(**style)
        points = [(coord[1], coord[0]) for coord in coords]

        if (encode):
            path.add_polyline_from_points(points)
        else:
            for latitude, longitude in points:
                path.add_point(latitude, longitude)

        return path

    def _points(self):
        if (isinstance(self.route, EncodedPolyline)):
            raise ValueError(errors.PATH_POINTS_AND_POLYLINE)
        if (self.route is None):
            self.route = PathPoints()
        return self.route

    def add_point(self, latitude, longitude):
        """ Appends a latitude/longitude pair to the path

        Returns:
            The path, for chaining.

        Raises:
            ValueError: The coordinates are out of range, or the path is
                already defined by a polyline.
        """

        check_coordinates(latitude, longitude)
        self._points().points.append((convert.latlng((latitude, longitude)), False))
        return self

    def add_location(self, location):
        """ Appends a geocodable location to the path

        Returns:
            The path, for chaining.

        Raises:
            ValueError: The location is empty, or the path is already
                defined by a polyline.
        """

        if (not isinstance(location, str) or not location.strip()):
            raise ValueError("Location cannot be empty")

        self._points().points.append((location, True))
        return self

    def add_polyline(self, polyline):
        """ Defines the path with an encoded polyline

        A second call replaces the previous polyline.

        Args:
            polyline: The encoded polyline, without the "enc:" prefix.

        Returns:
            The path, for chaining.

        Raises:
            ValueError: The path already has points.
        """

        if (isinstance(self.route, PathPoints) and len(self.route) > 0):
            raise ValueError(errors.PATH_POINTS_AND_POLYLINE)
        if (not polyline):
            raise ValueError("Polyline cannot be empty")

        self.route = EncodedPolyline(polyline)
        return self

    def add_polyline_from_points(self, points):
        """ Encodes a list of (latitude, longitude) pairs as the polyline

        Args:
            points: An iterable of (lat, lng) tuples or {"lat", "lng"} dicts.

        Returns:
            The path, for chaining.
        """

        points = list(points)
        for point in points:
            check_coordinates(*convert.normalize_lat_lng(point))
        return self.add_polyline(convert.encode_polyline(points))

    @property
    def polyline(self):
        if (isinstance(self.route, EncodedPolyline)):
            return self.route.polyline
        return None

    @property
    def points(self):
        if (isinstance(self.route, PathPoints)):
            return [text for text, _ in self.route.points]
        return None

    @property
    def location_count(self):
        """ Number of points given as geocodable locations """

        if (self.route is None):
            return 0
        return self.route.location_count

    def __str__(self):
        parts = []

        if (self.weight != DEFAULT_PATH_WEIGHT):
            parts.append("weight:%d" % self.weight)
        if (self.color is not None):
            parts.append(color_token("color", self.color))
        if (self.fill_color is not None):
            parts.append(color_token("fillcolor", self.fill_color))
        if (self.geodesic):
            parts.append("geodesic:true")

        if (self.route is None):
            raise errors.InvalidStateError(errors.PATH_NEEDS_TWO_POINTS)
        parts.append(self.route.render())

        return "|".join(parts)
