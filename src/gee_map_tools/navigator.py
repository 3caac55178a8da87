"""Center the map on typed-in coordinates and mark the location."""
import logging
import re
from typing import Any, Callable, Dict, NamedTuple, Optional

from gee_map_tools.config import (
    GOTO_BOUNDS_MESSAGE,
    GOTO_EMPTY_MESSAGE,
    GOTO_FORMAT_MESSAGE,
    GOTO_LAYER_NAME,
    GOTO_MARKER_STYLE,
    GOTO_NUMBER_MESSAGE,
    GOTO_ZOOM,
)
from gee_map_tools.errors import InvalidCoordinatesError
from gee_map_tools.surfaces import GeometryService, MapSurface

logger = logging.getLogger(__name__)

SEPARATOR = re.compile(r"[,\s]+")
LEADING_FLOAT = re.compile(r"^[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class CoordinateInput(NamedTuple):
    """Geographic coordinate, in degrees."""

    longitude: float
    latitude: float

    def is_valid(self) -> bool:
        """Check that both values lie within their geographic range."""
        return -180 <= self.longitude <= 180 and -90 <= self.latitude <= 90


def parse_float(token: str) -> Optional[float]:
    """
    Read the number a token starts with, ignoring any trailing characters.

    Returns None when the token does not start with a number, "12.5abc" reads as 12.5.
    """
    match = LEADING_FLOAT.match(token.strip())
    if match is None:
        return None
    return float(match.group(0).replace("Infinity", "inf"))


def parse_coordinates(text: Optional[str]) -> CoordinateInput:
    """
    Parse free text holding a longitude and a latitude.

    Any run of commas and whitespace separates the two values, empty tokens are ignored.

    :param text: Text as typed by the user, e.g. "-1.621681, 43.147862"
    :return: Validated coordinate
    :raises InvalidCoordinatesError: When the text is empty, malformed or out of range
    """
    if not text:
        raise InvalidCoordinatesError(GOTO_EMPTY_MESSAGE)

    parts = [p for p in SEPARATOR.split(text) if p]
    if len(parts) < 2:
        raise InvalidCoordinatesError(GOTO_FORMAT_MESSAGE)

    lon, lat = parse_float(parts[0]), parse_float(parts[1])
    if lon is None or lat is None:
        raise InvalidCoordinatesError(GOTO_NUMBER_MESSAGE)

    coordinate = CoordinateInput(longitude=lon, latitude=lat)
    if not coordinate.is_valid():
        raise InvalidCoordinatesError(GOTO_BOUNDS_MESSAGE)
    return coordinate


class CoordinateNavigator:
    """Navigate the map to a coordinate and keep a single marker on it."""

    def __init__(
        self,
        map_surface: MapSurface,
        geometry_service: GeometryService,
        display: Optional[Callable[[str], None]] = None,
        zoom: int = GOTO_ZOOM,
        layer_name: str = GOTO_LAYER_NAME,
        marker_style: Optional[Dict[str, Any]] = None,
    ) -> None:
        """
        Initialise the navigator.

        :param map_surface: Map to recenter and mark
        :param geometry_service: Service creating the point marker
        :param display: Callback receiving every status text, e.g. a label's setter
        :param zoom: Zoom level used when centering
        :param layer_name: Reserved name of the marker layer
        :param marker_style: Visualisation parameters of the marker
        """
        self.map = map_surface
        self.geometry_service = geometry_service
        self.display = display
        self.zoom = zoom
        self.layer_name = layer_name
        self.marker_style = dict(GOTO_MARKER_STYLE if marker_style is None else marker_style)
        self.status = ""

    def __str__(self) -> str:
        """Representation of the navigator."""
        return "CoordinateNavigator"

    def __repr__(self) -> str:
        """Representation of the navigator."""
        return str(self)

    def go(self, text: Optional[str]) -> Optional[CoordinateInput]:
        """
        Center the map on the coordinate in the text and replace the marker.

        The map is left untouched when the text cannot be used.

        :param text: Text as typed by the user
        :return: Coordinate navigated to, None if the text was rejected
        """
        try:
            coordinate = parse_coordinates(text)
        except InvalidCoordinatesError as e:
            self._show(e.message)
            return None
        lon, lat = coordinate

        # Center and replace the marker
        self.map.set_center(lon, lat, self.zoom)
        self.remove_markers()
        self.map.add_layer(
            self.geometry_service.point_marker(lon, lat),
            dict(self.marker_style),
            self.layer_name,
        )
        logger.info(f"Navigated to ({lon}, {lat})")

        self._show(f"Centered at: {lon:.6f}, {lat:.6f}")
        return coordinate

    def remove_markers(self) -> int:
        """Remove every layer carrying the marker name, return how many were removed."""
        layers = list(self.map.layers())
        removed = 0
        for layer in reversed(layers):
            if layer.get_name() == self.layer_name:
                self.map.remove(layer)
                removed += 1
        if removed > 1:
            logger.debug(f"Removed {removed} accumulated '{self.layer_name}' layers")
        return removed

    def _show(self, text: str) -> None:
        self.status = text
        if self.display is not None:
            self.display(text)
