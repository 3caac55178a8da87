"""Default settings shared by the area and navigation tools."""
from typing import Any, Dict

# Environment variable holding the Earth Engine Cloud project
GEE_PROJECT_ENV = "GEE_PROJECT"

# Area tool
AREA_MAX_ERROR = 1  # Tolerance of the geodesic area computation, in meters
SQUARE_METERS_PER_HECTARE = 10_000
SQUARE_METERS_PER_SQUARE_KILOMETER = 1_000_000
DRAWING_SHAPE = "polygon"

AREA_INITIAL_MESSAGE = "Area: (no geometry yet)"
AREA_NO_GEOMETRY_MESSAGE = "Area: draw a geometry first."
AREA_CLEARED_MESSAGE = "Area: (geometry cleared)"
AREA_ERROR_MESSAGE = "Error computing area."

# Navigation tool
GOTO_ZOOM = 14
GOTO_LAYER_NAME = "GoTo Point"
GOTO_MARKER_STYLE: Dict[str, Any] = {"color": "red", "pointRadius": 6}

GOTO_EMPTY_MESSAGE = "Enter lon, lat."
GOTO_FORMAT_MESSAGE = "Format: lon, lat"
GOTO_NUMBER_MESSAGE = "Could not read numbers. Use: lon, lat"
GOTO_BOUNDS_MESSAGE = "Out of bounds. Check lon/lat order."
GOTO_PLACEHOLDER = "lon, lat (e.g. -1.621681, 43.147862)"

# Panels
PANEL_WIDTH = "260px"
PANEL_PADDING = "8px"
