"""Google Earth Engine map tools: geodesic area calculator and "go to coordinates" navigator."""
from .app import MapToolsApp
from .area_calculator import AreaCalculator, AreaResult, format_area
from .errors import InvalidCoordinatesError
from .google_earth_engine import (
    DrawingTools,
    EarthEngineGeometryService,
    FoliumMapSurface,
    start_session,
)
from .navigator import CoordinateInput, CoordinateNavigator, parse_coordinates
from .panels import create_area_panel, create_goto_panel

__all__ = [
    "AreaCalculator",
    "AreaResult",
    "format_area",
    "CoordinateNavigator",
    "CoordinateInput",
    "parse_coordinates",
    "InvalidCoordinatesError",
    "MapToolsApp",
    "start_session",
    "DrawingTools",
    "EarthEngineGeometryService",
    "FoliumMapSurface",
    "create_area_panel",
    "create_goto_panel",
]
