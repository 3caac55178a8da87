"""Scripts to communicate with Google Earth Engine's Python API."""
from gee_map_tools.google_earth_engine.drawing import DrawingTools
from gee_map_tools.google_earth_engine.geometry import EarthEngineGeometryService
from gee_map_tools.google_earth_engine.session import start as start_session
from gee_map_tools.google_earth_engine.utils import (
    load_geojson,
    to_feature_collection,
    to_geometry,
)
from gee_map_tools.google_earth_engine.visualisation import FoliumMapSurface, add_ee_layer

__all__ = [
    "start_session",
    "DrawingTools",
    "EarthEngineGeometryService",
    "FoliumMapSurface",
    "add_ee_layer",
    "load_geojson",
    "to_geometry",
    "to_feature_collection",
]
