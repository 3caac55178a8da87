"""Utilisation functions."""
import json
from pathlib import Path
from typing import Any, Dict, List

GEOMETRY_TYPES = {
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
}


def to_geometry(geojson: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract the GeoJSON geometry of a Geometry, Feature or FeatureCollection.

    Only the first feature of a collection is taken.

    :param geojson: GeoJSON object
    :return: GeoJSON geometry
    """
    kind = geojson.get("type")
    if kind == "FeatureCollection":
        if not geojson.get("features"):
            raise ValueError("FeatureCollection holds no features")
        return to_geometry(geojson["features"][0])
    if kind == "Feature":
        return to_geometry(geojson["geometry"])
    if kind in GEOMETRY_TYPES:
        return geojson
    raise ValueError(f"Unsupported GeoJSON type: {kind}")


def to_feature_collection(geometries: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap the given GeoJSON geometries in a FeatureCollection."""
    return {
        "type": "FeatureCollection",
        "features": [
            {"type": "Feature", "properties": {"FID": i}, "geometry": geometry}
            for i, geometry in enumerate(geometries)
        ],
    }


def load_geojson(path: Path) -> Dict[str, Any]:
    """Load in a GeoJSON file, e.g. the export of the map's drawing toolbar."""
    with open(path, "r") as f:
        return json.load(f)  # type: ignore
