"""Visualisation methods."""
import logging
from typing import Any, Dict, List, Optional, Tuple

import ee
import folium

from gee_map_tools.google_earth_engine.drawing import DrawingTools
from gee_map_tools.surfaces import MapLayer, MapSurface

logger = logging.getLogger(__name__)


def _vector_style(vis_params: Dict[str, Any]) -> Tuple[Dict[str, Any], Optional[folium.CircleMarker]]:
    """Translate Earth Engine vector visualisation parameters to a folium style and point marker."""
    color = vis_params.get("color", "#000000")
    style = {"color": color, "fillColor": color, "weight": vis_params.get("width", 2)}
    radius = vis_params.get("pointRadius")
    marker = None
    if radius is not None:
        marker = folium.CircleMarker(radius=radius, color=color, fill=True, fill_opacity=0.8)
    return style, marker


def _add_geojson(
    mp: folium.Map, data: Dict[str, Any], vis_params: Dict[str, Any], name: str, show: bool
) -> None:
    style, marker = _vector_style(vis_params)
    folium.GeoJson(
        data=data,
        style_function=lambda x: style,
        marker=marker,
        name=name,
        overlay=True,
        control=True,
        show=show,
    ).add_to(mp)


def _add_tiles(mp: folium.Map, image: ee.Image, vis_params: Dict[str, Any], name: str, show: bool) -> None:
    map_id_dict = image.getMapId(vis_params)
    folium.raster_layers.TileLayer(
        tiles=map_id_dict["tile_fetcher"].url_format,
        attr="Google Earth Engine",
        name=name,
        overlay=True,
        control=True,
        show=show,
    ).add_to(mp)


def add_ee_layer(
    self: Any, ee_object: Any, vis_params: Dict[str, Any], name: str, show: bool = True
) -> bool:
    """
    Display an Earth Engine object (or plain GeoJSON) on a folium map.

    Images and image collections are shown as tiles, geometries and feature collections
    as vectors styled with the "color" and "pointRadius" parameters.

    :return: Whether the layer could be displayed
    """
    try:
        # display plain GeoJSON
        if isinstance(ee_object, dict):
            _add_geojson(self, ee_object, vis_params, name, show)

        # display ee.Image()
        elif isinstance(ee_object, ee.Image):
            _add_tiles(self, ee_object, vis_params, name, show)

        # display ee.ImageCollection()
        elif isinstance(ee_object, ee.ImageCollection):
            _add_tiles(self, ee_object.mosaic(), vis_params, name, show)

        # display ee.Geometry(), ee.Feature() and ee.FeatureCollection()
        elif isinstance(ee_object, (ee.Geometry, ee.Feature, ee.FeatureCollection)):
            _add_geojson(self, ee_object.getInfo(), vis_params, name, show)

        else:
            logger.warning(f"Could not display {name}: unsupported type {type(ee_object).__name__}")
            return False

    except ee.EEException as e:
        logger.warning(f"Could not display {name}: {e}")
        return False
    return True


# Add EE drawing method to folium.
folium.Map.add_ee_layer = add_ee_layer


class FoliumMapSurface(MapSurface):
    """Map surface keeping its layers in memory and rendering them with folium."""

    def __init__(
        self,
        center: Tuple[float, float] = (0.0, 0.0),
        zoom: int = 2,
        drawing: Optional[DrawingTools] = None,
    ) -> None:
        """
        Initialise the map surface.

        :param center: Initial (lon,lat) center of the view
        :param zoom: Initial zoom level
        :param drawing: Drawing toolbar to add to the rendered map
        """
        self.center = center
        self.zoom = zoom
        self.drawing = drawing
        self._layers: List[MapLayer] = []

    def __str__(self) -> str:
        """Representation of the map surface."""
        return f"FoliumMapSurface(center={self.center}, zoom={self.zoom}, layers={len(self._layers)})"

    def __repr__(self) -> str:
        """Representation of the map surface."""
        return str(self)

    def set_center(self, lon: float, lat: float, zoom: Optional[int] = None) -> None:
        """Center the map view on the given coordinate."""
        self.center = (lon, lat)
        if zoom is not None:
            self.zoom = zoom

    def layers(self) -> List[MapLayer]:
        """Get a snapshot of the layers, bottom first."""
        return list(self._layers)

    def add_layer(self, ee_object: Any, vis_params: Dict[str, Any], name: str) -> MapLayer:
        """Add a new layer on top of the map."""
        layer = MapLayer(ee_object, vis_params, name)
        self._layers.append(layer)
        return layer

    def remove(self, layer: MapLayer) -> None:
        """Remove the layer with the given handle (identity, not name)."""
        for i, candidate in enumerate(self._layers):
            if candidate is layer:
                del self._layers[i]
                return
        raise ValueError(f"{layer} is not on the map")

    def render(self) -> folium.Map:
        """Create a folium map showing the current view and every layer."""
        lon, lat = self.center
        mp = folium.Map(location=[lat, lon], zoom_start=self.zoom)
        for layer in self._layers:
            mp.add_ee_layer(layer.ee_object, layer.vis_params, layer.name)
        if self.drawing is not None:
            self.drawing.attach(mp)
        if self._layers:
            folium.LayerControl().add_to(mp)
        return mp
