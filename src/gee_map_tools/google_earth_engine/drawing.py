"""Drawing toolbar of the folium map."""
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import folium
from folium.plugins import Draw

from gee_map_tools.google_earth_engine.utils import load_geojson, to_geometry
from gee_map_tools.surfaces import DrawingSurface, DrawnLayer

logger = logging.getLogger(__name__)

SHAPES = ("polyline", "polygon", "rectangle", "circle", "marker", "circlemarker")


class DrawingTools(DrawingSurface):
    """
    Drawing surface holding the single geometry the user sketched on the map.

    The geometries themselves are drawn in the browser by folium's Draw control and
    handed back as GeoJSON (add_geojson or load_geojson on the exported file).
    A new drawing replaces the previous one, so at most one layer exists at any time.
    """

    def __init__(self) -> None:
        """Initialise an empty, hidden drawing surface."""
        self.shown = False
        self.linked = False
        self.shape: Optional[str] = None
        self.drawing = False
        self._layers: List[DrawnLayer] = []

    def __str__(self) -> str:
        """Representation of the drawing tools."""
        return f"DrawingTools(shape={self.shape}, layers={len(self._layers)})"

    def __repr__(self) -> str:
        """Representation of the drawing tools."""
        return str(self)

    def set_shown(self, shown: bool) -> None:
        """Show or hide the drawing toolbar."""
        self.shown = shown

    def set_linked(self, linked: bool) -> None:
        """Link the drawn geometries to other maps, or not."""
        self.linked = linked

    def set_shape(self, shape: Optional[str]) -> None:
        """Set the shape that is drawn next, None to allow every shape."""
        if shape is not None and shape not in SHAPES:
            raise ValueError(f"Unknown shape '{shape}', choose one of {SHAPES}")
        self.shape = shape

    def draw(self) -> None:
        """Arm drawing mode."""
        self.drawing = True
        logger.debug(f"Drawing mode armed (shape={self.shape})")

    def layers(self) -> Tuple[DrawnLayer, ...]:
        """Get a snapshot of the drawn layers."""
        return tuple(self._layers)

    def remove(self, layer: DrawnLayer) -> None:
        """Remove a single drawn layer."""
        self._layers.remove(layer)

    def clear(self) -> None:
        """Remove every drawn layer."""
        self._layers.clear()

    def add_geojson(self, geojson: Dict[str, Any]) -> DrawnLayer:
        """
        Register a finished drawing, replacing the current one.

        :param geojson: GeoJSON Geometry, Feature or FeatureCollection (first feature is taken)
        :return: Handle on the new layer
        """
        layer = DrawnLayer(to_geometry(geojson))
        self._layers[:] = [layer]
        self.drawing = False
        logger.debug(f"Registered drawn {layer}")
        return layer

    def load_geojson(self, path: Path) -> DrawnLayer:
        """Register the drawing stored in an exported GeoJSON file."""
        return self.add_geojson(load_geojson(path))

    def draw_options(self) -> Dict[str, Any]:
        """Get the Draw control options enabling only the current shape."""
        return {s: ({} if self.shape in (None, s) else False) for s in SHAPES}

    def attach(self, mp: folium.Map) -> folium.Map:
        """Add the drawn geometry and, when shown, the drawing toolbar to the map."""
        for layer in self._layers:
            folium.GeoJson(data=layer.geometry, name="Drawn geometry").add_to(mp)
        if self.shown:
            Draw(
                export=True,
                filename="drawing.geojson",
                draw_options=self.draw_options(),
                edit_options={"edit": False},
            ).add_to(mp)
        return mp
