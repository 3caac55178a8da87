"""Interfaces of the hosted collaborators the tools are built on."""
from abc import ABC, abstractmethod
from concurrent.futures import Future
from typing import Any, Dict, List, Optional, Tuple


class DrawnLayer:
    """Handle on a single geometry drawn by the user."""

    def __init__(self, geometry: Dict[str, Any]) -> None:
        """
        Initialise the handle.

        :param geometry: GeoJSON geometry (e.g. {"type": "Polygon", "coordinates": [...]})
        """
        self.geometry = geometry

    def __str__(self) -> str:
        """Representation of the drawn layer."""
        return f"DrawnLayer({self.geometry.get('type')})"

    def __repr__(self) -> str:
        """Representation of the drawn layer."""
        return str(self)


class MapLayer:
    """Named object rendered on the map."""

    def __init__(self, ee_object: Any, vis_params: Dict[str, Any], name: str) -> None:
        """
        Initialise the layer.

        :param ee_object: Earth Engine object (or raw GeoJSON) to display
        :param vis_params: Visualisation parameters of the layer
        :param name: Name identifying the layer on the map
        """
        self.ee_object = ee_object
        self.vis_params = vis_params
        self.name = name

    def get_name(self) -> str:
        """Get the name identifying this layer."""
        return self.name

    def __str__(self) -> str:
        """Representation of the map layer."""
        return f"MapLayer({self.name})"

    def __repr__(self) -> str:
        """Representation of the map layer."""
        return str(self)


class DrawingSurface(ABC):
    """Interactive overlay on which the user sketches geometries."""

    @abstractmethod
    def set_shown(self, shown: bool) -> None:
        """Show or hide the drawing toolbar."""

    @abstractmethod
    def set_linked(self, linked: bool) -> None:
        """Link the drawn geometries to other maps, or not."""

    @abstractmethod
    def set_shape(self, shape: Optional[str]) -> None:
        """Set the shape that is drawn next."""

    @abstractmethod
    def draw(self) -> None:
        """Arm interactive drawing mode."""

    @abstractmethod
    def layers(self) -> Tuple[DrawnLayer, ...]:
        """Get a snapshot of the drawn layers, oldest first."""

    @abstractmethod
    def remove(self, layer: DrawnLayer) -> None:
        """Remove a single drawn layer."""

    def clear(self) -> None:
        """Remove every drawn layer."""
        for layer in self.layers():
            self.remove(layer)


class MapSurface(ABC):
    """Map view holding an ordered list of named layers."""

    @abstractmethod
    def set_center(self, lon: float, lat: float, zoom: Optional[int] = None) -> None:
        """Center the map view on the given coordinate."""

    @abstractmethod
    def layers(self) -> List[MapLayer]:
        """Get the layers currently on the map, bottom first."""

    @abstractmethod
    def add_layer(self, ee_object: Any, vis_params: Dict[str, Any], name: str) -> MapLayer:
        """Add a new layer on top of the map and return its handle."""

    @abstractmethod
    def remove(self, layer: MapLayer) -> None:
        """Remove the layer with the given handle."""


class GeometryService(ABC):
    """Geometry engine answering area and point requests."""

    @abstractmethod
    def area(self, geometry: Dict[str, Any], max_error: float) -> "Future[Optional[float]]":
        """
        Request the geodesic area of a geometry.

        :param geometry: GeoJSON geometry to measure
        :param max_error: Tolerated error of the computation, in meters
        :return: Future resolving to the area in square meters, None if no value could be computed
        """

    @abstractmethod
    def point_marker(self, lon: float, lat: float) -> Any:
        """Create a displayable single-point collection at the given coordinate."""
