"""Pytest configuration."""

from concurrent.futures import Future
from typing import Any, Dict, List, Optional, Tuple

import pytest

from gee_map_tools.surfaces import (
    DrawingSurface,
    DrawnLayer,
    GeometryService,
    MapLayer,
    MapSurface,
)

SQUARE = {
    "type": "Polygon",
    "coordinates": [[[0.0, 0.0], [0.01, 0.0], [0.01, 0.01], [0.0, 0.01], [0.0, 0.0]]],
}


class FakeDrawingSurface(DrawingSurface):
    """Drawing surface recording every call."""

    def __init__(self) -> None:
        """Initialise an empty surface."""
        self.drawn: List[DrawnLayer] = []
        self.calls: List[Tuple[str, Any]] = []

    def set_shown(self, shown: bool) -> None:
        """Record the call."""
        self.calls.append(("set_shown", shown))

    def set_linked(self, linked: bool) -> None:
        """Record the call."""
        self.calls.append(("set_linked", linked))

    def set_shape(self, shape: Optional[str]) -> None:
        """Record the call."""
        self.calls.append(("set_shape", shape))

    def draw(self) -> None:
        """Record the call."""
        self.calls.append(("draw", None))

    def layers(self) -> Tuple[DrawnLayer, ...]:
        """Get the drawn layers."""
        return tuple(self.drawn)

    def remove(self, layer: DrawnLayer) -> None:
        """Remove a drawn layer."""
        self.drawn.remove(layer)


class FakeMapSurface(MapSurface):
    """Map surface recording every center request."""

    def __init__(self) -> None:
        """Initialise an empty map."""
        self.centers: List[Tuple[float, float, Optional[int]]] = []
        self.map_layers: List[MapLayer] = []

    def set_center(self, lon: float, lat: float, zoom: Optional[int] = None) -> None:
        """Record the center."""
        self.centers.append((lon, lat, zoom))

    def layers(self) -> List[MapLayer]:
        """Get the map layers."""
        return list(self.map_layers)

    def add_layer(self, ee_object: Any, vis_params: Dict[str, Any], name: str) -> MapLayer:
        """Add a layer."""
        layer = MapLayer(ee_object, vis_params, name)
        self.map_layers.append(layer)
        return layer

    def remove(self, layer: MapLayer) -> None:
        """Remove a layer by identity."""
        self.map_layers = [m for m in self.map_layers if m is not layer]


class FakeGeometryService(GeometryService):
    """Geometry service answering with a fixed area, or leaving futures pending."""

    def __init__(self, value: Optional[float] = None, pending: bool = False) -> None:
        """Initialise the service."""
        self.value = value
        self.pending = pending
        self.requests: List[Tuple[Dict[str, Any], float]] = []
        self.futures: List["Future[Optional[float]]"] = []

    def area(self, geometry: Dict[str, Any], max_error: float) -> "Future[Optional[float]]":
        """Answer the area request."""
        self.requests.append((geometry, max_error))
        future: "Future[Optional[float]]" = Future()
        if not self.pending:
            future.set_result(self.value)
        self.futures.append(future)
        return future

    def point_marker(self, lon: float, lat: float) -> Any:
        """Create a GeoJSON point."""
        return {"type": "Point", "coordinates": [lon, lat]}


@pytest.fixture()
def drawing() -> FakeDrawingSurface:
    """Empty drawing surface."""
    return FakeDrawingSurface()


@pytest.fixture()
def map_surface() -> FakeMapSurface:
    """Empty map surface."""
    return FakeMapSurface()


@pytest.fixture()
def geometry_service() -> FakeGeometryService:
    """Geometry service answering 123456 m² to every area request."""
    return FakeGeometryService(value=123456.0)


@pytest.fixture()
def square() -> Dict[str, Any]:
    """Small square polygon near (0,0)."""
    return dict(SQUARE)
