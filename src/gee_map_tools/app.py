"""Interface bundling the area calculator and the coordinate navigator on one map."""
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import ipywidgets as widgets
from IPython.display import display

from gee_map_tools.area_calculator import AreaCalculator
from gee_map_tools.google_earth_engine import (
    DrawingTools,
    EarthEngineGeometryService,
    FoliumMapSurface,
    start_session,
)
from gee_map_tools.navigator import CoordinateNavigator
from gee_map_tools.panels import create_area_panel, create_goto_panel, insert_panel
from gee_map_tools.surfaces import GeometryService


class MapToolsApp:
    """Map with the area calculator and "go to coordinates" panels, for use in Jupyter."""

    def __init__(
        self,
        new_session: bool = True,
        project: Optional[str] = None,
        center: Tuple[float, float] = (0.0, 0.0),
        zoom: int = 2,
        geometry_service: Optional[GeometryService] = None,
    ) -> None:
        """
        Initialise the tools and their panels, starting a GEE session if requested.

        :param new_session: Start a new GEE session
        :param project: Earth Engine Cloud project of the session
        :param center: Initial (lon,lat) center of the map
        :param zoom: Initial zoom level of the map
        :param geometry_service: Service to compute geometries with, Earth Engine by default
        """
        if new_session:
            start_session(project=project)
        self.geometry_service = geometry_service or EarthEngineGeometryService()

        # Surfaces
        self.drawing = DrawingTools()
        self.map = FoliumMapSurface(center=center, zoom=zoom, drawing=self.drawing)

        # Tools
        self.calculator = AreaCalculator(self.drawing, self.geometry_service)
        self.navigator = CoordinateNavigator(self.map, self.geometry_service)

        # Widgets
        self.map_view = widgets.HTML(layout=widgets.Layout(flex="1 1 auto"))
        self.root = widgets.HBox(children=[self.map_view])
        insert_panel(self.root, create_area_panel(self.calculator, on_change=self.refresh), position=0)
        insert_panel(
            self.root,
            create_goto_panel(self.navigator, on_change=self.refresh),
            position=len(self.root.children),
        )
        self.refresh()

    def __str__(self) -> str:
        """Representation of the application."""
        return "MapToolsApp"

    def __repr__(self) -> str:
        """Representation of the application."""
        return str(self)

    def refresh(self) -> None:
        """Re-render the map into its widget, once per user action that changed it."""
        self.map_view.value = self.map.render()._repr_html_()

    def add_drawing(self, geojson: Dict[str, Any]) -> None:
        """Register a geometry drawn on the map (GeoJSON as exported by the drawing toolbar)."""
        self.drawing.add_geojson(geojson)
        self.refresh()

    def load_drawing(self, path: Path) -> None:
        """Register the geometry stored in the drawing toolbar's exported file."""
        self.drawing.load_geojson(path)
        self.refresh()

    def _ipython_display_(self) -> None:
        """Show the application in a notebook."""
        display(self.root)


if __name__ == "__main__":
    # Demo: center on a coordinate without a notebook
    app = MapToolsApp()
    app.navigator.go("-1.621681, 43.147862")
    print(app.navigator.status)
