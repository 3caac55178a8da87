"""Geometry computations performed by Google Earth Engine."""
import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Dict, Optional

import ee

from gee_map_tools.surfaces import GeometryService

logger = logging.getLogger(__name__)


class EarthEngineGeometryService(GeometryService):
    """Geometry service evaluating its requests on Earth Engine's servers."""

    def __init__(self, executor: Optional[Executor] = None) -> None:
        """
        Initialise the service.

        Earth Engine answers a request only once it is evaluated (getInfo), which blocks;
        evaluations therefore run on the executor so that the caller is not held up.

        :param executor: Executor running the evaluations, a single worker thread by default
        """
        self.executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="ee")

    def __str__(self) -> str:
        """Representation of the geometry service."""
        return "EarthEngineGeometryService"

    def __repr__(self) -> str:
        """Representation of the geometry service."""
        return str(self)

    def area(self, geometry: Dict[str, Any], max_error: float) -> "Future[Optional[float]]":
        """Request the geodesic area (m²) of a GeoJSON geometry."""
        return self.executor.submit(self._evaluate_area, geometry, max_error)

    def point_marker(self, lon: float, lat: float) -> ee.FeatureCollection:
        """Create a feature collection holding a single point."""
        point = ee.Geometry.Point([lon, lat])
        return ee.FeatureCollection([ee.Feature(point)])

    @staticmethod
    def _evaluate_area(geometry: Dict[str, Any], max_error: float) -> Optional[float]:
        """Evaluate the area on the server, None if no usable value was returned."""
        try:
            value = ee.Geometry(geometry).area(maxError=max_error).getInfo()
        except ee.EEException as e:
            logger.warning(f"Could not compute area: {e}")
            return None
        if value is None:
            return None
        return float(value)

    def shutdown(self) -> None:
        """Stop the executor once all pending requests are answered."""
        self.executor.shutdown(wait=True)
