"""Geodesic area of the polygon drawn by the user."""
import logging
import threading
from concurrent.futures import Future
from decimal import ROUND_HALF_UP, Decimal
from itertools import count
from typing import Callable, NamedTuple, Optional

from gee_map_tools.config import (
    AREA_CLEARED_MESSAGE,
    AREA_ERROR_MESSAGE,
    AREA_INITIAL_MESSAGE,
    AREA_MAX_ERROR,
    AREA_NO_GEOMETRY_MESSAGE,
    DRAWING_SHAPE,
    SQUARE_METERS_PER_HECTARE,
    SQUARE_METERS_PER_SQUARE_KILOMETER,
)
from gee_map_tools.surfaces import DrawingSurface, GeometryService

logger = logging.getLogger(__name__)


class AreaResult(NamedTuple):
    """Area of a geometry, expressed in square meters."""

    square_meters: float

    @property
    def hectares(self) -> float:
        """Area in hectares."""
        return self.square_meters / SQUARE_METERS_PER_HECTARE

    @property
    def square_kilometers(self) -> float:
        """Area in square kilometers."""
        return self.square_meters / SQUARE_METERS_PER_SQUARE_KILOMETER


def to_fixed(value: float, digits: int) -> str:
    """Format a value with a fixed number of decimals, exact ties rounded up (2.5 gives "3")."""
    rounded = Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP)
    return f"{rounded:f}"


def format_area(result: AreaResult) -> str:
    """Format the area as m², ha and km², one unit per line."""
    return (
        "Area:\n"
        f"{to_fixed(result.square_meters, 0)} m²\n"
        f"{to_fixed(result.hectares, 2)} ha\n"
        f"{to_fixed(result.square_kilometers, 4)} km²"
    )


def _completed(value: str) -> "Future[str]":
    future: "Future[str]" = Future()
    future.set_result(value)
    return future


class AreaCalculator:
    """Compute and present the area of the single geometry on a drawing surface."""

    def __init__(
        self,
        drawing: DrawingSurface,
        geometry_service: GeometryService,
        display: Optional[Callable[[str], None]] = None,
        max_error: float = AREA_MAX_ERROR,
        shape: str = DRAWING_SHAPE,
    ) -> None:
        """
        Initialise the calculator and put the drawing surface in drawing mode.

        :param drawing: Drawing surface holding the user's geometry
        :param geometry_service: Service computing the geodesic area
        :param display: Callback receiving every result text, e.g. a label's setter
        :param max_error: Tolerated error of the area computation, in meters
        :param shape: Shape to (re-)arm the drawing surface with
        """
        self.drawing = drawing
        self.geometry_service = geometry_service
        self.display = display
        self.max_error = max_error
        self.shape = shape
        self.status = ""
        self._lock = threading.Lock()
        self._requests = count(1)
        self._latest = 0

        # Start in drawing mode
        self.drawing.set_shown(True)
        self.drawing.set_linked(False)
        self.drawing.set_shape(self.shape)
        self.drawing.draw()
        self._show(AREA_INITIAL_MESSAGE)

    def __str__(self) -> str:
        """Representation of the area calculator."""
        return "AreaCalculator"

    def __repr__(self) -> str:
        """Representation of the area calculator."""
        return str(self)

    def calculate(self) -> "Future[str]":
        """
        Calculate the area of the drawn geometry and display it once known.

        Only the most recently issued request updates the display; responses of
        older requests that arrive later are discarded.

        :return: Future resolving to the text of this request
        """
        layers = self.drawing.layers()
        if not layers:
            with self._lock:
                self._latest = next(self._requests)
                self._show(AREA_NO_GEOMETRY_MESSAGE)
            return _completed(AREA_NO_GEOMETRY_MESSAGE)

        # Take the first (and only expected) drawn geometry
        with self._lock:
            request = next(self._requests)
            self._latest = request
        response = self.geometry_service.area(layers[0].geometry, max_error=self.max_error)

        result: "Future[str]" = Future()
        response.add_done_callback(lambda f: self._resolve(request, f, result))
        return result

    def clear(self) -> None:
        """Remove the drawn geometry, reset the result and re-arm drawing mode."""
        self.drawing.clear()
        with self._lock:
            self._latest = next(self._requests)  # Pending responses are now stale
            self._show(AREA_CLEARED_MESSAGE)
        self.drawing.set_shape(self.shape)
        self.drawing.draw()

    def _resolve(self, request: int, response: "Future[Optional[float]]", result: "Future[str]") -> None:
        """Resolve the request's future, also when handling the response fails."""
        try:
            result.set_result(self._on_area(request, response))
        except Exception as e:
            logger.warning(f"Could not handle area response {request}: {e}")
            result.set_exception(e)

    def _on_area(self, request: int, response: "Future[Optional[float]]") -> str:
        """Turn the area response into a text and display it if still relevant."""
        error = response.exception()
        if error is not None:
            logger.warning(f"Area request {request} failed: {error}")
            value = None
        else:
            value = response.result()
        text = AREA_ERROR_MESSAGE if value is None else format_area(AreaResult(value))

        with self._lock:
            if request != self._latest:
                logger.debug(f"Discarding stale area response {request} (latest is {self._latest})")
            else:
                self._show(text)
        return text

    def _show(self, text: str) -> None:
        self.status = text
        if self.display is not None:
            self.display(text)
