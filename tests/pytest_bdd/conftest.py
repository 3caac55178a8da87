"""Step implementations."""

from typing import List

import pytest
from pytest_bdd import given, parsers, then, when

from gee_map_tools.area_calculator import AreaCalculator
from gee_map_tools.navigator import CoordinateNavigator
from gee_map_tools.surfaces import DrawnLayer

from ..conftest import SQUARE, FakeDrawingSurface, FakeGeometryService, FakeMapSurface

NUMBER = r"-?\d+(?:\.\d+)?"


@pytest.fixture()
def navigator(map_surface: FakeMapSurface, geometry_service: FakeGeometryService) -> CoordinateNavigator:
    """Navigator working on the fake map."""
    return CoordinateNavigator(map_surface, geometry_service)


@pytest.fixture()
def calculator(drawing: FakeDrawingSurface, geometry_service: FakeGeometryService) -> AreaCalculator:
    """Calculator working on the fake drawing surface."""
    return AreaCalculator(drawing, geometry_service)


@pytest.fixture()
def results() -> List[str]:
    """Texts returned by the area requests, in order."""
    return []


@given("an empty map")
def empty_map(map_surface: FakeMapSurface) -> None:
    """Start from a map without layers."""
    assert map_surface.layers() == []


@given("nothing is drawn")
def nothing_drawn(drawing: FakeDrawingSurface) -> None:
    """Start from an empty drawing surface."""
    assert drawing.layers() == ()


@given(parsers.re(r"a drawn polygon measuring (?P<area>\d+) m²"), converters={"area": float})
def drawn_polygon(drawing: FakeDrawingSurface, geometry_service: FakeGeometryService, area: float) -> None:
    """Draw a polygon the service measures at the given area."""
    geometry_service.value = area
    drawing.drawn.append(DrawnLayer(SQUARE))


@given("a drawn polygon the service cannot measure")
def unmeasurable_polygon(drawing: FakeDrawingSurface, geometry_service: FakeGeometryService) -> None:
    """Draw a polygon the service answers without value."""
    geometry_service.value = None
    drawing.drawn.append(DrawnLayer(SQUARE))


@when(parsers.re(r'I go to "(?P<text>[^"]*)"'))
def go(navigator: CoordinateNavigator, text: str) -> None:
    """Press Go with the given text."""
    navigator.go(text)


@when("I calculate the area")
def calculate(calculator: AreaCalculator, results: List[str]) -> None:
    """Press Calculate area and wait for the answer."""
    results.append(calculator.calculate().result(timeout=1))


@when("I clear the geometry")
def clear(calculator: AreaCalculator) -> None:
    """Press Clear geometry."""
    calculator.clear()


@then(parsers.re(r'the status reads "(?P<status>[^"]*)"'))
def status_reads(navigator: CoordinateNavigator, status: str) -> None:
    """Check the navigator's status label."""
    assert navigator.status == status


@then(
    parsers.re(rf"the map is centered on (?P<lon>{NUMBER}), (?P<lat>{NUMBER}) at zoom (?P<zoom>\d+)"),
    converters={"lon": float, "lat": float, "zoom": int},
)
def centered_on(map_surface: FakeMapSurface, lon: float, lat: float, zoom: int) -> None:
    """Check the last center request."""
    assert map_surface.centers[-1] == (lon, lat, zoom)


@then(
    parsers.re(rf'there is exactly one "(?P<name>[^"]+)" marker at (?P<lon>{NUMBER}), (?P<lat>{NUMBER})'),
    converters={"lon": float, "lat": float},
)
def single_marker(map_surface: FakeMapSurface, name: str, lon: float, lat: float) -> None:
    """Check that a single marker exists, at the given coordinate."""
    markers = [m for m in map_surface.layers() if m.get_name() == name]
    assert len(markers) == 1, f"Found {len(markers)} '{name}' layers"
    assert markers[0].ee_object["coordinates"] == [lon, lat]


@then("the map was not moved")
def not_moved(map_surface: FakeMapSurface) -> None:
    """Check that the map was neither centered nor marked."""
    assert map_surface.centers == []
    assert map_surface.layers() == []


@then(parsers.re(r'the result reads "(?P<text>[^"]*)"'))
def result_reads(calculator: AreaCalculator, results: List[str], text: str) -> None:
    """Check the last result and the calculator's display."""
    assert results[-1] == text
    assert calculator.status == text


@then(parsers.re(r'the result lists "(?P<m2>[^"]+)", "(?P<ha>[^"]+)" and "(?P<km2>[^"]+)"'))
def result_lists(calculator: AreaCalculator, m2: str, ha: str, km2: str) -> None:
    """Check the three units, in order."""
    assert calculator.status.splitlines()[1:] == [m2, ha, km2]


@then("the area service was not called")
def service_not_called(geometry_service: FakeGeometryService) -> None:
    """Check that no area was requested."""
    assert geometry_service.requests == []
