"""Control panels of the area and navigation tools."""
from html import escape
from typing import Callable, Optional

import ipywidgets as widgets

from gee_map_tools.area_calculator import AreaCalculator
from gee_map_tools.config import GOTO_PLACEHOLDER, PANEL_PADDING, PANEL_WIDTH
from gee_map_tools.navigator import CoordinateNavigator

INSTRUCTIONS = (
    "1) Draw a polygon with the drawing tools.\n"
    '2) Click "Calculate area".\n'
    '3) Use "Clear geometry" to remove it and draw a new one.'
)


def _title(text: str) -> widgets.HTML:
    return widgets.HTML(
        value=f"<b style='font-size: 14px'>{escape(text)}</b>",
        layout=widgets.Layout(margin="0 0 4px 0"),
    )


def _pre(text: str, font_size: str = "12px") -> str:
    """Render text keeping its line breaks."""
    return f"<pre style='font-size: {font_size}; margin: 0'>{escape(text)}</pre>"


def _panel(*children: widgets.Widget) -> widgets.VBox:
    return widgets.VBox(
        children=list(children),
        layout=widgets.Layout(width=PANEL_WIDTH, padding=PANEL_PADDING),
    )


def create_area_panel(
    calculator: AreaCalculator, on_change: Optional[Callable[[], None]] = None
) -> widgets.VBox:
    """
    Create the panel of the area calculator.

    The panel's result label becomes the calculator's display.

    :param calculator: Calculator the buttons act on
    :param on_change: Called once after each click that changed the drawing, e.g. to re-render the map
    :return: Panel holding the title, instructions, buttons and result
    """
    result = widgets.HTML(value=_pre(calculator.status))
    calculator.display = lambda text: setattr(result, "value", _pre(text))

    calc_button = widgets.Button(
        description="Calculate area",
        layout=widgets.Layout(width="100%", margin="4px 0 2px 0"),
    )
    calc_button.on_click(lambda _: calculator.calculate())

    clear_button = widgets.Button(
        description="Clear geometry",
        layout=widgets.Layout(width="100%", margin="2px 0 6px 0"),
    )

    def clear(_: widgets.Button) -> None:
        calculator.clear()
        if on_change is not None:
            on_change()

    clear_button.on_click(clear)

    return _panel(
        _title("Interactive Area Calculator"),
        widgets.HTML(value=_pre(INSTRUCTIONS, font_size="11px")),
        calc_button,
        clear_button,
        result,
    )


def create_goto_panel(
    navigator: CoordinateNavigator, on_change: Optional[Callable[[], None]] = None
) -> widgets.VBox:
    """
    Create the panel of the coordinate navigator, its status label becomes the navigator's display.

    :param navigator: Navigator the Go button acts on
    :param on_change: Called once after each Go that moved the map, e.g. to re-render it
    """
    coord_input = widgets.Text(placeholder=GOTO_PLACEHOLDER, layout=widgets.Layout(width="100%"))
    status = widgets.Label(value=navigator.status, style={"font_size": "11px", "text_color": "gray"})
    navigator.display = lambda text: setattr(status, "value", text)

    go_button = widgets.Button(description="Go", layout=widgets.Layout(width="100%", margin="4px 0 0 0"))

    def go(_: widgets.Button) -> None:
        if navigator.go(coord_input.value) is not None and on_change is not None:
            on_change()

    go_button.on_click(go)

    return _panel(_title("Go to coordinates"), coord_input, status, go_button)


def insert_panel(root: widgets.Box, panel: widgets.Widget, position: int = 0) -> widgets.Box:
    """Insert a panel among the root container's children."""
    children = list(root.children)
    children.insert(position, panel)
    root.children = tuple(children)
    return root
