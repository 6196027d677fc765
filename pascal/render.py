"""
Text, HTML and raw renderings of a ``Triangle``.

Text and HTML share the same pyramid padding: row ``i`` gets ``depth - i``
blank cells in front, every value is followed by one blank cell, and the row
is closed with ``(2 * depth + 1) - (depth - i)`` blank cells.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from pascal.combinatorics import unbounded_decimal
from pascal.triangle import Row, Triangle

logger = logging.getLogger(__name__)

FORMATS: Tuple[str, ...] = ("text", "html", "raw")
DEFAULT_FORMAT = "text"

# Width 0 means: len(str(triangle.max())) + 1
AUTO_WIDTH = 0

HTML_STYLE = """<style>
	table {
		empty-cells: show;
	}
	table, td, th {
		text-align: right;
		font-size: 9px;
	}
</style>"""


@dataclass(frozen=True)
class RenderOptions:
    """Output settings collected from the command line."""

    fmt: str = DEFAULT_FORMAT
    row_headers: bool = False
    width: int = AUTO_WIDTH


def _padding(depth: int, index: int) -> Tuple[int, int]:
    lead = depth - index
    return lead, (2 * depth + 1) - lead


def _header(index: int) -> str:
    return f"{index}: "


def _text_cells(triangle: Triangle, index: int, row: Row, row_headers: bool) -> List[str]:
    lead, trail = _padding(triangle.depth, index)
    cells: List[str] = []
    if row_headers:
        cells.append(_header(index))
    cells.extend([""] * lead)
    for value in row:
        cells.append(str(value))
        cells.append("")
    cells.extend([""] * trail)
    return cells


@unbounded_decimal()
def render_text(triangle: Triangle, row_headers: bool = False, width: int = AUTO_WIDTH) -> str:
    """
    Right-aligned columns shaped as a pyramid.

    Args:
        triangle: Triangle to render
        row_headers: Prefix every row with "<i>: "
        width: Minimum column width, AUTO_WIDTH to size it from triangle.max()

    Returns:
        One line per row, each ending with a newline
    """
    if width < 0:
        raise ValueError(f"width must be non-negative, got {width}")
    if width == AUTO_WIDTH:
        width = len(str(triangle.max())) + 1
    logger.debug("text column width %d", width)

    table = [_text_cells(triangle, i, row, row_headers) for i, row in triangle]

    # A column is as wide as its longest cell, never narrower than width.
    widths: List[int] = []
    for cells in table:
        for col, cell in enumerate(cells):
            if col == len(widths):
                widths.append(width)
            widths[col] = max(widths[col], len(cell))

    lines = []
    for cells in table:
        lines.append("".join(cell.rjust(widths[col]) for col, cell in enumerate(cells)))
    return "".join(line + "\n" for line in lines)


@unbounded_decimal()
def render_html(triangle: Triangle, row_headers: bool = False) -> str:
    """Self-contained HTML page with the triangle laid out in a table."""
    biggest = triangle.max()
    biggest_str = str(biggest)

    parts = [
        "",
        "<!DOCTYPE html>",
        "<html>",
        "<body>",
        f"<h1>Pascal triangle of depth {triangle.depth}</h1>",
        "<nav>",
        "\t<ul>",
        '\t\t<li><a href="#central-column">Central column</a></li>',
        '\t\t<li><a href="#biggest-number">Biggest number</a></li>',
        "\t</ul>",
        "</nav>",
        f"<p>Biggest number is {biggest_str}.</p>",
        f"<p>It has {len(biggest_str)} digits.</p>",
        HTML_STYLE,
        "<table><tbody>",
    ]

    for i, row in triangle:
        lead, trail = _padding(triangle.depth, i)
        cells = ["<tr>"]
        if row_headers:
            cells.append(f'<th scope="row">{i}</th>')
        cells.append("<td></td>" * lead)
        for value in row:
            if i == 0:
                cells.append(f'<td id="central-column">{value}</td><td></td>')
            elif value == biggest:
                cells.append(f'<td id="biggest-number" style="color: red;">{value}</td><td></td>')
            else:
                cells.append(f"<td>{value}</td><td></td>")
        cells.append("<td></td>" * trail)
        cells.append("</tr>")
        parts.append("".join(cells))

    parts.extend(["</tbody>", "</table>", "</body>", "</html>"])
    return "\n".join(parts)


@unbounded_decimal()
def render_raw(triangle: Triangle, row_headers: bool = False) -> str:
    """One list per row, e.g. ``[1, 4, 6, 4, 1]``."""
    lines = []
    for i, row in triangle:
        prefix = _header(i) if row_headers else ""
        lines.append(f"{prefix}{list(row)}\n")
    return "".join(lines)


def render(triangle: Triangle, options: RenderOptions) -> str:
    """Render ``triangle`` in the format named by ``options.fmt``."""
    renderers: Dict[str, Callable[[], str]] = {
        "text": lambda: render_text(triangle, options.row_headers, options.width),
        "html": lambda: render_html(triangle, options.row_headers),
        "raw": lambda: render_raw(triangle, options.row_headers),
    }
    if options.fmt not in renderers:
        raise ValueError(f"Unknown format: {options.fmt} (expected one of {', '.join(FORMATS)})")
    logger.info("rendering %d rows as %s", len(triangle), options.fmt)
    return renderers[options.fmt]()


__all__ = [
    "FORMATS",
    "DEFAULT_FORMAT",
    "AUTO_WIDTH",
    "RenderOptions",
    "render_text",
    "render_html",
    "render_raw",
    "render",
]
