"""
Cell Layout
===========

Builds the scene fragment for one nuclide: a link anchored at grid cell
(N, Z) holding the decay-mode fill, an optional "almost stable" border and
up to four lines of text.

Cell anatomy (50×50, origin top-left)::

    +----------------+
    |      ²³⁸       |   y=12  mass number (tspan, dy=-10)
    |       U        |   y=22  element symbol (tspan, dy=+10)
    |    α (100%)    |   y=31  primary decay
    |    SF (5%)     |   y=39  secondary decay, or abundance
    |   4.468E9 y    |   y=47  half-life (omitted when stable)
    +----------------+

Fill policy:
    A secondary decay mode with a known branching below
    ``config.secondary_threshold`` (5 %) is ignored for colouring; the
    whole cell takes the primary class.  Otherwise the cell is split along
    the falling diagonal: primary upper-left, secondary lower-right.  A
    secondary mode with *unknown* branching is not "below 5 %", so it also
    splits the cell.
"""

import re
from typing import List, Optional, Tuple

from nuclide_chart.config import ChartConfig
from nuclide_chart.data.nuclide import Nuclide
from nuclide_chart.visualization.scene import SceneElement, format_number, number_text

# Half-life of at least ~1e8 years, e.g. "4.468E9 y", "1.8E+19 Y"
ALMOST_STABLE_PATTERN = re.compile(r'E\+?([1-9][0-9]|[89])\s*y$', re.IGNORECASE)

STABLE_LINK = 'getdataset.jsp?nucleus'
UNSTABLE_LINK = 'decaysearchdirect.jsp?nuc'

# Text baselines inside a cell
_LABEL_X = 25
_SYMBOL_Y = 22
_DETAIL_ROWS = (31, 39, 47)


def cell_origin(n: int, z: int, config: ChartConfig) -> Tuple[float, float]:
    """Top-left corner of cell (N, Z).  Z grows upward."""
    x = (n + config.origin_offset) * config.pitch
    y = config.height - (z + 1) * config.pitch
    return x, y


def has_stability_border(half_life: str) -> bool:
    """Whether a half-life reads as 1e8 years or longer."""
    return ALMOST_STABLE_PATTERN.search(half_life) is not None


def needs_split_fill(nuclide: Nuclide, config: ChartConfig) -> bool:
    """Whether the cell is split into primary/secondary triangles."""
    secondary = nuclide.secondary_decay_mode
    if secondary is None:
        return False
    if secondary.has_known_frequency and secondary.frequency < config.secondary_threshold:
        return False
    return True


def nudat_url(nuclide: Nuclide, config: ChartConfig) -> str:
    """Link to the nuclide's NuDat page (dataset for stable, decay search otherwise)."""
    page = STABLE_LINK if nuclide.is_stable else UNSTABLE_LINK
    return f'{config.base_url}{page}={nuclide.a}{nuclide.element}'


def format_percentage(value: float) -> str:
    """Percentage label, printed exactly as given (``98.1%``, ``0.0000545%``)."""
    return f'{number_text(value)}%'


def _fill(nuclide: Nuclide, config: ChartConfig) -> List[SceneElement]:
    size = config.cell_size
    primary = f'box {nuclide.decay_mode.display_class}'
    if not needs_split_fill(nuclide, config):
        return [SceneElement('rect', {
            'width': size, 'height': size, 'x': 0, 'y': 0, 'class': primary,
        })]

    s = format_number(size)
    secondary = f'box {nuclide.secondary_decay_mode.display_class}'
    return [
        SceneElement('path', {'d': f'M0 {s} L0 0 L{s} 0 Z', 'class': primary}),
        SceneElement('path', {'d': f'M0 {s} L{s} {s} L{s} 0 Z', 'class': secondary}),
    ]


def _border(config: ChartConfig) -> SceneElement:
    inset = config.border_inset
    side = config.cell_size - 2 * inset
    return SceneElement('rect', {
        'width': side,
        'height': side,
        'x': inset,
        'y': inset,
        'stroke': 'black',
        'stroke-width': config.border_stroke_width,
        'fill': 'none',
    })


def _symbol_label(nuclide: Nuclide) -> SceneElement:
    return SceneElement(
        'text',
        {'x': _LABEL_X, 'y': _SYMBOL_Y},
        children=[
            SceneElement('tspan', {'dy': -10, 'class': 'isotope'}, text=str(nuclide.a)),
            SceneElement('tspan', {'dy': 10, 'class': 'element'}, text=nuclide.element),
        ],
    )


def _detail(row: int, text: str) -> SceneElement:
    return SceneElement(
        'text',
        {'x': _LABEL_X, 'y': _DETAIL_ROWS[row], 'class': 'details'},
        text=text,
    )


def detail_lines(nuclide: Nuclide) -> List[Optional[str]]:
    """Text of the three detail rows; None where a row is left empty."""
    primary = nuclide.decay_mode
    secondary = nuclide.secondary_decay_mode

    if secondary is not None:
        decay = primary.symbol
        if primary.has_known_frequency:
            decay += f' ({format_percentage(primary.frequency)})'
        decay += ','
        second = secondary.symbol
        if secondary.has_known_frequency:
            second += f' ({format_percentage(secondary.frequency)})'
    else:
        decay = primary.symbol
        second = None if nuclide.abundance is None else format_percentage(nuclide.abundance)

    half_life = None if nuclide.is_half_life_stable else nuclide.half_life
    return [decay, second, half_life]


def layout_cell(nuclide: Nuclide, config: Optional[ChartConfig] = None) -> SceneElement:
    """Build the linked cell for *nuclide*.

    Children, in document order: fill (one rect or two triangles), optional
    border, symbol label, title, detail rows.
    """
    if config is None:
        config = ChartConfig()

    x, y = cell_origin(nuclide.n, nuclide.z, config)
    cell = SceneElement('a', {
        'href': nudat_url(nuclide, config),
        'target': '_blank',
        'transform': f'translate({format_number(x)},{format_number(y)})',
        'class': f'nuclide {nuclide.decay_mode.display_class}',
    })

    cell.children.extend(_fill(nuclide, config))
    if has_stability_border(nuclide.half_life):
        cell.children.append(_border(config))
    cell.children.append(_symbol_label(nuclide))
    cell.children.append(SceneElement('title', text=nuclide.name))

    for row, text in enumerate(detail_lines(nuclide)):
        if text is not None:
            cell.children.append(_detail(row, text))

    return cell
