"""
Chart Configuration
===================

Geometry and policy constants for the chart of nuclides, bundled in one
dataclass so that a chart can be re-rendered with a different grid or link
target without touching the layout code.

Defaults reproduce the reference chart: 50×50 cells on a 51-unit pitch,
a 9100×6100 drawing, magic-number gridlines and NuDat 3 links.

Key Classes:
    ChartConfig: Layout, styling hooks and record-handling policy.

Usage:
    >>> from nuclide_chart.config import ChartConfig
    >>> config = ChartConfig(on_malformed='skip')
    >>> config.save_yaml('chart.yaml')
    >>> config = ChartConfig.load_yaml('chart.yaml')
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Tuple, Union

import yaml

logger = logging.getLogger(__name__)

NUDAT_BASE_URL = 'https://www.nndc.bnl.gov/nudat3/'

PROTON_MAGIC_NUMBERS: Tuple[int, ...] = (2, 8, 20, 28, 50, 82)
NEUTRON_MAGIC_NUMBERS: Tuple[int, ...] = (2, 8, 20, 28, 50, 82, 126)

# Preview colours keyed by decay display class (matplotlib only; the SVG
# output is styled by an external stylesheet).
DEFAULT_DECAY_COLORS: Dict[str, str] = {
    'stable': '#000000',
    'bminus': '#3f8fdf',
    'bplus': '#df3f3f',
    'ec': '#df3f3f',
    'a': '#f7e23e',
    'sf': '#4fbf4f',
    'p': '#f79a3e',
    'doublep': '#f79a3e',
    'n': '#8fd3f7',
    'doublen': '#8fd3f7',
}

_MALFORMED_POLICIES = ('raise', 'skip')


@dataclass
class ChartConfig:
    """Configuration for chart layout and assembly.

    Attributes:
        cell_size: Edge length of one nuclide cell in drawing units.
        pitch: Distance between neighbouring cell origins.  ``pitch - cell_size``
            is the width of the gap that shows up as a gridline.
        origin_offset: Horizontal shift of the grid, in cells.
        width: Declared width of the whole drawing.
        height: Declared height of the whole drawing.  Z is counted upward
            from the bottom edge.
        border_inset: Inset of the "almost stable" border rectangle.
        border_stroke_width: Stroke width of the "almost stable" border.
        secondary_threshold: Branching percentage at which a secondary decay
            mode earns its own triangle.
        base_url: Root of the nuclear data site the cells link to.
        proton_magic_numbers: Z values bracketed by horizontal lines.
        neutron_magic_numbers: N values bracketed by vertical lines.
        on_malformed: ``'raise'`` to stop on the first unusable record,
            ``'skip'`` to log it and carry on.
        decay_colors: Preview colours for :meth:`ChartOfNuclides.plot_chart`.
        default_color: Preview colour for decay classes not in
            ``decay_colors``.
    """

    cell_size: float = 50
    pitch: float = 51
    origin_offset: float = 0.1
    width: float = 9100
    height: float = 6100
    border_inset: float = 2
    border_stroke_width: float = 4
    secondary_threshold: float = 5.0
    base_url: str = NUDAT_BASE_URL
    proton_magic_numbers: Tuple[int, ...] = PROTON_MAGIC_NUMBERS
    neutron_magic_numbers: Tuple[int, ...] = NEUTRON_MAGIC_NUMBERS
    on_malformed: str = 'raise'
    decay_colors: Dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_DECAY_COLORS)
    )
    default_color: str = '#bfbfbf'

    def __post_init__(self):
        if self.on_malformed not in _MALFORMED_POLICIES:
            raise ValueError(
                f"Unknown on_malformed policy: {self.on_malformed!r}. "
                f"Expected one of {_MALFORMED_POLICIES}."
            )
        if self.cell_size <= 0 or self.pitch < self.cell_size:
            raise ValueError(
                f"pitch ({self.pitch}) must be at least cell_size "
                f"({self.cell_size}), which must be positive"
            )
        self.proton_magic_numbers = tuple(self.proton_magic_numbers)
        self.neutron_magic_numbers = tuple(self.neutron_magic_numbers)

    def color_for(self, display_class: str) -> str:
        """Return the preview colour for a decay display class."""
        return self.decay_colors.get(display_class, self.default_color)

    # ---- serialisation -----------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to a plain dict (YAML-safe)."""
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, tuple):
                value = list(value)
            elif isinstance(value, dict):
                value = dict(value)
            out[f.name] = value
        return out

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChartConfig':
        """Deserialise from the dict written by *to_dict*.

        Unknown keys are ignored with a warning so that older files keep
        loading after a field is retired.
        """
        known = {f.name for f in fields(cls)}
        kwargs = {}
        for key, value in data.items():
            if key not in known:
                logger.warning(f"Ignoring unknown chart config key: {key!r}")
                continue
            kwargs[key] = value
        return cls(**kwargs)

    def save_yaml(self, path: Union[str, Path]) -> Path:
        """Write the configuration to a YAML file and return its path."""
        path = Path(path)
        with open(path, 'w', encoding='utf-8') as fh:
            yaml.safe_dump(self.to_dict(), fh, sort_keys=False)
        logger.info(f"Saved chart config to {path}")
        return path

    @classmethod
    def load_yaml(cls, path: Union[str, Path]) -> 'ChartConfig':
        """Read a configuration written by *save_yaml*."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Chart config not found: {path}")
        with open(path, 'r', encoding='utf-8') as fh:
            data = yaml.safe_load(fh) or {}
        return cls.from_dict(data)
