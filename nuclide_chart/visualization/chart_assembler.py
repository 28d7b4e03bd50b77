"""Chart of Nuclides assembly and preview."""
import logging
from typing import List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from matplotlib.patches import Rectangle

from nuclide_chart.config import ChartConfig
from nuclide_chart.data.loader import parse_table
from nuclide_chart.visualization.cell_layout import layout_cell
from nuclide_chart.visualization.scene import Scene, SceneElement

logger = logging.getLogger(__name__)

MAGIC_LINE_CLASS = 'magicNumber'


def _line(x1: float, x2: float, y1: float, y2: float) -> SceneElement:
    return SceneElement('line', {
        'class': MAGIC_LINE_CLASS, 'x1': x1, 'x2': x2, 'y1': y1, 'y2': y2,
    })


class ChartOfNuclides:
    """Build the Chart of Nuclides as a scene graph.

    Each data row becomes one linked cell at (N, Z); pairs of gridlines mark
    the shell closures at the magic numbers.

    Args:
        config: Layout and record-handling policy.  ``None`` uses defaults.

    Example:
        >>> chart = ChartOfNuclides(ChartConfig(on_malformed='skip'))
        >>> scene = chart.build_chart(read_table('data.csv'))
        >>> save_svg(scene, 'chart.svg')
    """

    def __init__(self, config: Optional[ChartConfig] = None):
        self.config = config if config is not None else ChartConfig()

    def build_chart(self, text: str) -> Scene:
        """Assemble the scene for a complete table (header line first).

        Cells keep the input order.  Malformed rows raise
        :class:`MalformedRecordError` or are skipped, per
        ``config.on_malformed``.
        """
        cfg = self.config
        nuclides = parse_table(text, skip_malformed=cfg.on_malformed == 'skip')

        scene = Scene(width=cfg.width, height=cfg.height)
        scene.elements.extend(layout_cell(nuc, cfg) for nuc in nuclides)
        scene.elements.extend(self.magic_number_lines())
        logger.info(f"Chart: laid out {len(nuclides)} nuclides")
        return scene

    def magic_number_lines(self) -> List[SceneElement]:
        """Gridline pairs bracketing each proton and neutron magic number.

        Row m (protons) gets a line on its top edge and one on its bottom
        edge; column m (neutrons) gets one on its left and right edges.
        Lines span the whole drawing.
        """
        cfg = self.config
        lines: List[SceneElement] = []

        for m in cfg.proton_magic_numbers:
            y1 = cfg.height - (m + 1) * cfg.pitch
            y2 = cfg.height - m * cfg.pitch
            lines.append(_line(0, cfg.width, y1, y1))
            lines.append(_line(0, cfg.width, y2, y2))

        for m in cfg.neutron_magic_numbers:
            x1 = (m + 1 + cfg.origin_offset) * cfg.pitch
            x2 = (m + cfg.origin_offset) * cfg.pitch
            lines.append(_line(x1, x1, 0, cfg.height))
            lines.append(_line(x2, x2, 0, cfg.height))

        return lines

    def plot_chart(
        self,
        nuclides_df: pd.DataFrame,
        highlight_isotopes: Optional[Sequence[Tuple[int, int]]] = None,
    ):
        """Plot a Z vs N preview with matplotlib.

        Args:
            nuclides_df: Output of :func:`nuclides_to_frame` (needs ``Z``,
                ``N`` and ``DecayMode`` columns).
            highlight_isotopes: ``(Z, A)`` pairs to mark with a star.

        Returns:
            ``(fig, ax)``
        """
        cfg = self.config
        fig, ax = plt.subplots(figsize=(12, 8))

        for row in nuclides_df.itertuples(index=False):
            ax.add_patch(Rectangle(
                (row.N - 0.5, row.Z - 0.5), 1.0, 1.0,
                facecolor=cfg.color_for(row.DecayMode),
                edgecolor='white', linewidth=0.2,
            ))

        n_max = int(nuclides_df['N'].max()) + 1 if len(nuclides_df) else 1
        z_max = int(nuclides_df['Z'].max()) + 1 if len(nuclides_df) else 1

        for m in cfg.proton_magic_numbers:
            ax.hlines(np.array([m - 0.5, m + 0.5]), -0.5, n_max + 0.5,
                      colors='black', linewidth=0.6)
        for m in cfg.neutron_magic_numbers:
            ax.vlines(np.array([m - 0.5, m + 0.5]), -0.5, z_max + 0.5,
                      colors='black', linewidth=0.6)

        if highlight_isotopes:
            for Z, A in highlight_isotopes:
                N = A - Z
                ax.scatter([N], [Z], color='red', s=200, marker='*', zorder=5)

        ax.set_xlim(-0.5, n_max + 0.5)
        ax.set_ylim(-0.5, z_max + 0.5)
        ax.set_aspect('equal')
        ax.set_xlabel('Neutron Number (N)', fontsize=12, fontweight='bold')
        ax.set_ylabel('Atomic Number (Z)', fontsize=12, fontweight='bold')
        ax.set_title('Chart of Nuclides', fontsize=14, fontweight='bold')
        ax.grid(True, alpha=0.3)
        return fig, ax


def create_chart(text: str, config: Optional[ChartConfig] = None) -> Scene:
    """Shortcut for ``ChartOfNuclides(config).build_chart(text)``."""
    return ChartOfNuclides(config).build_chart(text)
