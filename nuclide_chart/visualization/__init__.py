"""
Chart Visualization Module
==========================

Turns parsed nuclides into a chart of nuclides.

Main Classes:
    ChartOfNuclides: Assembles cells and magic-number lines into a Scene
    Scene / SceneElement: Plain scene-graph tree
    layout_cell: One nuclide -> one linked cell

Example:
    >>> from nuclide_chart.data import read_table
    >>> from nuclide_chart.visualization import ChartOfNuclides, save_svg
    >>>
    >>> chart = ChartOfNuclides()
    >>> scene = chart.build_chart(read_table('data.csv'))
    >>> save_svg(scene, 'chart.svg', stylesheet=open('chartstyle.css').read())
"""

from .scene import Scene, SceneElement, to_svg, save_svg
from .cell_layout import (
    cell_origin,
    has_stability_border,
    layout_cell,
    needs_split_fill,
    nudat_url,
)
from .chart_assembler import ChartOfNuclides, create_chart

__all__ = [
    'ChartOfNuclides',
    'create_chart',
    'Scene',
    'SceneElement',
    'to_svg',
    'save_svg',
    'layout_cell',
    'cell_origin',
    'has_stability_border',
    'needs_split_fill',
    'nudat_url',
]
