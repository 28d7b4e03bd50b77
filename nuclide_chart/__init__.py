"""
nuclide_chart: Chart of Nuclides Renderer
=========================================

Builds an interactive chart of nuclides (Z vs N grid) from a flat
``;``-delimited nuclide table.

Pipeline:
    1. Record parsing   -> Nuclide / DecayMode value objects
    2. Nomenclature     -> element symbols and names (IUPAC systematic past Og)
    3. Cell layout      -> one linked, coloured, labelled cell per nuclide
    4. Chart assembly   -> full scene + magic-number gridlines
    5. Serialisation    -> standalone SVG

Modules:
    data: Table parsing, nuclide model, nomenclature, DataFrame view
    visualization: Scene graph, cell layout, chart assembly, SVG output
    config: ChartConfig (geometry, link target, malformed-record policy)

License: MIT
"""

__version__ = "1.0.0"

from nuclide_chart import config, data, visualization
from nuclide_chart.config import ChartConfig
from nuclide_chart.visualization import ChartOfNuclides, create_chart

__all__ = [
    "config",
    "data",
    "visualization",
    "ChartConfig",
    "ChartOfNuclides",
    "create_chart",
]
