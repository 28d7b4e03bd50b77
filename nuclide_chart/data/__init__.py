"""
Data Module
===========

Nuclide table parsing and the value objects the chart is drawn from.

Key Components:
    Nuclide: One isotope (Z, N, decay modes, half-life, abundance)
    DecayMode: A decay channel with display class, symbol and branching
    parse_record: One table row -> Nuclide
    parse_table: Whole table -> List[Nuclide]
    nuclides_to_frame: List[Nuclide] -> pandas DataFrame
    element_symbol / element_name / isotope_name: Nomenclature, including
        IUPAC systematic names past Z = 118
"""

from nuclide_chart.data.decay_mode import DecayMode
from nuclide_chart.data.nomenclature import (
    element_name,
    element_symbol,
    isotope_name,
    systematic_name,
    systematic_symbol,
)
from nuclide_chart.data.nuclide import (
    MalformedRecordError,
    Nuclide,
    RecordResult,
    parse_record,
    try_parse_record,
)
from nuclide_chart.data.loader import nuclides_to_frame, parse_table, read_table

__all__ = [
    "DecayMode",
    "Nuclide",
    "MalformedRecordError",
    "RecordResult",
    "parse_record",
    "try_parse_record",
    "parse_table",
    "read_table",
    "nuclides_to_frame",
    "element_symbol",
    "element_name",
    "isotope_name",
    "systematic_symbol",
    "systematic_name",
]
