"""
Nuclide Table Loader
====================

Reads the ``;``-delimited nuclide table and exposes it either as a list of
:class:`Nuclide` objects (input order preserved) or as a pandas DataFrame
for plotting and ad-hoc analysis.

Usage:
    >>> from nuclide_chart.data.loader import read_table, parse_table, nuclides_to_frame
    >>> nuclides = parse_table(read_table('data.csv'))
    >>> df = nuclides_to_frame(nuclides)
    >>> df[df['Stable']].groupby('Z').size()
"""

import logging
import re
from pathlib import Path
from typing import Iterator, List, Tuple, Union

import numpy as np
import pandas as pd

from nuclide_chart.data.nuclide import Nuclide, parse_record, try_parse_record

logger = logging.getLogger(__name__)

# Record separator tolerant of \n, \r\n and \r line endings
LINE_SPLIT = re.compile(r'[\r\n]+')

FRAME_COLUMNS = [
    'Z', 'N', 'A', 'Element', 'DecayMode', 'SecondaryDecayMode',
    'HalfLife', 'JP', 'Abundance', 'Stable',
]


def read_table(path: Union[str, Path]) -> str:
    """Return the full text of a nuclide table file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Nuclide table not found: {path}")
    return path.read_text(encoding='utf-8')


def iter_records(text: str) -> Iterator[Tuple[int, str]]:
    """Yield ``(line_number, line)`` for every data row.

    The header (first line) and blank lines are skipped.  Line numbers
    count from 1 at the header; runs of line terminators count once.
    """
    lines = LINE_SPLIT.split(text)
    for line_number, line in enumerate(lines[1:], start=2):
        if not line.strip():
            continue
        yield line_number, line


def parse_table(text: str, skip_malformed: bool = False) -> List[Nuclide]:
    """Parse every data row of *text*.

    Args:
        text: Complete table contents, header included.
        skip_malformed: Log and drop unusable rows instead of raising.

    Raises:
        MalformedRecordError: On the first unusable row, unless
            ``skip_malformed`` is set.
    """
    nuclides: List[Nuclide] = []
    skipped = 0
    for line_number, line in iter_records(text):
        if not skip_malformed:
            nuclides.append(parse_record(line, line_number))
            continue
        result = try_parse_record(line, line_number)
        if result.ok:
            nuclides.append(result.nuclide)
        else:
            logger.warning(f"Skipping malformed record: {result.error}")
            skipped += 1

    logger.info(f"Parsed {len(nuclides)} nuclides ({skipped} skipped)")
    return nuclides


def nuclides_to_frame(nuclides: List[Nuclide]) -> pd.DataFrame:
    """Tabular view of parsed nuclides, one row per nuclide.

    ``Abundance`` is NaN where the nuclide is not found in nature.
    """
    rows = []
    for nuc in nuclides:
        secondary = nuc.secondary_decay_mode
        rows.append({
            'Z': nuc.z,
            'N': nuc.n,
            'A': nuc.a,
            'Element': nuc.element,
            'DecayMode': nuc.decay_mode.display_class,
            'SecondaryDecayMode': secondary.display_class if secondary else None,
            'HalfLife': nuc.half_life,
            'JP': nuc.angular_momentum_parity,
            'Abundance': np.nan if nuc.abundance is None else nuc.abundance,
            'Stable': nuc.is_stable,
        })
    df = pd.DataFrame(rows, columns=FRAME_COLUMNS)
    return df.astype({'Z': int, 'N': int, 'A': int, 'Abundance': float, 'Stable': bool})
