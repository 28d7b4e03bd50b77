"""
Nuclide Records
===============

One row of the nuclide table becomes one immutable :class:`Nuclide`.

Table format (``;``-delimited, header on the first line)::

    nuclide;z;n;decay1;decay2;decay3;halflife;jp;abundance
    1H;1;0;stable;;;stable;1/2+;99.9885
    3H;1;2;b-;;;12.32 y;1/2+;
    212Bi;83;129;b-: 64.06 %;a: 35.94 %;;60.55 m;1-;

Column roles:
    - ``nuclide`` is a label only; A and the element symbol are recomputed
      from Z and N.
    - ``decay1`` is always present, ``decay2``/``decay3`` may be empty.
    - ``abundance`` may be empty (synthetic or unmeasured isotopes).

Unparsable Z or N fields raise :class:`MalformedRecordError` instead of
leaking NaN into the grid arithmetic.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional

from nuclide_chart.data.decay_mode import DecayMode
from nuclide_chart.data.nomenclature import element_symbol, isotope_name

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ';'
STABLE_HALF_LIFE = 'stable'

# nuclide, z, n, decay1, decay2, decay3, halflife, jp, abundance
_MIN_FIELDS = 8
_MAX_FIELDS = 9

# ASCII digits only (no "1_0", no non-ASCII digits)
_COUNT_PATTERN = re.compile(r'[+-]?[0-9]+')


class MalformedRecordError(ValueError):
    """A table row that cannot be placed on the chart."""

    def __init__(self, message: str, line: str, line_number: Optional[int] = None):
        self.line = line
        self.line_number = line_number
        where = f"line {line_number}: " if line_number is not None else ""
        super().__init__(f"{where}{message} in record {line!r}")


@dataclass(frozen=True)
class Nuclide:
    """A single isotope as listed in the table.

    Attributes:
        z: Proton number.
        n: Neutron number.
        decay_mode: Primary decay mode (``stable`` for stable isotopes).
        secondary_decay_mode: Second decay channel, if any.
        tertiary_decay_mode: Third decay channel, if any.  Kept on the model
            but not drawn.
        half_life: Half-life with unit, e.g. ``"614 s"``, or ``"stable"``.
        angular_momentum_parity: Spin and parity string, e.g. ``"1/2+"``.
        abundance: Natural abundance in percent; None when not found in
            nature.
        label: The table's own nuclide label (diagnostics only).
    """

    z: int
    n: int
    decay_mode: DecayMode
    secondary_decay_mode: Optional[DecayMode] = None
    tertiary_decay_mode: Optional[DecayMode] = None
    half_life: str = ''
    angular_momentum_parity: str = ''
    abundance: Optional[float] = None
    label: str = ''

    def __post_init__(self):
        if self.z < 0 or self.n < 0:
            raise ValueError(f"Z and N must be non-negative, got Z={self.z}, N={self.n}")
        if self.z + self.n < 1:
            raise ValueError("Mass number must be at least 1")

    @property
    def a(self) -> int:
        """Mass number."""
        return self.z + self.n

    @property
    def element(self) -> str:
        return element_symbol(self.z)

    @property
    def name(self) -> str:
        """Display name, e.g. ``"Hydrogen-1"``."""
        return isotope_name(self.z, self.a)

    @property
    def is_stable(self) -> bool:
        return self.decay_mode.is_stable

    @property
    def is_half_life_stable(self) -> bool:
        """Half-life column reads ``"stable"`` (no half-life to show)."""
        return self.half_life == STABLE_HALF_LIFE

    @property
    def decay_modes(self) -> List[DecayMode]:
        """All listed decay modes, primary first."""
        return [
            m for m in (self.decay_mode, self.secondary_decay_mode, self.tertiary_decay_mode)
            if m is not None
        ]


def _parse_count(value: str, column: str, line: str, line_number: Optional[int]) -> int:
    text = value.strip()
    if _COUNT_PATTERN.fullmatch(text) is None:
        raise MalformedRecordError(
            f"non-integer {column} field {value!r}", line, line_number
        )
    return int(text)


def parse_abundance(value: str) -> Optional[float]:
    """Parse the abundance column.

    Empty, non-numeric and NaN fields are "not found in nature" (None).
    An explicit ``0`` stays ``0.0``.
    """
    value = value.strip().rstrip('%').strip()
    if not value:
        return None
    try:
        abundance = float(value)
    except ValueError:
        return None
    if math.isnan(abundance):
        return None
    return abundance


def parse_record(line: str, line_number: Optional[int] = None) -> Nuclide:
    """Parse one ``;``-delimited table row into a :class:`Nuclide`.

    Args:
        line: The raw row, without line terminator.
        line_number: Position in the source (1-based), for error messages.

    Raises:
        MalformedRecordError: Wrong field count, non-integer Z/N or an
            impossible (Z, N) pair.
    """
    fields = line.split(FIELD_SEPARATOR)
    if not _MIN_FIELDS <= len(fields) <= _MAX_FIELDS:
        raise MalformedRecordError(
            f"expected {_MIN_FIELDS}-{_MAX_FIELDS} fields, got {len(fields)}",
            line, line_number,
        )
    if len(fields) == _MIN_FIELDS:
        fields.append('')

    label, z_field, n_field, primary, secondary, tertiary, half_life, jp, abundance = fields

    z = _parse_count(z_field, 'Z', line, line_number)
    n = _parse_count(n_field, 'N', line, line_number)

    if not primary.strip():
        raise MalformedRecordError("missing primary decay mode", line, line_number)
    secondary = secondary.strip()
    tertiary = tertiary.strip()

    try:
        return Nuclide(
            z=z,
            n=n,
            decay_mode=DecayMode.from_spec(primary, has_sibling_mode=bool(secondary)),
            secondary_decay_mode=DecayMode.from_spec(secondary, True) if secondary else None,
            tertiary_decay_mode=DecayMode.from_spec(tertiary, True) if tertiary else None,
            half_life=half_life.strip(),
            angular_momentum_parity=jp.strip(),
            abundance=parse_abundance(abundance),
            label=label.strip(),
        )
    except ValueError as e:
        raise MalformedRecordError(str(e), line, line_number) from e


@dataclass(frozen=True)
class RecordResult:
    """Outcome of :func:`try_parse_record`: either a nuclide or an error."""

    nuclide: Optional[Nuclide] = None
    error: Optional[MalformedRecordError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def try_parse_record(line: str, line_number: Optional[int] = None) -> RecordResult:
    """Like :func:`parse_record`, but returns the failure instead of raising."""
    try:
        return RecordResult(nuclide=parse_record(line, line_number))
    except MalformedRecordError as e:
        logger.debug(f"Rejected record: {e}")
        return RecordResult(error=e)
