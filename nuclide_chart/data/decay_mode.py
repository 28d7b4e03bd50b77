"""
Decay Mode Resolver
===================

Turns a raw decay field such as ``"b-: 98.1 %"`` into a :class:`DecayMode`
carrying a CSS-safe display class, a human-readable symbol and the branching
frequency.

Normalisation rules:
    - ``-`` → ``minus``, ``+`` → ``plus``, ``2`` → ``double``, lower-cased
      (``"2b-"`` → ``"doublebminus"``).
    - Alpha (``"a"``) is shown as ``α``; charged modes swap ``b`` for ``β``
      and keep their sign (``"b-"`` → ``"β-"``); anything else shows its
      class with ``double`` turned back into ``2`` (``"2p"`` → ``"2p"``).

Any token is accepted.  There is no whitelist of decay modes.
"""

import re
from dataclasses import dataclass
from typing import Optional

ALPHA_MARKER = 'a'
ALPHA_SYMBOL = 'α'
BETA_MARKER = 'b'
BETA_SYMBOL = 'β'

# Leading number in the frequency segment, e.g. "98.1" in " 98.1 %"
_LEADING_NUMBER = re.compile(r'\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)')


def _spell_out(token: str) -> str:
    return token.replace('-', 'minus').replace('+', 'plus').replace('2', 'double')


def normalize_token(token: str) -> str:
    """Map a raw decay token onto its display class."""
    return _spell_out(token.strip()).lower()


def parse_frequency(segment: str) -> Optional[float]:
    """Parse the leading number of a frequency segment.

    Returns None when the segment does not start with a number
    (``"< 0.1"``, ``"?"``), which callers treat as an unknown branching.
    """
    match = _LEADING_NUMBER.match(segment)
    if match is None:
        return None
    return float(match.group(1))


@dataclass(frozen=True)
class DecayMode:
    """A single decay channel of a nuclide.

    Attributes:
        display_class: Lower-case, symbol-safe token used for styling only.
        symbol: Label shown in the cell, e.g. ``"α"``, ``"β-"``, ``"EC"``.
        frequency: Branching percentage, or None when unknown.
    """

    display_class: str
    symbol: str
    frequency: Optional[float] = None

    @classmethod
    def from_spec(cls, spec: str, has_sibling_mode: bool) -> 'DecayMode':
        """Build a decay mode from a ``"<token>[: <percent>%]"`` field.

        Args:
            spec: Raw decay field from the data table.
            has_sibling_mode: Whether the same nuclide lists another decay
                mode.  A mode without a frequency is 100 % on its own but
                unknown when it shares the nuclide with another mode.  A lone
                mode whose frequency text is unreadable (``"b-: ?"``) is
                also 100 %.
        """
        token, sep, segment = spec.partition(':')
        token = token.strip()
        display_class = normalize_token(token)

        if token == ALPHA_MARKER:
            symbol = ALPHA_SYMBOL
        elif '+' in token or '-' in token:
            symbol = token.replace(BETA_MARKER, BETA_SYMBOL)
        else:
            symbol = _spell_out(token).replace('double', '2')

        frequency = parse_frequency(segment) if sep else None
        if frequency is None and not has_sibling_mode:
            # a lone mode is the whole decay, whatever its segment says
            frequency = 100.0

        return cls(
            display_class=display_class,
            symbol=symbol,
            frequency=frequency,
        )

    @property
    def is_stable(self) -> bool:
        return self.display_class == 'stable'

    @property
    def has_known_frequency(self) -> bool:
        return self.frequency is not None
