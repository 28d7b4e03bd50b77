"""
Element Nomenclature
====================

Element symbols and names for every proton number, including the IUPAC
systematic placeholders used for elements that have no assigned name yet.

Index 0 of the tables is the free neutron, so ``ELEMENT_SYMBOLS[z]`` works
directly with Z read from the data table.

Systematic naming (Z > 118)
---------------------------
Each decimal digit of Z maps to a syllable and a one-letter abbreviation::

    0 nil n   1 un u   2 bi b   3 tri t   4 quad q
    5 pent p  6 hex h  7 sept s  8 oct o   9 enn e

    119 -> un + un + enn + ium  -> Ununennium (Uue)
    120 -> un + bi + nil + ium  -> Unbinilium (Ubn)

The syllables are joined first, then a doubled ``i`` collapses to one and
a run of three ``n`` collapses to one (``enn`` + ``nil`` -> ``enil``).  The
suffix ``ium`` is appended after the cleanup, so ``bi``/``tri`` keep their
``i`` in front of it (122 -> Unbibiium).
"""

from typing import Tuple

ELEMENT_SYMBOLS: Tuple[str, ...] = (
    'n', 'H', 'He', 'Li', 'Be', 'B', 'C', 'N', 'O', 'F', 'Ne',
    'Na', 'Mg', 'Al', 'Si', 'P', 'S', 'Cl', 'Ar', 'K', 'Ca',
    'Sc', 'Ti', 'V', 'Cr', 'Mn', 'Fe', 'Co', 'Ni', 'Cu', 'Zn',
    'Ga', 'Ge', 'As', 'Se', 'Br', 'Kr', 'Rb', 'Sr', 'Y', 'Zr',
    'Nb', 'Mo', 'Tc', 'Ru', 'Rh', 'Pd', 'Ag', 'Cd', 'In', 'Sn',
    'Sb', 'Te', 'I', 'Xe', 'Cs', 'Ba', 'La', 'Ce', 'Pr', 'Nd',
    'Pm', 'Sm', 'Eu', 'Gd', 'Tb', 'Dy', 'Ho', 'Er', 'Tm', 'Yb',
    'Lu', 'Hf', 'Ta', 'W', 'Re', 'Os', 'Ir', 'Pt', 'Au', 'Hg',
    'Tl', 'Pb', 'Bi', 'Po', 'At', 'Rn', 'Fr', 'Ra', 'Ac', 'Th',
    'Pa', 'U', 'Np', 'Pu', 'Am', 'Cm', 'Bk', 'Cf', 'Es', 'Fm',
    'Md', 'No', 'Lr', 'Rf', 'Db', 'Sg', 'Bh', 'Hs', 'Mt', 'Ds',
    'Rg', 'Cn', 'Nh', 'Fl', 'Mc', 'Lv', 'Ts', 'Og',
)

ELEMENT_NAMES: Tuple[str, ...] = (
    'Neutron', 'Hydrogen', 'Helium', 'Lithium', 'Beryllium', 'Boron',
    'Carbon', 'Nitrogen', 'Oxygen', 'Fluorine', 'Neon',
    'Sodium', 'Magnesium', 'Aluminium', 'Silicon', 'Phosphorus',
    'Sulfur', 'Chlorine', 'Argon', 'Potassium', 'Calcium',
    'Scandium', 'Titanium', 'Vanadium', 'Chromium', 'Manganese',
    'Iron', 'Cobalt', 'Nickel', 'Copper', 'Zinc',
    'Gallium', 'Germanium', 'Arsenic', 'Selenium', 'Bromine',
    'Krypton', 'Rubidium', 'Strontium', 'Yttrium', 'Zirconium',
    'Niobium', 'Molybdenum', 'Technetium', 'Ruthenium', 'Rhodium',
    'Palladium', 'Silver', 'Cadmium', 'Indium', 'Tin',
    'Antimony', 'Tellurium', 'Iodine', 'Xenon', 'Caesium',
    'Barium', 'Lanthanum', 'Cerium', 'Praseodymium', 'Neodymium',
    'Promethium', 'Samarium', 'Europium', 'Gadolinium', 'Terbium',
    'Dysprosium', 'Holmium', 'Erbium', 'Thulium', 'Ytterbium',
    'Lutetium', 'Hafnium', 'Tantalum', 'Tungsten', 'Rhenium',
    'Osmium', 'Iridium', 'Platinum', 'Gold', 'Mercury',
    'Thallium', 'Lead', 'Bismuth', 'Polonium', 'Astatine',
    'Radon', 'Francium', 'Radium', 'Actinium', 'Thorium',
    'Protactinium', 'Uranium', 'Neptunium', 'Plutonium', 'Americium',
    'Curium', 'Berkelium', 'Californium', 'Einsteinium', 'Fermium',
    'Mendelevium', 'Nobelium', 'Lawrencium', 'Rutherfordium', 'Dubnium',
    'Seaborgium', 'Bohrium', 'Hassium', 'Meitnerium', 'Darmstadtium',
    'Roentgenium', 'Copernicium', 'Nihonium', 'Flerovium', 'Moscovium',
    'Livermorium', 'Tennessine', 'Oganesson',
)

PLACEHOLDER_SYMBOLS: Tuple[str, ...] = (
    'n', 'u', 'b', 't', 'q', 'p', 'h', 's', 'o', 'e',
)

PLACEHOLDER_NAMES: Tuple[str, ...] = (
    'nil', 'un', 'bi', 'tri', 'quad', 'pent', 'hex', 'sept', 'oct', 'enn',
)

MAX_NAMED_Z = len(ELEMENT_SYMBOLS) - 1


def _check_z(z: int) -> None:
    if z < 0:
        raise ValueError(f"Proton number must be non-negative, got {z}")


def systematic_symbol(z: int) -> str:
    """IUPAC placeholder symbol for *z*, e.g. ``119 -> 'Uue'``."""
    _check_z(z)
    letters = ''.join(PLACEHOLDER_SYMBOLS[int(d)] for d in str(z))
    return letters[0].upper() + letters[1:]


def systematic_name(z: int) -> str:
    """IUPAC placeholder name for *z*, e.g. ``120 -> 'Unbinilium'``."""
    _check_z(z)
    name = ''.join(PLACEHOLDER_NAMES[int(d)] for d in str(z))
    name = name.replace('ii', 'i').replace('nnn', 'n')
    return name[0].upper() + name[1:] + 'ium'


def element_symbol(z: int) -> str:
    """Element symbol, falling back to the systematic symbol past Oganesson."""
    _check_z(z)
    if z <= MAX_NAMED_Z:
        return ELEMENT_SYMBOLS[z]
    return systematic_symbol(z)


def element_name(z: int) -> str:
    """Element name, falling back to the systematic name past Oganesson."""
    _check_z(z)
    if z <= MAX_NAMED_Z:
        return ELEMENT_NAMES[z]
    return systematic_name(z)


def isotope_name(z: int, a: int) -> str:
    """Full display name, e.g. ``isotope_name(92, 235) -> 'Uranium-235'``."""
    return f'{element_name(z)}-{a}'
