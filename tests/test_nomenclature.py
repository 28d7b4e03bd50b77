"""Tests for element symbols and names."""

import pytest

from nuclide_chart.data.nomenclature import (
    ELEMENT_NAMES,
    ELEMENT_SYMBOLS,
    MAX_NAMED_Z,
    PLACEHOLDER_NAMES,
    element_name,
    element_symbol,
    isotope_name,
    systematic_name,
    systematic_symbol,
)


class TestKnownElements:
    """Z = 0..118 come straight from the tables."""

    def test_table_sizes(self):
        assert MAX_NAMED_Z == 118
        assert len(ELEMENT_SYMBOLS) == len(ELEMENT_NAMES) == 119

    def test_tables_are_immutable(self):
        assert isinstance(ELEMENT_SYMBOLS, tuple)
        assert isinstance(ELEMENT_NAMES, tuple)

    @pytest.mark.parametrize("z", range(0, 119))
    def test_lookup_matches_table(self, z):
        assert element_symbol(z) == ELEMENT_SYMBOLS[z]
        assert element_name(z) == ELEMENT_NAMES[z]

    @pytest.mark.parametrize("z, symbol, name", [
        (0, "n", "Neutron"),
        (1, "H", "Hydrogen"),
        (26, "Fe", "Iron"),
        (82, "Pb", "Lead"),
        (92, "U", "Uranium"),
        (118, "Og", "Oganesson"),
    ])
    def test_spot_checks(self, z, symbol, name):
        assert element_symbol(z) == symbol
        assert element_name(z) == name


class TestSystematicNames:
    """IUPAC placeholder names past Oganesson."""

    @pytest.mark.parametrize("z, symbol, name", [
        (119, "Uue", "Ununennium"),
        (120, "Ubn", "Unbinilium"),
        (121, "Ubu", "Unbiunium"),
        (122, "Ubb", "Unbibiium"),
        (123, "Ubt", "Unbitriium"),
        (124, "Ubq", "Unbiquadium"),
        (132, "Utb", "Untribiium"),
        (130, "Utn", "Untrinilium"),
        (190, "Uen", "Unenilium"),
        (200, "Bnn", "Binilnilium"),
    ])
    def test_systematic_symbol_and_name(self, z, symbol, name):
        assert element_symbol(z) == symbol
        assert element_name(z) == name

    @pytest.mark.parametrize("z", [119, 150, 999, 1000, 12345])
    def test_symbol_length_matches_digit_count(self, z):
        symbol = systematic_symbol(z)
        assert len(symbol) == len(str(z))
        assert symbol[0].isupper()
        assert symbol[1:] == symbol[1:].lower()

    @pytest.mark.parametrize("z", range(119, 400, 7))
    def test_name_follows_syllables(self, z):
        """Stripping 'ium' and undoing the cleanups gives back the syllables."""
        name = systematic_name(z)
        assert name.endswith("ium")
        assert name[0].isupper()
        stem = name[:-len("ium")].lower()
        raw = "".join(PLACEHOLDER_NAMES[int(d)] for d in str(z))
        assert stem == raw.replace("ii", "i").replace("nnn", "n")

    @pytest.mark.parametrize("z", [122, 123, 132, 222])
    def test_cleanup_does_not_reach_suffix(self, z):
        """Digits ending in bi/tri keep their 'i' before 'ium'."""
        assert systematic_name(z).endswith("iium")

    def test_systematic_helpers_work_below_119(self):
        """The digit scheme is defined for any Z, named or not."""
        assert systematic_symbol(92) == "Eb"
        assert systematic_name(92) == "Ennbiium"

    def test_negative_z_rejected(self):
        with pytest.raises(ValueError):
            element_symbol(-1)
        with pytest.raises(ValueError):
            element_name(-1)


class TestIsotopeName:

    def test_known_element(self):
        assert isotope_name(1, 1) == "Hydrogen-1"
        assert isotope_name(92, 235) == "Uranium-235"

    def test_free_neutron(self):
        assert isotope_name(0, 1) == "Neutron-1"

    def test_systematic_element(self):
        assert isotope_name(119, 300) == "Ununennium-300"
