"""Tests for the nuclide model and record parser."""

import dataclasses

import pytest

from nuclide_chart.data.nuclide import (
    MalformedRecordError,
    Nuclide,
    RecordResult,
    parse_abundance,
    parse_record,
    try_parse_record,
)

HYDROGEN_1 = "1H;1;0;stable;;;stable;1/2+;99.98"
TRITIUM = "3H;1;2;b-;;;12.32 y;1/2+;"
BISMUTH_212 = "212Bi;83;129;b-: 64.06 %;a: 35.94 %;;60.55 m;1-;"
FREE_NEUTRON = "1n;0;1;b-;;;613.9 s;1/2+;"


class TestParseRecord:
    """Well-formed rows."""

    def test_stable_hydrogen(self):
        nuc = parse_record(HYDROGEN_1)
        assert (nuc.z, nuc.n, nuc.a) == (1, 0, 1)
        assert nuc.element == "H"
        assert nuc.name == "Hydrogen-1"
        assert nuc.decay_mode.display_class == "stable"
        assert nuc.decay_mode.frequency == 100
        assert nuc.secondary_decay_mode is None
        assert nuc.tertiary_decay_mode is None
        assert nuc.half_life == "stable"
        assert nuc.angular_momentum_parity == "1/2+"
        assert nuc.abundance == pytest.approx(99.98)
        assert nuc.is_stable
        assert nuc.label == "1H"

    def test_synthetic_isotope_has_no_abundance(self):
        nuc = parse_record(TRITIUM)
        assert nuc.abundance is None
        assert nuc.half_life == "12.32 y"
        assert not nuc.is_stable

    def test_two_decay_modes(self):
        nuc = parse_record(BISMUTH_212)
        assert nuc.decay_mode.symbol == "β-"
        assert nuc.decay_mode.frequency == pytest.approx(64.06)
        assert nuc.secondary_decay_mode.symbol == "α"
        assert nuc.secondary_decay_mode.frequency == pytest.approx(35.94)

    def test_sibling_modes_without_values_are_unknown(self):
        nuc = parse_record("X;10;10;b+;a;;1 s;;")
        assert nuc.decay_mode.frequency is None
        assert nuc.secondary_decay_mode.frequency is None

    def test_branchings_not_normalised(self):
        nuc = parse_record("X;29;35;b-: 96;b+: 4;;12.7 h;1+;")
        assert nuc.decay_mode.frequency == 96.0
        assert nuc.secondary_decay_mode.frequency == 4.0

    def test_tertiary_mode_recorded(self):
        nuc = parse_record("X;90;138;a: 90;SF: 5;2b-: 1;1 s;0+;")
        assert nuc.tertiary_decay_mode.display_class == "doublebminus"
        assert [m.display_class for m in nuc.decay_modes] == ["a", "sf", "doublebminus"]

    def test_free_neutron(self):
        nuc = parse_record(FREE_NEUTRON)
        assert nuc.element == "n"
        assert nuc.name == "Neutron-1"

    def test_missing_abundance_column(self):
        nuc = parse_record("3H;1;2;b-;;;12.32 y;1/2+")
        assert nuc.abundance is None

    def test_id_column_is_ignored(self):
        """Mass number and symbol come from Z and N, not the label."""
        nuc = parse_record("bogus;2;2;stable;;;stable;0+;99.99")
        assert nuc.a == 4
        assert nuc.element == "He"

    def test_blank_secondary_is_absent(self):
        nuc = parse_record("X;10;10;b+; ;;1 s;;")
        assert nuc.secondary_decay_mode is None
        assert nuc.decay_mode.frequency == 100

    def test_superheavy(self):
        nuc = parse_record("X;119;180;a;;;1 ms;;")
        assert nuc.element == "Uue"
        assert nuc.name == "Ununennium-299"


class TestMalformedRecords:
    """Rows that cannot be placed on the grid."""

    @pytest.mark.parametrize("line", [
        "1H;one;0;stable;;;stable;1/2+;99.98",
        "1H;1;x;stable;;;stable;1/2+;99.98",
        "1H;;0;stable;;;stable;1/2+;99.98",
        "1H;1.5;0;stable;;;stable;1/2+;99.98",
        "1H;1;0",
        "1H;1;0;stable;;;stable;1/2+;99.98;extra",
        "1H;-1;2;stable;;;stable;1/2+;",
        "0n;0;0;stable;;;stable;;",
        "1H;1;0;;;;stable;1/2+;",
        "10Ne;1_0;0;stable;;;stable;0+;",
        "1H;\u0661;0;stable;;;stable;1/2+;",
        "1H;1;\uff10;stable;;;stable;1/2+;",
        "1H;1 0;0;stable;;;stable;1/2+;",
    ])
    def test_rejected(self, line):
        with pytest.raises(MalformedRecordError):
            parse_record(line)

    def test_signed_and_padded_counts_accepted(self):
        nuc = parse_record("4He; +2 ; 02 ;stable;;;stable;0+;99.99")
        assert (nuc.z, nuc.n) == (2, 2)

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_record("garbage")

    def test_error_carries_context(self):
        with pytest.raises(MalformedRecordError) as exc_info:
            parse_record("1H;one;0;stable;;;stable;1/2+;", line_number=7)
        err = exc_info.value
        assert err.line_number == 7
        assert err.line.startswith("1H;one")
        assert "line 7" in str(err)
        assert "Z" in str(err)

    def test_try_parse_failure(self):
        result = try_parse_record("1H;one;0;stable;;;stable;1/2+;")
        assert isinstance(result, RecordResult)
        assert not result.ok
        assert result.nuclide is None
        assert isinstance(result.error, MalformedRecordError)

    def test_try_parse_success(self):
        result = try_parse_record(HYDROGEN_1)
        assert result.ok
        assert result.nuclide.z == 1


class TestAbundance:
    """Absent vs zero abundance."""

    @pytest.mark.parametrize("value", ["", "  ", "NaN", "nan", "n/a"])
    def test_absent(self, value):
        assert parse_abundance(value) is None

    def test_zero_is_kept(self):
        assert parse_abundance("0") == 0.0
        assert parse_record("X;1;0;stable;;;stable;1/2+;0").abundance == 0.0

    def test_percent_sign_tolerated(self):
        assert parse_abundance("7.59%") == pytest.approx(7.59)


class TestNuclideModel:

    def test_mass_number_is_derived(self):
        nuc = parse_record(BISMUTH_212)
        assert nuc.a == nuc.z + nuc.n == 212

    def test_half_life_stable_flag(self):
        assert parse_record(HYDROGEN_1).is_half_life_stable
        assert not parse_record(TRITIUM).is_half_life_stable

    def test_immutable(self):
        nuc = parse_record(HYDROGEN_1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            nuc.z = 2

    def test_value_equality(self):
        assert parse_record(HYDROGEN_1) == parse_record(HYDROGEN_1)

    def test_direct_construction_validates(self):
        mode = parse_record(HYDROGEN_1).decay_mode
        with pytest.raises(ValueError):
            Nuclide(z=-1, n=3, decay_mode=mode)
