"""Tests for the render_chart command-line script."""

import runpy
import sys
from pathlib import Path

import pytest

SCRIPT = Path(__file__).parent.parent / "scripts" / "render_chart.py"

TABLE = "\n".join([
    "nuclide;z;n;decay1;decay2;decay3;halflife;jp;abundance",
    "1H;1;0;stable;;;stable;1/2+;99.98",
    "bad;x;0;stable;;;stable;;",
])


@pytest.fixture
def main():
    return runpy.run_path(str(SCRIPT), run_name="render_chart")["main"]


def _run(main, monkeypatch, *args):
    monkeypatch.setattr(sys, "argv", ["render_chart.py", *map(str, args)])
    return main()


def test_renders_svg(main, monkeypatch, tmp_path):
    data = tmp_path / "data.csv"
    data.write_text(TABLE.rsplit("\n", 1)[0], encoding="utf-8")
    css = tmp_path / "chartstyle.css"
    css.write_text(".magicNumber { stroke: red; }", encoding="utf-8")
    out = tmp_path / "chart.svg"

    assert _run(main, monkeypatch, data, out, "--stylesheet", css) == 0
    svg = out.read_text(encoding="utf-8")
    assert "getdataset.jsp?nucleus=1H" in svg
    assert ".magicNumber { stroke: red; }" in svg


def test_malformed_row_fails(main, monkeypatch, tmp_path):
    data = tmp_path / "data.csv"
    data.write_text(TABLE, encoding="utf-8")
    out = tmp_path / "chart.svg"

    assert _run(main, monkeypatch, data, out) == 1
    assert not out.exists()


def test_skip_malformed(main, monkeypatch, tmp_path):
    data = tmp_path / "data.csv"
    data.write_text(TABLE, encoding="utf-8")
    out = tmp_path / "chart.svg"

    assert _run(main, monkeypatch, data, out, "--skip-malformed") == 0
    assert out.read_text(encoding="utf-8").count("<a ") == 1


def test_missing_datafile(main, monkeypatch, tmp_path):
    assert _run(main, monkeypatch, tmp_path / "nope.csv", tmp_path / "chart.svg") == 1


def test_config_file(main, monkeypatch, tmp_path):
    from nuclide_chart.config import ChartConfig

    data = tmp_path / "data.csv"
    data.write_text(TABLE.rsplit("\n", 1)[0], encoding="utf-8")
    config = ChartConfig(width=1000, height=800).save_yaml(tmp_path / "chart.yaml")
    out = tmp_path / "chart.svg"

    assert _run(main, monkeypatch, data, out, "--config", config) == 0
    assert 'width="1000"' in out.read_text(encoding="utf-8")
