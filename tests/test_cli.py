import json

import ezdxf
from typer.testing import CliRunner

from flatpath.cli.main import app

runner = CliRunner()


def test_flatten_to_stdout():
    result = runner.invoke(app, ["flatten", "--d", "M0,0 L10,0 L10,10 Z"])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload == {
        "resolution": 64,
        "subpaths": [{"closed": True, "points": [[0, 0], [10, 0], [10, 10], [0, 0]]}],
    }


def test_flatten_from_file_with_config(tmp_path):
    data = tmp_path / "shape.txt"
    data.write_text("M0,0 Q5,5 10,0")
    cfg = tmp_path / "options.yml"
    cfg.write_text("resolution: 2\nprecision: 2\n")
    out = tmp_path / "out" / "shape.json"
    result = runner.invoke(app, ["flatten", "--input", str(data), "--config", str(cfg), "--out", str(out)])
    assert result.exit_code == 0, result.output
    payload = json.loads(out.read_text())
    assert payload["resolution"] == 2
    assert payload["subpaths"][0]["points"] == [[0, 0], [5, 2.5], [10, 0]]


def test_resolution_flag_overrides_config(tmp_path):
    cfg = tmp_path / "options.yml"
    cfg.write_text("resolution: 2\n")
    result = runner.invoke(app, ["flatten", "--d", "M0,0 Q5,5 10,0", "--config", str(cfg), "--resolution", "4"])
    assert result.exit_code == 0, result.output
    assert len(json.loads(result.output)["subpaths"][0]["points"]) == 5


def test_needs_exactly_one_source(tmp_path):
    assert runner.invoke(app, ["flatten"]).exit_code != 0
    data = tmp_path / "shape.txt"
    data.write_text("M0,0")
    assert runner.invoke(app, ["flatten", "--d", "M0,0", "--input", str(data)]).exit_code != 0


def test_lenient_reports_ignored_suffix():
    result = runner.invoke(app, ["flatten", "--d", "M0,0 L10,10 X5,5"])
    assert result.exit_code == 0
    assert "offset 12" in result.output


def test_strict_fails():
    result = runner.invoke(app, ["flatten", "--d", "M0,0 L10,10 X5,5", "--strict"])
    assert result.exit_code == 1
    assert "Invalid path data" in result.output


def test_preview_writes_svg(tmp_path):
    out = tmp_path / "preview.svg"
    result = runner.invoke(app, ["preview", "--d", "M0,0 L10,0 L10,10 Z M20,20 L30,30", "--out", str(out)])
    assert result.exit_code == 0, result.output
    text = out.read_text()
    assert "<polygon" in text and "<polyline" in text


def test_export_dxf(tmp_path):
    out = tmp_path / "shape.dxf"
    result = runner.invoke(app, ["export-dxf", "--d", "M0,0 L10,0 L10,10 Z M5,5", "--out", str(out), "--units", "in"])
    assert result.exit_code == 0, result.output
    doc = ezdxf.readfile(str(out))
    assert doc.header["$INSUNITS"] == 1
    [poly] = doc.modelspace().query("LWPOLYLINE")
    assert poly.closed
    assert [tuple(p) for p in poly.vertices()] == [(0, 0), (10, 0), (10, 10)]
    assert len(doc.modelspace().query("POINT")) == 1


def test_check_reports_crossings():
    ok = runner.invoke(app, ["check", "--d", "M0,0 L10,0 L10,10 Z"])
    assert ok.exit_code == 0, ok.output
    assert "closed, simple" in ok.output
    bowtie = runner.invoke(app, ["check", "--d", "M0,0 L10,10 L10,0 L0,10 Z"])
    assert bowtie.exit_code == 1
    assert "self-intersecting" in bowtie.output
