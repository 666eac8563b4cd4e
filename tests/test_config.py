import pytest
from typer.testing import CliRunner

from flatpath.cli.main import app
from flatpath.config import FlattenOptions, load_options, options_from_dict


def test_defaults():
    opts = load_options(None)
    assert opts == FlattenOptions(resolution=64, strict=False, units="mm", precision=None)


def test_yaml_file(tmp_path):
    cfg = tmp_path / "options.yml"
    cfg.write_text("resolution: 8\nstrict: true\nunits: in\n")
    assert load_options(cfg) == FlattenOptions(resolution=8, strict=True, units="in")


def test_empty_yaml_file(tmp_path):
    cfg = tmp_path / "options.yml"
    cfg.write_text("")
    assert load_options(cfg) == FlattenOptions()


def test_overrides_skip_none():
    opts = FlattenOptions(resolution=8).merged(resolution=None, units="unitless")
    assert opts.resolution == 8 and opts.units == "unitless"


@pytest.mark.parametrize("raw", [
    {"resolution": -1},
    {"resolution": "high"},
    {"units": "furlong"},
    {"tolerance": 0.1},
    {"resolution": True},
    {"precision": "two"},
    {"precision": -1},
    {"precision": False},
    {"strict": "no"},
])
def test_rejects_bad_options(raw):
    with pytest.raises(ValueError):
        options_from_dict(raw)


def test_bad_precision_in_file_is_a_usage_error(tmp_path):
    cfg = tmp_path / "options.yml"
    cfg.write_text("precision: two\n")
    result = CliRunner().invoke(app, ["flatten", "--d", "M0,0 L1,1", "--config", str(cfg)])
    assert result.exit_code == 2
    assert "precision" in result.output
