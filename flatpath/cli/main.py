import json
import logging
from pathlib import Path
from typing import Optional, List, Dict, Any

import typer

# Engine imports
from ..config import FlattenOptions, load_options          # YAML options
from ..dsl.path_parser import PathParser, SubPath          # streaming parser
from ..dsl.tokenizer import PathSyntaxError
from ..dsl.to_svg import subpaths_to_svg                   # SVG preview
from ..validators.intersections import has_self_intersections
# DXF exporter is imported inside the command to avoid hard dependency at import-time

app = typer.Typer(help="flatpath: SVG path data to polylines")


# ---------------------------
# Helpers
# ---------------------------

@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log parser diagnostics")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _read_path_data(d: Optional[str], inp: Optional[Path]) -> str:
    if (d is None) == (inp is None):
        raise typer.BadParameter("give exactly one of --d or --input")
    if inp is not None:
        return inp.read_text()
    return d


def _options(config: Optional[Path], **overrides: Any) -> FlattenOptions:
    try:
        return load_options(config).merged(**overrides)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--config")


def _flatten(data: str, opts: FlattenOptions) -> List[SubPath]:
    """Run the parser to completion; strict mode turns bad data into exit code 1."""
    parser = PathParser(data, opts.resolution, strict=opts.strict)
    try:
        subpaths = list(parser)
    except PathSyntaxError as e:
        typer.echo(f"Invalid path data: {e}", err=True)
        raise typer.Exit(code=1)
    if parser.error is not None:
        typer.echo(f"Ignored path data from offset {parser.error.offset}: {parser.error.reason}", err=True)
    return subpaths


def _subpaths_to_json(subpaths: List[SubPath], precision: Optional[int]) -> List[Dict[str, Any]]:
    def fmt(v: float) -> float:
        return v if precision is None else round(v, precision)
    return [
        {"closed": closed, "points": [[fmt(x), fmt(y)] for x, y in pts]}
        for closed, pts in subpaths
    ]


# ---------------------------
# Commands
# ---------------------------

DataOpt = typer.Option(None, "--d", help="SVG path data, e.g. 'M0,0 L10,10'")
InputOpt = typer.Option(None, "--input", exists=True, dir_okay=False, help="File holding SVG path data")
ConfigOpt = typer.Option(None, "--config", exists=True, dir_okay=False, help="Options YAML")
ResolutionOpt = typer.Option(None, min=0, help="Samples per curve/arc (default 64)")


@app.command()
def flatten(
    d: Optional[str] = DataOpt,
    inp: Optional[Path] = InputOpt,
    config: Optional[Path] = ConfigOpt,
    resolution: Optional[int] = ResolutionOpt,
    strict: Optional[bool] = typer.Option(None, "--strict/--lenient", help="Fail on malformed path data"),
    precision: Optional[int] = typer.Option(None, min=0, help="Round coordinates to N decimals"),
    out: Optional[Path] = typer.Option(None, help="Output JSON (stdout if omitted)"),
):
    """
    Flatten path data into polylines.

    Writes {"resolution": N, "subpaths": [{"closed": bool, "points": [[x, y], ...]}]}.
    """
    opts = _options(config, resolution=resolution, strict=strict, precision=precision)
    subpaths = _flatten(_read_path_data(d, inp), opts)
    payload = {"resolution": opts.resolution, "subpaths": _subpaths_to_json(subpaths, opts.precision)}
    text = json.dumps(payload, indent=2)
    if out is None:
        typer.echo(text)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text)
    typer.echo(f"Wrote {len(subpaths)} sub-path(s) to {out}")


@app.command()
def preview(
    d: Optional[str] = DataOpt,
    inp: Optional[Path] = InputOpt,
    config: Optional[Path] = ConfigOpt,
    resolution: Optional[int] = ResolutionOpt,
    out: Path = typer.Option(..., help="Output SVG file"),
):
    """
    Write the flattened polylines as an SVG for quick visual checks.
    """
    opts = _options(config, resolution=resolution)
    subpaths = _flatten(_read_path_data(d, inp), opts)
    out.parent.mkdir(parents=True, exist_ok=True)
    subpaths_to_svg(subpaths, str(out))
    typer.echo(f"Wrote {out}")


@app.command("export-dxf")
def export_dxf_cmd(
    d: Optional[str] = DataOpt,
    inp: Optional[Path] = InputOpt,
    config: Optional[Path] = ConfigOpt,
    resolution: Optional[int] = ResolutionOpt,
    out: Path = typer.Option(..., help="Output DXF path"),
    units: Optional[str] = typer.Option(None, help="Units for $INSUNITS (mm|in|unitless)"),
):
    """
    Export flattened sub-paths to DXF (AC1018), one LWPOLYLINE per sub-path.
    """
    from ..packaging.dxf_exporter import export_dxf  # import here to keep CLI import light

    opts = _options(config, resolution=resolution, units=units)
    subpaths = _flatten(_read_path_data(d, inp), opts)
    out.parent.mkdir(parents=True, exist_ok=True)
    path = export_dxf(subpaths, str(out), units=opts.units)
    typer.echo(f"Wrote DXF: {path}")


@app.command()
def check(
    d: Optional[str] = DataOpt,
    inp: Optional[Path] = InputOpt,
    config: Optional[Path] = ConfigOpt,
    resolution: Optional[int] = ResolutionOpt,
):
    """
    Report point count, closure and self-intersection for each sub-path.
    Exits with code 1 if any sub-path crosses itself.
    """
    opts = _options(config, resolution=resolution)
    subpaths = _flatten(_read_path_data(d, inp), opts)
    crossing = 0
    for i, (closed, pts) in enumerate(subpaths):
        simple = not has_self_intersections(pts)
        crossing += not simple
        typer.echo(
            f"{i}: {len(pts)} points, {'closed' if closed else 'open'}, "
            f"{'simple' if simple else 'self-intersecting'}"
        )
    if crossing:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
