"""
DXF exporter (AC1018) for flattened SVG paths.

- Writes one DXF file per call.
- Units: sets $INSUNITS=4 (mm) when units="mm", 1 for inches, 0 otherwise.
- Geometry: one LWPOLYLINE per sub-path on layer PATH; closed sub-paths get the
  closed flag and lose their repeated start point.
- Single-point sub-paths (a bare moveto) become POINT entities on layer MARK.

Requires: ezdxf
"""
from __future__ import annotations
from typing import Dict, Optional, Sequence
import logging

try:
    import ezdxf  # type: ignore
except ImportError:
    ezdxf = None

from ..dsl.path_parser import SubPath

logger = logging.getLogger(__name__)

INSUNITS = {"mm": 4, "in": 1, "unitless": 0}

DEFAULT_LAYERS = {
    "PATH": {"color": 7},
    "MARK": {"color": 1},
}

def export_dxf(
    subpaths: Sequence[SubPath],
    out_path: str,
    units: str = "mm",
    layer_map: Optional[Dict[str, str]] = None,
):
    if ezdxf is None:
        raise RuntimeError("ezdxf is not available. Install dependencies: pip install ezdxf")

    doc = ezdxf.new(dxfversion="AC1018")
    msp = doc.modelspace()
    doc.header["$INSUNITS"] = INSUNITS.get(units.lower(), 0)

    # remap names; colors remain default
    names = {k: (layer_map or {}).get(k, k) for k in DEFAULT_LAYERS}
    for key, opts in DEFAULT_LAYERS.items():
        if names[key] not in doc.layers:
            doc.layers.add(names[key], color=opts.get("color", 7))

    for closed, pts in subpaths:
        if not pts:
            continue
        if len(pts) == 1:
            msp.add_point(pts[0], dxfattribs={"layer": names["MARK"]})
            continue
        verts = list(pts)
        if closed and len(verts) > 2 and verts[0] == verts[-1]:
            verts.pop()
        msp.add_lwpolyline(verts, format="xy", close=closed, dxfattribs={"layer": names["PATH"]})

    logger.debug("writing %d sub-paths to %s", len(subpaths), out_path)
    doc.saveas(out_path)
    return out_path
