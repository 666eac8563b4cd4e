from typing import Sequence
from .path_parser import SubPath
import svgwrite

def subpaths_to_svg(subpaths: Sequence[SubPath], filename: str, margin: float = 10, stroke_width: float = 1) -> str:
    """Write flattened sub-paths as SVG polylines/polygons for a quick visual check."""
    xs = [x for _, pts in subpaths for x, _ in pts] or [0.0]
    ys = [y for _, pts in subpaths for _, y in pts] or [0.0]
    min_x, min_y = min(xs) - margin, min(ys) - margin
    width = max(xs) - min(xs) + 2*margin
    height = max(ys) - min(ys) + 2*margin

    dwg = svgwrite.Drawing(filename, size=(width, height))
    dwg.viewbox(min_x, min_y, width, height)
    for closed, pts in subpaths:
        if closed:
            # polygon closes itself; drop the repeated start point
            ring = list(pts[:-1]) if len(pts) > 1 and pts[0] == pts[-1] else list(pts)
            dwg.add(dwg.polygon(ring, fill="none", stroke="black", stroke_width=stroke_width))
        else:
            dwg.add(dwg.polyline(list(pts), fill="none", stroke="black", stroke_width=stroke_width))
    dwg.save()
    return filename
