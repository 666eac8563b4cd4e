from shapely.geometry import LineString

def has_self_intersections(coords):
    # fewer than two distinct points cannot cross themselves
    if len(set(coords)) < 2:
        return False
    line = LineString(coords)
    return not line.is_simple
