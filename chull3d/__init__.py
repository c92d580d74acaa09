"""
chull3d — рандомізована інкрементальна 3D опукла оболонка (Py 3.10+).
Два алгоритми: еталонний O(N^2) і conflict graph з очікуваним O(N log N);
плюс тріангуляція Делоне через підйом на параболоїд.
"""

__version__ = "0.2.0"

import logging

from chull3d.geom import Pt, centroid, unique_points, as_points, lift
from chull3d.predicates import orient3d, above, collinear, coplanar, orient2d, incircle
from chull3d.hull import (
    ConvexHull3D, DegenerateInputError, Face, prepare_points, naive_hull, fast_hull,
)
from chull3d.delaunay import delaunay_triangles, check_delaunay
from chull3d.offio import parse_points, read_points, to_off, write_off
from chull3d.pipeline import convex_hull

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Pt", "centroid", "unique_points", "as_points", "lift",
    "orient3d", "above", "collinear", "coplanar", "orient2d", "incircle",
    "ConvexHull3D", "DegenerateInputError", "Face", "prepare_points", "naive_hull", "fast_hull",
    "delaunay_triangles", "check_delaunay",
    "parse_points", "read_points", "to_off", "write_off",
    "convex_hull", "__version__",
]
