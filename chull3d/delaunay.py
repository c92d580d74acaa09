"""
Тріангуляція Делоне на площині через 3D оболонку:
точки піднімаються на параболоїд z = x² + y², нижня частина оболонки
(грані з нормаллю донизу) проектується назад — це і є тріангуляція Делоне.
"""
from __future__ import annotations
import logging
from functools import cmp_to_key
from random import Random
from typing import Dict, List, Optional, Sequence, Tuple

from .geom import Pt, Coord, cross, sub, lift
from .hull import ConvexHull3D, DegenerateInputError, Tri
from .predicates import incircle, orient2d

logger = logging.getLogger(__name__)

Pt2 = Tuple[Coord, Coord]


def _fan(points: Sequence[Pt2]) -> List[Tri]:
    """Усі точки на одному колі: віяло з точки 0, решта за кутом."""
    o = points[0]

    def by_angle(i: int, j: int) -> int:
        # усі точки на колі разом з o, тож кути лежать у півплощині
        s = orient2d(o, points[i], points[j])
        return -1 if s > 0 else (1 if s < 0 else 0)

    rest = sorted(range(1, len(points)), key=cmp_to_key(by_angle))
    return [(0, rest[k], rest[k + 1]) for k in range(len(rest) - 1)]


def delaunay_triangles(
    points: Sequence[Pt2],
    seed: Optional[int] = None,
    rng: Optional[Random] = None,
) -> List[Tri]:
    """
    Повертає трикутники Делоне як трійки індексів у `points`, проти годинникової стрілки.
    Вхід не змінюється: переставляється лише піднята копія.
    Вимоги: ≥3 різні точки, не всі колінеарні.
    """
    if len(points) < 3:
        raise DegenerateInputError("Need at least 3 points")
    lifted = [lift(x, y) for x, y in points]
    index: Dict[Pt, int] = {p: k for k, p in enumerate(lifted)}
    if len(index) != len(lifted):
        raise DegenerateInputError("Duplicate points")
    if all(orient2d(points[0], points[1], p) == 0 for p in points[2:]):
        raise DegenerateInputError("All points collinear")

    if rng is None:
        rng = Random(seed)
    try:
        hull = ConvexHull3D(lifted, rng=rng)
    except DegenerateInputError:
        # піднята множина пласка <=> усі точки на одному колі (зокрема рівно 3 точки)
        logger.debug("delaunay: %d concyclic points, using fan", len(points))
        return _fan(points)

    out: List[Tri] = []
    for a, b, c in hull.faces():
        pa, pb, pc = hull.P[a], hull.P[b], hull.P[c]
        if cross(sub(pb, pa), sub(pc, pa)).z < 0:
            # нормаль донизу: зверху грань обходиться за годинниковою, розвертаємо
            out.append((index[pa], index[pc], index[pb]))
    logger.debug("delaunay: %d points -> %d triangles", len(points), len(out))
    return out


def check_delaunay(points: Sequence[Pt2], triangles: Sequence[Tri]) -> List[Tuple[Tri, int]]:
    """
    Перевірка порожнього кола: пари (трикутник, точка), де точка строго
    всередині описаного кола трикутника. Порожній список = все ок.
    """
    bad: List[Tuple[Tri, int]] = []
    for t in triangles:
        a, b, c = (points[i] for i in t)
        for k, p in enumerate(points):
            if k in t:
                continue
            if incircle(a, b, c, p) > 0:
                bad.append((t, k))
    return bad
