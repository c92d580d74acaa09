# chull3d/predicates.py
from __future__ import annotations
from typing import Tuple

from .geom import Pt, Coord, sub, cross, dot

Pt2 = Tuple[Coord, Coord]

def orient3d(a: Pt, b: Pt, c: Pt, d: Pt) -> Coord:
    """
    Подвоєний (×6) знаковий об'єм тетраедра (a,b,c,d).
    >0 якщо d лежить з боку нормалі (b-a)×(c-a), тобто «над» гранню (a,b,c).
    """
    ab = sub(b, a)
    ac = sub(c, a)
    ad = sub(d, a)
    return dot(cross(ab, ac), ad)

def above(a: Pt, b: Pt, c: Pt, p: Pt) -> bool:
    """Чи лежить p строго над площиною (a,b,c). Точка на площині — не над."""
    return orient3d(a, b, c, p) > 0

def collinear(a: Pt, b: Pt, c: Pt) -> bool:
    n = cross(sub(b, a), sub(c, a))
    return n.x == 0 and n.y == 0 and n.z == 0

def coplanar(a: Pt, b: Pt, c: Pt, d: Pt) -> bool:
    return orient3d(a, b, c, d) == 0

# ---------- 2D (для перевірки Делоне) ----------
def orient2d(a: Pt2, b: Pt2, c: Pt2) -> Coord:
    """>0 якщо a,b,c ідуть проти годинникової стрілки."""
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])

def incircle(a: Pt2, b: Pt2, c: Pt2, d: Pt2) -> Coord:
    """
    Тест «чи лежить d усередині кола через a,b,c?».
    Для трикутника (a,b,c) проти годинникової:
      >0  якщо d всередині,
      <0  якщо зовні,
       0  якщо на колі.
    """
    adx, ady = a[0] - d[0], a[1] - d[1]
    bdx, bdy = b[0] - d[0], b[1] - d[1]
    cdx, cdy = c[0] - d[0], c[1] - d[1]
    ad2 = adx*adx + ady*ady
    bd2 = bdx*bdx + bdy*bdy
    cd2 = cdx*cdx + cdy*cdy
    return (adx * (bdy*cd2 - bd2*cdy)
            - ady * (bdx*cd2 - bd2*cdx)
            + ad2 * (bdx*cdy - bdy*cdx))
