from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

Coord = Union[int, float]


@dataclass(frozen=True)
class Pt:
    """
    Точка в 3D. Координати — int, Fraction або float.
    Для int/Fraction усі детермінанти обчислюються точно (довга арифметика Python).
    """
    x: Coord
    y: Coord
    z: Coord
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def dot(a: Pt, b: Pt) -> Coord:
    return a.x*b.x + a.y*b.y + a.z*b.z

def cross(a: Pt, b: Pt) -> Pt:
    return Pt(a.y*b.z - a.z*b.y,
              a.z*b.x - a.x*b.z,
              a.x*b.y - a.y*b.x)

def centroid(points: Iterable[Pt]) -> Pt:
    xs = ys = zs = 0.0
    n = 0
    for p in points:
        xs += p.x; ys += p.y; zs += p.z; n += 1
    if n == 0:
        raise ValueError("empty set")
    inv = 1.0 / n
    return Pt(xs*inv, ys*inv, zs*inv)

def as_points(points: Iterable[Union[Pt, Tuple[Coord, Coord, Coord]]]) -> List[Pt]:
    """Привести вхід (Pt або трійки) до списку Pt."""
    out: List[Pt] = []
    for p in points:
        if isinstance(p, Pt):
            out.append(p)
        else:
            x, y, z = p
            out.append(Pt(x, y, z))
    return out

def lift(x: Coord, y: Coord) -> Pt:
    """Підйом на параболоїд z = x² + y² (для Делоне через 3D оболонку)."""
    return Pt(x, y, x*x + y*y)

def unique_points(points: Iterable[Tuple[float, float, float]], scale: float = 1e9) -> List[Pt]:
    """
    Груба дедуплікація з квантуванням (стабільніше для float).
    `scale=1e9` ≈ 1e-9 на координату. Порядок першої появи зберігається.
    """
    seen: dict[Tuple[int, int, int], Pt] = {}
    for x, y, z in points:
        key = (int(round(x*scale)), int(round(y*scale)), int(round(z*scale)))
        if key not in seen:
            seen[key] = Pt(x, y, z)
    return list(seen.values())
