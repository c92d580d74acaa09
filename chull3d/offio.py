from __future__ import annotations
from typing import List, Sequence, Tuple, Union

from .geom import Pt

Number = Union[int, float]


def _number(s: str) -> Number:
    # цілі лишаються int
    try:
        return int(s)
    except ValueError:
        return float(s)


def parse_points(text: str, dim: int = 3) -> List[Tuple[Number, ...]]:
    """
    Парсить точки з багаторядкового тексту.
    Кожен рядок: x y z або x, y, z (для dim=2 — x y).
    Порожні рядки й рядки з '#' пропускаються.
    """
    points = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.replace(",", " ").split()
        if len(parts) != dim:
            raise ValueError(f"line {lineno}: expected {dim} numbers, got {len(parts)}")
        try:
            points.append(tuple(_number(s) for s in parts))
        except ValueError:
            raise ValueError(f"line {lineno}: cannot parse numbers in '{line}'") from None
    return points


def read_points(path: str, dim: int = 3) -> List[Tuple[Number, ...]]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_points(f.read(), dim)


def to_off(pts: Sequence[Pt], faces: Sequence[Tuple[int, int, int]]) -> str:
    """
    OFF для трикутної поверхні: лише вершини, що входять у грані,
    з перенумерацією в порядку зростання індексів.
    """
    used = sorted({i for tri in faces for i in tri})
    remap = {old: new for new, old in enumerate(used)}
    lines = ["OFF", f"{len(used)} {len(faces)} 0"]
    for i in used:
        p = pts[i]
        lines.append(f"{p.x} {p.y} {p.z}")
    for a, b, c in faces:
        lines.append(f"3 {remap[a]} {remap[b]} {remap[c]}")
    return "\n".join(lines)


def write_off(path: str, pts: Sequence[Pt], faces: Sequence[Tuple[int, int, int]]) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(to_off(pts, faces))
