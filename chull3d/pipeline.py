from __future__ import annotations
from random import Random
from typing import Iterable, List, Optional, Tuple, Union

from .geom import Pt, Coord, as_points
from .hull import ConvexHull3D, naive_hull, Tri


def convex_hull(
    points: Iterable[Union[Pt, Tuple[Coord, Coord, Coord]]],
    method: str = "fast",
    backend: str = "internal",
    seed: Optional[int] = None,
) -> Tuple[List[Pt], List[Tri]]:
    """
    Повний пайплайн опуклої оболонки.
      backend="internal": наш інкрементальний алгоритм,
          method="fast"  — conflict graph, очікувано O(N log N),
          method="naive" — еталонний O(N^2);
      backend="scipy": Qhull через scipy.spatial.ConvexHull (для звірки).

    Повертає:
      pts    — список Pt у фінальному порядку (внутрішній бекенд його переставляє);
      faces  — трикутники оболонки (індекси у pts), нормалі назовні.
    Вхідна послідовність не змінюється.
    """
    pts: List[Pt] = as_points(points)

    if backend.lower() == "internal":
        if method == "fast":
            hull = ConvexHull3D(pts, seed=seed)
            return hull.P, hull.faces()
        if method == "naive":
            faces = naive_hull(pts, Random(seed))
            return pts, faces
        raise ValueError(f"Unknown method: {method}")

    if backend.lower() == "scipy":
        try:
            import numpy as np
            from scipy.spatial import ConvexHull
        except ImportError as e:
            raise RuntimeError(
                "backend='scipy' requires SciPy; install scipy or use backend='internal'."
            ) from e

        arr = np.array([(p.x, p.y, p.z) for p in pts], dtype=float)
        qh = ConvexHull(arr)
        faces: List[Tri] = []
        # порядок вершин симплекса у Qhull довільний, орієнтуємо за нормаллю фасети
        for (a, b, c), eq in zip(qh.simplices, qh.equations):
            n = np.cross(arr[b] - arr[a], arr[c] - arr[a])
            if np.dot(n, eq[:3]) < 0:
                b, c = c, b
            faces.append((int(a), int(b), int(c)))
        return pts, faces

    raise ValueError(f"Unknown backend: {backend}")
