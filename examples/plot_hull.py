# examples/plot_hull.py
from __future__ import annotations

import logging
import random

import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d.art3d import Poly3DCollection

from chull3d import ConvexHull3D, Pt


def generate_random_points(n: int, rnd: random.Random):
    """n випадкових точок у кубі [0,1000]^3 із цілими координатами (предикати точні)."""
    return [Pt(rnd.randint(0, 1000), rnd.randint(0, 1000), rnd.randint(0, 1000)) for _ in range(n)]


def plot_hull(ax, hull: ConvexHull3D) -> None:
    pts = hull.P
    faces = hull.faces()
    tris = [[(pts[i].x, pts[i].y, pts[i].z) for i in f] for f in faces]
    ax.add_collection3d(Poly3DCollection(tris, alpha=0.3, edgecolor="k", linewidths=0.5))

    used = set(hull.vertices())
    inner = [p for i, p in enumerate(pts) if i not in used]
    outer = [pts[i] for i in used]
    ax.scatter([p.x for p in outer], [p.y for p in outer], [p.z for p in outer], c="r", s=8)
    ax.scatter([p.x for p in inner], [p.y for p in inner], [p.z for p in inner], c="b", s=4)

    # однакові масштаби
    xs = [p.x for p in pts]
    ys = [p.y for p in pts]
    zs = [p.z for p in pts]
    max_range = max(max(xs) - min(xs), max(ys) - min(ys), max(zs) - min(zs)) or 1.0
    mx = 0.5 * (min(xs) + max(xs))
    my = 0.5 * (min(ys) + max(ys))
    mz = 0.5 * (min(zs) + max(zs))
    ax.set_xlim(mx - max_range / 2, mx + max_range / 2)
    ax.set_ylim(my - max_range / 2, my + max_range / 2)
    ax.set_zlim(mz - max_range / 2, mz + max_range / 2)

    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_zlabel("Z")
    ax.set_title(f"Convex hull: {len(faces)} faces, {len(used)} vertices")


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    hull = ConvexHull3D(generate_random_points(200, random.Random(0)), seed=0)
    fig = plt.figure(figsize=(6, 5))
    ax = fig.add_subplot(111, projection="3d")
    plot_hull(ax, hull)
    plt.show()
