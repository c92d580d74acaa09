# examples/demo_hull.py
import logging
import sys

from chull3d import ConvexHull3D, as_points, read_points, unique_points

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if len(sys.argv) > 1:
        pts = as_points(read_points(sys.argv[1]))
    else:
        # куб + внутрішні точки
        raw = [
            (0,0,0), (1,0,0), (1,1,0), (0,1,0),
            (0,0,1), (1,0,1), (1,1,1), (0,1,1),
            (0.5,0.5,0.5), (0.2,0.8,0.3), (0.8,0.2,0.7)
        ]
        pts = unique_points(raw)

    hull = ConvexHull3D(pts, seed=0)

    report = hull.validate()
    print("VALIDATION:", report)

    with open("hull.off", "w", encoding="utf-8") as f:
        f.write(hull.to_off())
    print("Wrote hull.off — можна глянути в MeshLab/ParaView.")
