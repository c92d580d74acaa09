# examples/demo_delaunay.py
import logging
import random

from chull3d import check_delaunay, delaunay_triangles

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    rnd = random.Random(1)
    pts = list({(rnd.randint(0, 100), rnd.randint(0, 100)) for _ in range(50)})

    tris = delaunay_triangles(pts, seed=0)
    print("points:", len(pts))
    print("triangles:", len(tris))
    print("empty-circle violations:", check_delaunay(pts, tris))
