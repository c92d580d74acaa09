# examples/demo_pipeline.py
from chull3d.pipeline import convex_hull

if __name__ == "__main__":
    cube = [
        (0,0,0), (1,0,0), (1,1,0), (0,1,0),
        (0,0,1), (1,0,1), (1,1,1), (0,1,1),
        (0.5,0.5,0.5), (0.2,0.8,0.3), (0.8,0.2,0.7)
    ]

    for backend, method in (("internal", "fast"), ("internal", "naive"), ("scipy", "fast")):
        pts, surface = convex_hull(cube, method=method, backend=backend, seed=0)
        print(f"{backend}/{method}: vertices={len({i for t in surface for i in t})} triangles={len(surface)}")
