import itertools
from collections import Counter
from random import Random

import numpy as np
import pytest

from chull3d import ConvexHull3D, DegenerateInputError, Pt, fast_hull, naive_hull
from chull3d.geom import cross, sub

from _checks import canonical, manifold_errors, outside_points, random_int_points

BUILDERS = {
    "naive": naive_hull,
    "fast": fast_hull,
}


def assert_valid_hull(P, faces):
    assert faces, "empty hull"
    assert manifold_errors(faces) == []
    assert outside_points(P, faces) == []


@pytest.mark.parametrize("method", ["naive", "fast"])
def test_tetrahedron(method, tetra):
    P = list(tetra)
    faces = BUILDERS[method](P, Random(1))

    assert len(faces) == 4
    assert_valid_hull(P, faces)
    for f, g in itertools.combinations(faces, 2):
        shared = {frozenset(e) for e in zip(f, f[1:] + f[:1])} & {frozenset(e) for e in zip(g, g[1:] + g[:1])}
        assert len(shared) == 1
    counts = Counter(i for f in faces for i in f)
    assert sorted(counts) == [0, 1, 2, 3]
    assert all(n == 3 for n in counts.values())


@pytest.mark.parametrize("method", ["naive", "fast"])
@pytest.mark.parametrize("seed", range(10))
def test_cube_normals(method, seed, cube):
    P = list(cube)
    faces = BUILDERS[method](P, Random(seed))

    assert len(faces) == 12
    assert_valid_hull(P, faces)
    for a, b, c in faces:
        n = cross(sub(P[b], P[a]), sub(P[c], P[a]))
        # нормаль уздовж осі грані куба
        comps = [(axis, v) for axis, v in enumerate(n) if v != 0]
        assert len(comps) == 1
        axis, v = comps[0]
        pa, pb, pc = (tuple(P[i]) for i in (a, b, c))
        side = pa[axis]
        assert pb[axis] == side and pc[axis] == side
        assert (v > 0) == (side == 1)


@pytest.mark.parametrize("method", ["naive", "fast"])
def test_point_above_triangle(method):
    P = [Pt(0, 0, 0), Pt(4, 0, 0), Pt(0, 4, 0), Pt(1, 1, 3)]
    faces = BUILDERS[method](P, Random(3))

    assert len(faces) == 4
    assert_valid_hull(P, faces)


@pytest.mark.parametrize("n_points", [5, 10, 50, 200])
@pytest.mark.parametrize("seed", [0, 1, 2])
def test_naive_and_fast_agree_in_general_position(n_points, seed):
    pts = random_int_points(n_points, seed=seed)
    P1, P2 = list(pts), list(pts)
    f1 = naive_hull(P1, Random(seed))
    f2 = fast_hull(P2, Random(seed + 100))

    assert_valid_hull(P1, f1)
    assert_valid_hull(P2, f2)
    assert canonical(P1, f1) == canonical(P2, f2)


@pytest.mark.parametrize("method", ["naive", "fast"])
@pytest.mark.parametrize("seed", range(5))
def test_degenerate_grid_is_still_valid(method, seed, grid):
    P = list(grid)
    faces = BUILDERS[method](P, Random(seed))

    assert_valid_hull(P, faces)
    # кутові точки завжди вершини
    used = {P[i] for f in faces for i in f}
    corners = {Pt(x, y, z) for x in (0, 2) for y in (0, 2) for z in (0, 2)}
    assert corners <= used
    assert Pt(1, 1, 1) not in used


@pytest.mark.parametrize("distribution", ["uniform_int", "normal_int", "normal_float"])
def test_fast_hull_validate(distribution):
    rng = np.random.default_rng(42)
    if distribution == "uniform_int":
        raw = rng.integers(-100, 100, size=(400, 3)).tolist()
    elif distribution == "normal_int":
        raw = np.round(rng.normal(0, 50, size=(400, 3))).astype(int).tolist()
    else:
        # цілі значення у float, детермінанти точні
        raw = np.round(rng.normal(0, 1000, size=(400, 3))).tolist()
    hull = ConvexHull3D([Pt(*p) for p in raw], seed=5)
    report = hull.validate()

    assert report["faces"] == len(hull.faces())
    assert report["bad_edges"] == []
    assert report["bad_neighbors"] == []
    assert report["outside_points"] == []
    assert report["bad_conflicts"] == []
    assert report["unique_vertices"] == len(hull.vertices())


def test_interior_point_is_skipped(cube):
    hull = ConvexHull3D(cube + [Pt(0.5, 0.5, 0.5)], seed=0)
    centre = hull.P.index(Pt(0.5, 0.5, 0.5))

    assert centre not in hull.vertices()
    assert set(hull.skipped).isdisjoint(hull.vertices())
    assert len(hull.faces()) == 12


def test_faces_are_tombstoned_not_removed():
    hull = ConvexHull3D(random_int_points(100, seed=9), seed=1)
    dead = [f for f in hull.faces_list if not f.alive]

    assert dead
    assert len(hull.faces_list) == len(dead) + len(hull.faces())
    assert all(f.conflict == [] for f in dead)
    # сусіди активних граней активні
    for f in hull.faces_list:
        if f.alive:
            assert all(hull.faces_list[s[0]].alive for s in f.nbr)


def test_same_seed_same_hull():
    pts = random_int_points(300, low=-20, high=20, seed=3)  # багато копланарних точок
    h1 = ConvexHull3D(pts, seed=11)
    h2 = ConvexHull3D(pts, seed=11)

    assert h1.P == h2.P
    assert set(h1.faces()) == set(h2.faces())


def test_different_seeds_valid_under_degeneracy():
    pts = random_int_points(300, low=-5, high=5, seed=4)
    for seed in range(5):
        hull = ConvexHull3D(pts, seed=seed)
        assert_valid_hull(hull.P, hull.faces())


def test_copy_flag():
    pts = random_int_points(20, seed=2)
    before = list(pts)

    hull = ConvexHull3D(pts, seed=0)
    assert pts == before
    assert sorted(map(tuple, hull.P)) == sorted(map(tuple, pts))

    fast_hull(pts, Random(0))
    assert pts != before
    assert sorted(map(tuple, pts)) == sorted(map(tuple, before))


def test_naive_hull_permutes_in_place():
    pts = random_int_points(30, seed=8)
    before = list(pts)
    faces = naive_hull(pts, Random(0))

    assert sorted(map(tuple, pts)) == sorted(map(tuple, before))
    assert_valid_hull(pts, faces)


@pytest.mark.parametrize("method", ["naive", "fast"])
def test_coplanar_input_rejected(method):
    P = [Pt(x, y, 0) for x in range(4) for y in range(4)]
    with pytest.raises(DegenerateInputError):
        BUILDERS[method](P, Random(0))


@pytest.mark.parametrize("method", ["naive", "fast"])
def test_too_few_points_rejected(method, tetra):
    with pytest.raises(ValueError):
        BUILDERS[method](tetra[:3], Random(0))


def test_to_off(tetra):
    hull = ConvexHull3D(tetra, seed=0)
    lines = hull.to_off().splitlines()

    assert lines[0] == "OFF"
    assert lines[1] == "4 4 0"
    assert all(line.startswith("3 ") for line in lines[6:])
    assert len(lines) == 2 + 4 + 4
