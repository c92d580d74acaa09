# tests/conftest.py

import pytest

from chull3d import Pt


@pytest.fixture
def cube():
    return [Pt(x, y, z) for x in (0, 1) for y in (0, 1) for z in (0, 1)]


@pytest.fixture
def tetra():
    return [Pt(1, 1, 1), Pt(1, -1, -1), Pt(-1, 1, -1), Pt(-1, -1, 1)]


@pytest.fixture
def grid():
    return [Pt(x, y, z) for x in range(3) for y in range(3) for z in range(3)]
