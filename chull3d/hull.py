from __future__ import annotations
import logging
from dataclasses import dataclass, field
from heapq import merge
from random import Random
from typing import Dict, List, Optional, Set, Tuple

from .geom import Pt
from .offio import to_off
from .predicates import above, collinear, coplanar

logger = logging.getLogger(__name__)

Edge = Tuple[int, int]          # орієнтоване ребро (u, v)
Tri = Tuple[int, int, int]      # грань як трійка індексів точок
Slot = Tuple[int, int]          # (face_id, local_edge)


class DegenerateInputError(ValueError):
    """Менше 4 точок або всі точки копланарні: 3D оболонка не визначена."""


# ---------------- Підготовка точок ----------------
def prepare_points(P: List[Pt], rng: Optional[Random] = None) -> List[Pt]:
    """
    Перемішати P на місці й переставити так, щоб P[0..3] були не копланарні.

    Один прохід із лічильником «вимірності»: 1 — є одна точка, 2 — дві різні
    (пряма), 3 — три неколінеарні (площина). Точка, що ламає поточне виродження,
    переїжджає у наступний резервний слот. Якщо лічильник не дійшов до 4 —
    усі точки копланарні.
    """
    if len(P) < 4:
        raise DegenerateInputError("Need at least 4 points")
    if rng is None:
        rng = Random()
    rng.shuffle(P)

    dim = 1
    for i in range(1, len(P)):
        if dim == 1:
            if P[0] != P[i]:
                P[1], P[i] = P[i], P[1]
                dim += 1
        elif dim == 2:
            if not collinear(P[0], P[1], P[i]):
                P[2], P[i] = P[i], P[2]
                dim += 1
        elif dim == 3:
            if not coplanar(P[0], P[1], P[2], P[i]):
                P[3], P[i] = P[i], P[3]
                dim += 1
        else:
            break
    if dim != 4:
        raise DegenerateInputError("All points coplanar: 3D hull is impossible")
    return P


# ---------------- Наївна O(N^2) побудова ----------------
def naive_hull(P: List[Pt], rng: Optional[Random] = None) -> List[Tri]:
    """
    Еталонна інкрементальна оболонка: видимість перераховується з нуля на кожному кроці.
    Переставляє P на місці; повертає грані як індекси у переставлений P.
    """
    prepare_points(P, rng)
    # вироджена «оболонка» з двох протилежно орієнтованих трикутників
    hull: List[Tri] = [(0, 1, 2), (0, 2, 1)]

    for i in range(3, len(P)):
        p = P[i]
        # зайняті орієнтовані ребра, лише в межах цього кроку
        occupied: Set[Edge] = set()
        kept: List[Tri] = []
        created: List[Tri] = []
        for f in hull:
            a, b, c = f
            if not above(P[a], P[b], P[c], p):
                kept.append(f)
                continue
            for x, y in ((a, b), (b, c), (c, a)):
                if (y, x) in occupied:
                    # внутрішнє ребро видимої області: знищується
                    occupied.remove((y, x))
                else:
                    occupied.add((x, y))
                    created.append((x, y, i))
        # вціліли лише нові грані на горизонті
        for t in created:
            e = (t[0], t[1])
            if e in occupied:
                occupied.remove(e)
                kept.append(t)
        assert not occupied
        hull = kept
    return hull


# ---------------- Conflict-graph побудова ----------------
@dataclass
class Face:
    """
    Трикутна грань опуклої оболонки.
    v: індекси вершин із узгодженою орієнтацією (нормаль назовні).
    nbr[k]: (face_id, локальне ребро) сусіда через ребро k (0:(a,b), 1:(b,c), 2:(c,a)).
    alive: чи грань активна (у hull).
    conflict: відсортований список точок, що лежать строго над гранню.
    """
    v: Tri
    nbr: List[Optional[Slot]] = field(default_factory=lambda: [None, None, None])
    alive: bool = True
    conflict: List[int] = field(default_factory=list)

    def edge(self, k: int) -> Edge:
        return (self.v[k], self.v[(k + 1) % 3])


def _merge_unique(xs: List[int], ys: List[int]) -> List[int]:
    """Злиття двох відсортованих списків без повторів."""
    out: List[int] = []
    for x in merge(xs, ys):
        if not out or out[-1] != x:
            out.append(x)
    return out


class ConvexHull3D:
    """
    Рандомізований інкрементальний 3D convex hull із conflict graph,
    очікуваний час O(N log N).

    Вхід: список Pt (мінімум 4, не всі копланарні).
    copy=True — працюємо з копією self.P; copy=False — переставляємо список викликача.
    Вихід: self.faces_list — масив Face (зокрема мертві); faces() — лише активні трикутники.
    """

    def __init__(
        self,
        points: List[Pt],
        seed: Optional[int] = None,
        rng: Optional[Random] = None,
        copy: bool = True,
    ):
        if rng is None:
            rng = Random(seed)
        self.P: List[Pt] = list(points) if copy else points
        prepare_points(self.P, rng)

        # Динамічні структури
        self.faces_list: List[Face] = []                              # усі створені грані, мертві лишаються
        self.vis: List[Set[int]] = [set() for _ in self.P]            # точка -> видимі з неї активні грані
        self.skipped: List[int] = []                                  # точки, що опинились всередині

        self._build_seed()
        for i in range(3, len(self.P)):
            self._insert(i)

        logger.debug(
            "hull: %d points, %d faces created, %d active, %d skipped",
            len(self.P), len(self.faces_list), len(self.faces()), len(self.skipped),
        )

    # ---------------- Публічний API ----------------
    def faces(self) -> List[Tri]:
        """Активні грані (трикутники) як індекси вершин."""
        return [f.v for f in self.faces_list if f.alive]

    def vertices(self) -> List[int]:
        return sorted({i for f in self.faces_list if f.alive for i in f.v})

    # ---------------- Сховище граней ----------------
    def _add_face(self, a: int, b: int, c: int) -> int:
        self.faces_list.append(Face((a, b, c)))
        return len(self.faces_list) - 1

    def _edge(self, s: Slot) -> Edge:
        return self.faces_list[s[0]].edge(s[1])

    def _glue(self, s: Slot, t: Slot) -> None:
        """Склеїти дві грані по спільному ребру (у протилежних орієнтаціях)."""
        u, v = self._edge(s)
        assert self._edge(t) == (v, u)
        self.faces_list[s[0]].nbr[s[1]] = t
        self.faces_list[t[0]].nbr[t[1]] = s

    def _above(self, fid: int, pi: int) -> bool:
        a, b, c = self.faces_list[fid].v
        return above(self.P[a], self.P[b], self.P[c], self.P[pi])

    def _add_conflict(self, fid: int, pi: int) -> None:
        self.faces_list[fid].conflict.append(pi)
        self.vis[pi].add(fid)

    # ---------------- Побудова ----------------
    def _build_seed(self) -> None:
        """
        Дві протилежні грані першого трикутника, склеєні по всіх трьох ребрах.
        Орієнтуємо так, щоб точка 3 бачила грань 0 (її й буде знесено першою).
        """
        self._add_face(0, 1, 2)
        self._add_face(0, 2, 1)
        if self._above(1, 3):
            self.P[1], self.P[2] = self.P[2], self.P[1]
        for k in range(3):
            self._glue((0, k), (1, 2 - k))
        for i in range(3, len(self.P)):
            # копланарні точки йдуть у конфлікти грані 0
            self._add_conflict(1 if self._above(1, i) else 0, i)

    def _insert(self, i: int) -> None:
        """
        Додати точку i:
          1) знести всі видимі з неї грані,
          2) на кожному ребрі горизонту створити грань (a,b,i) й зібрати її конфлікти,
          3) обійти цикл горизонту й склеїти нові грані між собою.
        """
        removed = sorted(self.vis[i])
        if not removed:
            # точка всередині або на межі, оболонка не змінюється
            self.skipped.append(i)
            return
        for fid in removed:
            self.faces_list[fid].alive = False

        label: Dict[int, int] = {}   # вершина горизонту -> нова грань, що з неї починається
        start = -1
        for r in removed:
            face_r = self.faces_list[r]
            for k in range(3):
                o = face_r.nbr[k]
                if not self.faces_list[o[0]].alive:
                    continue
                # ребро горизонту
                a, b = face_r.edge(k)
                cur = self._add_face(a, b, i)
                label[a] = cur
                start = a
                candidates = _merge_unique(face_r.conflict, self.faces_list[o[0]].conflict)
                for x in candidates:
                    if x > i and self._above(cur, x):
                        self._add_conflict(cur, x)
                self._glue((cur, 0), o)

        # склеїти сусідні грані віяла навколо i
        x = start
        while True:
            X = label[x]
            y = self.faces_list[X].v[1]
            self._glue((X, 1), (label[y], 2))
            if y == start:
                break
            x = y

        # прибрати мертві грані з видимостей точок (дзеркальність індексів)
        for r in removed:
            face_r = self.faces_list[r]
            for pi in face_r.conflict:
                self.vis[pi].discard(r)
            face_r.conflict = []

    # ---------------- Діагностика / Експорт ----------------
    def validate(self) -> dict:
        """
        Перевірка коректності:
          - кожне орієнтоване ребро рівно в одній активній грані, а зворотне — в іншій;
          - сусідства активні й симетричні (зворотні посилання через те саме ребро);
          - жодна точка не лежить строго над активною гранню (опуклість);
          - conflict-списки та vis дзеркальні.
        Повертає словник із діагностикою (порожні списки = все ок).
        """
        alive = [fid for fid, f in enumerate(self.faces_list) if f.alive]

        # 1) орієнтовані ребра
        edge_count: Dict[Edge, int] = {}
        for fid in alive:
            f = self.faces_list[fid]
            for k in range(3):
                e = f.edge(k)
                edge_count[e] = edge_count.get(e, 0) + 1
        bad_edges = [
            e for e, n in edge_count.items()
            if n != 1 or edge_count.get((e[1], e[0])) != 1
        ]

        # 2) симетрія сусідств
        bad_nbr: List[Tuple[int, int, str]] = []
        for fid in alive:
            f = self.faces_list[fid]
            for k in range(3):
                s = f.nbr[k]
                if s is None or not self.faces_list[s[0]].alive:
                    bad_nbr.append((fid, k, "missing_or_dead_neighbor"))
                    continue
                if self.faces_list[s[0]].nbr[s[1]] != (fid, k):
                    bad_nbr.append((fid, k, f"no_backlink_to_{s[0]}"))

        # 3) опуклість
        outside: List[Tuple[int, int]] = []
        for fid in alive:
            for pi in range(len(self.P)):
                if self._above(fid, pi):
                    outside.append((fid, pi))

        # 4) дзеркальність conflict <-> vis
        bad_conf: List[Tuple[int, int]] = []
        for fid, f in enumerate(self.faces_list):
            for pi in f.conflict:
                if fid not in self.vis[pi]:
                    bad_conf.append((fid, pi))
        for pi, fids in enumerate(self.vis):
            for fid in fids:
                if pi not in self.faces_list[fid].conflict:
                    bad_conf.append((fid, pi))

        return {
            "faces": len(alive),
            "unique_vertices": len(self.vertices()),
            "bad_edges": bad_edges,
            "bad_neighbors": bad_nbr,
            "outside_points": outside,
            "bad_conflicts": bad_conf,
        }

    def to_off(self) -> str:
        """Експорт опуклої оболонки у формат OFF (активні грані)."""
        return to_off(self.P, self.faces())


def fast_hull(P: List[Pt], rng: Optional[Random] = None) -> List[Tri]:
    """Conflict-graph оболонка; як і naive_hull, переставляє P на місці."""
    return ConvexHull3D(P, rng=rng, copy=False).faces()
