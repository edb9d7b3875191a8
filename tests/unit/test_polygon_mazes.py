"""
Unit tests for the recursive polygon maze generators.

Tests maze generation for geometric correctness (the cursor returns to where
it started, every wall stays inside the polygon), perfect maze structure
(each tiling opens one wall fewer than it has regions, and the drawn walls
leave exactly one path between any two unit cells), reproducibility and
argument validation before anything is drawn.
"""

import math

import pytest

import numpy as np

from polymaze.geometry import UnionFind
from polymaze.mazes import (
    DecagonMazeGenerator,
    HexagonMazeGenerator,
    HexagonMethod,
    MazeContext,
    ParallelogramMazeGenerator,
    StartFrom,
    TrapezoidMazeGenerator,
    TriangleMazeGenerator,
)
from polymaze.utils.exceptions import ConfigError, InvalidArgumentError, ValidationError

GENERATORS = {
    "hexagon": (HexagonMazeGenerator, {}),
    "decagon": (DecagonMazeGenerator, {}),
    "triangle": (TriangleMazeGenerator, {}),
    "trapezoid": (TrapezoidMazeGenerator, {}),
    "rectangle": (ParallelogramMazeGenerator, {}),
    "rhombus": (ParallelogramMazeGenerator, {"angle": 60.0}),
}

# (shape, method, dims) for which the drawn maze is checked cell by cell
DRAWN_MAZES = [
    ("hexagon", "two_trapezoids", (4,)),
    ("hexagon", "six_triangles", (4,)),
    ("hexagon", "three_parallelograms", (4,)),
    ("hexagon", "random", (3,)),
    ("decagon", "ten_rhombs", (4,)),
    ("triangle", "four_triangles", (4,)),
    ("triangle", "triangle_and_trapezoid", (5,)),
    ("trapezoid", "parallelogram_and_triangle", (6, 3)),
    ("trapezoid", "three_triangles", (6, 3)),
    ("trapezoid", "four_trapezoids", (8, 4)),
    ("rectangle", "two_parallelograms", (3, 5)),
    ("rectangle", "four_parallelograms", (4, 4)),
    ("rhombus", "two_parallelograms", (2, 3)),
    ("rhombus", "four_parallelograms", (4, 4)),
]


def _make(name, context):
    cls, kwargs = GENERATORS[name]
    return cls(context, **kwargs)


class _VertexIds:
    """Integer ids for points, merging points closer than ``tol``."""

    def __init__(self, tol=1e-6, bucket=1e-3):
        self.tol = tol
        self.bucket = bucket
        self.points = []
        self.buckets = {}

    def __call__(self, point):
        x, y = point
        bx, by = math.floor(x / self.bucket), math.floor(y / self.bucket)
        for dx in (-1, 0, 1):
            for dy in (-1, 0, 1):
                for i in self.buckets.get((bx + dx, by + dy), ()):
                    px, py = self.points[i]
                    if abs(px - x) <= self.tol and abs(py - y) <= self.tol:
                        return i

        self.points.append((x, y))
        self.buckets.setdefault((bx, by), []).append(len(self.points) - 1)
        return len(self.points) - 1


def _on_drawn_wall(points, segments, tol=1e-6):
    """Whether each point lies on one of the drawn segments."""
    start = segments[:, 0][None]
    direction = (segments[:, 1] - segments[:, 0])[None]
    offset = points[:, None] - start
    t = np.clip((offset * direction).sum(-1) / (direction * direction).sum(-1), 0.0, 1.0)
    distance = np.linalg.norm(offset - t[..., None] * direction, axis=-1)
    return distance.min(axis=1) <= tol


def _area(corners):
    xs, ys = np.array(corners).T
    return abs(np.dot(xs, np.roll(ys, -1)) - np.dot(ys, np.roll(xs, -1))) / 2


def _cell_adjacency(context):
    """
    Read the maze back from a traced drawing.

    Every unit cell edge is either shared by two cells or lies on the
    boundary. A shared edge without a wall on its midpoint is a passage.

    Returns:
        (open_pairs, boundary_walled): cell index pairs joined by a passage,
        and per boundary edge whether a wall covers it
    """
    vertex_id = _VertexIds()
    edge_cells = {}
    midpoints = {}
    for cell, corners in enumerate(context.cells):
        for a, b in zip(corners, corners[1:] + corners[:1]):
            key = frozenset((vertex_id(a), vertex_id(b)))
            edge_cells.setdefault(key, []).append(cell)
            midpoints[key] = ((a[0] + b[0]) / 2, (a[1] + b[1]) / 2)

    keys = list(edge_cells)
    walled = _on_drawn_wall(np.array([midpoints[key] for key in keys]), context.surface.to_array())

    open_pairs, boundary_walled = [], []
    for key, has_wall in zip(keys, walled):
        cells = edge_cells[key]
        assert len(cells) <= 2, "unit cells overlap"
        if len(cells) == 1:
            boundary_walled.append(bool(has_wall))
        elif not has_wall:
            open_pairs.append(tuple(cells))
    return open_pairs, boundary_walled


def _loops_and_components(num_cells, open_pairs):
    uf = UnionFind(num_cells)
    loops = sum(not uf.union(a, b) for a, b in open_pairs)
    components = len({uf.find(cell) for cell in range(num_cells)})
    return loops, components


class TestCursorClosure:
    """Test that every maze leaves the cursor where it found it."""

    @pytest.mark.parametrize("name", sorted(GENERATORS))
    @pytest.mark.parametrize("start_from", ["midpoint", "corner"])
    @pytest.mark.parametrize("clockwise", [True, False])
    def test_returns_to_start(self, name, start_from, clockwise):
        """Test that position and heading are restored for every shape and orientation."""
        context = MazeContext.create(seed=1)
        _make(name, context).generate(depth=2, start_from=start_from, clockwise=clockwise, draw_boundary=True)

        assert context.cursor.position == pytest.approx((0.0, 0.0), abs=1e-6)
        assert context.cursor.heading == pytest.approx(0.0)
        assert len(context.surface) > 0

    @pytest.mark.parametrize("method", ["two_trapezoids", "six_triangles", "three_parallelograms"])
    def test_hexagon_methods_return_to_start(self, method):
        """Test that each hexagon tiling closes at depth 3."""
        context = MazeContext.create(seed=5)
        HexagonMazeGenerator(context).generate(depth=3, method=method, unit_len=2.0)

        assert context.cursor.position == pytest.approx((0.0, 0.0), abs=1e-6)
        assert context.cursor.heading == pytest.approx(0.0)

    def test_pen_state_restored(self, context):
        """Test that the pen ends up or down as it was on entry."""
        context.cursor.pen_down()
        HexagonMazeGenerator(context).generate(depth=2)
        assert context.cursor.is_down

        context.cursor.pen_up()
        HexagonMazeGenerator(context).generate(depth=2)
        assert not context.cursor.is_down


class TestContainment:
    """Test that walls stay inside the polygon."""

    @pytest.mark.parametrize("method", ["two_trapezoids", "six_triangles", "three_parallelograms"])
    def test_hexagon_walls_inside_bounding_box(self, method):
        """Test that hexagon walls stay within the hexagon's bounding box."""
        n, unit_len = 8, 1.0
        context = MazeContext.create(seed=3)
        HexagonMazeGenerator(context).generate(depth=3, unit_len=unit_len, method=method, draw_boundary=True)

        xmin, ymin, xmax, ymax = context.surface.bounds()
        tol = 1e-6
        assert xmin >= -n * unit_len - tol
        assert xmax <= n * unit_len + tol
        assert ymin >= -math.sqrt(3) * n * unit_len - tol
        assert ymax <= tol

    def test_decagon_walls_inside_circumcircle(self):
        """Test that no decagon wall leaves the circumscribed circle."""
        n, unit_len = 4, 3.0
        side = n * unit_len
        apothem = side / (2 * math.tan(math.radians(18)))
        radius = side / (2 * math.sin(math.radians(18)))

        context = MazeContext.create(seed=9)
        DecagonMazeGenerator(context).generate(depth=2, unit_len=unit_len, draw_boundary=True)

        points = context.surface.to_array().reshape(-1, 2)
        distances = np.hypot(points[:, 0], points[:, 1] + apothem)
        assert distances.max() <= radius + 1e-6

    def test_no_zero_length_walls(self, context):
        """Test that hole gaps never leave degenerate segments behind."""
        DecagonMazeGenerator(context).generate(depth=2, draw_boundary=True)
        assert min(seg.length for seg in context.surface) > 0


class TestPerfectMazeStructure:
    """Test the wall opening decisions of every tiling."""

    @pytest.mark.parametrize("name", sorted(GENERATORS))
    def test_each_tiling_opens_a_spanning_tree(self, name):
        """Test that every recorded tiling opens regions - 1 walls."""
        context = MazeContext.create(seed=4, record_tilings=True)
        _make(name, context).generate(depth=3 if name != "decagon" else 2, method="random")

        assert context.tilings
        for decision in context.tilings:
            assert len(decision.open_walls) == decision.num_walls
            assert decision.num_open == decision.num_regions - 1

    def test_decagon_opens_nine_of_fifteen_walls(self, traced_context):
        """Test the ten rhombus chain of the decagon."""
        DecagonMazeGenerator(traced_context).generate(depth=1)

        top = traced_context.tilings[0]
        assert top.shape == "decagon"
        assert top.method == "ten_rhombs"
        assert top.num_regions == 10
        assert top.num_walls == 15
        assert top.num_open == 9

    def test_six_triangles_open_five_of_six_spokes(self, traced_context):
        """Test that the ring of six triangles keeps exactly one spoke closed."""
        HexagonMazeGenerator(traced_context).generate(depth=1, method="six_triangles")

        top = traced_context.tilings[0]
        assert top.method == "six_triangles"
        assert top.dims == (2,)
        assert top.num_walls == 6
        assert top.num_open == 5

    def test_two_trapezoids_always_open_the_diagonal(self, traced_context):
        """Test that the single wall between two trapezoids is opened."""
        HexagonMazeGenerator(traced_context).generate(depth=1, method=HexagonMethod.TWO_TRAPEZOIDS)
        assert traced_context.tilings[0].open_walls == (True,)

    def test_random_method_reaches_every_hexagon_tiling(self):
        """Test that random method choice covers all three hexagon tilings."""
        chosen = set()
        for seed in range(60):
            context = MazeContext.create(seed=seed, record_tilings=True)
            HexagonMazeGenerator(context).generate(depth=1, method="random")
            chosen.add(context.tilings[0].method)

        assert chosen == {"two_trapezoids", "six_triangles", "three_parallelograms"}

    def test_no_tilings_recorded_by_default(self, context):
        """Test that tracing is off unless requested."""
        HexagonMazeGenerator(context).generate(depth=2)
        assert context.tilings == []
        assert context.cells == []


class TestDrawnMazeIsPerfect:
    """Test that the drawn walls join all unit cells in a single tree."""

    @pytest.mark.parametrize(("name", "method", "dims"), DRAWN_MAZES)
    @pytest.mark.parametrize("clockwise", [True, False])
    @pytest.mark.parametrize("seed", [3, 17])
    def test_passages_form_spanning_tree(self, name, method, dims, clockwise, seed):
        """Test that open cell edges connect every cell without a loop."""
        context = MazeContext.create(seed=seed, record_tilings=True)
        generator = _make(name, context)
        generator.render(
            dims,
            unit_len=1.0,
            clockwise=clockwise,
            start_from="corner",
            method=method,
            draw_boundary=True,
            boundary_holes=[],
        )

        outline = generator.outline(dims)
        cell_area = sum(_area(corners) for corners in context.cells)
        assert cell_area == pytest.approx(_area(outline.corners((0.0, 0.0), 0.0, 1.0, clockwise)))

        open_pairs, boundary_walled = _cell_adjacency(context)
        loops, components = _loops_and_components(len(context.cells), open_pairs)

        assert loops == 0
        assert components == 1
        assert len(open_pairs) == len(context.cells) - 1
        assert len(boundary_walled) == sum(outline.side_units)
        assert all(boundary_walled)

    def test_fractional_depth_hexagon(self):
        """Test a hexagon drawn with three unit pieces per side through generate."""
        context = MazeContext.create(seed=12, record_tilings=True)
        HexagonMazeGenerator(context).generate(
            depth=np.log2(3), unit_len=1.0, start_from="corner", draw_boundary=True, boundary_holes=[]
        )

        assert len(context.cells) == 6 * 9
        open_pairs, boundary_walled = _cell_adjacency(context)
        assert _loops_and_components(len(context.cells), open_pairs) == (0, 1)
        assert all(boundary_walled)

    def test_opening_every_wall_creates_loops(self, monkeypatch):
        """Test that the cell check notices a tiling that opens too many walls."""
        monkeypatch.setattr(
            "polymaze.mazes.base.open_wall_mask", lambda graph, rng: np.ones(graph.num_edges, dtype=bool)
        )
        context = MazeContext.create(seed=0, record_tilings=True)
        HexagonMazeGenerator(context).render((4,), unit_len=1.0, start_from="corner", method="six_triangles")

        open_pairs, _ = _cell_adjacency(context)
        loops, components = _loops_and_components(len(context.cells), open_pairs)
        assert loops > 0
        assert components == 1

    def test_cells_are_unit_polygons(self):
        """Test that each recorded cell has unit sides."""
        context = MazeContext.create(seed=2, record_tilings=True)
        DecagonMazeGenerator(context).generate(depth=1, unit_len=2.0)

        assert len(context.cells) == 10 * 4
        for corners in context.cells:
            assert len(corners) == 4
            sides = [math.dist(a, b) for a, b in zip(corners, corners[1:] + corners[:1])]
            assert sides == pytest.approx([2.0] * 4)


class TestReproducibility:
    """Test seeding and symmetry."""

    def test_same_seed_same_maze(self):
        """Test that a seed fixes the drawing."""
        arrays = []
        for _ in range(2):
            context = MazeContext.create(seed=21)
            HexagonMazeGenerator(context).generate(depth=3, method="random", draw_boundary=True)
            arrays.append(context.surface.to_array())

        np.testing.assert_array_equal(arrays[0], arrays[1])

    def test_different_seeds_differ(self):
        """Test that different seeds give different mazes."""
        arrays = []
        for seed in (1, 2):
            context = MazeContext.create(seed=seed)
            HexagonMazeGenerator(context).generate(depth=3, method="six_triangles")
            arrays.append(context.surface.to_array())

        assert arrays[0].shape != arrays[1].shape or not np.allclose(arrays[0], arrays[1])

    @pytest.mark.parametrize("name", ["hexagon", "decagon", "trapezoid"])
    def test_counter_clockwise_is_mirror_image(self, name):
        """Test that the same seed drawn counter-clockwise mirrors across the x axis."""
        drawings = {}
        for clockwise in (True, False):
            context = MazeContext.create(seed=8)
            _make(name, context).generate(depth=2, clockwise=clockwise, method="random", draw_boundary=True)
            drawings[clockwise] = context.surface.to_array()

        mirrored = drawings[False].copy()
        mirrored[..., 1] *= -1
        np.testing.assert_allclose(mirrored, drawings[True], atol=1e-8)


class TestBoundary:
    """Test drawing of the outer boundary."""

    def test_depth_zero_draws_no_walls(self, context):
        """Test that a unit hexagon without boundary draws nothing."""
        HexagonMazeGenerator(context).generate(depth=0)
        assert len(context.surface) == 0

    def test_depth_zero_boundary_only(self, context):
        """Test that a unit decagon draws just its ten sides."""
        DecagonMazeGenerator(context).generate(depth=0, unit_len=2.0, draw_boundary=True, boundary_holes=[])

        assert len(context.surface) == 10
        assert [seg.length for seg in context.surface] == pytest.approx([2.0] * 10)

    def test_boundary_drawn_last(self, context):
        """Test that the boundary strokes follow the interior walls."""
        unit_len = 3.0
        DecagonMazeGenerator(context).generate(depth=1, unit_len=unit_len, draw_boundary=True, boundary_holes=[])

        boundary = context.surface.segments[-10:]
        assert [seg.length for seg in boundary] == pytest.approx([2 * unit_len] * 10)

    def test_marked_boundary_holes(self, context):
        """Test that colored holes appear once per selected side."""
        HexagonMazeGenerator(context).generate(
            depth=1, unit_len=5.0, draw_boundary=True, boundary_holes=[1, 4], boundary_hole_color="red"
        )

        red = [seg for seg in context.surface if seg.color == "red"]
        assert len(red) == 2
        assert [seg.length for seg in red] == pytest.approx([5.0, 5.0])

    @pytest.mark.parametrize("holes", [{1, 4}, frozenset({4, 1})])
    def test_boundary_holes_as_set(self, context, holes):
        """Test that a set of side indices selects the same sides as a list."""
        HexagonMazeGenerator(context).generate(
            depth=1, unit_len=5.0, draw_boundary=True, boundary_holes=holes, boundary_hole_color="red"
        )

        red = [seg for seg in context.surface if seg.color == "red"]
        assert len(red) == 2

    def test_hidden_boundary_lines(self):
        """Test that hidden boundary lines add no strokes."""
        counts = []
        for draw_boundary in (False, True):
            context = MazeContext.create(seed=13)
            HexagonMazeGenerator(context).generate(
                depth=2, draw_boundary=draw_boundary, boundary_lines=False, boundary_holes=[]
            )
            counts.append(len(context.surface))

        assert counts[0] == counts[1]

    def test_partial_boundary(self, context):
        """Test that only the selected boundary sides are drawn."""
        HexagonMazeGenerator(context).generate(depth=0, draw_boundary=True, boundary_lines=[1, 2], boundary_holes=[])
        assert len(context.surface) == 2


class TestCursorPlacement:
    """Test start and end positions on the outline."""

    def test_end_side_from_corner(self, context):
        """Test that the cursor ends on the first corner of side 3."""
        HexagonMazeGenerator(context).generate(depth=1, unit_len=1.0, start_from=StartFrom.CORNER, end_side=3)

        assert context.cursor.position == pytest.approx((3.0, -math.sqrt(3)))
        assert context.cursor.heading == pytest.approx(240.0)

    def test_end_side_from_midpoint(self, context):
        """Test that the cursor ends on the midpoint of side 3."""
        HexagonMazeGenerator(context).generate(depth=1, unit_len=1.0, end_side=3)

        assert context.cursor.position == pytest.approx((1.5, -1.5 * math.sqrt(3)))
        assert context.cursor.heading == pytest.approx(240.0)

    def test_segment_count(self):
        """Test that depth maps to round(2**depth) pieces."""
        assert HexagonMazeGenerator().segment_count(np.log2(3)) == 3
        assert DecagonMazeGenerator().segment_count(2) == 4

    @pytest.mark.parametrize("clockwise", [True, False])
    def test_outline_corners(self, clockwise):
        """Test the corners of a unit triangle walked from the origin."""
        corners = TriangleMazeGenerator().outline((1,)).corners((0.0, 0.0), 0.0, 2.0, clockwise)

        y = -math.sqrt(3) if clockwise else math.sqrt(3)
        assert corners[0] == pytest.approx((0.0, 0.0))
        assert corners[1] == pytest.approx((2.0, 0.0))
        assert corners[2] == pytest.approx((1.0, y))


class TestValidation:
    """Test that invalid requests fail before anything is drawn."""

    @pytest.mark.parametrize(
        ("kwargs", "error"),
        [
            ({"depth": 11}, ConfigError),
            ({"depth": -1}, ConfigError),
            ({"depth": float("nan")}, ConfigError),
            ({"depth": 2, "method": "spiral"}, ConfigError),
            ({"depth": 2, "unit_len": 0}, ConfigError),
            ({"depth": 2, "end_side": 7}, ValidationError),
            ({"depth": 2, "end_side": 0}, ValidationError),
            ({"depth": 2, "start_from": "top"}, InvalidArgumentError),
            ({"depth": 2, "draw_boundary": True, "boundary_holes": [7]}, ValidationError),
            ({"depth": 2, "draw_boundary": True, "boundary_holes": {2, 9}}, ValidationError),
            ({"depth": 2, "draw_boundary": True, "num_boundary_holes": 7}, ValidationError),
            ({"depth": 2, "draw_boundary": True, "num_boundary_holes": float("nan")}, ValidationError),
            ({"depth": 2, "draw_boundary": True, "boundary_lines": [True] * 5}, InvalidArgumentError),
        ],
    )
    def test_hexagon_rejects_before_drawing(self, context, kwargs, error):
        """Test that each invalid argument raises with an untouched surface and cursor."""
        with pytest.raises(error):
            HexagonMazeGenerator(context).generate(**kwargs)

        assert len(context.surface) == 0
        assert context.cursor.position == (0.0, 0.0)

    def test_decagon_needs_integral_depth(self, context):
        """Test that the decagon refuses fractional depths."""
        with pytest.raises(ConfigError, match="integral depth"):
            DecagonMazeGenerator(context).generate(depth=1.5)

    def test_max_depth_follows_context(self):
        """Test that generate honors a lowered max_depth."""
        context = MazeContext.create(seed=0, max_depth=2)
        with pytest.raises(ConfigError):
            HexagonMazeGenerator(context).generate(depth=3)

    @pytest.mark.parametrize(
        ("name", "dims"),
        [("hexagon", (5,)), ("trapezoid", (10, 4)), ("trapezoid", (8, 5)), ("rectangle", (2, 5))],
    )
    def test_render_size_follows_max_depth(self, name, dims):
        """Test that render refuses shapes larger than generate allows at max_depth."""
        context = MazeContext.create(seed=0, max_depth=2)
        with pytest.raises(ConfigError, match="max_depth"):
            _make(name, context).render(dims)

        assert len(context.surface) == 0
        assert context.cursor.position == (0.0, 0.0)

    @pytest.mark.parametrize(("name", "dims"), [("hexagon", (4,)), ("trapezoid", (8, 4)), ("rectangle", (4, 4))])
    def test_render_at_max_depth_size(self, name, dims):
        """Test that the largest shape generate would build still renders."""
        context = MazeContext.create(seed=0, max_depth=2)
        _make(name, context).render(dims)
        assert len(context.surface) > 0

    def test_render_huge_dimensions_rejected(self, context):
        """Test that a default context refuses a million pieces per side."""
        with pytest.raises(ConfigError, match="max_depth"):
            HexagonMazeGenerator(context).render((10**6,))
        assert len(context.surface) == 0

    def test_inapplicable_method(self, context):
        """Test that an explicit method that does not fit the dimensions is refused."""
        with pytest.raises(ConfigError, match="not applicable"):
            TriangleMazeGenerator(context).render((3,), method="four_triangles")
        assert len(context.surface) == 0

    @pytest.mark.parametrize("kwargs", [{"hole_fraction": 0.0}, {"hole_fraction": 1.5}, {"max_depth": -1}])
    def test_context_validation(self, kwargs):
        """Test that the context validates its own settings."""
        with pytest.raises(ConfigError):
            MazeContext.create(**kwargs)
