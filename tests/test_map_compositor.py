"""Tests for map composition and the generate() entry point."""

import math
from itertools import combinations

import pytest
import numpy as np
from pydantic import ValidationError
from py_lakegen import generate
from py_lakegen.core.alea_prng import AleaPRNG
from py_lakegen.core.grid import Grid, Point
from py_lakegen.core.lake_analysis import label_water_regions
from py_lakegen.core.lakes import LakeOptions, synthesize_lake
from py_lakegen.core.map_compositor import MapCompositor, MapParameters


def make_compositor(seed="compositor", **overrides):
    values = dict(width=50, height=50, lake_count=3, min_lake_distance=20, max_depth=40)
    values.update(overrides)
    return MapCompositor(MapParameters(**values), seed=seed)


class TestMapParameters:
    """Test up-front parameter validation."""

    @pytest.mark.parametrize("overrides", [
        {"width": 0},
        {"width": -5},
        {"height": -1},
        {"lake_count": -1},
        {"min_lake_distance": -0.5},
        {"max_depth": 0},
    ])
    def test_out_of_range(self, overrides):
        values = dict(width=10, height=10, lake_count=1, min_lake_distance=5, max_depth=40)
        values.update(overrides)
        with pytest.raises(ValidationError):
            MapParameters(**values)

    def test_generate_rejects_before_generation(self):
        with pytest.raises(ValueError):
            generate(width=10, height=10, lake_count=1, min_lake_distance=5, max_depth=0)

    def test_mismatched_lake_options(self):
        params = MapParameters(width=10, height=10, lake_count=1, min_lake_distance=5, max_depth=40)
        with pytest.raises(ValueError):
            MapCompositor(params, lake_options=LakeOptions(max_depth=30))


class TestScenario:
    """Test the reference 50x50 scenario."""

    @pytest.fixture
    def global_map(self):
        return generate(
            width=50, height=50, lake_count=3, min_lake_distance=20, max_depth=40,
            seed="scenario",
        )

    def test_shape(self, global_map):
        assert isinstance(global_map, Grid)
        assert global_map.width == 50
        assert global_map.height == 50

    def test_depth_buckets(self, global_map):
        positive = set(np.unique(global_map.values[global_map.values > 0]).tolist())
        assert len(positive) <= 4
        assert positive <= {10, 20, 30, 40}

    def test_region_count(self, global_map):
        _, count = label_water_regions(global_map)
        assert count <= 3

    def test_has_water(self, global_map):
        assert np.any(global_map.values > 0)


class TestPlacement:
    """Test lake center placement."""

    def test_min_distance_respected(self):
        result = make_compositor("spacing", width=60, height=60, lake_count=10,
                                 min_lake_distance=15).compose()
        for a, b in combinations(result.lakes, 2):
            distance = math.hypot(a.center.x - b.center.x, a.center.y - b.center.y)
            assert distance >= 15

    def test_centers_inside_map(self):
        result = make_compositor("inside", width=30, height=20, lake_count=5,
                                 min_lake_distance=0).compose()
        for lake in result.lakes:
            assert 0 <= lake.center.x < 30
            assert 0 <= lake.center.y < 20

    def test_exhaustion_skips_lakes(self):
        """On a 1x1 map only the first lake can ever be placed."""
        result = make_compositor("tiny", width=1, height=1, lake_count=3,
                                 min_lake_distance=5).compose()
        assert len(result.lakes) == 1
        assert result.skipped == 2
        assert result.lakes[0].center == Point(0, 0)

    def test_zero_min_distance_places_all(self):
        result = make_compositor("all", lake_count=6, min_lake_distance=0).compose()
        assert len(result.lakes) == 6
        assert result.skipped == 0

    def test_zero_lakes(self):
        result = make_compositor("none", lake_count=0).compose()
        assert result.lakes == []
        assert np.all(result.global_map.values == 0)

    def test_pick_center_returns_none_when_full(self):
        compositor = make_compositor("full", width=1, height=1, lake_count=1,
                                     min_lake_distance=1)
        lake = synthesize_lake(Point(0, 0), compositor.lake_options, AleaPRNG("x"))
        assert compositor.pick_center([lake]) is None


class TestMerge:
    """Test merging lakes into the global map."""

    def test_first_writer_wins(self):
        """Every cell holds the depth of the first lake reaching it."""
        result = make_compositor("overlap", width=40, height=40, lake_count=4,
                                 min_lake_distance=5).compose()
        assert len(result.lakes) == 4

        for y in range(40):
            for x in range(40):
                expected = 0
                for lake in result.lakes:
                    depth = lake.local_depth(x, y)
                    if depth > 0:
                        expected = depth
                        break
                assert result.global_map.get(x, y) == expected

    def test_claimed_cells_untouched(self):
        compositor = make_compositor("claimed", width=20, height=20)
        global_map = Grid(20, 20, fill=7)
        lake = synthesize_lake(Point(10, 10), compositor.lake_options, AleaPRNG("claimed"))

        assert compositor.merge_lake(global_map, lake) == 0
        assert np.all(global_map.values == 7)

    def test_lake_clipped_at_map_edge(self):
        compositor = make_compositor("edge", width=10, height=10)
        global_map = Grid(10, 10)
        lake = synthesize_lake(Point(0, 0), compositor.lake_options, AleaPRNG("edge"))

        written = compositor.merge_lake(global_map, lake)
        visible = sum(
            1 for y in range(10) for x in range(10) if lake.local_depth(x, y) > 0
        )
        assert written == visible
        assert int(np.sum(global_map.values > 0)) == visible

    def test_lake_outside_map(self):
        compositor = make_compositor("outside", width=10, height=10)
        global_map = Grid(10, 10)
        lake = synthesize_lake(Point(200, 200), compositor.lake_options, AleaPRNG("far"))
        assert compositor.merge_lake(global_map, lake) == 0

    def test_never_summed(self):
        result = make_compositor("sum", width=30, height=30, lake_count=5,
                                 min_lake_distance=0).compose()
        assert result.global_map.values.max() <= 40


class TestDeterminism:
    """Test seeded reproducibility."""

    def test_same_seed_same_map(self):
        a = generate(50, 50, 3, 20, 40, seed="repeat")
        b = generate(50, 50, 3, 20, 40, seed="repeat")
        assert a == b

    def test_seed_matches_explicit_prng(self):
        a = generate(50, 50, 3, 20, 40, seed="handle")
        b = generate(50, 50, 3, 20, 40, prng=AleaPRNG("handle"))
        assert a == b

    def test_result_records_seed(self):
        result = make_compositor("recorded").compose()
        assert result.seed == "recorded"
