"""
Cross-space invariants of the conversion graph.
"""
import itertools
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

import tincture
from tincture import D65, Cielab, Cielch, Ciexyz, ColorSpace, Srgb

SAMPLE_BYTES = [0, 1, 64, 128, 200, 255]


def _samples():
    for r, g, b in itertools.product(SAMPLE_BYTES, repeat=3):
        yield Srgb.new(r, g, b)


class TestInvariants:
    def test_black_chain_is_exact(self):
        srgb = Srgb.new(0, 0, 0)
        xyz = Ciexyz.from_srgb(srgb)
        lab = Cielab.from_ciexyz(xyz)
        lch = Cielch.from_cielab(lab)
        assert xyz == Ciexyz(0.0, 0.0, 0.0)
        assert lab == Cielab(0.0, 0.0, 0.0)
        assert lch == Cielch(0.0, 0.0, 0.0)

    def test_white_chain(self):
        xyz = Ciexyz.from_srgb(Srgb.new(255, 255, 255))
        assert xyz == D65
        assert Cielab.from_ciexyz(xyz) == Cielab(100.0, 0.0, 0.0)

    def test_srgb_round_trips(self):
        for srgb in _samples():
            assert Srgb.from_ciexyz(Ciexyz.from_srgb(srgb)) == srgb
            assert Srgb.from_cielab(Cielab.from_srgb(srgb)) == srgb
            assert Srgb.from_cielch(Cielch.from_srgb(srgb)) == srgb

    def test_lab_lch_round_trip(self):
        rng = np.random.default_rng(12345)
        for lightness, a, b in zip(
            rng.uniform(0.0, 100.0, 50), rng.uniform(-128.0, 128.0, 50), rng.uniform(-128.0, 128.0, 50)
        ):
            lab = Cielab(lightness, a, b)
            back = Cielab.from_cielch(Cielch.from_cielab(lab))
            np.testing.assert_allclose(back.to_array(), lab.to_array(), atol=1e-10)

    def test_composed_edges_match_explicit_routes(self):
        srgb = Srgb.new(12, 200, 77)
        xyz = Ciexyz.from_srgb(srgb)
        lab = Cielab.from_ciexyz(xyz)
        lch = Cielch.from_cielab(lab)
        assert Cielab.from_srgb(srgb) == lab
        assert Cielch.from_srgb(srgb) == lch
        assert Cielch.from_ciexyz(xyz) == lch
        assert Ciexyz.from_cielch(lch) == Ciexyz.from_cielab(Cielab.from_cielch(lch))

    def test_conversion_results_are_unchecked(self):
        """Converted values may leave the target's specification without raising."""
        xyz = Ciexyz.from_array([2.0, 1.5, 2.0])
        lab = Cielab.from_ciexyz(xyz)
        assert lab.lightness > 100.0
        assert not Cielab.is_valid(*lab.to_tuple())


class TestFromColor:
    @pytest.mark.parametrize("target", [Srgb, Ciexyz, Cielab, Cielch])
    def test_every_pair_is_connected(self, target):
        sources = [
            Srgb.new(30, 60, 90),
            Ciexyz.from_srgb(Srgb.new(30, 60, 90)),
            Cielab.from_srgb(Srgb.new(30, 60, 90)),
            Cielch.from_srgb(Srgb.new(30, 60, 90)),
        ]
        for source in sources:
            assert isinstance(target.from_color(source), target)

    def test_same_type_is_identity(self):
        xyz = Ciexyz(0.1, 0.2, 0.3)
        assert Ciexyz.from_color(xyz) is xyz

    @pytest.mark.parametrize("value", [(0.1, 0.2, 0.3), "red", None])
    def test_rejects_non_colors(self, value):
        with pytest.raises(TypeError):
            Cielab.from_color(value)

    def test_base_predicate_is_abstract(self):
        with pytest.raises(NotImplementedError):
            ColorSpace.is_valid(0.0, 0.0, 0.0)


class TestConcurrency:
    def test_conversions_are_thread_safe(self):
        colors = list(_samples())
        expected = [Cielch.from_srgb(c) for c in colors]
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(Cielch.from_srgb, colors))
        assert results == expected


def test_package_metadata():
    from tincture.__about__ import metadata_summary

    summary = metadata_summary()
    assert summary["title"] == "Tincture"
    assert summary["version"] == tincture.__version__
    assert summary["license"] == "LGPL-3.0-or-later"
