"""
Tests for the CIEXYZ color value and the D65 white point.
"""
import numpy as np
import pytest

from tincture import D65, M_SRGB_TO_XYZ, Cielab, Cielch, Ciexyz, OutOfSpecification, Srgb


class TestConstruction:
    def test_valid(self):
        xyz = Ciexyz(0.1, 0.2, 0.3)
        assert (xyz.x, xyz.y, xyz.z) == (0.1, 0.2, 0.3)
        assert xyz == Ciexyz.from_array([0.1, 0.2, 0.3])

    @pytest.mark.parametrize(
        "components",
        [(-0.1, 0.2, 0.3), (0.1, -0.2, 0.3), (0.1, 0.2, -0.3), (0.1, 2.0, 0.3), (0.1, 1.0000001, 0.3)],
    )
    def test_out_of_specification(self, components):
        with pytest.raises(OutOfSpecification):
            Ciexyz(*components)

    def test_y_range_is_closed(self):
        assert Ciexyz(0.0, 1.0, 0.0).y == 1.0
        assert Ciexyz.try_from_array([0.0, 1.0, 0.0]).y == 1.0
        assert Ciexyz(0.0, 0.0, 0.0).y == 0.0

    def test_x_and_z_are_unbounded_above(self):
        assert Ciexyz(4.0, 1.0, 6.0).x == 4.0

    def test_try_from_array_validates(self):
        with pytest.raises(OutOfSpecification):
            Ciexyz.try_from_array([0.1, 1.5, 0.3])

    def test_from_array_is_unchecked(self):
        xyz = Ciexyz.from_array([-1.0, 1.5, -2.0])
        assert xyz.to_tuple() == (-1.0, 1.5, -2.0)
        assert not Ciexyz.is_valid(*xyz.to_tuple())

    def test_to_array(self):
        np.testing.assert_array_equal(Ciexyz(0.1, 0.2, 0.3).to_array(), [0.1, 0.2, 0.3])


class TestD65:
    def test_approximate_values(self):
        np.testing.assert_allclose(D65.to_array(), [0.9504559, 1.0, 1.0890577], rtol=1e-7)

    def test_is_matrix_row_sums(self):
        np.testing.assert_allclose(D65.to_array(), M_SRGB_TO_XYZ.sum(axis=1), rtol=1e-15)

    def test_equals_white_conversion_exactly(self):
        assert D65 == Ciexyz.from_srgb(Srgb.new(255, 255, 255))

    def test_is_valid(self):
        assert Ciexyz.is_valid(*D65.to_tuple())


class TestConversions:
    def test_from_srgb_black(self):
        assert Ciexyz.from_srgb(Srgb.new(0, 0, 0)) == Ciexyz(0.0, 0.0, 0.0)

    def test_from_srgb_matches_matrix(self):
        srgb = Srgb.new(10, 20, 30)
        linear = np.array([srgb.linear_red, srgb.linear_green, srgb.linear_blue])
        np.testing.assert_allclose(
            Ciexyz.from_srgb(srgb).to_array(), M_SRGB_TO_XYZ @ linear, atol=1e-15
        )

    def test_from_cielab_black(self):
        assert Ciexyz.from_cielab(Cielab(0.0, 0.0, 0.0)) == Ciexyz(0.0, 0.0, 0.0)

    def test_from_cielab_white(self):
        assert Ciexyz.from_cielab(Cielab(100.0, 0.0, 0.0)) == D65

    def test_from_cielab_linear_segment(self):
        """Dark colors take the linear branch of the inverse transfer function."""
        xyz = Ciexyz.from_cielab(Cielab(5.0, 0.0, 0.0))
        assert xyz.y == pytest.approx(5.0 / (116.0 * 29.0 * 29.0 / (3.0 * 6.0 * 6.0)))

    def test_from_cielab_may_leave_specification(self):
        xyz = Ciexyz.from_cielab(Cielab(1.0, -100.0, 100.0))
        assert xyz.x < 0.0

    def test_from_cielch_routes_through_cielab(self):
        lch = Cielch(40.0, 25.0, 1.2)
        assert Ciexyz.from_cielch(lch) == Ciexyz.from_cielab(Cielab.from_cielch(lch))

    def test_from_color(self):
        lab = Cielab(40.0, 10.0, -10.0)
        assert Ciexyz.from_color(lab) == Ciexyz.from_cielab(lab)
