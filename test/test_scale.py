"""
Tests for cartomath.scale

Tests nice-number rounding, distance labels and scale bar layout.
"""

import numpy as np
import pytest

from cartomath.errors import InvalidArgumentError
from cartomath.scale import (
    EARTH_CIRCUMFERENCE,
    ScaleBar,
    feet_to_meters,
    format_feet,
    format_meters,
    meters_per_pixel,
    meters_to_feet,
    round_nice,
    round_nice_decadic,
    scale_bar,
    tile_width_meters,
)


class TestRoundNice:
    """Test 1-2-5 rounding"""

    @pytest.mark.parametrize("distance,expected", [
        (347.0, 200.0),
        (780.0, 500.0),
        (999.0, 500.0),
        (1000.0, 1000.0),
        (5.0, 5.0),
        (25.0, 20.0),
        (1.4, 1.0),
        (0.2, 1.0),
        (12345.0, 10000.0),
    ])
    def test_values(self, distance, expected):
        """Reference roundings"""
        assert round_nice(distance) == pytest.approx(expected)

    def test_scalar_output(self):
        """Scalar input returns a plain float"""
        assert isinstance(round_nice(347.0), float)

    def test_array_input(self):
        """Arrays are rounded element-wise"""
        result = round_nice(np.array([347.0, 780.0, 1.0]))
        np.testing.assert_allclose(result, [200.0, 500.0, 1.0])

    def test_preferred_numbers(self):
        """Leading digit is always 1, 2 or 5"""
        values = round_nice(np.geomspace(1.0, 1e7, 400))
        leading = values / 10.0 ** np.floor(np.log10(values))
        assert set(np.round(leading).astype(int)) <= {1, 2, 5}

    def test_monotonic(self):
        """Larger distances never round to smaller values"""
        values = round_nice(np.geomspace(0.5, 1e7, 2000))
        assert np.all(np.diff(values) >= 0.0)

    def test_idempotent(self):
        """Rounding a rounded value is a no-op"""
        values = round_nice(np.geomspace(1.0, 1e7, 400))
        np.testing.assert_array_equal(round_nice(values), values)

    def test_nan_propagates(self):
        """NaN input yields NaN output"""
        assert np.isnan(round_nice(np.nan))

    @pytest.mark.parametrize("value", [5.0, 500.0, 5e6])
    def test_leading_five_kept(self, value):
        """A leading 5 is already a nice number"""
        assert round_nice(value) == value


class TestRoundNiceDecadic:
    """Test one-significant-digit rounding"""

    @pytest.mark.parametrize("distance,expected", [
        (347.0, 300.0),
        (780.0, 800.0),
        (999.0, 1000.0),
        (25.0, 20.0),
        (0.2, 1.0),
    ])
    def test_values(self, distance, expected):
        """Reference roundings"""
        assert round_nice_decadic(distance) == pytest.approx(expected)

    def test_monotonic(self):
        """Larger distances never round to smaller values"""
        values = round_nice_decadic(np.geomspace(0.5, 1e7, 2000))
        assert np.all(np.diff(values) >= 0.0)


class TestLabels:
    """Test distance labels"""

    @pytest.mark.parametrize("meters,label", [
        (5.0, "5 m"),
        (500.0, "500 m"),
        (1000.0, "1000 m"),
        (2000.0, "2 km"),
        (50000.0, "50 km"),
    ])
    def test_meters(self, meters, label):
        """Metres switch to kilometres above 1000"""
        assert format_meters(meters) == label

    @pytest.mark.parametrize("feet,label", [
        (200.0, "200 ft"),
        (5280.0, "5280 ft"),
        (10560.0, "2 mi"),
    ])
    def test_feet(self, feet, label):
        """Feet switch to miles above one mile"""
        assert format_feet(feet) == label

    def test_unit_conversion(self):
        """International foot"""
        assert meters_to_feet(0.3048) == pytest.approx(1.0)
        assert feet_to_meters(1000.0) == pytest.approx(304.8)


class TestGroundResolution:
    """Test tile width and ground resolution"""

    def test_equator_zoom_0(self):
        """One tile spans the equatorial circumference"""
        assert tile_width_meters(0.0, 0) == pytest.approx(EARTH_CIRCUMFERENCE)
        assert meters_per_pixel(0.0, 0) == pytest.approx(156543.034, rel=1e-8)

    def test_latitude_scaling(self):
        """Width shrinks with the cosine of the latitude"""
        assert tile_width_meters(60.0, 3) == pytest.approx(EARTH_CIRCUMFERENCE / 16.0)

    def test_zoom_halves(self):
        """Each zoom level halves the resolution"""
        lat = np.array([0.0, 30.0, 60.0])
        np.testing.assert_allclose(
            meters_per_pixel(lat, 11), meters_per_pixel(lat, 10) / 2.0
        )

    def test_tile_pixels(self):
        """Resolution scales with the tile size"""
        assert meters_per_pixel(0.0, 4, tile_pixels=512) == pytest.approx(
            meters_per_pixel(0.0, 4) / 2.0
        )

    @pytest.mark.parametrize("zoom", [-1, 2.0, True])
    def test_invalid_zoom(self, zoom):
        """Zoom must be a non-negative integer"""
        with pytest.raises(InvalidArgumentError):
            tile_width_meters(0.0, zoom)


class TestScaleBar:
    """Test scale bar layout"""

    def test_one_meter_per_pixel(self):
        """100 m and 200 ft at one metre per pixel"""
        bar = scale_bar(1.0)
        assert isinstance(bar, ScaleBar)
        assert bar.meters == pytest.approx(100.0)
        assert bar.meters_pixels == pytest.approx(100.0)
        assert bar.feet == pytest.approx(200.0)
        assert bar.feet_pixels == pytest.approx(61.0)
        assert bar.visible
        assert bar.meters_label == "100 m"
        assert bar.feet_label == "200 ft"
        assert bar.width_pixels == pytest.approx(100.0)

    def test_miles(self):
        """Imperial bar switches to whole miles"""
        bar = scale_bar(50.0)
        assert bar.meters == pytest.approx(5000.0)
        assert bar.meters_label == "5 km"
        assert bar.feet == pytest.approx(2 * 5280.0)
        assert bar.feet_label == "2 mi"
        assert bar.feet_pixels == pytest.approx(64.0)
        assert bar.visible

    def test_decadic(self):
        """Decadic rounding keeps the leading digit"""
        bar = scale_bar(1.0, decadic=True)
        assert bar.meters == pytest.approx(100.0)
        assert bar.feet == pytest.approx(300.0)
        assert bar.feet_pixels == pytest.approx(91.0)

    def test_hidden_when_too_long(self):
        """Bars longer than 2.5 times the target are hidden"""
        bar = scale_bar(0.003)
        assert bar.meters == pytest.approx(1.0)
        assert bar.meters_pixels == pytest.approx(333.0)
        assert not bar.visible

    def test_bars_near_target(self):
        """Visible bars stay within the allowed length"""
        for mpp in np.geomspace(0.05, 5000.0, 60):
            bar = scale_bar(float(mpp))
            assert bar.visible
            assert bar.width_pixels <= 250.0

    @pytest.mark.parametrize("target", [40.0, 100.0])
    def test_visibility_uses_longer_bar(self, target):
        """Visibility is decided by the longer of the two bars"""
        for mpp in np.geomspace(0.001, 5000.0, 200):
            bar = scale_bar(float(mpp), target_pixels=target)
            assert bar.width_pixels == max(bar.meters_pixels, bar.feet_pixels)
            assert bar.visible == (bar.width_pixels <= 2.5 * target)

    @pytest.mark.parametrize("mpp", [0.0, -1.0, np.nan])
    def test_invalid_resolution(self, mpp):
        """Ground resolution must be positive"""
        with pytest.raises(InvalidArgumentError):
            scale_bar(mpp)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
