"""
Tests for cartomath.settings

Tests environment variables and runtime setters:
- CARTOMATH_DECLINATION_METHOD: default declination source
- CARTOMATH_DMS_PRECISION: default DMS seconds decimals
"""

import os
from unittest.mock import patch

import pytest

from cartomath import settings
from cartomath.errors import InvalidArgumentError
from cartomath.settings import _SettingsState

# =============================================================================
# Test: CARTOMATH_DECLINATION_METHOD
# =============================================================================

class TestEnvDeclinationMethod:
    """Test CARTOMATH_DECLINATION_METHOD environment variable"""

    def test_default(self):
        """Unset variable selects the ephemeris"""
        state = _SettingsState()
        assert state.declination_method == 'ephemeris'

    def test_fast(self):
        """CARTOMATH_DECLINATION_METHOD=fast selects the closed form"""
        with patch.dict(os.environ, {'CARTOMATH_DECLINATION_METHOD': 'fast'}):
            state = _SettingsState()
            assert state.declination_method == 'fast'

    def test_case_insensitive(self):
        """Value is case-insensitive and stripped"""
        with patch.dict(os.environ, {'CARTOMATH_DECLINATION_METHOD': ' FAST '}):
            state = _SettingsState()
            assert state.declination_method == 'fast'

    def test_invalid_warns(self):
        """Unknown value warns and keeps the default"""
        with patch.dict(os.environ, {'CARTOMATH_DECLINATION_METHOD': 'exact'}):
            with pytest.warns(RuntimeWarning, match="CARTOMATH_DECLINATION_METHOD"):
                state = _SettingsState()
            assert state.declination_method == 'ephemeris'

    def test_empty(self):
        """Empty value is the same as unset"""
        with patch.dict(os.environ, {'CARTOMATH_DECLINATION_METHOD': ''}):
            state = _SettingsState()
            assert state.declination_method == 'ephemeris'


# =============================================================================
# Test: CARTOMATH_DMS_PRECISION
# =============================================================================

class TestEnvDMSPrecision:
    """Test CARTOMATH_DMS_PRECISION environment variable"""

    def test_default(self):
        """Unset variable gives whole seconds"""
        state = _SettingsState()
        assert state.dms_precision == 0

    def test_value(self):
        """CARTOMATH_DMS_PRECISION=2"""
        with patch.dict(os.environ, {'CARTOMATH_DMS_PRECISION': '2'}):
            state = _SettingsState()
            assert state.dms_precision == 2

    @pytest.mark.parametrize("value", ['-1', 'two', '1.5'])
    def test_invalid_warns(self, value):
        """Invalid value warns and keeps the default"""
        with patch.dict(os.environ, {'CARTOMATH_DMS_PRECISION': value}):
            with pytest.warns(RuntimeWarning, match="CARTOMATH_DMS_PRECISION"):
                state = _SettingsState()
            assert state.dms_precision == 0

    def test_reset_reads_environment(self):
        """reset_settings picks up a changed environment"""
        with patch.dict(os.environ, {'CARTOMATH_DMS_PRECISION': '3'}):
            settings.reset_settings()
            assert settings.get_dms_precision() == 3


# =============================================================================
# Test: Runtime setters
# =============================================================================

class TestSetters:
    """Test runtime configuration"""

    def test_set_declination_method(self):
        """Setter changes the default"""
        settings.set_declination_method('fast')
        assert settings.get_declination_method() == 'fast'
        settings.set_declination_method('Ephemeris')
        assert settings.get_declination_method() == 'ephemeris'

    def test_set_invalid_method(self):
        """Setter rejects unknown methods"""
        with pytest.raises(InvalidArgumentError):
            settings.set_declination_method('exact')
        assert settings.get_declination_method() == 'ephemeris'

    def test_resolve(self):
        """Explicit method wins over the default"""
        settings.set_declination_method('fast')
        assert settings.resolve_declination_method() == 'fast'
        assert settings.resolve_declination_method('ephemeris') == 'ephemeris'

    def test_set_dms_precision(self):
        """Setter changes the default"""
        settings.set_dms_precision(4)
        assert settings.get_dms_precision() == 4

    @pytest.mark.parametrize("places", [-1, 1.5, True, None])
    def test_set_invalid_precision(self, places):
        """Setter rejects anything but non-negative integers"""
        with pytest.raises(InvalidArgumentError):
            settings.set_dms_precision(places)

    def test_context_manager(self):
        """Method is restored after the block"""
        with settings.declination_method('fast'):
            assert settings.get_declination_method() == 'fast'
        assert settings.get_declination_method() == 'ephemeris'

    def test_context_manager_restores_on_error(self):
        """Method is restored when the block raises"""
        with pytest.raises(RuntimeError):
            with settings.declination_method('fast'):
                raise RuntimeError("boom")
        assert settings.get_declination_method() == 'ephemeris'

    def test_context_manager_invalid(self):
        """Unknown method is rejected before switching"""
        with pytest.raises(InvalidArgumentError):
            with settings.declination_method('exact'):
                pass


# =============================================================================
# Test: Status
# =============================================================================

class TestStatus:
    """Test settings status functions"""

    def test_get_settings(self):
        """Dictionary of current settings"""
        settings.set_dms_precision(2)
        assert settings.get_settings() == {
            'declination_method': 'ephemeris',
            'dms_precision': 2,
        }

    def test_show_settings(self, capsys):
        """Printed summary"""
        settings.show_settings()
        out = capsys.readouterr().out
        assert 'declination_method' in out
        assert 'ephemeris' in out
        assert 'dms_precision' in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
