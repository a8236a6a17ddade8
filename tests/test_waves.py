import numpy as np
import pytest

from physics_viz.config import WaveMeshConfig
from physics_viz.core.waves import (
    attenuated_amplitude,
    interference_at,
    interference_pattern,
    height_field,
    wave_speed,
    path_difference,
    two_source_amplitude,
    wave_frequency,
    wave_wavelength,
    diffraction_angle,
    snells_law,
)
from physics_viz.errors import DomainError
from physics_viz.types import WaveSource


def test_symmetric_sources_constructive_at_origin():
    """
    Identical sources at (±1, 0), t = 0:
      path difference 0, each attenuated amplitude a = 1/(1 + 0.1*1),
      intensity at the origin = (2a)^2.
    """
    sources = [WaveSource((-1.0, 0.0)), WaveSource((1.0, 0.0))]
    a = attenuated_amplitude(1.0, 1.0)
    result = interference_at((0.0, 0.0), sources, time=0.0)

    print("intensity", result.intensity, "expected", (2 * a) ** 2)
    assert result.intensity == pytest.approx((2 * a) ** 2)
    assert result.amplitude == pytest.approx(2 * a)


def test_opposite_phase_sources_cancel():
    """Sources half a cycle apart cancel on the perpendicular bisector."""
    sources = [WaveSource((-1.0, 0.0)), WaveSource((1.0, 0.0), phase=np.pi)]
    result = interference_at((0.0, 3.0), sources, time=0.37)
    assert result.intensity == pytest.approx(0.0, abs=1e-24)
    assert result.amplitude == pytest.approx(0.0, abs=1e-12)


def test_single_source_intensity_follows_instantaneous_height():
    """
    One source at the origin, point (0.3, 0), λ = 1, f = 1:
      a = 1/(1 + 0.03), φ(t) = 2π(0.3 − t),
      I(t) = (a sin φ)² -> ring fringes that move outward over time.
    """
    source = WaveSource((0.0, 0.0))
    a = 1.0 / (1.0 + 0.1 * 0.3)
    intensities = []
    for t in (0.0, 0.125, 0.25):
        result = interference_at((0.3, 0.0), [source], time=t)
        expected = (a * np.sin(2 * np.pi * (0.3 - t))) ** 2
        print("t", t, "intensity", result.intensity, "expected", expected)
        assert result.intensity == pytest.approx(expected)
        assert result.amplitude == pytest.approx(abs(result.displacement))
        assert result.amplitude >= 0.0
        intensities.append(result.intensity)

    assert intensities[0] == pytest.approx(0.853, abs=1e-3)
    assert intensities[2] == pytest.approx(0.090, abs=1e-3)


def test_single_source_pattern_uses_height_squared():
    config = WaveMeshConfig(size=4.0, segments=4)
    source = WaveSource((0.0, 0.0), wavelength=1.5)
    pattern = interference_pattern([source], 0.2, config)

    expected = interference_at((pattern.xs[3], pattern.ys[1]), [source], time=0.2).intensity
    assert pattern.intensity[1, 3] == pytest.approx(expected)
    # A silent companion does not switch to phasor summation
    with_silent = interference_pattern([source, WaveSource((1.0, 1.0), amplitude=0.0)], 0.2, config)
    assert np.allclose(with_silent.intensity, pattern.intensity)


def test_displacement_is_signed_sine_sum():
    """z = a sin(2π(d/λ − f t) + φ0) for one source."""
    source = WaveSource((0.0, 0.0), wavelength=2.0, frequency=1.0)
    result = interference_at((0.5, 0.0), [source], time=0.0)
    a = 1.0 / (1.0 + 0.1 * 0.5)
    assert result.displacement == pytest.approx(a * np.sin(2 * np.pi * 0.25))


def test_empty_and_zero_amplitude_sources():
    empty = interference_at((1.0, 1.0), [], time=0.0)
    assert empty.intensity == 0.0 and empty.amplitude == 0.0 and empty.displacement == 0.0

    live = WaveSource((0.0, 0.0))
    silent = WaveSource((3.0, 0.0), amplitude=0.0)
    with_silent = interference_at((1.0, 1.0), [live, silent], time=0.2)
    without = interference_at((1.0, 1.0), [live], time=0.2)
    assert with_silent.intensity == pytest.approx(without.intensity)


def test_pattern_shape_and_normalization():
    config = WaveMeshConfig(size=4.0, segments=40)
    pattern = interference_pattern([WaveSource((-1.0, 0.0)), WaveSource((1.0, 0.0))], 0.0, config)

    assert pattern.intensity.shape == (41, 41)
    assert pattern.normalized.max() == pytest.approx(1.0)
    assert np.all(pattern.intensity >= 0.0)
    assert pattern.max_intensity == pytest.approx(pattern.intensity.max())

    empty = interference_pattern([], 0.0, config)
    assert np.all(empty.normalized == 0.0)


def test_height_field_matches_point_displacement():
    sources = [WaveSource((-1.0, 0.0)), WaveSource((1.0, 0.5), wavelength=1.3)]
    heights = height_field(np.array([0.3, 0.9]), np.array([0.7]), sources, time=0.4, scale=0.15)

    assert heights.shape == (1, 2)
    expected = 0.15 * interference_at((0.3, 0.7), sources, time=0.4).displacement
    assert heights[0, 0] == pytest.approx(expected)


def test_formula_helpers():
    assert wave_speed(2.0, 3.0) == pytest.approx(6.0)
    assert path_difference(3.0, 5.5) == pytest.approx(2.5)
    assert two_source_amplitude(1.0, 1.0, 0.0) == pytest.approx(2.0)
    assert two_source_amplitude(1.0, 1.0, np.pi) == pytest.approx(0.0, abs=1e-7)
    assert two_source_amplitude(1.0, 1.0, np.pi) >= 0.0


def test_source_validation():
    with pytest.raises(DomainError):
        WaveSource((0.0, 0.0), wavelength=0.0)
    with pytest.raises(DomainError):
        WaveSource((0.0, 0.0), amplitude=-1.0)
    with pytest.raises(DomainError):
        WaveSource((0.0, 0.0), frequency=float("nan"))
    with pytest.raises(ValueError):
        WaveSource((0.0, 0.0, 0.0))


def test_optics_helpers():
    assert wave_frequency(340.0, 2.0) == pytest.approx(170.0)
    assert wave_wavelength(340.0, 170.0) == pytest.approx(2.0)
    with pytest.raises(DomainError):
        wave_frequency(340.0, 0.0)

    # sin θ = λ/w = 0.5 -> 30°
    assert diffraction_angle(500e-9, 1000e-9) == pytest.approx(np.pi / 6)
    assert diffraction_angle(500e-9, 1000e-9, order=3) is None

    # Air to glass at 30°: sin θ2 = 0.5/1.5
    assert snells_law(1.0, 1.5, 30.0) == pytest.approx(np.degrees(np.arcsin(1 / 3)))
    assert snells_law(1.5, 1.0, 60.0) is None
    assert snells_law(1.33, 1.33, 42.0) == pytest.approx(42.0)
