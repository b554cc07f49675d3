"""
Tests for heightfield generation.
"""

import numpy as np
import pytest

from py_heightfield.core.errors import InvalidConfigurationError
from py_heightfield.core.heightfield import HeightField, SCALE_DIVISOR, FREQUENCY_MULTIPLIER
from py_heightfield.utils.random import RandomSource
from helpers import FailingNoise, LinearNoise


class TestConstruction:
    """Test heightfield construction."""

    def test_initial_state(self):
        field = HeightField(4, 3, 0.0, 10.0, 2)

        assert field.size == (4, 3)
        assert field.height_range == (0.0, 10.0)
        assert field.octave_count == 2
        assert not field.is_generated
        assert field.data.shape == (0,)

    @pytest.mark.parametrize("width,height", [(0, 3), (4, 0), (0, 0), (-1, 5)])
    def test_non_positive_dimensions_rejected(self, width, height):
        with pytest.raises(InvalidConfigurationError):
            HeightField(width, height, 0.0, 1.0, 0)

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            HeightField(0, 1)

    def test_negative_octave_count_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            HeightField(4, 4, 0.0, 1.0, -1)


class TestOctaveSchedule:
    """Test the frequency and amplitude schedule."""

    def test_base_octave(self):
        field = HeightField(30, 10, octave_count=0)

        (freq, scale, offset), = field.octave_scales()

        assert freq == pytest.approx(1 / 20)
        assert scale == 0.5
        assert offset == 0.5

    def test_scale_decays_by_six(self):
        field = HeightField(16, 16, octave_count=4)
        schedule = field.octave_scales()

        assert len(schedule) == 5
        scales = [scale for _, scale, _ in schedule]
        # Base octave uses half amplitude, refinements start from 1 / 6
        assert scales[1] == pytest.approx(1 / SCALE_DIVISOR)
        for previous, current in zip(scales[1:], scales[2:]):
            assert current == pytest.approx(previous / SCALE_DIVISOR)
            assert current < previous

    def test_frequency_grows_by_four(self):
        field = HeightField(16, 16, octave_count=3)
        freqs = [freq for freq, _, _ in field.octave_scales()]

        for previous, current in zip(freqs, freqs[1:]):
            assert current == pytest.approx(previous * FREQUENCY_MULTIPLIER)

    def test_only_base_octave_has_offset(self):
        field = HeightField(8, 8, octave_count=3)
        offsets = [offset for _, _, offset in field.octave_scales()]

        assert offsets == [0.5, 0.0, 0.0, 0.0]


class TestGeneration:
    """Test multi-octave generation."""

    def test_base_octave_with_linear_noise(self):
        """Cell values follow noise * 0.5 + 0.5 at frequency 1 / avg."""
        field = HeightField(3, 2, octave_count=0, noise=LinearNoise())
        field.generate_seeded(0)

        freq = 1 / 2.5
        expected = [(x + y) * freq * 0.5 + 0.5 for y in range(2) for x in range(3)]
        assert field.data.tolist() == pytest.approx(expected, rel=1e-6)

    def test_refinement_octaves_add_detail(self):
        base = HeightField(3, 2, octave_count=0, noise=LinearNoise())
        refined = HeightField(3, 2, octave_count=1, noise=LinearNoise())
        base.generate_seeded(0)
        refined.generate_seeded(0)

        freq = 4 / 2.5
        for (xy, b), (_, r) in zip(base.iter(), refined.iter()):
            x, y = xy
            assert r - b == pytest.approx((x + y) * freq / 6, rel=1e-5, abs=1e-6)

    def test_one_seed_drawn_per_octave(self):
        field = HeightField(4, 4, octave_count=5, noise=LinearNoise())
        rng = RandomSource(3)

        field.generate(rng)

        assert rng.call_count == 6

    def test_seeded_generation_is_deterministic(self):
        first = HeightField(16, 12, 0.0, 100.0, 3)
        second = HeightField(16, 12, 0.0, 100.0, 3)

        first.generate_seeded(42)
        second.generate_seeded(42)

        assert list(first.iter()) == list(second.iter())

    def test_distinct_seeds_differ(self):
        first = HeightField(2, 2, 0.0, 1.0, 5)
        second = HeightField(2, 2, 0.0, 1.0, 5)

        first.generate_seeded(1)
        second.generate_seeded(2)

        assert list(first.iter()) != list(second.iter())

    def test_unseeded_generation(self):
        field = HeightField(5, 5, octave_count=1)
        field.generate_seeded()

        assert field.is_generated
        assert field.data.shape == (25,)
        assert np.all(np.isfinite(field.data))

    def test_regeneration_replaces_buffer(self):
        field = HeightField(8, 8, octave_count=2)
        field.generate_seeded(1)
        first = field.data.copy()

        field.generate_seeded(2)

        assert field.data.shape == first.shape
        assert not np.array_equal(field.data, first)

    def test_failed_generation_keeps_previous_buffer(self):
        noise = FailingNoise()
        field = HeightField(4, 4, octave_count=2, noise=noise)
        field.generate_seeded(5)
        before = field.data.copy()

        noise.fail = True
        with pytest.raises(RuntimeError):
            field.generate_seeded(6)

        assert np.array_equal(field.data, before)

    def test_data_is_read_only(self):
        field = HeightField(3, 3)
        field.generate_seeded(9)

        with pytest.raises(ValueError):
            field.data[0] = 5.0


class TestIteration:
    """Test read-only iteration."""

    def test_empty_before_generation(self):
        field = HeightField(4, 3)

        assert list(field.iter()) == []

    def test_row_major_coordinates(self):
        field = HeightField(4, 3, 0.0, 10.0, 0)
        field.generate_seeded(42)

        coords = [xy for xy, _ in field.iter()]

        assert coords == [(x, y) for y in range(3) for x in range(4)]
        assert len(set(coords)) == 12

    def test_values_match_buffer(self):
        field = HeightField(4, 3, octave_count=1)
        field.generate_seeded(42)

        values = [value for _, value in field]

        assert values == field.data.tolist()

    def test_iteration_is_restartable(self):
        field = HeightField(3, 2, octave_count=1)
        field.generate_seeded(8)

        assert list(field.iter()) == list(field.iter())

    def test_yields_plain_floats(self):
        field = HeightField(2, 2)
        field.generate_seeded(8)

        assert all(type(value) is float for _, value in field.iter())
