"""Unit tests for render settings.

Tests cover:
- Defaults and validation
- Quality presets
- Loading TOML files, including unknown tables and keys
"""

import pytest

from config import QUALITY_LEVELS, RenderSettings, apply_quality, load_settings
from renderer.raytracer import MAX_DEPTH


class TestRenderSettings:
    """Tests for the settings dataclass."""

    def test_defaults(self):
        settings = RenderSettings().validate()
        assert (settings.width, settings.height) == (200, 100)
        assert settings.max_depth == MAX_DEPTH
        assert settings.aspect_ratio == 2.0

    @pytest.mark.parametrize("overrides, message", [
        ({"width": 0}, "dimensions"),
        ({"samples": -1}, "Samples"),
        ({"max_depth": 0}, "depth"),
        ({"workers": -2}, "Worker"),
        ({"shader": "toon"}, "shader"),
        ({"look_from": (1.0, 2.0)}, "three components"),
    ])
    def test_validation(self, overrides, message):
        with pytest.raises(ValueError, match=message):
            RenderSettings(**overrides).validate()


class TestQuality:
    """Tests for quality presets."""

    def test_preview_halves_resolution(self):
        settings = apply_quality(RenderSettings(width=400, height=200), "preview")
        assert (settings.width, settings.height) == (200, 100)
        assert settings.samples == QUALITY_LEVELS["preview"]["samples"]

    def test_high_quality_uses_full_depth(self):
        assert apply_quality(RenderSettings(), "high_quality").max_depth == MAX_DEPTH

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="quality level"):
            apply_quality(RenderSettings(), "ultra")


class TestLoadSettings:
    """Tests for TOML config files."""

    def test_render_and_camera_tables(self, tmp_path):
        path = tmp_path / "render.toml"
        path.write_text(
            '[render]\n'
            'width = 64\n'
            'height = 32\n'
            'scene = "random_spheres"\n'
            'seed = 9\n'
            '\n'
            '[camera]\n'
            'look_from = [13, 2, 3]\n'
            'vfov = 25.0\n'
        )
        settings = load_settings(path)
        assert (settings.width, settings.height) == (64, 32)
        assert settings.scene == "random_spheres"
        assert settings.seed == 9
        assert settings.look_from == (13.0, 2.0, 3.0)
        assert settings.vfov == 25.0
        assert settings.samples == RenderSettings().samples

    def test_base_settings_are_kept(self, tmp_path):
        path = tmp_path / "render.toml"
        path.write_text("[render]\nsamples = 3\n")
        settings = load_settings(path, RenderSettings(width=10, height=10))
        assert (settings.width, settings.samples) == (10, 3)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_settings(tmp_path / "absent.toml")

    def test_unknown_table(self, tmp_path):
        path = tmp_path / "render.toml"
        path.write_text("[lights]\ncount = 2\n")
        with pytest.raises(ValueError, match="Unknown config tables"):
            load_settings(path)

    def test_unknown_key(self, tmp_path):
        path = tmp_path / "render.toml"
        path.write_text("[render]\nresolution = 4\n")
        with pytest.raises(ValueError, match="resolution"):
            load_settings(path)

    def test_invalid_values_are_rejected(self, tmp_path):
        path = tmp_path / "render.toml"
        path.write_text("[render]\nsamples = 0\n")
        with pytest.raises(ValueError, match="Samples"):
            load_settings(path)
