"""End-to-end tests for the command-line entry point.

Tests cover:
- Flag parsing and the config / quality / flag precedence
- Rendering small images to PPM and PNG
- Error reporting through the exit code
"""

import numpy as np
from PIL import Image

from config import RenderSettings
from main import build_settings, main, parse_args, render


class TestSettings:
    """Tests for settings assembly."""

    def test_flags_override_config(self, tmp_path):
        path = tmp_path / "render.toml"
        path.write_text("[render]\nwidth = 50\nsamples = 7\n")
        args = parse_args(["--config", str(path), "--samples", "2", "--max-depth", "4"])
        settings = build_settings(args)
        assert settings.width == 50
        assert settings.samples == 2
        assert settings.max_depth == 4

    def test_flags_override_quality(self):
        settings = build_settings(parse_args(["--quality", "preview", "--samples", "9"]))
        assert settings.samples == 9
        assert settings.width == 100


class TestRender:
    """Tests for full renders."""

    def test_same_seed_same_pixels(self):
        settings = RenderSettings(width=6, height=3, samples=2, max_depth=5, seed=4)
        a = render(settings, quiet=True)
        b = render(settings, quiet=True)
        assert a.dtype == np.uint8
        assert a.shape == (3, 6, 3)
        np.testing.assert_array_equal(a, b)

    def test_writes_ppm(self, tmp_path):
        output = tmp_path / "image.ppm"
        code = main(["--width", "4", "--height", "2", "--samples", "1", "--seed", "1",
                     "--output", str(output), "--quiet"])
        assert code == 0
        lines = output.read_text(encoding="ascii").splitlines()
        assert lines[:3] == ["P3", "4 2", "255"]
        assert len(lines) == 3 + 8

    def test_writes_png_with_normals_shader(self, tmp_path):
        output = tmp_path / "image.png"
        code = main(["--width", "8", "--height", "4", "--samples", "1", "--seed", "2",
                     "--shader", "normals", "--scene", "glass_and_metal",
                     "--output", str(output), "--quiet"])
        assert code == 0
        with Image.open(output) as img:
            assert img.size == (8, 4)


class TestErrors:
    """Tests for failures reported to the user."""

    def test_bad_output_format(self, tmp_path, capsys):
        code = main(["--width", "2", "--height", "2", "--samples", "1",
                     "--output", str(tmp_path / "image.tiff"), "--quiet"])
        assert code == 1
        assert "Error: Unsupported image format" in capsys.readouterr().err

    def test_invalid_setting(self, capsys):
        code = main(["--samples", "0", "--quiet"])
        assert code == 1
        assert "Samples" in capsys.readouterr().err
