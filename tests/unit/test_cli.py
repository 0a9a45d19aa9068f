"""Unit tests for CLI functionality."""

import numpy as np
import pytest
from click.testing import CliRunner

from pycolornoise.misc import load_png


class TestCLINoiseCommands:
    """Test the noise generation command."""

    @pytest.fixture
    def runner(self):
        """Provide Click test runner."""
        return CliRunner()

    @pytest.mark.unit
    def test_noise_help(self, runner):
        """Test that noise command shows help."""
        from pycolornoise.cli.noise_commands import noise

        result = runner.invoke(noise, ["--help"])
        assert result.exit_code == 0
        assert "Generate a noise texture" in result.output

    @pytest.mark.unit
    def test_noise_requires_args(self, runner):
        """Test that noise requires arguments."""
        from pycolornoise.cli.noise_commands import noise

        result = runner.invoke(noise, [])
        assert result.exit_code != 0

    @pytest.mark.unit
    @pytest.mark.parametrize("color", ["white", "red", "blue", "green", "PURPLE"])
    def test_noise_writes_png(self, runner, tmp_path, color):
        """Every color produces a PNG of the requested size."""
        from pycolornoise.cli.noise_commands import noise

        out = tmp_path / f"{color}.png"
        result = runner.invoke(
            noise, [color, str(out), "-W", "20", "-H", "12", "-n", "2"]
        )
        assert result.exit_code == 0, result.output
        assert f"Generated {color.lower()} noise" in result.output
        assert load_png(out).shape == (12, 20)

    @pytest.mark.unit
    def test_noise_verbose(self, runner, tmp_path):
        from pycolornoise.cli.noise_commands import noise

        out = tmp_path / "red.png"
        result = runner.invoke(
            noise, ["-v", "red", str(out), "-W", "16", "-H", "16", "--sigma", "2"]
        )
        assert result.exit_code == 0, result.output
        assert "Generating red noise (16x16, iterations=5)" in result.output
        assert "Done!" in result.output

    @pytest.mark.unit
    def test_noise_invalid_dimensions(self, runner, tmp_path):
        from pycolornoise.cli.noise_commands import noise

        out = tmp_path / "bad.png"
        result = runner.invoke(noise, ["white", str(out), "-W", "0"])
        assert result.exit_code == 1
        assert "Invalid parameter" in result.output
        assert not out.exists()

    @pytest.mark.unit
    def test_noise_invalid_sigma(self, runner, tmp_path):
        from pycolornoise.cli.noise_commands import noise

        result = runner.invoke(noise, ["blue", str(tmp_path / "b.png"), "--sigma=-1"])
        assert result.exit_code == 1
        assert "sigma" in result.output

    @pytest.mark.unit
    def test_noise_strict_band(self, runner, tmp_path):
        from pycolornoise.cli.noise_commands import noise

        args = ["green", str(tmp_path / "g.png"), "-W", "8", "-H", "8",
                "--low-sigma", "3", "--high-sigma", "1"]
        assert runner.invoke(noise, args).exit_code == 0

        result = runner.invoke(noise, args + ["--strict-band"])
        assert result.exit_code == 1
        assert "low_sigma" in result.output

    @pytest.mark.unit
    def test_noise_unknown_color(self, runner, tmp_path):
        from pycolornoise.cli.noise_commands import noise

        result = runner.invoke(noise, ["pink", str(tmp_path / "p.png")])
        assert result.exit_code == 2


class TestCLISpectrumCommands:
    """Test the spectrum plotting command."""

    @pytest.fixture
    def runner(self):
        return CliRunner()

    @pytest.mark.unit
    def test_spectrum_help(self, runner):
        from pycolornoise.cli.spectrum_commands import spectrum

        result = runner.invoke(spectrum, ["--help"])
        assert result.exit_code == 0
        assert "OUTPUT_PLOT" in result.output

    @pytest.mark.unit
    def test_spectrum_writes_plot(self, runner, tmp_path):
        from pycolornoise.cli.spectrum_commands import spectrum

        out = tmp_path / "spectra.png"
        result = runner.invoke(
            spectrum, [str(out), "--colors", "white,red", "--size", "32", "-n", "2", "-v"]
        )
        assert result.exit_code == 0, result.output
        assert out.exists()
        assert "low-band" in result.output
        assert load_png(out).ndim == 2

    @pytest.mark.unit
    def test_spectrum_unknown_color(self, runner, tmp_path):
        from pycolornoise.cli.spectrum_commands import spectrum

        result = runner.invoke(spectrum, [str(tmp_path / "s.png"), "--colors", "white,pink"])
        assert result.exit_code == 2
        assert "pink" in result.output

    @pytest.mark.unit
    def test_spectrum_invalid_size(self, runner, tmp_path):
        from pycolornoise.cli.spectrum_commands import spectrum

        result = runner.invoke(spectrum, [str(tmp_path / "s.png"), "--size", "0"])
        assert result.exit_code == 1
        assert "Invalid parameter" in result.output
