"""Tests for DataFrame sampling and the curve export script."""

from __future__ import annotations

import pandas as pd
import pytest

from scrollfix.core.curves import (
    LINEAR_CURVE,
    build_acceleration_curve,
    preset_params,
    sample_acceleration_curve,
    sample_curve,
)
from scrollfix.scripts.export_curves import main


class TestSampleCurve:
    """Sampling a Bezier curve across its domain."""

    def test_linear(self) -> None:
        df = sample_curve(LINEAR_CURVE, num_points=11)
        assert list(df.columns) == ["x", "y", "slope"]
        assert len(df) == 11
        assert df["x"].iloc[0] == 0.0
        assert df["x"].iloc[-1] == 1.0
        assert (df["y"] - df["x"]).abs().max() <= LINEAR_CURVE.epsilon
        assert df["slope"].tolist() == pytest.approx([1.0] * 11, abs=0.01)

    def test_too_few_points(self) -> None:
        with pytest.raises(ValueError, match="num_points"):
            sample_curve(LINEAR_CURVE, num_points=1)


class TestSampleAccelerationCurve:
    """Sampling all three regions."""

    def test_regions(self) -> None:
        curve = build_acceleration_curve(preset_params("standard"))
        df = sample_acceleration_curve(curve, num_points=101, x_start=0, x_end=100)

        assert list(df.columns) == ["ticks_per_second", "px_per_tick", "region"]
        assert set(df["region"]) == {"flat", "curve", "linear"}

        flat = df[df["region"] == "flat"]
        assert (flat["px_per_tick"] == 60).all()
        assert (flat["ticks_per_second"] < curve.x_min).all()

        linear = df[df["region"] == "linear"]
        assert (linear["px_per_tick"] > 130).all()

    def test_monotonic_output(self) -> None:
        curve = build_acceleration_curve(preset_params("quick"))
        df = sample_acceleration_curve(curve, num_points=200)
        assert df["px_per_tick"].is_monotonic_increasing

    def test_default_range(self) -> None:
        curve = build_acceleration_curve(preset_params("precise"))
        df = sample_acceleration_curve(curve, num_points=5)
        assert df["ticks_per_second"].iloc[-1] == pytest.approx(curve.x_max * 1.5)

    def test_bad_range(self) -> None:
        curve = build_acceleration_curve(preset_params("precise"))
        with pytest.raises(ValueError, match="x_end"):
            sample_acceleration_curve(curve, x_start=10, x_end=5)


class TestExportScript:
    """scripts/export_curves.py"""

    def test_export_all_presets(self, tmp_path, monkeypatch) -> None:
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "curves.csv"

        assert main(["--output", str(output), "--points", "10"]) == 0

        df = pd.read_csv(output)
        assert len(df) == 30
        assert set(df["preset"]) == {"standard", "precise", "quick"}

    def test_export_single_preset_with_config(self, tmp_path) -> None:
        config = tmp_path / "config.yaml"
        config.write_text("scroll:\n  smooth:\n    px_per_tick_base: 40\n", encoding="utf-8")
        output = tmp_path / "standard.csv"

        code = main([
            "--config", str(config),
            "--preset", "standard",
            "--points", "5",
            "--output", str(output),
        ])

        assert code == 0
        df = pd.read_csv(output)
        assert df["px_per_tick"].iloc[0] == 40

    def test_missing_config(self, tmp_path) -> None:
        code = main(["--config", str(tmp_path / "nope.yaml"), "--output", str(tmp_path / "out.csv")])
        assert code == 1
