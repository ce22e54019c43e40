"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from graphmarker.engine.config import MarkerConfig


class Settings(BaseSettings):
    graphmarker_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:8000", "http://localhost:3000"]

    # JSON file mapping question IDs to GraphSolutions; built-in demo questions if empty
    graphmarker_questions_file: str = ""

    # Tolerance overrides (normalised canvas units)
    graphmarker_axis_slop: float = 0.02
    graphmarker_origin_slop: float = 0.05
    graphmarker_relaxed_origin_slop: float = 0.1
    graphmarker_slope_threshold: float = 4.0
    graphmarker_symmetry_tolerance: float = 0.4
    graphmarker_slope_sample_points: int = 5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    def marker_config(self) -> MarkerConfig:
        return MarkerConfig(
            axis_slop=self.graphmarker_axis_slop,
            origin_slop=self.graphmarker_origin_slop,
            relaxed_origin_slop=self.graphmarker_relaxed_origin_slop,
            slope_threshold=self.graphmarker_slope_threshold,
            symmetry_tolerance=self.graphmarker_symmetry_tolerance,
            slope_sample_points=self.graphmarker_slope_sample_points,
        )


settings = Settings()
