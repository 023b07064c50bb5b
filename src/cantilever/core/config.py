"""Configuration management with pydantic and YAML support."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .constants import (
    ASPECT_MAX,
    DELTA_MAX_CM,
    END_LOAD_N,
    HEIGHT_SET_CM,
    SECTION_LENGTH_CM,
    SIGMA_MAX,
    WIDTH_SET_CM,
    YOUNGS_MODULUS,
)
from .encoding import ValueSet
from .types import BeamParams
from .variants import CONTINUOUS, ProblemVariant, discrete_variant

# Section size in cm: finite and strictly positive
SizeCm = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class BeamConfig(BaseModel):
    """Physical constants of the beam."""

    load_n: float = Field(default=END_LOAD_N, gt=0)
    section_length_cm: float = Field(default=SECTION_LENGTH_CM, gt=0)
    youngs_modulus: float = Field(default=YOUNGS_MODULUS, gt=0)
    sigma_max: float = Field(default=SIGMA_MAX, gt=0)
    delta_max: float = Field(default=DELTA_MAX_CM, gt=0)
    aspect_max: float = Field(default=ASPECT_MAX, gt=0)

    def to_params(self) -> BeamParams:
        return BeamParams(
            load=self.load_n,
            section_length=self.section_length_cm,
            youngs_modulus=self.youngs_modulus,
            sigma_max=self.sigma_max,
            delta_max=self.delta_max,
            aspect_max=self.aspect_max,
        )


class DiscreteSetsConfig(BaseModel):
    """Standard sizes for the discretized sections."""

    width_set: list[SizeCm] = Field(default_factory=lambda: list(WIDTH_SET_CM), min_length=1)
    height_set: list[SizeCm] = Field(default_factory=lambda: list(HEIGHT_SET_CM), min_length=1)

    @field_validator("width_set", "height_set")
    @classmethod
    def _unique_sizes(cls, values: list[float]) -> list[float]:
        if len(set(values)) != len(values):
            raise ValueError(f"sizes must be unique, got {values}")
        return values


class GAConfig(BaseModel):
    """Genetic algorithm settings."""

    pop_size: int = Field(default=150, ge=4, le=10000)
    n_gen: int = Field(default=200, ge=1, le=100000)
    elite_count: int = Field(default=10, ge=0)
    ftol: float = Field(default=1e-8, gt=0)
    seed: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _elite_below_pop(self) -> GAConfig:
        if self.elite_count >= self.pop_size:
            raise ValueError(
                f"elite_count ({self.elite_count}) must be below pop_size ({self.pop_size})"
            )
        return self


class CantileverConfig(BaseModel):
    """Root configuration object."""

    variant: str = Field(default="discrete", pattern="^(continuous|discrete)$")
    beam: BeamConfig = Field(default_factory=BeamConfig)
    discrete: DiscreteSetsConfig = Field(default_factory=DiscreteSetsConfig)
    ga: GAConfig = Field(default_factory=GAConfig)

    def to_variant(self) -> ProblemVariant:
        """Build the configured problem variant (discrete sets applied)."""
        if self.variant == "continuous":
            return CONTINUOUS
        return discrete_variant(
            ValueSet(values=tuple(self.discrete.width_set)),
            ValueSet(values=tuple(self.discrete.height_set)),
        )


def load_config(path: str | Path) -> CantileverConfig:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML config file.

    Returns:
        Parsed CantileverConfig object.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return CantileverConfig.model_validate(data or {})


def save_config(config: CantileverConfig, path: str | Path) -> None:
    """Save configuration to YAML file.

    Args:
        config: Configuration to save.
        path: Output path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w") as f:
        yaml.safe_dump(config.model_dump(), f, default_flow_style=False)


def default_config() -> CantileverConfig:
    """Return default configuration."""
    return CantileverConfig()


def merge_config(base: CantileverConfig, overrides: dict[str, Any]) -> CantileverConfig:
    """Merge overrides into base configuration.

    Args:
        base: Base configuration.
        overrides: Dictionary of override values.

    Returns:
        New configuration with overrides applied.
    """
    base_dict = base.model_dump()

    def deep_merge(d1: dict, d2: dict) -> dict:
        result = d1.copy()
        for k, v in d2.items():
            if k in result and isinstance(result[k], dict) and isinstance(v, dict):
                result[k] = deep_merge(result[k], v)
            else:
                result[k] = v
        return result

    merged = deep_merge(base_dict, overrides)
    return CantileverConfig.model_validate(merged)
