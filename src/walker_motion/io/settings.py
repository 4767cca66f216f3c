"""Define a Pydantic model for the tunable parameters of waypoint interpolation."""

from __future__ import annotations

from pathlib import Path

import numpy as np
from pydantic import BaseModel, ConfigDict, Field

from walker_motion.io.yaml_utils import load_yaml_data

SINGLE_PRECISION_EPSILON = float(np.finfo(np.float32).eps)
"""Machine epsilon of a 32-bit float, used as the default relative radius tolerance."""


class InterpolationSettings(BaseModel):
    """Resolution and tolerance parameters shared by every interpolated command."""

    linear_step: float = Field(default=1.0, gt=0, description="Distance between linear waypoints")
    angular_resolution_deg: float = Field(
        default=5.0,
        gt=0,
        le=360,
        description="Angle (degrees) swept between consecutive arc waypoints",
    )
    radius_abs_tolerance: float = Field(
        default=1e-4,
        ge=0,
        description="Absolute tolerance when comparing the start and end radii of an arc",
    )
    radius_rel_tolerance: float = Field(
        default=SINGLE_PRECISION_EPSILON,
        ge=0,
        description="Relative tolerance when comparing the start and end radii of an arc",
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def angular_resolution_rad(self) -> float:
        """Retrieve the angular resolution in radians."""
        return float(np.deg2rad(self.angular_resolution_deg))

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> InterpolationSettings:
        """Load interpolation settings from the `interpolation` key of a YAML file.

        :param yaml_path: Path to a YAML file containing an `interpolation` mapping
        :return: Validated settings (unspecified fields keep their defaults)
        :raises pydantic.ValidationError: If the settings are malformed
        """
        yaml_data = load_yaml_data(yaml_path, required_keys={"interpolation"})
        return cls.model_validate(yaml_data["interpolation"] or {})


DEFAULT_SETTINGS = InterpolationSettings()
"""Unit linear step, 5-degree arc resolution, and the default radius tolerances."""
