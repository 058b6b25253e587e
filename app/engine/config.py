"""
Readiness configuration.

Shared by the fatigue, timeline and readiness modules.  A config object is
passed into every call; there is no stored, process-wide settings state.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TrainingExperience(str, Enum):
    NOVICE = "NOVICE"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


# High-fatigue threshold per experience level.
_HIGH_THRESHOLD_BY_EXPERIENCE: dict[TrainingExperience, float] = {
    TrainingExperience.NOVICE: 40.0,
    TrainingExperience.INTERMEDIATE: 50.0,
    TrainingExperience.ADVANCED: 60.0,
}


class Thresholds(BaseModel):
    """Fatigue thresholds for readiness status labels."""

    model_config = ConfigDict(frozen=True)

    moderate: float = Field(30.0, ge=0.0)
    high: float = Field(50.0, ge=0.0)
    cns_max: float = Field(80.0, ge=0.0, description="Systemic ceiling before CNS burnout")

    @model_validator(mode="after")
    def _check_order(self) -> "Thresholds":
        if self.moderate > self.high:
            raise ValueError(
                f"moderate threshold ({self.moderate}) must not exceed high ({self.high})"
            )
        return self


class ReadinessConfig(BaseModel):
    """Configuration for fatigue scoring and readiness classification."""

    model_config = ConfigDict(frozen=True)

    recovery_speed_multiplier: float = Field(
        1.0, gt=0.0,
        description="0.8 = slow, 1.0 = normal, 1.2 = fast recovery",
    )
    default_rpe: float = Field(7.0, ge=6.0, le=10.0, description="RPE assumed when a set has none")
    allow_running_on_tired_legs: bool = Field(
        False,
        description="Downgrade a blocked run to easy-zone-only instead of RED",
    )
    thresholds: Thresholds = Field(default_factory=Thresholds)
    ignore_weekends: bool = Field(False, description="Force GREEN on Saturday and Sunday")

    @classmethod
    def from_experience(
        cls,
        experience: TrainingExperience = TrainingExperience.INTERMEDIATE,
        *,
        recovery_speed_multiplier: float = 1.0,
        default_rpe: float = 7.0,
        strict_run_blocking: bool = True,
        ignore_weekends: bool = False,
    ) -> "ReadinessConfig":
        """Build a config from the user-facing calibration settings.

        Only the high threshold depends on experience; moderate and CNS
        ceilings stay at their defaults.
        """
        return cls(
            recovery_speed_multiplier=recovery_speed_multiplier,
            default_rpe=default_rpe,
            allow_running_on_tired_legs=not strict_run_blocking,
            thresholds=Thresholds(high=_HIGH_THRESHOLD_BY_EXPERIENCE[experience]),
            ignore_weekends=ignore_weekends,
        )


DEFAULT_READINESS_CONFIG = ReadinessConfig()
