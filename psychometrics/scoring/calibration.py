"""
LLM Psychometrics — Calibration transform.

Language models answering Likert items cluster around the neutral point and
lean slightly agreeable.  Summed inventory scores are therefore re-centred and
re-scaled with a z-score transform:

  1. z = (raw - observed_mean) / observed_std
  2. calibrated = z * target_std + target_mean
  3. clamp to the inventory's valid range

The observed parameters are fixed constants from prior offline observation of
model responses, not fitted at runtime.  Recalibrating against new baseline
data means editing ``CALIBRATION_PARAMS``.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CalibrationParams:
    """Distribution parameters for one inventory's calibration."""

    observed_mean: float
    observed_std: float
    target_mean: float
    target_std: float
    min_value: float
    max_value: float

    def apply(self, raw_score: float) -> float:
        return calibrate_score(
            raw_score,
            self.observed_mean,
            self.observed_std,
            self.target_mean,
            self.target_std,
            self.min_value,
            self.max_value,
        )


# Per-item 1-5 Likert baseline (most models hover around 3.0-3.5).
LLM_BASELINE = CalibrationParams(
    observed_mean=3.2,
    observed_std=0.7,
    target_mean=3.0,
    target_std=1.2,
    min_value=1.0,
    max_value=5.0,
)

CALIBRATION_PARAMS: dict[str, CalibrationParams] = {
    # 24 items per domain: neutral 24 * 3.0 = 72, observed 24 * 3.2 = 76.8
    "bigfive": CalibrationParams(
        observed_mean=76.8,
        observed_std=8.0,
        target_mean=72.0,
        target_std=14.0,
        min_value=24.0,
        max_value=120.0,
    ),
    # 8 items per dimension: neutral 8 * 3.0 = 24, observed 8 * 3.2 = 25.6
    "mbti": CalibrationParams(
        observed_mean=25.6,
        observed_std=3.5,
        target_mean=24.0,
        target_std=5.0,
        min_value=8.0,
        max_value=40.0,
    ),
    # Centre is kept; only the spread is widened.
    "disc": CalibrationParams(
        observed_mean=14.0,
        observed_std=3.5,
        target_mean=14.0,
        target_std=5.5,
        min_value=0.0,
        max_value=28.0,
    ),
}


def calibrate_score(
    raw_score: float,
    observed_mean: float = LLM_BASELINE.observed_mean,
    observed_std: float = LLM_BASELINE.observed_std,
    target_mean: float = LLM_BASELINE.target_mean,
    target_std: float = LLM_BASELINE.target_std,
    min_value: float = LLM_BASELINE.min_value,
    max_value: float = LLM_BASELINE.max_value,
) -> float:
    """Recentre and rescale ``raw_score`` onto the target distribution.

    ``observed_std`` must be strictly positive; every caller passes a
    literal constant.
    """
    z_score = (raw_score - observed_mean) / observed_std
    calibrated = z_score * target_std + target_mean
    return max(min_value, min(max_value, calibrated))


def calibrate_big_five_domain(raw_domain_score: float) -> float:
    """Calibrate a Big Five domain sum (range 24-120, midpoint 72)."""
    return CALIBRATION_PARAMS["bigfive"].apply(raw_domain_score)


def calibrate_mbti_dimension(raw_dimension_score: float) -> float:
    """Calibrate an MBTI dimension sum (range 8-40, midpoint 24)."""
    return CALIBRATION_PARAMS["mbti"].apply(raw_dimension_score)


def calibrate_disc_quadrant(raw_quadrant_score: float) -> float:
    """Calibrate a DISC quadrant score (range 0-28, midpoint 14)."""
    return CALIBRATION_PARAMS["disc"].apply(raw_quadrant_score)
