"""
LLM Psychometrics — scoring core.

Pure, synchronous transforms from raw per-item samples to trait scores.
Nothing in this package performs I/O or logs; every call allocates its own
result and only reads its input.
"""

from psychometrics.scoring.bigfive import calculate_big_five_scores
from psychometrics.scoring.calibration import (
    CALIBRATION_PARAMS,
    CalibrationParams,
    calibrate_big_five_domain,
    calibrate_disc_quadrant,
    calibrate_mbti_dimension,
    calibrate_score,
)
from psychometrics.scoring.darktriad import calculate_dark_triad_scores
from psychometrics.scoring.disc import calculate_disc_scores, decode_choice, encode_choice
from psychometrics.scoring.mbti import calculate_mbti_scores, derive_mbti_from_big_five

__all__ = [
    "CALIBRATION_PARAMS",
    "CalibrationParams",
    "calculate_big_five_scores",
    "calculate_dark_triad_scores",
    "calculate_disc_scores",
    "calculate_mbti_scores",
    "calibrate_big_five_domain",
    "calibrate_disc_quadrant",
    "calibrate_mbti_dimension",
    "calibrate_score",
    "decode_choice",
    "derive_mbti_from_big_five",
    "encode_choice",
]
