# release_planner/services/scoring/engines/wsjf.py

from __future__ import annotations

import logging
from typing import Optional, Tuple

from release_planner.config import ScoringWeights
from release_planner.services.scoring.interfaces import ScoringFramework, ScoreInputs, ScoreResult

logger = logging.getLogger("release_planner.services.scoring.wsjf")


def _weighted_wsjf(
    business_value: float,
    time_criticality: float,
    risk_reduction: float,
    job_size: float,
    weights: ScoringWeights,
) -> Tuple[float, float, Optional[str]]:
    """Return (cost_of_delay, wsjf, warning); no division when job size <= 0."""
    cod = (
        business_value * weights.business_value
        + time_criticality * weights.time_criticality
        + risk_reduction * weights.risk_reduction
    )
    if job_size <= 0:
        return cod, 0.0, f"WSJF: job size {job_size} is non-positive; score set to 0."
    return cod, cod / job_size, None


def calculate_wsjf(
    business_value: float,
    time_criticality: float,
    risk_reduction: float,
    job_size: float,
    weights: ScoringWeights,
) -> float:
    """WSJF = (BV*wBV + TC*wTC + RR*wRR) / Job Size.

    A non-positive job size yields 0.0 and a warning instead of a division.
    """
    _, score, warn = _weighted_wsjf(business_value, time_criticality, risk_reduction, job_size, weights)
    if warn:
        logger.warning("wsjf.invalid_job_size", extra={"job_size": job_size, "warning": warn})
        return score

    logger.debug("wsjf.computed", extra={"wsjf_score": round(score, 2), "job_size": job_size})
    return score


class WsjfScoringEngine:
    """WSJF scoring engine.

    WSJF formula: weighted Cost of Delay / Job Size
    Cost of Delay (CoD) = BV*wBV + TC*wTC + RR*wRR
    - Inputs are used as given (no clamping).
    - Job Size must be > 0 for meaningful score; else overall=0 with warning.
      The warning is returned on the result; logging it is the caller's job.
    """

    framework = ScoringFramework.WSJF

    def __init__(self, weights: ScoringWeights):
        self.weights = weights

    def compute(self, inputs: ScoreInputs) -> ScoreResult:
        cod, overall, warn = _weighted_wsjf(
            inputs.business_value,
            inputs.time_criticality,
            inputs.risk_reduction,
            inputs.job_size,
            self.weights,
        )

        return ScoreResult(
            value_score=cod,
            effort_score=inputs.job_size,
            overall_score=overall,
            components={
                "business_value": inputs.business_value,
                "time_criticality": inputs.time_criticality,
                "risk_reduction": inputs.risk_reduction,
                "cost_of_delay": cod,
                "job_size": inputs.job_size,
            },
            warnings=[warn] if warn else [],
        )


__all__ = ["WsjfScoringEngine", "calculate_wsjf"]
