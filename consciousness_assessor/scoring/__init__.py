"""
Scoring engine: turns indicator inputs into a classified, fingerprinted
assessment.

Modules
-------
assessor : Assessor class + average_score() + classify() + round_composite()
           + compute_proof_hash() — pure functions, no I/O beyond the clock.
"""

from consciousness_assessor.scoring.assessor import (
    Assessor,
    InvalidIndicatorRange,
    assess,
)

__all__ = ["Assessor", "InvalidIndicatorRange", "assess"]
