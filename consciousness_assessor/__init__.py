"""
consciousness_assessor — weighted consciousness-indicator scoring.

Typical use::

    from consciousness_assessor.models.indicators import AssessmentInput
    from consciousness_assessor.scoring import Assessor

    result = Assessor().assess(AssessmentInput(name="subject", ...))
    result.composite_score, result.classification, result.proof_hash
"""

__version__ = "0.1.0"
