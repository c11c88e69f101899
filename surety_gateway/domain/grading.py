"""Category grading - YoY growth and questionnaire answers to 0-100 scores"""

from typing import Mapping, Optional

from surety_gateway.domain.models import FinancialGrade, QuestionnaireAnswers, YoYDeltaSet
from surety_gateway.domain.policy import DEFAULT_POLICY, ScoringPolicy


def grade_financial(value: float, policy: ScoringPolicy = DEFAULT_POLICY) -> FinancialGrade:
    """
    Grade a YoY growth percentage.

    Bands (inclusive lower bounds):
    - >= 15:      A
    - 5 to < 15:  B
    - < 5:        C (including any decline)
    """
    if value >= policy.financial_band_a:
        grade = "A"
    elif value >= policy.financial_band_b:
        grade = "B"
    else:
        grade = "C"
    return FinancialGrade(grade=grade, score=policy.grade_scale[grade])


def grade_answer(letter: Optional[str], policy: ScoringPolicy = DEFAULT_POLICY) -> float:
    """Letter answer to score; unknown or missing letters score 0"""
    return policy.grade_scale.get(letter, 0.0)


def score_section(
    answers: QuestionnaireAnswers,
    weights: Mapping[str, int],
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> float:
    """
    Weighted average of the answered questions of one section.

    Unanswered questions are left out of both the total and the weight sum, so a
    partially completed questionnaire is graded only on what was answered. A section
    with no answers scores 0.
    """
    total_score = 0.0
    total_weight = 0

    for key, weight in weights.items():
        answer = answers.get(key)
        if answer:
            total_score += grade_answer(answer, policy) * weight
            total_weight += weight

    return total_score / total_weight if total_weight else 0.0


def score_financial_capacity(yoy: YoYDeltaSet, policy: ScoringPolicy = DEFAULT_POLICY) -> float:
    """Unweighted mean of the grades of the four YoY deltas"""
    scores = [
        grade_financial(value, policy).score
        for value in (yoy.equity, yoy.profit, yoy.assets, yoy.liabilities)
    ]
    return sum(scores) / len(scores)
