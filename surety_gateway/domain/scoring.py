"""5C decision engine - core business logic for surety bond approval and cash collateral"""

from typing import List

from surety_gateway.domain.catalog import Section
from surety_gateway.domain.financials import analyze
from surety_gateway.domain.grading import score_financial_capacity, score_section
from surety_gateway.domain.models import (
    ApplicantProfile,
    AssessmentInput,
    AssessmentResult,
    BondType,
    CollateralRequirement,
    CollateralStatus,
    DecisionBand,
    FinancialStatement,
    QuestionnaireAnswers,
    SectionScores,
    YoYDeltaSet,
)
from surety_gateway.domain.policy import DEFAULT_POLICY, ScoringPolicy


def calculate_section_scores(
    yoy: YoYDeltaSet,
    capacity_answers: QuestionnaireAnswers,
    character_answers: QuestionnaireAnswers,
    capital_answers: QuestionnaireAnswers,
    condition_answers: QuestionnaireAnswers,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> SectionScores:
    """
    Score every pillar.

    Financial capacity comes from the balance sheet trend; technical capacity comes
    from the capacity questionnaire and is informational only.
    """
    return SectionScores(
        character=score_section(character_answers, policy.weights_for(Section.CHARACTER), policy),
        capital=score_section(capital_answers, policy.weights_for(Section.CAPITAL), policy),
        financial_capacity=score_financial_capacity(yoy, policy),
        condition=score_section(condition_answers, policy.weights_for(Section.CONDITION), policy),
        tech_capacity=score_section(capacity_answers, policy.weights_for(Section.CAPACITY), policy),
    )


def calculate_final_score(
    character: float,
    capital: float,
    capacity: float,
    condition: float,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> float:
    """
    Weighted 5C score, 0-100.

    Scoring weights:
    - 25%: Character
    - 25%: Capital
    - 25%: Capacity (financial trend)
    - 25%: Condition
    """
    return (
        character * policy.character_weight
        + capital * policy.capital_weight
        + capacity * policy.capacity_weight
        + condition * policy.condition_weight
    )


def determine_decision(
    final_score: float, policy: ScoringPolicy = DEFAULT_POLICY
) -> tuple[bool, bool, DecisionBand]:
    """
    Map final score to approval and tier.

    Returns: (approved, high_tier, decision_band)
    """
    if final_score < policy.approval_threshold:
        return False, False, DecisionBand.REJECTED
    elif final_score < policy.high_tier_threshold:
        return True, False, DecisionBand.APPROVED_TIER_2
    else:
        return True, True, DecisionBand.APPROVED_TIER_1


def determine_collateral(
    final_score: float,
    profile: ApplicantProfile,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> CollateralRequirement:
    """
    Size the cash collateral deposit.

    Rules, in order:
    - bid bonds (Penawaran) never require collateral, whatever the score
    - rejected applications get no collateral offer
    - tier 1: 0% up to the threshold, 5% above it
    - tier 2: 5% up to the threshold, 10% above it

    The threshold is 500M IDR for private obligees and 1B IDR for state-owned ones.
    Amounts are whole IDR (truncated).
    """
    if profile.bond_type == BondType.BID:
        return CollateralRequirement(status=CollateralStatus.NO_COLLATERAL, rate_percent=0, amount=0)

    approved, high_tier, _ = determine_decision(final_score, policy)
    if not approved:
        return CollateralRequirement(status=CollateralStatus.REJECTED, rate_percent=0, amount=0)

    within_threshold = profile.guarantee_value <= policy.collateral_thresholds[profile.employer_type]

    if high_tier:
        if within_threshold:
            status, rate = CollateralStatus.NONE_REQUIRED, 0
        else:
            status, rate = CollateralStatus.TIER1_OVER_THRESHOLD, policy.tier1_over_threshold_rate
    elif within_threshold:
        status, rate = CollateralStatus.TIER2_WITHIN_THRESHOLD, policy.tier2_within_threshold_rate
    else:
        status, rate = CollateralStatus.TIER2_OVER_THRESHOLD, policy.tier2_over_threshold_rate

    return CollateralRequirement(
        status=status,
        rate_percent=rate,
        amount=profile.guarantee_value * rate // 100,
    )


def describe_trends(yoy: YoYDeltaSet) -> List[str]:
    """One sentence each for the asset, liability and profit trend; zero change reads as a decline"""
    notes = []
    if yoy.assets > 0:
        notes.append(f"Assets increased {yoy.assets:.1f}%.")
    else:
        notes.append(f"Assets decreased {abs(yoy.assets):.1f}%.")

    if yoy.liabilities > 0:
        notes.append(f"Liabilities rose {yoy.liabilities:.1f}%.")
    else:
        notes.append(f"Liabilities fell {abs(yoy.liabilities):.1f}%.")

    if yoy.profit > 0:
        notes.append(f"Net profit grew {yoy.profit:.1f}%.")
    else:
        notes.append(f"Net profit declined {abs(yoy.profit):.1f}%.")
    return notes


def rate_capacity_strength(financial_capacity_score: float, policy: ScoringPolicy = DEFAULT_POLICY) -> str:
    return "strong" if financial_capacity_score > policy.strong_capacity_score else "adequate"


def decide(
    fin_t1: FinancialStatement,
    fin_t2: FinancialStatement,
    capacity_answers: QuestionnaireAnswers,
    character_answers: QuestionnaireAnswers,
    capital_answers: QuestionnaireAnswers,
    condition_answers: QuestionnaireAnswers,
    profile: ApplicantProfile,
    policy: ScoringPolicy = DEFAULT_POLICY,
) -> AssessmentResult:
    """
    Main entry point: score all pillars and make the bond decision.

    Pure function of its arguments; never raises and never mutates its inputs.
    """
    analysis = analyze(fin_t1, fin_t2)
    scores = calculate_section_scores(
        analysis.yoy,
        capacity_answers,
        character_answers,
        capital_answers,
        condition_answers,
        policy,
    )
    final_score = calculate_final_score(
        scores.character, scores.capital, scores.financial_capacity, scores.condition, policy
    )
    approved, high_tier, decision_band = determine_decision(final_score, policy)

    return AssessmentResult(
        character_score=scores.character,
        capital_score=scores.capital,
        condition_score=scores.condition,
        financial_capacity_score=scores.financial_capacity,
        tech_capacity_score=scores.tech_capacity,
        final_score=final_score,
        approved=approved,
        high_tier=high_tier,
        decision_band=decision_band,
        collateral=determine_collateral(final_score, profile, policy),
        project_value=profile.project_value,
        analysis=analysis,
        capacity_strength=rate_capacity_strength(scores.financial_capacity, policy),
        trend_notes=describe_trends(analysis.yoy),
        policy_version=policy.version,
    )


def assess(inputs: AssessmentInput, policy: ScoringPolicy = DEFAULT_POLICY) -> AssessmentResult:
    """Run decide() over a complete input record"""
    return decide(
        inputs.financials_y1,
        inputs.financials_y2,
        inputs.capacity_answers,
        inputs.character_answers,
        inputs.capital_answers,
        inputs.condition_answers,
        inputs.profile,
        policy,
    )
