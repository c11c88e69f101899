"""Unit tests for category grading"""

import pytest

from surety_gateway.domain.grading import (
    grade_answer,
    grade_financial,
    score_financial_capacity,
    score_section,
)
from surety_gateway.domain.models import YoYDeltaSet


def test_grade_financial_bands():
    """Test YoY growth bands with inclusive lower bounds"""
    assert grade_financial(-40.0).grade == "C"
    assert grade_financial(0.0).grade == "C"
    assert grade_financial(4.99).grade == "C"
    assert grade_financial(5.0).grade == "B"
    assert grade_financial(14.99).grade == "B"
    assert grade_financial(15.0).grade == "A"
    assert grade_financial(250.0).grade == "A"


def test_grade_financial_scores():
    """Test band scores"""
    assert grade_financial(2.0).score == 33.33
    assert grade_financial(10.0).score == 66.67
    assert grade_financial(20.0).score == 100.0


def test_grade_financial_monotonic():
    """Test scores never drop as growth rises"""
    values = [-100, -5, 0, 4.9, 5, 7.5, 14.9, 15, 30, 1000]
    scores = [grade_financial(v).score for v in values]

    assert scores == sorted(scores)


def test_grade_answer():
    """Test letter scale and unknown letters"""
    assert grade_answer("A") == 100.0
    assert grade_answer("B") == 66.67
    assert grade_answer("C") == 33.33
    assert grade_answer("D") == 0.0
    assert grade_answer("a") == 0.0
    assert grade_answer(None) == 0.0


def test_score_section_weighted_average():
    """Test weighted aggregation of two answers"""
    # (100*10 + 66.67*10) / 20
    score = score_section({"q1": "A", "q2": "B"}, {"q1": 10, "q2": 10})

    assert score == pytest.approx(83.335)


def test_score_section_uses_weights():
    """Test heavier questions pull the average harder"""
    # Character weights: q1=7 (A), q4=5 (C) -> (700 + 166.65) / 12
    score = score_section({"q1": "A", "q4": "C"}, {"q1": 7, "q2": 7, "q3": 7, "q4": 5, "q5": 5})

    assert score == pytest.approx((100 * 7 + 33.33 * 5) / 12)


def test_score_section_no_answers():
    """Test a section with nothing answered scores 0"""
    assert score_section({}, {"q1": 7, "q2": 3}) == 0.0


def test_score_section_single_answer_ignores_weight():
    """Test one answered question scores exactly its graded value"""
    weights = {"q1": 8, "q2": 3, "q3": 3, "q4": 5}

    assert score_section({"q2": "B"}, weights) == pytest.approx(66.67)
    assert score_section({"q1": "C"}, weights) == pytest.approx(33.33)


def test_score_section_unanswered_questions_do_not_penalize():
    """Test partially completed sections are graded only on what was answered"""
    weights = {"q1": 5, "q2": 5, "q3": 5, "q4": 5, "q5": 5, "q6": 5}

    partial = score_section({"q1": "A", "q2": "A"}, weights)
    complete = score_section({k: "A" for k in weights}, weights)

    assert partial == complete == 100.0


def test_score_section_ignores_keys_outside_catalog():
    """Test answers without a weight are not counted"""
    score = score_section({"q1": "A", "q9": "C"}, {"q1": 7})

    assert score == 100.0


def test_score_section_unknown_letter_counts_weight():
    """Test an answered but unrecognized letter contributes 0 with its weight"""
    # (100*5 + 0*5) / 10
    score = score_section({"q1": "A", "q2": "X"}, {"q1": 5, "q2": 5})

    assert score == pytest.approx(50.0)


def test_score_financial_capacity_mean():
    """Test financial capacity is the plain mean of four YoY grades"""
    yoy = YoYDeltaSet(assets=20.0, liabilities=10.0, equity=26.67, profit=-3.0)

    # A, B, A, C
    assert score_financial_capacity(yoy) == pytest.approx((100 + 66.67 + 100 + 33.33) / 4)


def test_score_financial_capacity_flat_trend():
    """Test zero growth everywhere grades all four as C"""
    yoy = YoYDeltaSet(assets=0.0, liabilities=0.0, equity=0.0, profit=0.0)

    assert score_financial_capacity(yoy) == pytest.approx(33.33)
