"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient

from surety_gateway.api.main import create_app
from surety_gateway.domain.catalog import LineItem
from surety_gateway.domain.financials import new_statement
from surety_gateway.domain.models import ApplicantProfile, BondType, EmployerType, FinancialStatement


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def statement_y1() -> FinancialStatement:
    """
    Prior year: assets 1,000M, liabilities 400M, equity 600M, profit 100M.
    """
    return new_statement({
        LineItem.CASH: 200_000_000,
        LineItem.INVENTORY: 100_000_000,
        LineItem.FIXED_ASSETS_NET: 700_000_000,
        LineItem.TRADE_PAYABLES: 150_000_000,
        LineItem.BANK_LOANS_CURRENT: 50_000_000,
        LineItem.BANK_LOANS_LONG_TERM: 200_000_000,
        LineItem.PAID_IN_CAPITAL: 500_000_000,
        LineItem.NET_PROFIT: 100_000_000,
        LineItem.SALES: 2_000_000_000,
    })


@pytest.fixture
def statement_y2() -> FinancialStatement:
    """
    Current year: assets 1,200M (+20%), liabilities 440M (+10%), equity 760M (+26.7%),
    profit 130M (+30%). Current assets 450M, current liabilities 250M.
    """
    return new_statement({
        LineItem.CASH: 300_000_000,
        LineItem.INVENTORY: 150_000_000,
        LineItem.FIXED_ASSETS_NET: 750_000_000,
        LineItem.TRADE_PAYABLES: 180_000_000,
        LineItem.BANK_LOANS_CURRENT: 70_000_000,
        LineItem.BANK_LOANS_LONG_TERM: 190_000_000,
        LineItem.PAID_IN_CAPITAL: 500_000_000,
        LineItem.NET_PROFIT: 130_000_000,
        LineItem.SALES: 2_400_000_000,
    })


@pytest.fixture
def private_profile() -> ApplicantProfile:
    """Performance bond for a private obligee, 400M guarantee (within the 500M threshold)"""
    return ApplicantProfile(
        name="PT. Contoh Konstruksi",
        address="Jl. Jenderal Sudirman No. 1, Jakarta",
        bond_type=BondType.PERFORMANCE,
        employer_type=EmployerType.PRIVATE,
        guarantee_value=400_000_000,
        coverage_percent=5,
    )


@pytest.fixture
def all_a_answers() -> dict:
    """Best answer to every question of every section"""
    return {
        "capacity_answers": {"q1": "A", "q2": "A", "q3": "A", "q4": "A"},
        "character_answers": {"q1": "A", "q2": "A", "q3": "A", "q4": "A", "q5": "A"},
        "capital_answers": {"q1": "A", "q2": "A", "q3": "A", "q4": "A", "q5": "A", "q6": "A"},
        "condition_answers": {"q1": "A", "q2": "A", "q3": "A", "q4": "A"},
    }


@pytest.fixture
def assessment_payload(all_a_answers: dict) -> dict:
    """JSON body for POST /v1/assessment with the sample statements and best answers"""
    return {
        "applicant": {
            "name": "PT. Contoh Konstruksi",
            "address": "Jl. Jenderal Sudirman No. 1, Jakarta",
            "bond_type": "Pelaksanaan",
            "employer_type": "Private",
            "guarantee_value": "Rp 400.000.000",
            "coverage_percent": 5,
        },
        "financials_y1": {
            "Kas dan Setara Kas": 200_000_000,
            "Persediaan": 100_000_000,
            "Aset Tetap - Bersih": 700_000_000,
            "Utang usaha": 150_000_000,
            "Utang bank (lancar)": 50_000_000,
            "Utang bank (jbg panjang)": 200_000_000,
            "Laba tahun berjalan": 100_000_000,
        },
        "financials_y2": {
            "Kas dan Setara Kas": "300.000.000",
            "Persediaan": 150_000_000,
            "Aset Tetap - Bersih": 750_000_000,
            "Utang usaha": 180_000_000,
            "Utang bank (lancar)": 70_000_000,
            "Utang bank (jbg panjang)": 190_000_000,
            "Laba tahun berjalan": 130_000_000,
        },
        **all_a_answers,
    }
