"""Financial statement summaries, ratios and year-over-year analysis"""

from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Union

from surety_gateway.domain.catalog import (
    ASSET_ITEMS,
    CURRENT_ASSET_ITEMS,
    CURRENT_LIABILITY_ITEMS,
    LIABILITY_ITEMS,
    PROFIT_ITEM,
    SALES_ITEM,
    LineItem,
)
from surety_gateway.domain.exceptions import UnknownLineItemError
from surety_gateway.domain.models import (
    FinancialAnalysis,
    FinancialStatement,
    FinancialSummary,
    RatioSet,
    YoYDeltaSet,
)


def new_statement(items: Optional[Mapping[Union[LineItem, str], int]] = None) -> FinancialStatement:
    """
    Build a read-only statement with every known line item present.

    Items not supplied default to 0. Keys may be LineItem members or their labels.

    Raises:
        UnknownLineItemError: If a key is not a known line item
    """
    statement = {item: 0 for item in LineItem}
    for key, amount in (items or {}).items():
        try:
            item = LineItem(key)
        except ValueError:
            raise UnknownLineItemError(key) from None
        statement[item] = amount
    return MappingProxyType(statement)


def _sum_items(statement: FinancialStatement, items: Iterable[LineItem]) -> int:
    return sum(statement.get(item, 0) for item in items)


def summarize(statement: FinancialStatement) -> FinancialSummary:
    """Reduce a statement to aggregate totals. An empty statement yields all zeros."""
    assets = _sum_items(statement, ASSET_ITEMS)
    liabilities = _sum_items(statement, LIABILITY_ITEMS)

    return FinancialSummary(
        assets=assets,
        liabilities=liabilities,
        equity=assets - liabilities,
        profit=statement.get(PROFIT_ITEM, 0),
        sales=statement.get(SALES_ITEM, 0),
        current_assets=_sum_items(statement, CURRENT_ASSET_ITEMS),
        current_liabilities=_sum_items(statement, CURRENT_LIABILITY_ITEMS),
    )


def calculate_yoy(prev: float, curr: float) -> float:
    """Percentage change from prev to curr; 0 when prev is 0"""
    if prev == 0:
        return 0.0
    return (curr - prev) / prev * 100


def _percent(numerator: float, denominator: float) -> float:
    return numerator / denominator * 100 if denominator != 0 else 0.0


def calculate_ratios(summary: FinancialSummary) -> RatioSet:
    """
    Liquidity, solvency and profitability in percent.

    Negative equity is propagated as-is, so solvency and profitability can come out
    negative or very large.
    """
    return RatioSet(
        liquidity=_percent(summary.current_assets, summary.current_liabilities),
        solvency=_percent(summary.liabilities, summary.equity),
        profitability=_percent(summary.profit, summary.equity),
    )


def analyze(y1: FinancialStatement, y2: FinancialStatement) -> FinancialAnalysis:
    """
    Summarize both years, compute YoY deltas and current-year ratios.

    Ratios only use year 2 (the current statement).
    """
    summary_y1 = summarize(y1)
    summary_y2 = summarize(y2)

    yoy = YoYDeltaSet(
        assets=calculate_yoy(summary_y1.assets, summary_y2.assets),
        liabilities=calculate_yoy(summary_y1.liabilities, summary_y2.liabilities),
        equity=calculate_yoy(summary_y1.equity, summary_y2.equity),
        profit=calculate_yoy(summary_y1.profit, summary_y2.profit),
    )

    return FinancialAnalysis(
        summary_y1=summary_y1,
        summary_y2=summary_y2,
        yoy=yoy,
        ratios=calculate_ratios(summary_y2),
    )
