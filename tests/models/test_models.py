"""Parsing of FMP payloads into typed records."""

import pytest
from pydantic import ValidationError

from fmp_client.models import (
    CashFlowStatement,
    CompanyProfile,
    CompanyRating,
    DiscountedCashFlow,
    IncomeStatement,
    IndexConstituent,
    KeyMetrics,
    KeyMetricsTTM,
    Quote,
    SymbolListing,
)


def test_profile_parses_camel_case_and_irregular_keys(profile_payload) -> None:
    profile = CompanyProfile.model_validate(profile_payload[0])
    assert profile.symbol == "AAPL"
    assert profile.company_name == "Apple Inc."
    assert profile.mkt_cap == pytest.approx(2952972032000)
    assert profile.price_range == "164.08-199.62"
    assert profile.exchange_short_name == "NASDAQ"
    assert profile.is_etf is False
    assert profile.description is None


def test_unknown_keys_are_ignored() -> None:
    listing = SymbolListing.model_validate(
        {"symbol": "SPY", "name": "SPDR S&P 500", "type": "etf", "brandNewField": 1}
    )
    assert listing.asset_type == "etf"
    assert not hasattr(listing, "brandNewField")


def test_symbol_is_required() -> None:
    with pytest.raises(ValidationError):
        Quote.model_validate({"price": 10.0})


def test_income_statement_lowercase_ratio_keys() -> None:
    statement = IncomeStatement.model_validate({
        "symbol": "AAPL",
        "date": "2023-09-30",
        "calendarYear": "2023",
        "period": "FY",
        "revenue": 383285000000,
        "ebitdaratio": 0.33,
        "epsdiluted": 6.13,
        "weightedAverageShsOutDil": 15812547000,
    })
    assert statement.ebitda_ratio == pytest.approx(0.33)
    assert statement.eps_diluted == pytest.approx(6.13)
    assert statement.weighted_average_shs_out_dil == pytest.approx(15812547000)


def test_cash_flow_misspelled_provider_keys() -> None:
    statement = CashFlowStatement.model_validate({
        "symbol": "AAPL",
        "netCashUsedForInvestingActivites": 3705000000,
        "otherFinancingActivites": -6012000000,
        "netCashProvidedByOperatingActivities": 110543000000,
        "freeCashFlow": 99584000000,
    })
    assert statement.net_cash_used_for_investing_activities == pytest.approx(3705000000)
    assert statement.other_financing_activities == pytest.approx(-6012000000)
    assert statement.net_cash_provided_by_operating_activities == pytest.approx(110543000000)


def test_rating_detail_aliases() -> None:
    rating = CompanyRating.model_validate({
        "symbol": "AAPL",
        "rating": "S",
        "ratingScore": 5,
        "ratingDetailsDCFScore": 5,
        "ratingDetailsPERecommendation": "Neutral",
    })
    assert rating.dcf_score == 5
    assert rating.pe_recommendation == "Neutral"


def test_dcf_stock_price_key_with_space() -> None:
    dcf = DiscountedCashFlow.model_validate({"symbol": "AAPL", "dcf": 150.2, "Stock Price": 189.8})
    assert dcf.stock_price == pytest.approx(189.8)


def test_key_metrics_acronym_keys() -> None:
    metrics = KeyMetrics.model_validate({
        "symbol": "AAPL",
        "period": "Q1",
        "peRatio": 29.1,
        "enterpriseValueOverEBITDA": 22.5,
        "pocfratio": 25.3,
    })
    assert metrics.enterprise_value_over_ebitda == pytest.approx(22.5)
    assert metrics.pocf_ratio == pytest.approx(25.3)


def test_key_metrics_ttm_strips_suffix() -> None:
    metrics = KeyMetricsTTM.model_validate({
        "peRatioTTM": 30.4,
        "netDebtToEBITDATTM": 0.4,
        "dividendPerShareTTM": 0.95,
    })
    assert metrics.symbol is None
    assert metrics.pe_ratio == pytest.approx(30.4)
    assert metrics.net_debt_to_ebitda == pytest.approx(0.4)
    assert metrics.dividend_per_share == pytest.approx(0.95)


def test_numeric_cik_coerced_to_string() -> None:
    constituent = IndexConstituent.model_validate(
        {"symbol": "MMM", "subSector": "Industrial Conglomerates", "cik": 66740, "founded": 1902}
    )
    assert constituent.cik == "66740"
    assert constituent.founded == "1902"
    assert constituent.sub_sector == "Industrial Conglomerates"


def test_records_accept_snake_case_names() -> None:
    quote = Quote(symbol="AAPL", day_low=1.0, price_avg50=2.0)
    assert quote.price_avg50 == 2.0
    assert Quote.model_validate({"symbol": "AAPL", "priceAvg50": 3.0}).price_avg50 == 3.0
