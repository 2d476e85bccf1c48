"""Tests for src/domain/models/portfolio.py."""

import pytest
from pydantic import ValidationError

from src.domain.models.portfolio import Portfolio, Position


# --- Position ---

def test_position_ticker_is_upper_cased_and_trimmed():
    assert Position(ticker="  aapl ", quantity=10).ticker == "AAPL"


def test_position_blank_ticker_raises():
    with pytest.raises(ValidationError):
        Position(ticker="   ", quantity=10)


def test_position_quantity_defaults_to_zero():
    assert Position(ticker="AAPL").quantity == 0.0


def test_position_market_value():
    assert Position(ticker="AAPL", quantity=10).market_value(101.5) == pytest.approx(1_015.0)


def test_position_allows_fractional_quantity():
    assert Position(ticker="AAPL", quantity=0.25).quantity == 0.25


# --- Portfolio ---

def test_portfolio_default_name():
    assert Portfolio().name == "My Portfolio"


def test_portfolio_empty_positions_valid():
    assert Portfolio().positions == []


def test_portfolio_duplicate_tickers_raise():
    with pytest.raises(ValidationError, match="AAPL"):
        Portfolio(positions=[Position(ticker="AAPL", quantity=1), Position(ticker="aapl", quantity=2)])


def test_portfolio_from_quantities():
    portfolio = Portfolio.from_quantities({"aapl": 10, "MSFT": 5}, name="Core")
    assert portfolio.name == "Core"
    assert [p.ticker for p in portfolio.positions] == ["AAPL", "MSFT"]


def test_portfolio_get_position_is_case_insensitive():
    portfolio = Portfolio.from_quantities({"AAPL": 10})
    assert portfolio.get_position(" aapl ").quantity == 10


def test_portfolio_get_position_missing_returns_none():
    assert Portfolio.from_quantities({"AAPL": 10}).get_position("MSFT") is None


def test_portfolio_holdings_skip_zero_quantities():
    portfolio = Portfolio.from_quantities({"AAPL": 10, "MSFT": 0, "SHORT": -3})
    assert portfolio.holdings() == {"AAPL": 10, "SHORT": -3}
