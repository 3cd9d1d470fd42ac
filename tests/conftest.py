import json
from datetime import date
from pathlib import Path

import pytest

import db
from models.cash_flow import Account, CashFlow, Frequency

EXAMPLES = Path(__file__).resolve().parent.parent / "scenarios" / "examples"


@pytest.fixture
def monthly_account() -> Account:
    return Account(
        name="Test Account",
        balance=0.0,
        cash_flows=[
            CashFlow(name="Test Cash Flow", amount=100.0, frequency=Frequency.MONTH_START),
        ],
        start_date=date(2020, 1, 1),
        end_date=date(2020, 12, 31),
    )


@pytest.fixture
def mixed_account() -> Account:
    return Account(
        name="Checking",
        balance=1000.0,
        cash_flows=[
            CashFlow(name="Salary", amount=2000.0, frequency=Frequency.SEMI_MONTHLY, tax_rate=0.25),
            CashFlow(name="Rent", amount=-1200.0, frequency=Frequency.MONTH_START),
            CashFlow(name="Card", amount=-300.0, frequency=Frequency.MONTH_END, end_date=date(2021, 6, 30)),
            CashFlow(name="Bonus", amount=5000.0, frequency=Frequency.ANNUALLY,
                     start_date=date(2021, 3, 10), tax_rate=0.4),
            CashFlow(name="Car", amount=-8000.0, frequency=Frequency.ONCE, start_date=date(2021, 5, 5)),
        ],
        start_date=date(2021, 1, 1),
        end_date=date(2021, 12, 31),
    )


@pytest.fixture
def sample_account_dict() -> dict:
    return json.loads((EXAMPLES / "default_account.json").read_text(encoding="utf-8"))


@pytest.fixture
def sample_portfolio_path() -> Path:
    return EXAMPLES / "default_portfolio.json"


@pytest.fixture
def store(tmp_path, monkeypatch):
    monkeypatch.setattr(db, "DB_FILE", str(tmp_path / "test.duckdb"))
    db.init_db()
    return tmp_path


@pytest.fixture
def sample_account_yaml_path() -> Path:
    return EXAMPLES / "default_account.yaml"
