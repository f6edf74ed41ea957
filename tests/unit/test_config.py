"""Unit tests for settings loading"""

import pydantic
import pytest
from liquidity_gateway.config import Settings


def test_defaults(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.delenv("DATA_SOURCE", raising=False)
    settings = Settings()

    assert settings.data_source == "database"
    assert settings.default_runway_months == 12
    assert settings.default_cash_gap_months == 6
    assert settings.max_horizon_months == 60


def test_data_source_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("DATA_SOURCE", "ledger_api")

    assert Settings().data_source == "ledger_api"


@pytest.mark.parametrize("data_source", ["ledgerapi", "Database", "sqlite"])
def test_unknown_data_source_is_rejected(monkeypatch: pytest.MonkeyPatch, data_source: str):
    """A typo must fail at startup instead of silently reading the database"""
    monkeypatch.setenv("DATA_SOURCE", data_source)

    with pytest.raises(pydantic.ValidationError):
        Settings()
