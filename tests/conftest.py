import pytest
from decimal import Decimal
from fastapi.testclient import TestClient

from matka.api import deps
from matka.core.config import Settings
from matka.core.reward_calculator import PayoutCalculator
from matka.main import app
from matka.schemas import AggregatedBetTotals, PannaTable, WinningRateTable


@pytest.fixture()
def rates() -> WinningRateTable:
    return WinningRateTable()


@pytest.fixture()
def calculator(rates) -> PayoutCalculator:
    return PayoutCalculator(rates, PannaTable())


@pytest.fixture()
def panna_totals() -> AggregatedBetTotals:
    """Totals used by the 138 single-panna scenarios."""
    return AggregatedBetTotals(
        single_numbers={"2": Decimal("20"), "7": Decimal("100")},
        single_panna={"138": Decimal("50")},
        double_numbers={"92": Decimal("10")},
    )


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(STRICT_CLOSE_DECLARATION=False)


@pytest.fixture()
def client(test_settings):
    app.dependency_overrides[deps.get_settings] = lambda: test_settings
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
