"""Unit tests for the quote API endpoints and error handling."""

import pytest
from fastapi.testclient import TestClient

from bonding_curve.api.endpoints import get_curve
from bonding_curve.api.main import app
from bonding_curve.curve import CurveConfig, ExponentialCurve
from bonding_curve.math.fixed_point import WAD
from bonding_curve.safe_int import UINT256_MAX
from tests.helpers import SCENARIO_A, SCENARIO_B, STEEP_A, STEEP_B

E_MINUS_ONE_WAD = 1_718281828459045235


@pytest.fixture
def client():
    """Test client serving the steep curve."""
    curve = ExponentialCurve.from_values(STEEP_A, STEEP_B)
    app.dependency_overrides[get_curve] = lambda: curve
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestHealth:
    """Tests for the health endpoint."""

    def test_health(self, client):
        """Health check returns ok."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestConfigEndpoint:
    """Tests for GET /config."""

    def test_reports_parameters_and_bounds(self, client):
        """The config body lists A, B and every bound."""
        response = client.get("/config")

        assert response.status_code == 200
        data = response.json()
        assert data["a"] == str(STEEP_A)
        assert data["b"] == str(STEEP_B)
        assert data["maxSupply"] == str(CurveConfig().max_supply)
        assert data["minRemainingSupply"] == str(1_000 * WAD)
        assert set(data) == {
            "a",
            "b",
            "maxSupply",
            "maxTxSize",
            "minRemainingSupply",
            "maxExpValue",
            "minParameter",
            "maxParameter",
            "minGrowthRate",
        }

    def test_default_curve_without_override(self):
        """The environment-free default is the reference scenario curve."""
        app.dependency_overrides.clear()
        response = TestClient(app).get("/config")
        assert response.status_code == 200
        assert response.json()["a"] == str(SCENARIO_A)
        assert response.json()["b"] == str(SCENARIO_B)


class TestQuotes:
    """Tests for successful quotes."""

    def test_price(self, client):
        """Price at zero supply is A."""
        response = client.post("/quote/price", json={"supply": "0"})
        assert response.status_code == 200
        assert response.json() == {"supply": "0", "price": str(WAD)}

    def test_sell(self, client):
        """Selling 1000 tokens from 1000 returns 1000 * (e - 1)."""
        supply = str(1_000 * WAD)
        response = client.post("/quote/sell", json={"supply": supply, "amount": supply})
        assert response.status_code == 200
        assert response.json()["funds"] == str(E_MINUS_ONE_WAD * 1_000)

    def test_buy(self, client):
        """Buying 1000 tokens from zero costs 1000 * (e - 1)."""
        response = client.post("/quote/buy", json={"supply": "0", "amount": str(1_000 * WAD)})
        assert response.status_code == 200
        assert response.json()["funds"] == str(E_MINUS_ONE_WAD * 1_000)

    def test_amount_out(self, client):
        """Spending 1000 * (e - 1) from zero buys 1000 tokens."""
        response = client.post(
            "/quote/amount-out", json={"supply": "0", "funds": str(E_MINUS_ONE_WAD * 1_000)}
        )
        assert response.status_code == 200
        assert abs(int(response.json()["amount"]) - 1_000 * WAD) <= 10**6

    def test_price_impact(self, client):
        """Impact is reported in basis points under impactBps."""
        response = client.post(
            "/quote/price-impact", json={"supply": "0", "amount": str(1_000 * WAD)}
        )
        assert response.status_code == 200
        assert response.json()["impactBps"] == 17_182

    def test_integer_amounts_accepted(self, client):
        """JSON integers are accepted as amounts."""
        response = client.post("/quote/price", json={"supply": 0})
        assert response.status_code == 200


class TestCurveRejections:
    """Tests for curve rejections mapped to 422."""

    def test_invalid_range_returns_422_with_bound(self, client):
        """Selling more than the supply returns the typed error body."""
        response = client.post("/quote/sell", json={"supply": "5", "amount": "6"})

        assert response.status_code == 422
        assert response.json() == {
            "error": "InvalidRange",
            "detail": "Cannot remove 6 from supply 5: amount exceeds supply",
            "value": "6",
            "bound": "5",
        }

    def test_supply_above_maximum(self, client):
        """Supplies above the cap are rejected."""
        supply = CurveConfig().max_supply + 1
        response = client.post("/quote/price", json={"supply": str(supply)})

        assert response.status_code == 422
        data = response.json()
        assert data["error"] == "SupplyExceedsMaximum"
        assert data["value"] == str(supply)

    def test_insufficient_remaining_supply(self, client):
        """Buys near the cap are rejected."""
        supply = CurveConfig().max_supply - 900 * WAD
        response = client.post("/quote/amount-out", json={"supply": str(supply), "funds": "1"})

        assert response.status_code == 422
        assert response.json()["error"] == "InsufficientRemainingSupply"

    def test_buy_past_uint256_is_a_supply_rejection(self, client):
        """supply + amount beyond 2^256-1 is a 422, not a 500."""
        response = client.post("/quote/buy", json={"supply": str(UINT256_MAX), "amount": "1"})

        assert response.status_code == 422
        assert response.json()["error"] == "SupplyExceedsMaximum"
        assert response.json()["value"] == str(UINT256_MAX + 1)

    def test_price_impact_past_uint256_is_a_supply_rejection(self, client):
        """The simulated supply is rejected the same way."""
        response = client.post(
            "/quote/price-impact", json={"supply": "1", "amount": str(UINT256_MAX)}
        )

        assert response.status_code == 422
        assert response.json()["error"] == "SupplyExceedsMaximum"


class TestRequestValidation:
    """Tests for request schema validation."""

    @pytest.mark.parametrize("supply", ["-1", "abc", str(UINT256_MAX + 1), True, 1.5])
    def test_invalid_amount_returns_422(self, client, supply):
        """Values that are not uint256 never reach the curve."""
        response = client.post("/quote/price", json={"supply": supply})
        assert response.status_code == 422
        assert "detail" in response.json()

    def test_missing_field_returns_422(self, client):
        """Missing fields are rejected."""
        response = client.post("/quote/sell", json={"supply": "0"})
        assert response.status_code == 422


class TestArithmeticFailures:
    """Tests for kernel failures mapped to 500."""

    def test_kernel_overflow_returns_500(self):
        """Funds too large to represent after scaling surface as Overflow."""
        curve = ExponentialCurve.from_values(SCENARIO_A, SCENARIO_B)
        app.dependency_overrides[get_curve] = lambda: curve
        try:
            response = TestClient(app).post(
                "/quote/amount-out", json={"supply": "0", "funds": str(UINT256_MAX)}
            )
            assert response.status_code == 500
            assert response.json()["error"] == "Overflow"
        finally:
            app.dependency_overrides.clear()
