"""
Tests for the HTTP API.

Tests cover:
- /check and /generate happy paths and response shapes
- 400 error envelopes for missing or out-of-range parameters
- Truncation by result cap and time budget
- Health check and catch-all error handling
"""
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from polydivisible.config import Settings, get_settings
from polydivisible.main import app


CHECK_URL = "/api/polydivisible/check"
GENERATE_URL = "/api/polydivisible/generate"


class TestCheck:
    """Tests for GET /api/polydivisible/check."""

    def test_polydivisible_number(self, client):
        """Test a polydivisible base 10 number."""
        response = client.get(CHECK_URL, params={"digits": "1232", "base": "10"})

        assert response.status_code == 200
        assert response.json() == {
            "isPolydivisible": True,
            "digits": "1232",
            "base": 10,
            "parsedDigits": [1, 2, 3, 2],
        }

    def test_not_polydivisible(self, client):
        """Test a number failing at its third prefix."""
        response = client.get(CHECK_URL, params={"digits": "124", "base": "10"})

        assert response.status_code == 200
        assert response.json()["isPolydivisible"] is False

    def test_original_text_echoed(self, client):
        """Test that digits are echoed as submitted, not normalized."""
        response = client.get(CHECK_URL, params={"digits": "1A2B", "base": "16"})

        assert response.status_code == 200
        data = response.json()
        assert data["digits"] == "1A2B"
        assert data["parsedDigits"] == [1, 10, 2, 11]

    def test_comma_separated_base(self, client):
        """Test comma-separated input above base 36."""
        response = client.get(CHECK_URL, params={"digits": "5,12,99", "base": "100"})

        assert response.status_code == 200
        assert response.json()["parsedDigits"] == [5, 12, 99]

    def test_single_zero(self, client):
        """Test that a lone zero digit is reported as polydivisible."""
        response = client.get(CHECK_URL, params={"digits": "0", "base": "10"})

        assert response.status_code == 200
        assert response.json()["isPolydivisible"] is True

    def test_missing_parameters(self, client):
        """Test that missing parameters are rejected."""
        for params in ({"base": "10"}, {"digits": "12"}, {"digits": "", "base": "10"}):
            response = client.get(CHECK_URL, params=params)
            assert response.status_code == 400
            assert response.json() == {"error": "Missing required parameters: digits and base"}

    @pytest.mark.parametrize("base", ["1", "101", "abc", "10.5", "+-5", "--3", "²", "9" * 5000])
    def test_invalid_base(self, client, base):
        """Test that bases outside 2-100 are rejected."""
        response = client.get(CHECK_URL, params={"digits": "12", "base": base})

        assert response.status_code == 400
        assert response.json() == {"error": "Base must be an integer between 2 and 100"}

    def test_invalid_digit(self, client):
        """Test that codec errors name the offending character."""
        response = client.get(CHECK_URL, params={"digits": "1g", "base": "16"})

        assert response.status_code == 400
        assert '"g"' in response.json()["error"]
        assert "16" in response.json()["error"]

    def test_invalid_token(self, client):
        """Test that codec errors name the offending token."""
        response = client.get(CHECK_URL, params={"digits": "1,150", "base": "100"})

        assert response.status_code == 400
        assert response.json() == {"error": 'Invalid digit "150" for base 100'}

    def test_huge_token(self, client):
        """Test that a token with thousands of digits gets a 400, not a 500."""
        response = client.get(CHECK_URL, params={"digits": "1," + "9" * 5000, "base": "100"})

        assert response.status_code == 400
        assert response.json()["error"].startswith('Invalid digit "999')

    def test_too_many_digits(self, client):
        """Test that numbers beyond 20 digits are rejected."""
        response = client.get(CHECK_URL, params={"digits": "1" * 21, "base": "10"})

        assert response.status_code == 400
        assert "20 digits" in response.json()["error"]


class TestGenerate:
    """Tests for GET /api/polydivisible/generate."""

    def test_base_10_length_1(self, client):
        """Test the single-digit enumeration."""
        response = client.get(GENERATE_URL, params={"base": "10", "maxLength": "1"})

        assert response.status_code == 200
        assert response.json() == {
            "polydivisibleNumbers": ["1", "2", "3", "4", "5", "6", "7", "8", "9"],
            "base": 10,
            "maxLength": 1,
            "count": 9,
            "truncated": False,
        }

    def test_comma_formatting(self, client):
        """Test formatting of results above base 36."""
        response = client.get(GENERATE_URL, params={"base": "100", "maxLength": "2"})

        assert response.status_code == 200
        data = response.json()
        assert data["polydivisibleNumbers"][:3] == ["1", "1,0", "1,2"]
        # 99 leading digits, each followed by 50 even-making digits
        assert data["count"] == 99 + 99 * 50

    def test_missing_parameters(self, client):
        """Test that missing parameters are rejected."""
        response = client.get(GENERATE_URL, params={"base": "10"})

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required parameters: base and maxLength"}

    def test_invalid_base(self, client):
        """Test that bases outside 2-100 are rejected."""
        response = client.get(GENERATE_URL, params={"base": "1", "maxLength": "3"})

        assert response.status_code == 400
        assert response.json() == {"error": "Base must be an integer between 2 and 100"}

    @pytest.mark.parametrize("max_length", ["0", "21", "+-5", "²", "9" * 5000])
    def test_invalid_max_length(self, client, max_length):
        """Test that lengths outside 1-20 are rejected."""
        response = client.get(GENERATE_URL, params={"base": "10", "maxLength": max_length})

        assert response.status_code == 400
        assert response.json() == {"error": "Max length must be an integer between 1 and 20"}

    def test_result_cap(self, client):
        """Test that the configured result cap truncates the response."""
        app.dependency_overrides[get_settings] = lambda: Settings(max_generate_results=5)

        response = client.get(GENERATE_URL, params={"base": "10", "maxLength": "3"})

        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 5
        assert data["truncated"] is True
        assert data["polydivisibleNumbers"] == ["1", "10", "102", "105", "108"]

    def test_time_budget(self, client):
        """Test that an exhausted time budget truncates a huge enumeration."""
        app.dependency_overrides[get_settings] = lambda: Settings(
            generate_timeout_seconds=1e-9, generate_check_interval=1
        )

        response = client.get(GENERATE_URL, params={"base": "100", "maxLength": "20"})

        assert response.status_code == 200
        data = response.json()
        assert data["truncated"] is True
        assert data["count"] == len(data["polydivisibleNumbers"])


class TestRateLimit:
    """Tests for the /generate rate limit source."""

    def test_limit_read_from_cached_settings(self, client):
        """Test that the limit comes from get_settings, not dependency overrides."""
        from polydivisible.dependencies import generate_rate_limit

        app.dependency_overrides[get_settings] = lambda: Settings(generate_rate_limit="1/minute")

        assert generate_rate_limit() == get_settings().generate_rate_limit
        assert generate_rate_limit() != "1/minute"


class TestHealth:
    """Tests for health and service info."""

    @pytest.mark.parametrize("path", ["/api/health", "/health"])
    def test_health(self, client, path):
        """Test the health check response."""
        response = client.get(path)

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "OK"
        timestamp = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
        assert timestamp.tzinfo is not None

    def test_root(self, client):
        """Test the service info endpoint."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["health"] == "/api/health"


class TestErrorHandling:
    """Tests for the error envelope."""

    def test_unknown_route(self, client):
        """Test that 404s use the error envelope."""
        response = client.get("/api/polydivisible/unknown")

        assert response.status_code == 404
        assert "error" in response.json()

    def test_unexpected_failure(self, monkeypatch):
        """Test that unexpected exceptions become a generic 500."""
        def boom(digits, base):
            raise RuntimeError("boom")

        monkeypatch.setattr("polydivisible.api.polydivisible.is_polydivisible", boom)

        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get(CHECK_URL, params={"digits": "12", "base": "10"})

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
