"""
API tests for the /hash and /sleep demos.
"""

import asyncio
import time

import pytest

pytestmark = [pytest.mark.api]

AMOUNT_ERROR = "Amount must be a positive integer between 0 and 10,000"
LENGTH_ERROR = "Length must be a positive integer between 0 and 10,000"


class TestHashEndpoint:
    """Tests for GET /hash."""

    def test_hash_default(self, client, templates):
        response = client.get("/hash")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert templates.renders == [("index", {"hash-success-msg": "Successfully hashed 1000 times"})]
        assert "Successfully hashed 1000 times" in response.text

    @pytest.mark.parametrize("amount", ["0", "3000", "9999", "10000"])
    def test_hash_custom_amount(self, client, templates, amount):
        response = client.get("/hash", params={"amount": amount})

        assert response.status_code == 200
        assert templates.last_fields == {"hash-success-msg": f"Successfully hashed {amount} times"}

    @pytest.mark.parametrize("amount", ["10001", "string", "abc", "-5", ""])
    def test_hash_rejected_amount(self, client, templates, amount):
        response = client.get("/hash", params={"amount": amount})

        assert response.status_code == 200
        assert templates.last_fields == {"hash-error-msg": AMOUNT_ERROR}

    def test_hash_amount_with_thousands_of_digits(self, client, templates):
        response = client.get("/hash", params={"amount": "9" * 5000})

        assert response.status_code == 200
        assert templates.last_fields == {"hash-error-msg": AMOUNT_ERROR}
        assert AMOUNT_ERROR in response.text

    def test_hash_is_stateless(self, client, templates):
        for _ in range(3):
            client.get("/hash", params={"amount": "5"})

        assert [fields for _, fields in templates.renders] == [
            {"hash-success-msg": "Successfully hashed 5 times"}
        ] * 3


class TestSleepEndpoint:
    """Tests for GET /sleep."""

    def test_sleep_waits_for_length(self, client, templates):
        start = time.perf_counter()
        response = client.get("/sleep", params={"length": "150"})
        elapsed = time.perf_counter() - start

        assert response.status_code == 200
        assert elapsed >= 0.15
        assert templates.last_fields == {"sleep-success-msg": "Successfully slept 150 milliseconds"}

    @pytest.mark.parametrize("length", ["0", "1"])
    def test_sleep_small_lengths(self, client, templates, length):
        response = client.get("/sleep", params={"length": length})

        assert response.status_code == 200
        assert templates.last_fields == {"sleep-success-msg": f"Successfully slept {length} milliseconds"}

    @pytest.mark.parametrize("length", ["10001", "later", "1.5", "9" * 5000])
    def test_sleep_rejected_length(self, client, templates, length):
        start = time.perf_counter()
        response = client.get("/sleep", params={"length": length})

        assert response.status_code == 200
        assert time.perf_counter() - start < 1.0
        assert templates.last_fields == {"sleep-error-msg": LENGTH_ERROR}

    @pytest.mark.slow
    def test_sleep_default_is_one_second(self, client, templates):
        start = time.perf_counter()
        client.get("/sleep")

        assert time.perf_counter() - start >= 1.0
        assert templates.last_fields == {"sleep-success-msg": "Successfully slept 1000 milliseconds"}

    @pytest.mark.asyncio
    async def test_concurrent_sleepers_do_not_serialize(self, async_client):
        start = time.perf_counter()
        responses = await asyncio.gather(
            *(async_client.get("/sleep", params={"length": "300"}) for _ in range(4))
        )
        elapsed = time.perf_counter() - start

        assert all(r.status_code == 200 for r in responses)
        assert all("Successfully slept 300 milliseconds" in r.text for r in responses)
        assert elapsed < 1.2
