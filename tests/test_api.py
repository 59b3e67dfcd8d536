import httpx
import pytest
from fastapi.testclient import TestClient

from gateway.adapters.factory import ProviderFactory
from gateway.main import create_application
from tests.payloads import ERVIN, GOKU, LEANNE, LONDON_WEATHER, exchange_rates

RATES_PATH = "/v2/exchange-rates"


def assert_failure(response, status_code):
    body = response.json()
    assert response.status_code == status_code
    assert body["success"] is False
    assert "data" not in body
    assert isinstance(body["error"], str) and body["error"]
    assert body["timestamp"]
    return body


def stub_rates(provider_stub, rates):
    def handler(request):
        currency = request.url.params["currency"]
        if currency not in rates:
            return httpx.Response(500, json={"message": "upstream exploded"})
        return httpx.Response(200, json=exchange_rates(currency, rates[currency]))

    provider_stub.add_handler(RATES_PATH, handler)


# =============================================================================
# Documentation, health and routing
# =============================================================================

def test_root_lists_endpoints(client):
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Learning Endpoints API"
    assert body["endpoints"]["weather"] == "/api/weather/:city"
    assert body["endpoints"]["dragonball"] == "/api/dragonball/:id"


def test_unknown_path_returns_404_envelope(client):
    response = client.get("/api/nothing-here")

    body = assert_failure(response, 404)
    assert body["error"] == "The endpoint /api/nothing-here does not exist"


def test_wrong_method_returns_envelope(client):
    response = client.post("/api/quotes")

    assert_failure(response, 405)


def test_health_reports_provider_configuration(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    providers = {p["name"]: p for p in body["providers"]}
    assert set(providers) == {"weather", "quotes", "users", "crypto", "dragonball"}
    assert providers["weather"]["configured"] is True
    assert body["status"] == "ok"


def test_correlation_id_is_echoed(client, provider_stub):
    provider_stub.add("/users/1", json=LEANNE)

    response = client.get("/api/users/1", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"


# =============================================================================
# Users
# =============================================================================

def test_get_user_success(client, provider_stub):
    provider_stub.add("/users/1", json=LEANNE)

    response = client.get("/api/users/1")

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert "error" not in body
    assert body["data"]["id"] == 1
    assert body["data"]["name"] == "Leanne Graham"
    assert body["data"]["company"]["catchPhrase"] == "Multi-layered client-server neural-net"


def test_get_user_not_found_maps_to_404(client, provider_stub):
    provider_stub.add("/users/999999", status_code=404, json={})

    response = client.get("/api/users/999999")

    body = assert_failure(response, 404)
    assert "999999" in body["error"]
    assert "not found" in body["error"]


@pytest.mark.parametrize("user_id", ["0", "-3", "abc", "1.5", "1_0", "+5"])
def test_invalid_user_id_is_rejected_without_calling_provider(client, provider_stub, user_id):
    response = client.get(f"/api/users/{user_id}")

    body = assert_failure(response, 400)
    assert body["error"] == "User ID must be a positive number"
    assert provider_stub.calls == []


def test_list_users_with_limit(client, provider_stub):
    provider_stub.add("/users", json=[LEANNE, ERVIN])

    response = client.get("/api/users", params={"limit": "1"})

    assert response.status_code == 200
    assert [user["id"] for user in response.json()["data"]] == [1]


@pytest.mark.parametrize("limit", ["0", "-1", "ten"])
def test_invalid_limit_is_rejected(client, provider_stub, limit):
    response = client.get("/api/users", params={"limit": limit})

    body = assert_failure(response, 400)
    assert body["error"] == "Limit must be a positive number"
    assert provider_stub.calls == []


def test_user_posts(client, provider_stub):
    provider_stub.add("/users/1/posts", json=[{"userId": 1, "id": 1, "title": "sunt aut", "body": "quia et"}])

    response = client.get("/api/users/1/posts")

    assert response.status_code == 200
    assert response.json()["data"] == [{"userId": 1, "id": 1, "title": "sunt aut", "body": "quia et"}]


def test_upstream_failure_maps_to_500(client, provider_stub):
    provider_stub.add("/users", status_code=502, json={"message": "Bad gateway"})

    response = client.get("/api/users")

    body = assert_failure(response, 500)
    assert body["error"] == "Users API failed (502): Bad gateway"


def test_same_request_twice_yields_identical_data(client, provider_stub):
    provider_stub.add("/users/1", json=LEANNE)

    first = client.get("/api/users/1").json()
    second = client.get("/api/users/1").json()

    assert first["data"] == second["data"]


# =============================================================================
# Weather
# =============================================================================

def test_weather_success(client, provider_stub):
    provider_stub.add("/v1/current.json", json=LONDON_WEATHER)

    response = client.get("/api/weather/London")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["location"] == {"name": "London", "country": "United Kingdom", "region": "City of London, Greater London"}
    assert data["current"]["temp_c"] == 14.0
    assert data["current"]["condition"]["text"] == "Partly cloudy"


def test_weather_without_api_key_is_500_and_never_calls_provider(settings, provider_stub, http_client):
    settings = settings.model_copy(update={"WEATHER_API_KEY": None})
    registry = ProviderFactory(settings, http_client).build_registry()
    provider_stub.add("/v1/current.json", json=LONDON_WEATHER)

    with TestClient(create_application(settings=settings, registry=registry)) as client:
        response = client.get("/api/weather/London")

    body = assert_failure(response, 500)
    assert "not configured" in body["error"]
    assert provider_stub.calls == []


def test_blank_city_is_rejected(client, provider_stub):
    response = client.get("/api/weather/%20%20")

    body = assert_failure(response, 400)
    assert body["error"] == "City parameter is required"
    assert provider_stub.calls == []


def test_city_is_trimmed_before_forwarding(client, provider_stub):
    provider_stub.add("/v1/current.json", json=LONDON_WEATHER)

    client.get("/api/weather/%20London%20")

    assert provider_stub.calls[0].url.params["q"] == "London"


# =============================================================================
# Quotes
# =============================================================================

def test_random_quote(client, provider_stub):
    provider_stub.add("/random", json={"content": "Stay hungry.", "author": "Steve Jobs", "tags": []})

    response = client.get("/api/quotes")

    assert response.status_code == 200
    assert response.json()["data"] == {"text": "Stay hungry.", "author": "Steve Jobs", "category": "general"}


def test_quotes_by_author(client, provider_stub):
    provider_stub.add(
        "/quotes",
        json={"results": [{"content": "Imagination is everything.", "author": "Albert Einstein", "tags": ["Famous Quotes"]}]},
    )

    response = client.get("/api/quotes/author/Albert Einstein")

    assert response.status_code == 200
    assert response.json()["data"][0]["category"] == "Famous Quotes"
    assert provider_stub.calls[0].url.params["author"] == "Albert Einstein"


def test_blank_author_is_rejected(client, provider_stub):
    response = client.get("/api/quotes/author/%20")

    assert_failure(response, 400)
    assert provider_stub.calls == []


# =============================================================================
# Crypto
# =============================================================================

@pytest.mark.parametrize("symbol", ["B", "ABCDEFGHIJK"])
def test_symbol_length_out_of_bounds_is_rejected(client, provider_stub, symbol):
    response = client.get(f"/api/crypto/{symbol}")

    body = assert_failure(response, 400)
    assert body["error"] == "Invalid cryptocurrency symbol format"
    assert provider_stub.calls == []


@pytest.mark.parametrize("symbol", ["BT", "ABCDEFGHIJ"])
def test_symbol_length_at_bounds_reaches_provider(client, provider_stub, symbol):
    stub_rates(provider_stub, {symbol: "2.5"})

    response = client.get(f"/api/crypto/{symbol}")

    assert response.status_code == 200
    assert response.json()["data"]["symbol"] == symbol
    assert provider_stub.calls_to(RATES_PATH) == 1


def test_crypto_price_success_shape(client, provider_stub):
    stub_rates(provider_stub, {"ETH": "3500.25"})

    response = client.get("/api/crypto/eth")

    data = response.json()["data"]
    assert data["symbol"] == "ETH"
    assert data["name"] == "Ethereum"
    assert data["price"] == 3500.25
    assert data["change_percentage_24h"] == 0
    assert data["last_updated"]


def test_crypto_batch_omits_failures(client, provider_stub):
    stub_rates(provider_stub, {"BTC": "67000", "ETH": "3500"})

    response = client.get("/api/crypto", params={"symbols": "BTC,???,ETH"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert len(body["data"]) == 2
    assert [price["symbol"] for price in body["data"]] == ["BTC", "ETH"]
    assert response.headers["X-Omitted-Symbols"] == "%3F%3F%3F"


@pytest.mark.parametrize(
    "failing, header",
    [("€€", "%E2%82%AC%E2%82%AC"), ("A\r\nB", "A%0D%0AB")],
)
def test_crypto_batch_header_encodes_unsafe_symbols(client, provider_stub, failing, header):
    stub_rates(provider_stub, {"BTC": "67000"})

    response = client.get("/api/crypto", params={"symbols": f"BTC,{failing}"})

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert [price["symbol"] for price in body["data"]] == ["BTC"]
    assert response.headers["X-Omitted-Symbols"] == header


def test_crypto_batch_ignores_empty_tokens(client, provider_stub):
    stub_rates(provider_stub, {"BTC": "67000", "ETH": "3500"})

    response = client.get("/api/crypto", params={"symbols": " BTC, ,ETH,"})

    assert response.status_code == 200
    assert provider_stub.calls_to(RATES_PATH) == 2
    assert "X-Omitted-Symbols" not in response.headers


@pytest.mark.parametrize(
    "params, message",
    [
        ({}, "Symbols query parameter is required (e.g., ?symbols=BTC,ETH,ADA)"),
        ({"symbols": " , ,"}, "At least one cryptocurrency symbol is required"),
        ({"symbols": ",".join(f"S{i}" for i in range(11))}, "Maximum 10 symbols allowed per request"),
    ],
)
def test_crypto_batch_validation(client, provider_stub, params, message):
    response = client.get("/api/crypto", params=params)

    body = assert_failure(response, 400)
    assert body["error"] == message
    assert provider_stub.calls == []


# =============================================================================
# Dragonball
# =============================================================================

def test_character_success(client, provider_stub):
    provider_stub.add("/api/characters/1", json=GOKU)

    response = client.get("/api/dragonball/1")

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["name"] == "Goku"
    assert data["origin_planet"] == "Vegeta"


def test_character_not_found(client, provider_stub):
    provider_stub.add("/api/characters/999", status_code=404, json={"message": "Character not found"})

    response = client.get("/api/dragonball/999")

    body = assert_failure(response, 404)
    assert body["error"] == "Character with ID 999 not found"


def test_non_numeric_character_id_is_rejected(client, provider_stub):
    response = client.get("/api/dragonball/goku")

    assert_failure(response, 400)
    assert provider_stub.calls == []


# =============================================================================
# Unexpected failures
# =============================================================================

def test_exception_escaping_adapter_becomes_generic_500(client, registry, monkeypatch):
    async def explode(user_id):
        raise RuntimeError("boom")

    monkeypatch.setattr(registry.require("users"), "get_user", explode)

    response = client.get("/api/users/1")

    body = assert_failure(response, 500)
    assert body["error"] == "Failed to fetch user"


def test_missing_registry_is_handled_by_global_handler(settings):
    app = create_application(settings=settings)

    # No lifespan: the registry is never built, so the dependency lookup fails
    client = TestClient(app, raise_server_exceptions=False)
    response = client.get("/api/users/1", headers={"X-Correlation-ID": "trace-500"})

    body = assert_failure(response, 500)
    assert body["error"] == "Internal server error"
    assert response.headers["X-Correlation-ID"] == "trace-500"
