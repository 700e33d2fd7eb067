"""
Tests for the FastAPI endpoints.

The resolver dependency is replaced with a mock, so no real API calls are made.
"""

from unittest.mock import Mock, patch

import pytest
import requests
from fastapi.testclient import TestClient

from api.main import app, get_resolver
from cocktails.connectors.cocktaildb_connector import CocktailDBConnector
from cocktails.models import (
    Cocktail,
    EmptyOutcome,
    FailedOutcome,
    FailureReason,
    ManyOutcome,
    SingleOutcome,
)
from cocktails.resolver import SearchResolver

MARGARITA = Cocktail.model_validate(
    {
        "idDrink": "11007",
        "strDrink": "Margarita",
        "strDrinkThumb": "https://example.com/margarita.jpg",
        "strInstructions": "Shake with ice.",
        "strIngredient1": "Tequila",
        "strMeasure1": "1 1/2 oz ",
        "strIngredient2": "Salt",
    }
)


@pytest.fixture
def resolver():
    mock_resolver = Mock(spec=SearchResolver)
    app.dependency_overrides[get_resolver] = lambda: mock_resolver
    yield mock_resolver
    app.dependency_overrides.clear()


@pytest.fixture
def client(resolver):
    return TestClient(app)


class TestSearchEndpoint:
    """Tests for GET /search."""

    def test_many_results(self, client, resolver):
        other = MARGARITA.model_copy(update={"id": "11118", "name": "Blue Margarita"})
        resolver.resolve_by_text.return_value = ManyOutcome(cocktails=[MARGARITA, other])

        response = client.get("/search", params={"q": "margarita"})

        assert response.status_code == 200
        data = response.json()
        assert data["kind"] == "many"
        assert [c["name"] for c in data["cocktails"]] == ["Margarita", "Blue Margarita"]
        assert data["cocktails"][0]["id"] == "11007"
        resolver.resolve_by_text.assert_called_once_with("margarita")

    def test_single_result(self, client, resolver):
        resolver.resolve_by_text.return_value = SingleOutcome(cocktail=MARGARITA)

        data = client.get("/search", params={"q": "margarita"}).json()

        assert data["kind"] == "single"
        assert data["cocktail"]["thumbnail_url"] == "https://example.com/margarita.jpg"

    def test_empty_result_is_200(self, client, resolver):
        resolver.resolve_by_text.return_value = EmptyOutcome()

        response = client.get("/search", params={"q": "xyzzy"})

        assert response.status_code == 200
        assert response.json() == {"kind": "empty"}

    def test_empty_query_is_400(self, client, resolver):
        resolver.resolve_by_text.return_value = FailedOutcome(reason=FailureReason.EMPTY_QUERY)

        response = client.get("/search")

        assert response.status_code == 400
        body = response.json()
        assert body["outcome"]["reason"] == "empty_query"
        assert "enter a cocktail name" in body["message"]
        resolver.resolve_by_text.assert_called_once_with("")

    def test_network_error_is_502(self, client, resolver):
        resolver.resolve_by_text.return_value = FailedOutcome(
            reason=FailureReason.NETWORK_ERROR, detail="HTTP 500"
        )

        response = client.get("/search", params={"q": "margarita"})

        assert response.status_code == 502
        assert response.json()["outcome"]["detail"] == "HTTP 500"


class TestRandomEndpoint:
    """Tests for GET /random."""

    def test_random(self, client, resolver):
        resolver.resolve_random.return_value = SingleOutcome(cocktail=MARGARITA)

        response = client.get("/random")

        assert response.status_code == 200
        assert response.json()["cocktail"]["name"] == "Margarita"

    def test_random_unavailable_is_404(self, client, resolver):
        resolver.resolve_random.return_value = FailedOutcome(reason=FailureReason.NO_RANDOM_AVAILABLE)

        response = client.get("/random")

        assert response.status_code == 404
        assert response.json()["message"] == "Failed to fetch a random cocktail."


class TestCocktailDetailsEndpoint:
    """Tests for GET /cocktails/{cocktail_id}."""

    def test_details_include_ingredient_lines(self, client, resolver):
        resolver.resolve_details_by_id.return_value = SingleOutcome(cocktail=MARGARITA)

        response = client.get("/cocktails/11007")

        assert response.status_code == 200
        data = response.json()
        assert data["cocktail"]["name"] == "Margarita"
        assert [line["text"] for line in data["ingredients"]] == ["1 1/2 oz Tequila", "Salt"]
        assert data["ingredients"][1]["measure"] is None
        resolver.resolve_details_by_id.assert_called_once_with("11007")

    def test_not_found_is_404(self, client, resolver):
        resolver.resolve_details_by_id.return_value = FailedOutcome(reason=FailureReason.DETAILS_NOT_FOUND)

        response = client.get("/cocktails/0")

        assert response.status_code == 404
        assert response.json()["outcome"]["reason"] == "details_not_found"

    def test_network_error_is_502(self, client, resolver):
        resolver.resolve_details_by_id.return_value = FailedOutcome(reason=FailureReason.NETWORK_ERROR)

        assert client.get("/cocktails/11007").status_code == 502


class TestMetaEndpoints:
    """Tests for /health and /."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "ok"
        assert data["uptime_seconds"] >= 0

    def test_root(self, client):
        assert client.get("/").json()["docs"] == "/docs"


class TestUpstreamFailureBodies:
    """502 bodies must not leak the request URL, which carries the API key."""

    BASE_URL = "https://www.thecocktaildb.com/api/json/v1/SECRET9973533/"

    @pytest.fixture
    def real_client(self):
        resolver = SearchResolver(connector=CocktailDBConnector(base_url=self.BASE_URL))
        app.dependency_overrides[get_resolver] = lambda: resolver
        yield TestClient(app)
        app.dependency_overrides.clear()

    @pytest.mark.parametrize("path", ["/search?q=gin", "/random", "/cocktails/11007"])
    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_connection_error_hides_api_key(self, mock_get, real_client, path):
        mock_get.side_effect = requests.exceptions.ConnectionError(
            f"Max retries exceeded with url: {self.BASE_URL}search.php?s=gin"
        )

        response = real_client.get(path)

        assert response.status_code == 502
        assert "SECRET9973533" not in response.text
        assert response.json()["outcome"]["detail"].endswith("request failed")


class TestOpenAPI:
    """Tests for the generated OpenAPI document."""

    def test_tag_descriptions_are_published(self):
        schema = TestClient(app).get("/openapi.json").json()

        tags = {tag["name"]: tag["description"] for tag in schema["tags"]}
        assert set(tags) == {"search", "cocktails", "health"}
        assert "ingredient fallback" in tags["search"]
