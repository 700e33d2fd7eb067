"""
Tests for the TheCocktailDB connector using a mocked requests.get.

These tests verify that:
- The connector builds endpoint URLs and query params correctly
- Base URL, API key and timeout come from the environment when not given
- Null, blank and non-list "drinks" payloads are reported as empty lists
- Transport failures, HTTP errors and invalid JSON raise CocktailDBError
"""

import os
from unittest.mock import Mock, patch

import pytest
import requests

from cocktails.connectors.base import CocktailDBError
from cocktails.connectors.cocktaildb_connector import CocktailDBConnector

BASE_URL = "https://www.thecocktaildb.com/api/json/v1/1/"


def _response(payload=None, text=None, status_code=200):
    """Build a mock requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.text = text if text is not None else ("" if payload is None else "{...}")
    response.json.return_value = payload
    if status_code >= 400:
        error = requests.exceptions.HTTPError(f"{status_code} Error")
        error.response = response
        response.raise_for_status.side_effect = error
    else:
        response.raise_for_status.return_value = None
    return response


class TestCocktailDBConnectorConfig:
    """Tests for connector initialization."""

    @patch.dict(os.environ, {}, clear=True)
    def test_defaults_to_public_test_key(self):
        connector = CocktailDBConnector()
        assert connector.base_url == BASE_URL
        assert connector.timeout is None
        assert connector.source == "cocktaildb"

    @patch.dict(os.environ, {"COCKTAILDB_API_KEY": "9973533"}, clear=True)
    def test_base_url_uses_api_key(self):
        connector = CocktailDBConnector()
        assert connector.base_url == "https://www.thecocktaildb.com/api/json/v1/9973533/"

    @patch.dict(os.environ, {"COCKTAILDB_BASE_URL": "http://localhost:9000/api", "COCKTAILDB_TIMEOUT": "2.5"}, clear=True)
    def test_base_url_and_timeout_from_env(self):
        connector = CocktailDBConnector()
        assert connector.base_url == "http://localhost:9000/api/"
        assert connector.timeout == 2.5

    def test_explicit_arguments_win(self):
        connector = CocktailDBConnector(base_url="http://example.test", timeout=1.0)
        assert connector.base_url == "http://example.test/"
        assert connector.timeout == 1.0


@patch.dict(os.environ, {}, clear=True)
class TestCocktailDBConnectorRequests:
    """Tests for the four endpoints."""

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_search_by_name(self, mock_get):
        mock_get.return_value = _response({"drinks": [{"idDrink": "11007", "strDrink": "Margarita"}]})

        drinks = CocktailDBConnector().search_by_name("margarita")

        mock_get.assert_called_once_with(f"{BASE_URL}search.php", params={"s": "margarita"}, timeout=None)
        assert drinks == [{"idDrink": "11007", "strDrink": "Margarita"}]

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_filter_by_ingredient(self, mock_get):
        mock_get.return_value = _response({"drinks": [{"idDrink": "1"}, {"idDrink": "2"}]})

        drinks = CocktailDBConnector().filter_by_ingredient("Vodka")

        mock_get.assert_called_once_with(f"{BASE_URL}filter.php", params={"i": "Vodka"}, timeout=None)
        assert len(drinks) == 2

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_random_pick(self, mock_get):
        mock_get.return_value = _response({"drinks": [{"idDrink": "1", "strDrink": "A1"}]})

        drinks = CocktailDBConnector().random_pick()

        mock_get.assert_called_once_with(f"{BASE_URL}random.php", params=None, timeout=None)
        assert len(drinks) == 1

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_lookup_by_id(self, mock_get):
        mock_get.return_value = _response({"drinks": [{"idDrink": "11007"}]})

        CocktailDBConnector().lookup_by_id("11007")

        mock_get.assert_called_once_with(f"{BASE_URL}lookup.php", params={"i": "11007"}, timeout=None)

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_configured_timeout_is_passed(self, mock_get):
        mock_get.return_value = _response({"drinks": None})

        CocktailDBConnector(timeout=3.0).random_pick()

        assert mock_get.call_args.kwargs["timeout"] == 3.0


@patch.dict(os.environ, {}, clear=True)
class TestCocktailDBConnectorEmptyResults:
    """Empty-looking payloads are results, not errors."""

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_null_drinks(self, mock_get):
        mock_get.return_value = _response({"drinks": None})
        assert CocktailDBConnector().search_by_name("nothing") == []

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_string_drinks(self, mock_get):
        mock_get.return_value = _response({"drinks": "no data found"})
        assert CocktailDBConnector().filter_by_ingredient("nothing") == []

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_blank_body(self, mock_get):
        response = _response(text="  ")
        mock_get.return_value = response

        assert CocktailDBConnector().filter_by_ingredient("nothing") == []
        response.json.assert_not_called()

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_non_dict_entries_are_dropped(self, mock_get):
        mock_get.return_value = _response({"drinks": [{"idDrink": "1"}, None, "junk"]})
        assert CocktailDBConnector().search_by_name("x") == [{"idDrink": "1"}]


@patch.dict(os.environ, {}, clear=True)
class TestCocktailDBConnectorErrors:
    """Failures raise CocktailDBError."""

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_connection_error(self, mock_get):
        mock_get.side_effect = requests.exceptions.ConnectionError("DNS failure")

        with pytest.raises(CocktailDBError, match="Could not connect") as exc_info:
            CocktailDBConnector().search_by_name("margarita")
        assert exc_info.value.endpoint == "search.php"

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_timeout(self, mock_get):
        mock_get.side_effect = requests.exceptions.Timeout()

        with pytest.raises(CocktailDBError, match="timed out"):
            CocktailDBConnector().random_pick()

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_http_error_status(self, mock_get):
        mock_get.return_value = _response(status_code=503)

        with pytest.raises(CocktailDBError) as exc_info:
            CocktailDBConnector().lookup_by_id("11007")
        assert exc_info.value.status_code == 503
        assert exc_info.value.endpoint == "lookup.php"

    @patch("cocktails.connectors.cocktaildb_connector.requests.get")
    def test_invalid_json(self, mock_get):
        response = _response(text="<html>oops</html>")
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response

        with pytest.raises(CocktailDBError, match="not JSON"):
            CocktailDBConnector().search_by_name("margarita")

    def test_error_is_a_runtime_error(self):
        assert issubclass(CocktailDBError, RuntimeError)
