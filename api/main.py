"""
FastAPI application for the Cocktail Finder API.

This module exposes the search resolver over HTTP:
- GET /search: Search cocktails by name, falling back to ingredient
- GET /random: One random cocktail
- GET /cocktails/{cocktail_id}: Full recipe for a cocktail, with ingredient lines
- GET /health: Health check

Successful searches return a SearchOutcome discriminated by "kind"
("empty", "single" or "many"). Failures return an ErrorResponse with a status
code matching the failure reason.

Run the API with:
    uvicorn api.main:app --reload

Access API documentation at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import logging
import time
from typing import Optional

from fastapi import Depends, FastAPI, Query, status
from fastapi.responses import JSONResponse

from api.config import configure_logging
from api.schemas import CocktailDetail, ErrorResponse, IngredientLineOut
from cocktails.messages import failure_message
from cocktails.models import FailedOutcome, FailureReason, SearchOutcome
from cocktails.resolver import SearchResolver, extract_ingredient_lines

configure_logging()
logger = logging.getLogger(__name__)

API_NAME = "Cocktail Finder API"
API_VERSION = "1.0.0"
API_DESCRIPTION = "Search TheCocktailDB by name or ingredient, pick a random cocktail, and read full recipes"

# Track app start time for uptime calculation
_APP_START_TIME = time.time()

app = FastAPI(
    title=API_NAME,
    description=API_DESCRIPTION,
    version=API_VERSION,
    openapi_tags=[
        {
            "name": "search",
            "description": "Search by name with ingredient fallback, and random picks.",
        },
        {
            "name": "cocktails",
            "description": "Full cocktail details by TheCocktailDB id.",
        },
        {
            "name": "health",
            "description": "Health check and monitoring endpoints.",
        },
    ],
)

FAILURE_STATUS_CODES = {
    FailureReason.EMPTY_QUERY: status.HTTP_400_BAD_REQUEST,
    FailureReason.NETWORK_ERROR: status.HTTP_502_BAD_GATEWAY,
    FailureReason.NO_RESULTS_FOUND: status.HTTP_404_NOT_FOUND,
    FailureReason.NO_RANDOM_AVAILABLE: status.HTTP_404_NOT_FOUND,
    FailureReason.DETAILS_NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

_resolver: Optional[SearchResolver] = None


def get_resolver() -> SearchResolver:
    """
    Provide the process-wide SearchResolver.

    Tests replace this dependency via app.dependency_overrides.
    """
    global _resolver
    if _resolver is None:
        _resolver = SearchResolver()
    return _resolver


def failure_response(outcome: FailedOutcome) -> JSONResponse:
    """Render a failed outcome as an ErrorResponse with the matching status code."""
    body = ErrorResponse(outcome=outcome, message=failure_message(outcome.reason))
    return JSONResponse(
        status_code=FAILURE_STATUS_CODES[outcome.reason],
        content=body.model_dump(mode="json"),
    )


@app.get(
    "/search",
    response_model=SearchOutcome,
    response_model_by_alias=False,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    tags=["search"],
    summary="Search cocktails by name or ingredient",
    description="Searches by cocktail name first. If nothing matches, lists cocktails that use the "
                "query as an ingredient. Ingredient matches are partial records (id, name, thumbnail).",
)
def search(
    q: str = Query("", description="Cocktail name or ingredient (e.g., 'margarita', 'vodka')"),
    resolver: SearchResolver = Depends(get_resolver),
):
    """
    Search cocktails by name with an ingredient fallback.

    Example:
        ```bash
        GET /search?q=margarita
        ```
    """
    outcome = resolver.resolve_by_text(q)
    if isinstance(outcome, FailedOutcome):
        return failure_response(outcome)
    return outcome


@app.get(
    "/random",
    response_model=SearchOutcome,
    response_model_by_alias=False,
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    tags=["search"],
    summary="Get a random cocktail",
)
def random_cocktail(resolver: SearchResolver = Depends(get_resolver)):
    outcome = resolver.resolve_random()
    if isinstance(outcome, FailedOutcome):
        return failure_response(outcome)
    return outcome


@app.get(
    "/cocktails/{cocktail_id}",
    response_model=CocktailDetail,
    response_model_by_alias=False,
    responses={404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
    tags=["cocktails"],
    summary="Get full details for a cocktail",
)
def cocktail_details(cocktail_id: str, resolver: SearchResolver = Depends(get_resolver)):
    """
    Get the full recipe for a cocktail id.

    Returns:
        CocktailDetail with the record and its ingredient lines in slot order
    """
    outcome = resolver.resolve_details_by_id(cocktail_id)
    if isinstance(outcome, FailedOutcome):
        return failure_response(outcome)

    lines = [
        IngredientLineOut(index=line.index, ingredient=line.ingredient, measure=line.measure, text=line.text)
        for line in extract_ingredient_lines(outcome.cocktail)
    ]
    return CocktailDetail(cocktail=outcome.cocktail, ingredients=lines)


@app.get("/health", tags=["health"])
def health():
    """
    Health check endpoint for monitoring and status checks.

    Always returns 200 OK if the endpoint is reachable; it does not call
    TheCocktailDB.
    """
    return {
        "status": "ok",
        "name": API_NAME,
        "version": API_VERSION,
        "uptime_seconds": int(time.time() - _APP_START_TIME),
    }


@app.get("/")
def root():
    """
    Root endpoint providing API information.
    """
    return {
        "name": API_NAME,
        "version": API_VERSION,
        "description": API_DESCRIPTION,
        "docs": "/docs",
    }
