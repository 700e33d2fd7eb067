"""
Pydantic schemas for FastAPI responses.

Search-style endpoints return the SearchOutcome union from cocktails.models
directly (discriminated by "kind"). The detail endpoint wraps the record with
its rendered ingredient lines so clients do not need to repeat that logic.
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from cocktails.models import Cocktail, FailedOutcome


class IngredientLineOut(BaseModel):
    """An ingredient line as shown to users (e.g., '1 1/2 oz Tequila')."""
    index: int = Field(..., description="Originating slot index (1..15)")
    ingredient: str
    measure: Optional[str] = None
    text: str = Field(..., description="Measure and ingredient joined for display")


class CocktailDetail(BaseModel):
    """Full cocktail record plus its ingredient lines."""
    cocktail: Cocktail
    ingredients: List[IngredientLineOut] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Body returned with non-2xx statuses: the failed outcome and a readable message."""
    outcome: FailedOutcome
    message: str
