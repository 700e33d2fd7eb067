"""
Cocktail and search outcome models.

This module defines the canonical schemas used throughout the cocktail finder.
The connector hands back raw drink dictionaries exactly as TheCocktailDB returns
them; the resolver validates those into Cocktail records and wraps the result
in one of the SearchOutcome variants.

TheCocktailDB spreads ingredients over fifteen indexed fields
(strIngredient1..strIngredient15 / strMeasure1..strMeasure15). These are
collected into an ordered list of IngredientSlot objects when a record is
parsed, so nothing downstream needs to build field names on the fly.

# NOTE: Records from the ingredient-filter endpoint only carry idDrink,
    strDrink and strDrinkThumb. They validate fine as Cocktail records but
    report is_partial=True.
"""

from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

# TheCocktailDB exposes at most 15 ingredient/measure pairs per drink
MAX_INGREDIENT_SLOTS = 15


def clean_text(value: Any) -> Optional[str]:
    """Trim a raw API string, mapping blank or missing values to None."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


class IngredientSlot(BaseModel):
    """One indexed ingredient/measure pair as stored on the API record."""
    index: int = Field(..., ge=1, le=MAX_INGREDIENT_SLOTS, description="Slot index (1..15)")
    ingredient: Optional[str] = Field(None, description="Raw ingredient value")
    measure: Optional[str] = Field(None, description="Raw measure value")

    model_config = ConfigDict(frozen=True)


class IngredientLine(BaseModel):
    """
    A displayable ingredient line.

    Built from an IngredientSlot whose ingredient is non-empty. Both values are
    already trimmed; measure is None when the slot had no usable measure.
    """
    index: int = Field(..., ge=1, le=MAX_INGREDIENT_SLOTS, description="Originating slot index")
    ingredient: str = Field(..., min_length=1, description="Trimmed ingredient name")
    measure: Optional[str] = Field(None, description="Trimmed measure, if any")

    model_config = ConfigDict(frozen=True)

    @property
    def text(self) -> str:
        if self.measure:
            return f"{self.measure} {self.ingredient}"
        return self.ingredient

    def __str__(self) -> str:
        return self.text


class Cocktail(BaseModel):
    """
    A cocktail record from TheCocktailDB.

    Fields use the API's names as aliases (idDrink, strDrink, ...), so a raw
    drink dict validates directly with Cocktail.model_validate(raw). Python
    field names are accepted too.
    """
    id: str = Field(..., alias="idDrink", description="TheCocktailDB drink id")
    name: str = Field(..., alias="strDrink", description="Drink name")
    thumbnail_url: Optional[str] = Field(None, alias="strDrinkThumb", description="URL to drink image")
    category: Optional[str] = Field(None, alias="strCategory", description="Drink category (e.g., 'Ordinary Drink')")
    glass: Optional[str] = Field(None, alias="strGlass", description="Serving glass")
    alcoholic_type: Optional[str] = Field(None, alias="strAlcoholic", description="'Alcoholic', 'Non alcoholic', ...")
    instructions: Optional[str] = Field(None, alias="strInstructions", description="Preparation instructions (English)")
    slots: List[IngredientSlot] = Field(default_factory=list, description="Indexed ingredient/measure pairs")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _collect_ingredient_slots(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "slots" in data:
            return data

        data = dict(data)
        slots: List[Dict[str, Any]] = []
        for index in range(1, MAX_INGREDIENT_SLOTS + 1):
            ingredient = data.pop(f"strIngredient{index}", None)
            measure = data.pop(f"strMeasure{index}", None)
            if ingredient is None and measure is None:
                continue
            slots.append({"index": index, "ingredient": ingredient, "measure": measure})
        data["slots"] = slots

        # The API sends ids as strings, but be lenient with numeric ids
        if "idDrink" in data and data["idDrink"] is not None:
            data["idDrink"] = str(data["idDrink"])
        return data

    @property
    def is_partial(self) -> bool:
        """True for filter-endpoint records that lack instructions and ingredients."""
        has_ingredient = any(clean_text(slot.ingredient) for slot in self.slots)
        return clean_text(self.instructions) is None and not has_ingredient


class FailureReason(str, Enum):
    """Every user-visible failure a resolver operation can report."""
    EMPTY_QUERY = "empty_query"
    NETWORK_ERROR = "network_error"
    NO_RESULTS_FOUND = "no_results_found"
    NO_RANDOM_AVAILABLE = "no_random_available"
    DETAILS_NOT_FOUND = "details_not_found"


class EmptyOutcome(BaseModel):
    kind: Literal["empty"] = "empty"


class SingleOutcome(BaseModel):
    kind: Literal["single"] = "single"
    cocktail: Cocktail


class ManyOutcome(BaseModel):
    kind: Literal["many"] = "many"
    cocktails: List[Cocktail] = Field(..., min_length=2)


class FailedOutcome(BaseModel):
    kind: Literal["failed"] = "failed"
    reason: FailureReason
    detail: Optional[str] = Field(None, description="Diagnostic text (not meant for end users)")


SearchOutcome = Annotated[
    Union[EmptyOutcome, SingleOutcome, ManyOutcome, FailedOutcome],
    Field(discriminator="kind"),
]
