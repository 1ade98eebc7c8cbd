"""
Food text parsing schemas.

All nutrition values on ``ParsedFood`` are per unit: the food's total
contribution is ``value * quantity``.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictStr, field_validator


class ParsedFood(BaseModel):
    """A food recognised in free text."""

    name: str
    quantity: float = Field(..., gt=0)
    unit: str
    calories: float = Field(..., description="Calories per unit")
    protein: float = Field(..., description="Protein (g) per unit")
    carbs: float = Field(..., description="Carbohydrates (g) per unit")
    fats: float = Field(..., description="Fats (g) per unit")
    confidence: float = Field(..., ge=0.0, le=1.0)


class NutritionTotals(BaseModel):
    """Absolute nutrition summed over a list of foods."""

    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fats: float = 0.0


class FoodParseResult(BaseModel):
    """Outcome of the parse pipeline."""

    success: bool
    foods: list[ParsedFood] = Field(default_factory=list)
    totals: Optional[NutritionTotals] = None
    message: Optional[str] = None
    source: str = Field(..., description="One of: cloudflare-ai, fallback")
    ai_available: bool = False


# Request schemas
class FoodParseRequest(BaseModel):
    """Body of ``POST /api/nutrition/parse``."""

    text: StrictStr = Field(..., description="Free-text food description")

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Text is required")
        return value


# Response schemas
class FoodParseResponse(FoodParseResult):
    parsed_text: str
