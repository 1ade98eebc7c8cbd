"""
Food text parser: free text to per-unit nutrition.

Turns a description such as ``"200g chicken breast with rice"`` into a
list of :class:`ParsedFood`.  Two stages are tried in order and the first
one producing at least one food wins:

1. **LLM stage**: a single Workers AI completion constrained to emit a
   ``{"foods": [...]}`` JSON object with nutrition for the full described
   quantity.  Values are normalised to per-unit.  Any provider failure or
   unusable answer is a miss, never an error.
2. **Fallback stage**: keyword matching against the user's frequent
   foods (the foods they have logged before).  Without history there is
   nothing to match and the result is empty.

The parser owns no I/O handles: the frequent-food query and the AI client
are passed in by the caller.

Matching caveat
---------------
The fallback takes the *first* corpus entry that matches, in ranked
order (``use_count desc, last_used_at desc``).  When one food name
contains another ("rice" / "brown rice") the winner depends on ranking.
"""

from __future__ import annotations

import json
import logging
import math
import re
from typing import Any, Callable, Optional, Protocol, Sequence

from app.models.frequent_food import FrequentFood
from app.schemas.food_parse import FoodParseResult, NutritionTotals, ParsedFood

logger = logging.getLogger(__name__)

# ======================================================================
# Configuration
# ======================================================================

SOURCE_AI = "cloudflare-ai"
SOURCE_FALLBACK = "fallback"

AI_CONFIDENCE = 0.85
FALLBACK_CONFIDENCE = 0.6

CORPUS_LIMIT = 50

NO_FOODS_MESSAGE = (
    "Could not identify any foods. Try being more specific, "
    "e.g., '200g chicken breast with 100g rice'"
)

SYSTEM_PROMPT = """You are a nutrition expert assistant. When given a food description, extract the food items and estimate their nutritional values.

IMPORTANT: You must respond ONLY with valid JSON, no other text. Use this exact format:
{
  "foods": [
    {
      "name": "Food Name",
      "quantity": 1,
      "unit": "g or serving or piece",
      "calories": 0,
      "protein": 0,
      "carbs": 0,
      "fats": 0
    }
  ]
}

Nutritional values must be for the FULL described quantity, not per unit. They should be realistic estimates based on common food databases. All numbers should be integers or decimals (no strings). If no quantity is specified, assume a typical serving size."""

USER_PROMPT_TEMPLATE = 'Parse this food description and return nutritional estimates as JSON: "{text}"'

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")

_SEPARATOR_RE = re.compile(r",|\s+and\s+|\s+with\s+|\+|&|\n", re.IGNORECASE)

_QUANTITY_RE = re.compile(
    r"(\d+(?:\.\d+)?)\s*"
    r"(?:grams?|g|ml|cups?|tbsp|pieces?|slices?|servings?|large|medium|small)?\b\s*",
    re.IGNORECASE,
)

# Checked in order; first hit decides the unit.
_UNIT_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("g", re.compile(r"\d\s*g(?:rams?)?\b", re.IGNORECASE)),
    ("ml", re.compile(r"\d\s*ml\b", re.IGNORECASE)),
    ("cup", re.compile(r"\d\s*cups?\b", re.IGNORECASE)),
    ("tbsp", re.compile(r"\d\s*tbsp\b", re.IGNORECASE)),
    ("slice", re.compile(r"\d\s*slices?\b", re.IGNORECASE)),
]

_GRAM_UNITS = {"g", "gram", "grams"}

# Grams assumed in one serving of a non-gram canonical unit.
_GRAMS_PER_SERVING = 100.0

# Shortest phrase allowed to match inside a longer food name.
_MIN_REVERSE_MATCH = 3


class CompletionClient(Protocol):
    """Anything that can run a text completion."""

    is_configured: bool

    def complete(self, system_prompt: str, user_prompt: str) -> Optional[str]:
        ...


# ``(user_id, limit) -> frequent foods ranked by use``.
FrequentFoodLoader = Callable[[int, int], Sequence[FrequentFood]]


# ======================================================================
# Helpers
# ======================================================================


def _to_float(value: Any, default: float = 0.0) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return number


def _per_unit(value: Any, quantity: float) -> float:
    number = _to_float(value) / quantity
    return round(number, 2) if math.isfinite(number) else 0.0


def _title_case(name: str) -> str:
    return " ".join(w[:1].upper() + w[1:] for w in name.split(" "))


def compute_totals(foods: Sequence[ParsedFood]) -> NutritionTotals:
    """Sum ``value * quantity`` over foods, rounded to 1 decimal."""
    return NutritionTotals(
        calories=round(sum(f.calories * f.quantity for f in foods), 1),
        protein=round(sum(f.protein * f.quantity for f in foods), 1),
        carbs=round(sum(f.carbs * f.quantity for f in foods), 1),
        fats=round(sum(f.fats * f.quantity for f in foods), 1),
    )


# ======================================================================
# Stage A: LLM
# ======================================================================


def parse_ai_response(response: str) -> Optional[list[ParsedFood]]:
    """Extract foods from a raw completion.

    Returns ``None`` when no JSON object can be decoded or it carries no
    ``foods`` list.  Nutrition is converted from totals to per-unit.
    """
    match = _JSON_OBJECT_RE.search(response)
    if not match:
        return None

    try:
        parsed = json.loads(match.group(0))
    except ValueError:
        logger.warning("Failed to decode AI response as JSON")
        return None

    if not isinstance(parsed, dict):
        return None
    raw_foods = parsed.get("foods")
    if not isinstance(raw_foods, list) or not raw_foods:
        return None

    foods: list[ParsedFood] = []
    for raw in raw_foods:
        if not isinstance(raw, dict):
            continue
        quantity = _to_float(raw.get("quantity"), 1.0)
        if quantity <= 0:
            quantity = 1.0
        foods.append(ParsedFood(
            name=str(raw.get("name") or "Unknown"),
            quantity=quantity,
            unit=str(raw.get("unit") or "serving"),
            calories=_per_unit(raw.get("calories"), quantity),
            protein=_per_unit(raw.get("protein"), quantity),
            carbs=_per_unit(raw.get("carbs"), quantity),
            fats=_per_unit(raw.get("fats"), quantity),
            confidence=AI_CONFIDENCE,
        ))
    return foods or None


def ai_parse(text: str, client: CompletionClient) -> list[ParsedFood]:
    """Run the LLM stage. Returns an empty list on any miss."""
    if not client.is_configured:
        return []

    try:
        response = client.complete(SYSTEM_PROMPT, USER_PROMPT_TEMPLATE.format(text=text))
    except Exception:
        logger.exception("AI completion raised, falling back")
        return []
    if not response:
        return []

    return parse_ai_response(response) or []


# ======================================================================
# Stage B: frequent-food fallback
# ======================================================================


def _build_corpus(rows: Sequence[FrequentFood]) -> dict[str, FrequentFood]:
    """Key foods by lowercased name, keeping the highest-ranked row."""
    corpus: dict[str, FrequentFood] = {}
    for row in rows:
        key = row.food_name.strip().lower()
        if key and key not in corpus:
            corpus[key] = row
    return corpus


def split_phrases(text: str) -> list[str]:
    """Split an input on comma, and, with, ``+``, ``&`` and newlines."""
    return [p.strip() for p in _SEPARATOR_RE.split(text) if p and p.strip()]


def extract_quantity(phrase: str) -> float:
    """First number in the phrase, 1 when there is none."""
    match = _QUANTITY_RE.search(phrase)
    if not match:
        return 1.0
    quantity = float(match.group(1))
    return quantity if quantity > 0 else 1.0


def infer_unit(phrase: str) -> str:
    for unit, pattern in _UNIT_PATTERNS:
        if pattern.search(phrase):
            return unit
    return "serving"


def _food_words(phrase: str) -> str:
    """The phrase without its quantity/unit token and a leading "of"."""
    words = _QUANTITY_RE.sub(" ", phrase, count=1).strip().lower()
    if words.startswith("of "):
        words = words[3:]
    return words.strip()


def _match(
    phrase: str, text: str, corpus: dict[str, FrequentFood], used: set[str],
) -> Optional[str]:
    """Find the corpus key for a phrase.

    The phrase is tried first, then the whole input; within each the
    first corpus entry in ranked order wins.  A corpus name inside the
    phrase matches any entry.  A phrase inside a longer corpus name, or a
    corpus name found only in the whole input, matches entries not yet
    emitted.
    """
    lowered = phrase.lower()
    words = _food_words(phrase)
    reverse = len(words) >= _MIN_REVERSE_MATCH
    for key in corpus:
        if key in lowered:
            return key
        if reverse and key not in used and words in key:
            return key

    lowered_text = text.lower()
    for key in corpus:
        if key not in used and key in lowered_text:
            return key
    return None


def _reconcile_unit(quantity: float, unit: str, food: FrequentFood) -> tuple[float, str]:
    canonical = (food.unit or "serving").strip()
    if unit == "g" and canonical.lower() not in _GRAM_UNITS:
        return quantity / _GRAMS_PER_SERVING, canonical
    if unit == "serving":
        return quantity, canonical
    return quantity, unit


def fallback_parse(text: str, frequent_foods: Sequence[FrequentFood]) -> list[ParsedFood]:
    """Match phrases of ``text`` against previously logged foods."""
    corpus = _build_corpus(frequent_foods)
    if not corpus:
        return []

    foods: list[ParsedFood] = []
    used: set[str] = set()
    for phrase in split_phrases(text):
        key = _match(phrase, text, corpus, used)
        if key is None:
            continue
        used.add(key)
        food = corpus[key]

        quantity, unit = _reconcile_unit(extract_quantity(phrase), infer_unit(phrase), food)
        foods.append(ParsedFood(
            name=_title_case(key),
            quantity=quantity,
            unit=unit,
            calories=round(food.calories, 2),
            protein=round(food.protein_g, 2),
            carbs=round(food.carbs_g, 2),
            fats=round(food.fats_g, 2),
            confidence=FALLBACK_CONFIDENCE,
        ))
    return foods


# ======================================================================
# Main entry point
# ======================================================================


def parse_food_text(
    text: str,
    user_id: int,
    load_frequent_foods: FrequentFoodLoader,
    ai_client: Optional[CompletionClient] = None,
) -> FoodParseResult:
    """Run the two-stage pipeline.

    Args:
        text: Free-text food description (already validated non-empty).
        user_id: Owner of the frequent-food history.
        load_frequent_foods: ``(user_id, limit)`` query returning ranked
            frequent foods.  Its errors propagate.
        ai_client: Optional completion client; skipped when absent or
            not configured.

    Returns:
        :class:`FoodParseResult`; ``success`` is False when neither stage
        recognised a food.
    """
    ai_available = bool(ai_client is not None and ai_client.is_configured)

    foods: list[ParsedFood] = []
    source = SOURCE_FALLBACK

    if ai_available:
        foods = ai_parse(text, ai_client)
        if foods:
            source = SOURCE_AI

    if not foods:
        foods = fallback_parse(text, load_frequent_foods(user_id, CORPUS_LIMIT))
        source = SOURCE_FALLBACK

    if not foods:
        return FoodParseResult(
            success=False,
            foods=[],
            message=NO_FOODS_MESSAGE,
            source=source,
            ai_available=ai_available,
        )

    logger.debug("Parsed %d food(s) via %s", len(foods), source)
    return FoodParseResult(
        success=True,
        foods=foods,
        totals=compute_totals(foods),
        source=source,
        ai_available=ai_available,
    )
