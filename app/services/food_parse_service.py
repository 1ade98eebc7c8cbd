"""
Food parse service.

Wires the frequent-food repository and the Workers AI client into the
framework-free parser.
"""

from typing import Optional

from sqlmodel import Session

from app.db.repositories.frequent_food import FrequentFoodRepository
from app.fittrack.ai_client import CloudflareAIClient
from app.fittrack.food_parser import CompletionClient, parse_food_text
from app.schemas.food_parse import FoodParseResponse


class FoodParseService:
    """Service for natural-language food parsing."""

    def __init__(self, session: Session, ai_client: Optional[CompletionClient] = None):
        self.frequent_foods = FrequentFoodRepository(session)
        self.ai_client = ai_client if ai_client is not None else CloudflareAIClient.from_settings()

    def parse(self, user_id: int, text: str) -> FoodParseResponse:
        result = parse_food_text(
            text,
            user_id,
            load_frequent_foods=lambda uid, limit: self.frequent_foods.get_top(uid, limit),
            ai_client=self.ai_client,
        )
        return FoodParseResponse(**result.model_dump(), parsed_text=text)
