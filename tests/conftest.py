"""
Shared fixtures.

Model replies are canned JSON strings fed through an AsyncMock completion
client, so nothing here touches the network.
"""

import json
from typing import Any, Dict
from unittest.mock import AsyncMock

import pytest

from flow import AnalyzeFoodLogFlow
from prompts import PromptVariant
from schemas import AnalysisResult


def make_result(calories: int, protein: int = 10, carbs: int = 20, fat: int = 5) -> AnalysisResult:
    return AnalysisResult(
        food_items=[],
        total_calories=calories,
        total_protein=protein,
        total_carbs=carbs,
        total_fat=fat,
    )


@pytest.fixture
def itemized_reply() -> Dict[str, Any]:
    """Reply for "1 apple, 1 cup oatmeal"."""
    return {
        "foodItems": [
            {"name": "apple", "calories": 95, "protein": 0, "carbs": 25, "fat": 0},
            {"name": "oatmeal (1 cup)", "calories": 158, "protein": 6, "carbs": 27, "fat": 3},
        ],
        "totalCalories": 253,
        "totalProtein": 6,
        "totalCarbs": 52,
        "totalFat": 3,
    }


@pytest.fixture
def totals_reply() -> Dict[str, Any]:
    return {"calories": 253, "protein": 6, "carbs": 52, "fat": 3}


@pytest.fixture
def completion_client(itemized_reply: Dict[str, Any]) -> AsyncMock:
    client = AsyncMock()
    client.complete = AsyncMock(return_value=json.dumps(itemized_reply))
    return client


@pytest.fixture
def flow(completion_client: AsyncMock) -> AnalyzeFoodLogFlow:
    return AnalyzeFoodLogFlow(client=completion_client, variant=PromptVariant.ITEMIZED)
