"""Unit tests for request and reply schemas."""

from typing import Any, Dict

import pytest
from pydantic import ValidationError

from schemas import AnalysisResult, DailyTotals, FoodItem, FoodLogInput


class TestFoodLogInput:
    def test_accepts_alias_and_field_name(self) -> None:
        assert FoodLogInput.model_validate({"foodLog": "1 apple"}).food_log == "1 apple"
        assert FoodLogInput(food_log="1 apple").food_log == "1 apple"

    def test_empty_string_is_allowed(self) -> None:
        assert FoodLogInput(food_log="").food_log == ""

    def test_non_string_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FoodLogInput.model_validate({"foodLog": 42})


class TestAnalysisResult:
    def test_parses_itemized_reply(self, itemized_reply: Dict[str, Any]) -> None:
        result = AnalysisResult.model_validate(itemized_reply)

        assert [item.name for item in result.food_items] == ["apple", "oatmeal (1 cup)"]
        assert result.total_calories == 253
        assert result.totals == DailyTotals(calories=253, protein=6, carbs=52, fat=3)

    def test_dumps_camel_case(self, itemized_reply: Dict[str, Any]) -> None:
        dumped = AnalysisResult.model_validate(itemized_reply).model_dump(by_alias=True)

        assert dumped == itemized_reply

    def test_float_values_accepted(self) -> None:
        item = FoodItem.model_validate(
            {"name": "butter", "calories": 102.5, "protein": 0.1, "carbs": 0, "fat": 11.5}
        )
        assert item.calories == 102.5

    @pytest.mark.parametrize("bad", ["120", None, True, -5])
    def test_numeric_fields_are_strict(self, itemized_reply: Dict[str, Any], bad: Any) -> None:
        itemized_reply["totalCalories"] = bad

        with pytest.raises(ValidationError):
            AnalysisResult.model_validate(itemized_reply)

    def test_missing_total_rejected(self, itemized_reply: Dict[str, Any]) -> None:
        del itemized_reply["totalFat"]

        with pytest.raises(ValidationError):
            AnalysisResult.model_validate(itemized_reply)

    def test_item_without_name_rejected(self, itemized_reply: Dict[str, Any]) -> None:
        del itemized_reply["foodItems"][0]["name"]

        with pytest.raises(ValidationError):
            AnalysisResult.model_validate(itemized_reply)

    def test_extra_fields_ignored(self, itemized_reply: Dict[str, Any]) -> None:
        itemized_reply["note"] = "estimates only"

        result = AnalysisResult.model_validate(itemized_reply)
        assert not hasattr(result, "note")

    def test_from_totals_has_no_items(self, totals_reply: Dict[str, Any]) -> None:
        result = AnalysisResult.from_totals(DailyTotals.model_validate(totals_reply))

        assert result.food_items == []
        assert result.total_calories == 253
        assert result.total_protein == 6
        assert result.total_carbs == 52
        assert result.total_fat == 3

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_values_rejected(self, itemized_reply: Dict[str, Any], bad: float) -> None:
        itemized_reply["foodItems"][0]["calories"] = bad

        with pytest.raises(ValidationError):
            AnalysisResult.model_validate(itemized_reply)
