from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Numbers from the model must be real, finite JSON numbers: "120", true, null and Infinity are rejected.
Nutrient = Union[
    Annotated[int, Field(strict=True, ge=0)],
    Annotated[float, Field(strict=True, ge=0, allow_inf_nan=False)],
]


# --------- Models (Request) ----------
class FoodLogInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    food_log: str = Field(
        alias="foodLog",
        description="The user-provided food log as a text string.",
    )


# --------- Models (Model reply) ----------
class FoodItem(BaseModel):
    name: str = Field(description="Name of the food item.")
    calories: Nutrient = Field(description="Estimated calories for this item.")
    protein: Nutrient = Field(description="Estimated grams of protein for this item.")
    carbs: Nutrient = Field(description="Estimated grams of carbohydrates for this item.")
    fat: Nutrient = Field(description="Estimated grams of fat for this item.")


class DailyTotals(BaseModel):
    """Reply of the totals-only prompt: daily totals, no breakdown."""

    calories: Nutrient = Field(description="Estimated total calories for the day.")
    protein: Nutrient = Field(description="Estimated grams of protein.")
    carbs: Nutrient = Field(description="Estimated grams of carbohydrates.")
    fat: Nutrient = Field(description="Estimated grams of fat.")


class AnalysisResult(BaseModel):
    """Nutrition estimate for one food log: per-item values and daily totals."""

    model_config = ConfigDict(populate_by_name=True)

    food_items: List[FoodItem] = Field(alias="foodItems")
    total_calories: Nutrient = Field(alias="totalCalories")
    total_protein: Nutrient = Field(alias="totalProtein")
    total_carbs: Nutrient = Field(alias="totalCarbs")
    total_fat: Nutrient = Field(alias="totalFat")

    @classmethod
    def from_totals(cls, totals: DailyTotals) -> "AnalysisResult":
        return cls(
            food_items=[],
            total_calories=totals.calories,
            total_protein=totals.protein,
            total_carbs=totals.carbs,
            total_fat=totals.fat,
        )

    @property
    def totals(self) -> DailyTotals:
        return DailyTotals(
            calories=self.total_calories,
            protein=self.total_protein,
            carbs=self.total_carbs,
            fat=self.total_fat,
        )


# --------- Models (UI) ----------
class Notification(BaseModel):
    variant: Literal["default", "destructive"] = "default"
    title: str
    description: str


class PageSnapshot(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    food_log: str = Field(alias="foodLog")
    result: Optional[AnalysisResult] = None
    history: List[AnalysisResult] = Field(default_factory=list)
    is_loading: bool = Field(alias="isLoading")
