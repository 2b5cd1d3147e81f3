from enum import Enum


class PromptVariant(str, Enum):
    TOTALS = "totals"
    ITEMIZED = "itemized"


# Daily totals only (first version of the analysis).
TOTALS_PROMPT = """You are a nutritionist analyzing a user's food log to estimate their daily calorie and macronutrient intake.

Analyze the following food log and estimate the total calories, protein, carbs, and fat.

Food Log: {food_log}

Return STRICT JSON in this format:
{
  "calories": number,
  "protein": number,
  "carbs": number,
  "fat": number
}

Ensure that the calories, protein, carbs, and fat reflect whole numbers. Protein, carbs and fat are in grams.
Do not give explanations, only the JSON. Do not list the individual foods eaten and their nutrition information."""

# Per-item breakdown plus daily totals.
ITEMIZED_PROMPT = """You are a nutritionist analyzing a user's food log to estimate their daily calorie and macronutrient intake.

Analyze the following food log. For each food item, estimate the calories, protein, carbs, and fat.
Then estimate the total calories, protein, carbs, and fat for the day.

Food Log: {food_log}

Return STRICT JSON in this format:
{
  "foodItems": [
    {
      "name": "food name",
      "calories": number,
      "protein": number,
      "carbs": number,
      "fat": number
    }
  ],
  "totalCalories": number,
  "totalProtein": number,
  "totalCarbs": number,
  "totalFat": number
}

Ensure that all calories, protein, carbs, and fat values reflect whole numbers. Protein, carbs and fat are in grams.
Do not give explanations, only the JSON."""

TEMPLATES = {
    PromptVariant.TOTALS: TOTALS_PROMPT,
    PromptVariant.ITEMIZED: ITEMIZED_PROMPT,
}

USER_PROMPT = "Analyze my food log and reply with the JSON only."


def render_prompt(food_log: str, variant: PromptVariant = PromptVariant.ITEMIZED) -> str:
    # Plain replace keeps braces in the user's text intact.
    return TEMPLATES[variant].replace("{food_log}", food_log)
