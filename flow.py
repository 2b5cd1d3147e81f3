"""
Food log analysis flow.

Renders the prompt, makes one call to the completion client, and validates the
JSON reply. Callers get an AnalysisResult or an AnalysisError, never a
partially-typed object.
"""

import json
import logging
from typing import Optional, Union

from pydantic import ValidationError

import config
from errors import AnalysisValidationError
from llm_client import CompletionClient, OpenAIChatClient
from prompts import USER_PROMPT, PromptVariant, render_prompt
from schemas import AnalysisResult, DailyTotals, FoodLogInput

logger = logging.getLogger("nutrijournal.flow")


def _reject_constant(name: str) -> None:
    # json.loads accepts NaN, Infinity and -Infinity; JSON does not.
    raise ValueError(f"non-finite number {name}")


def parse_reply(content: str, variant: PromptVariant = PromptVariant.ITEMIZED) -> AnalysisResult:
    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except ValueError as e:
        logger.warning("Invalid JSON response (%s): %.500s", e, content)
        raise AnalysisValidationError("Invalid JSON response from the model.") from e

    try:
        if variant is PromptVariant.TOTALS:
            return AnalysisResult.from_totals(DailyTotals.model_validate(data))
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        raise AnalysisValidationError(
            f"Model reply does not match the {variant.value} schema: {e.error_count()} error(s)"
        ) from e


class AnalyzeFoodLogFlow:
    def __init__(
        self,
        client: CompletionClient,
        variant: PromptVariant = PromptVariant.ITEMIZED,
    ):
        self.client = client
        self.variant = variant

    async def __call__(self, payload: Union[FoodLogInput, str]) -> AnalysisResult:
        food_log = payload.food_log if isinstance(payload, FoodLogInput) else payload
        prompt = render_prompt(food_log, self.variant)

        content = await self.client.complete(prompt, USER_PROMPT)
        result = parse_reply(content, self.variant)

        logger.info(
            "Analyzed food log: %d item(s), %s kcal",
            len(result.food_items),
            result.total_calories,
        )
        return result


def build_flow(client: Optional[CompletionClient] = None) -> AnalyzeFoodLogFlow:
    return AnalyzeFoodLogFlow(
        client=client or OpenAIChatClient(),
        variant=PromptVariant(config.PROMPT_VARIANT),
    )
