import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol

from ..core.prompt_builder import build_prompt
from ..models.meal import RequestParameters, Suggestion
from .suggestion_parser import SuggestionParser

log = logging.getLogger(__name__)

NO_SUGGESTIONS_NOTICE = "条件に合う料理が見つかりませんでした。条件を変えてお試しください。"


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


@dataclass(frozen=True)
class MealPlanResult:
    suggestions: List[Suggestion] = field(default_factory=list)
    notice: Optional[str] = None


class MealPlanner:
    """Form selections in, parsed suggestions out."""

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    async def suggest(self, params: RequestParameters) -> MealPlanResult:
        prompt = build_prompt(params)
        raw = await self.generator.generate(prompt)

        suggestions = SuggestionParser.parse(raw)
        if not suggestions:
            log.warning(f"⚠️ No suggestion could be extracted from {len(raw)} characters")
            return MealPlanResult(notice=NO_SUGGESTIONS_NOTICE)

        log.info(f"🍽️ Parsed {len(suggestions)} of {params.count} requested suggestions")
        return MealPlanResult(suggestions=suggestions)
