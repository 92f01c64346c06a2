from fastapi import APIRouter, Depends
import logging

from ..core.config import Settings, get_settings
from ..core.errors import InvalidPromptError
from ..models.meal import (
    ErrorResponse,
    HealthResponse,
    MealPlanResponse,
    RequestParameters,
    SuggestRequest,
    SuggestResponse,
)
from ..services.gemini_client import GeminiClient
from ..services.meal_planner import MealPlanner

log = logging.getLogger(__name__)
router = APIRouter(prefix="/api")

ERROR_RESPONSES = {code: {"model": ErrorResponse} for code in (400, 500, 502, 503)}


def get_gemini_client(settings: Settings = Depends(get_settings)) -> GeminiClient:
    return GeminiClient(settings)


@router.post("/suggestMeal", response_model=SuggestResponse, responses=ERROR_RESPONSES)
async def suggest_meal(body: SuggestRequest, client: GeminiClient = Depends(get_gemini_client)):
    """Relay a ready-made prompt to Gemini and return the raw suggestion text."""
    if not body.prompt or not body.prompt.strip():
        raise InvalidPromptError()

    text = await client.generate(body.prompt)
    log.info(f"📝 Relayed suggestion: {len(text)} characters")
    return SuggestResponse(suggestion=text)


@router.get("/suggestMeal", response_model=HealthResponse)
async def suggest_meal_status():
    return HealthResponse(status="OK", message="AI Suggestion API is running.")


@router.post("/v1/meals/suggest", response_model=MealPlanResponse, responses=ERROR_RESPONSES)
async def plan_meals(params: RequestParameters, client: GeminiClient = Depends(get_gemini_client)):
    """Build the prompt from the form selections and return parsed suggestions."""
    result = await MealPlanner(client).suggest(params)
    return MealPlanResponse(suggestions=result.suggestions, notice=result.notice)
