from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, conint


class MealTime(str, Enum):
    BREAKFAST = "朝食"
    LUNCH = "昼食"
    DINNER = "夕食"


class Cuisine(str, Enum):
    JAPANESE = "和食"
    WESTERN = "洋食"
    CHINESE = "中華"


class CookingTime(str, Enum):
    UNSPECIFIED = "指定なし"
    WITHIN_15_MIN = "15分以内"
    WITHIN_30_MIN = "30分以内"
    WITHIN_60_MIN = "60分以内"


class RequestParameters(BaseModel):
    """The four selections made on the form for one suggestion request."""

    model_config = ConfigDict(frozen=True)

    meal_time: MealTime = MealTime.DINNER
    cuisine: Cuisine = Cuisine.JAPANESE
    count: conint(ge=1, le=5) = 1
    cooking_time: CookingTime = CookingTime.UNSPECIFIED


class Suggestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str


class SuggestRequest(BaseModel):
    prompt: Optional[str] = None


class SuggestResponse(BaseModel):
    suggestion: str


class ErrorResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str


class MealPlanResponse(BaseModel):
    suggestions: List[Suggestion]
    notice: Optional[str] = None
