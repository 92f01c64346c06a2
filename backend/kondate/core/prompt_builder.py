"""
Builds the instruction sent to the text-generation service.

The labels and delimiter below are the output format the model is asked to
follow; SuggestionParser reads the reply with the same constants.
"""

from ..models.meal import CookingTime, RequestParameters

NAME_LABEL = "料理名："
DESCRIPTION_LABEL = "説明："
DELIMITER = "---次の提案---"


def cooking_time_clause(cooking_time: CookingTime) -> str:
    if cooking_time == CookingTime.UNSPECIFIED:
        return ""
    return f"調理時間は{cooking_time.value}を目安とした、"


def build_prompt(params: RequestParameters) -> str:
    return (
        f"今日の{params.meal_time.value}におすすめの、{params.cuisine.value}で、"
        f"{cooking_time_clause(params.cooking_time)}"
        f"美味しくて比較的簡単に作れる料理を{params.count}品提案してください。"
        f"各提案は「{NAME_LABEL}<ここに料理名>\n{DESCRIPTION_LABEL}<ここに料理の説明（2〜3文程度）>」の形式で記述し、"
        f"提案と提案の間は「{DELIMITER}」という区切り文字で明確に区切ってください。"
    )
