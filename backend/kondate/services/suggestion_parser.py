"""
Turns the free text returned by the model into Suggestion objects.

Labels are matched first, then looser fallbacks; malformed input degrades to
placeholders or an empty list and never raises.
"""

import re
from typing import List

from ..core.prompt_builder import DELIMITER
from ..models.meal import Suggestion

PLACEHOLDER_NAME = "AIからの献立提案"
PLACEHOLDER_DESCRIPTION = "詳しい説明はありませんでした。"


class SuggestionParser:
    # Both colon widths are accepted.
    name_pattern = re.compile(r"料理名[：:]([^\n]*)")
    description_pattern = re.compile(r"説明[：:]")
    leading_description_pattern = re.compile(r"^説明[：:]")

    @classmethod
    def extract_one(cls, block: str) -> Suggestion:
        name = PLACEHOLDER_NAME
        description = block

        name_match = cls.name_pattern.search(block)
        if name_match:
            name = name_match.group(1).strip()
            remainder = block[name_match.end():].strip()
            desc_match = cls.description_pattern.search(remainder)
            if desc_match:
                description = remainder[desc_match.end():].strip()
            else:
                description = remainder
        else:
            desc_match = cls.description_pattern.search(block)
            if desc_match:
                before = block[:desc_match.start()].strip()
                if before:
                    name = before
                description = block[desc_match.end():].strip()

        description = cls.leading_description_pattern.sub("", description).strip()
        if not description or description == name:
            description = PLACEHOLDER_DESCRIPTION
        return Suggestion(name=name, description=description)

    @staticmethod
    def is_usable(suggestion: Suggestion) -> bool:
        return bool(
            suggestion.name
            and suggestion.description
            and suggestion.name != PLACEHOLDER_NAME
        )

    @classmethod
    def parse(cls, raw: str) -> List[Suggestion]:
        blocks = [block.strip() for block in raw.split(DELIMITER)]
        suggestions = [
            s for s in (cls.extract_one(block) for block in blocks) if cls.is_usable(s)
        ]
        if suggestions:
            return suggestions

        # The model sometimes skips the delimiter for a single suggestion.
        text = raw.strip()
        if text:
            single = cls.extract_one(text)
            if cls.is_usable(single):
                return [single]
        return []
