from backend.kondate.core.prompt_builder import DELIMITER
from backend.kondate.services.suggestion_parser import (
    PLACEHOLDER_DESCRIPTION,
    PLACEHOLDER_NAME,
    SuggestionParser,
)


def test_single_labelled_block():
    suggestions = SuggestionParser.parse("料理名：味噌汁\n 説明：和風の優しい汁物。")

    assert len(suggestions) == 1
    assert suggestions[0].name == "味噌汁"
    assert suggestions[0].description == "和風の優しい汁物。"


def test_blocks_keep_their_order():
    raw = (
        "料理名：肉じゃが\n説明：甘辛い煮物です。\n"
        f"{DELIMITER}\n"
        "料理名：焼き魚\n説明：塩を振って焼くだけ。"
    )

    suggestions = SuggestionParser.parse(raw)

    assert [s.name for s in suggestions] == ["肉じゃが", "焼き魚"]
    assert suggestions[1].description == "塩を振って焼くだけ。"


def test_empty_text():
    assert SuggestionParser.parse("") == []
    assert SuggestionParser.parse("   \n ") == []


def test_name_without_description_uses_placeholder():
    suggestions = SuggestionParser.parse("料理名：冷奴\n説明：")

    assert len(suggestions) == 1
    assert suggestions[0].name == "冷奴"
    assert suggestions[0].description == PLACEHOLDER_DESCRIPTION


def test_name_at_end_of_block():
    suggestions = SuggestionParser.parse("料理名：冷奴")

    assert suggestions[0].name == "冷奴"
    assert suggestions[0].description == PLACEHOLDER_DESCRIPTION


def test_repeated_block_parses_identically():
    block = "料理名：親子丼\n説明：鶏肉と卵をだしで煮てご飯にのせます。"

    alone = SuggestionParser.parse(block)
    doubled = SuggestionParser.parse(block + DELIMITER + block)

    assert len(doubled) == 2
    assert doubled[0] == doubled[1] == alone[0]


def test_description_marker_without_name_marker():
    suggestion = SuggestionParser.extract_one("麻婆豆腐\n説明：ピリ辛の豆腐料理。")

    assert suggestion.name == "麻婆豆腐"
    assert suggestion.description == "ピリ辛の豆腐料理。"


def test_description_marker_only_falls_back_to_placeholder_name():
    suggestion = SuggestionParser.extract_one("説明：ピリ辛の豆腐料理。")

    assert suggestion.name == PLACEHOLDER_NAME
    assert suggestion.description == "ピリ辛の豆腐料理。"
    assert SuggestionParser.parse("説明：ピリ辛の豆腐料理。") == []


def test_unlabelled_text_is_dropped():
    suggestion = SuggestionParser.extract_one("今日は何でも美味しいですよ。")

    assert suggestion.name == PLACEHOLDER_NAME
    assert suggestion.description == "今日は何でも美味しいですよ。"
    assert SuggestionParser.parse("今日は何でも美味しいですよ。") == []


def test_description_without_label_is_remainder():
    suggestion = SuggestionParser.extract_one("料理名：カレー\nスパイスを炒めて煮込みます。")

    assert suggestion.description == "スパイスを炒めて煮込みます。"


def test_text_between_name_and_description_label_is_skipped():
    suggestion = SuggestionParser.extract_one("料理名：カレー\n材料：玉ねぎ\n説明：じっくり煮込みます。")

    assert suggestion.name == "カレー"
    assert suggestion.description == "じっくり煮込みます。"


def test_description_equal_to_name_is_replaced():
    suggestion = SuggestionParser.extract_one("料理名：おにぎり\nおにぎり")

    assert suggestion.description == PLACEHOLDER_DESCRIPTION


def test_half_width_colons():
    suggestions = SuggestionParser.parse("料理名: ナポリタン\n説明: ケチャップで炒めたパスタ。")

    assert suggestions[0].name == "ナポリタン"
    assert suggestions[0].description == "ケチャップで炒めたパスタ。"


def test_noise_blocks_are_filtered():
    raw = (
        "以下の提案です。\n"
        f"{DELIMITER}\n"
        "料理名：豚汁\n説明：具だくさんの味噌汁。\n"
        f"{DELIMITER}\n"
    )

    suggestions = SuggestionParser.parse(raw)

    assert [s.name for s in suggestions] == ["豚汁"]


def test_preamble_before_name_label():
    suggestions = SuggestionParser.parse("おすすめはこちら。料理名：ぶり大根\n説明：ぶりと大根の煮物。")

    assert suggestions[0].name == "ぶり大根"
    assert suggestions[0].description == "ぶりと大根の煮物。"


def test_whole_text_retried_when_every_block_is_unusable():
    raw = f"麻婆豆腐\n{DELIMITER}\n説明：ピリ辛。"

    suggestions = SuggestionParser.parse(raw)

    assert len(suggestions) == 1
    assert suggestions[0].name == f"麻婆豆腐\n{DELIMITER}"
    assert suggestions[0].description == "ピリ辛。"
