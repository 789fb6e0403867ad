"""Tests for normalizing free-form conversational-AI answers."""

from travel_assistant.domain.response_normalizer import (
    EXTRACTED_FROM_IMAGE,
    TRANSLATION_UNAVAILABLE,
    extract_answer,
    extract_json_object,
    normalize_image_translation,
    parse_currency_conversion,
    parse_structured_answer,
)


class TestExtractAnswer:
    def test_prefers_answer_field(self):
        assert extract_answer({"answer": "a", "text": "t"}) == "a"

    def test_falls_back_to_text_then_response(self):
        assert extract_answer({"text": "t"}) == "t"
        assert extract_answer({"response": "r"}) == "r"

    def test_skips_blank_fields(self):
        assert extract_answer({"answer": "  ", "text": "t"}) == "t"

    def test_missing_answer(self):
        assert extract_answer({"chatId": "1"}) is None
        assert extract_answer(["not", "a", "dict"]) is None


class TestExtractJsonObject:
    def test_object_inside_prose(self):
        text = 'Sure! Here you go: {"a": 1, "b": {"c": 2}} Hope that helps.'
        assert extract_json_object(text) == {"a": 1, "b": {"c": 2}}

    def test_invalid_json_returns_none(self):
        assert extract_json_object("{not json}") is None

    def test_no_braces(self):
        assert extract_json_object("plain text") is None


class TestNormalizeImageTranslation:
    """Each answer shape the vision chatflow is known to produce."""

    def test_json_embedded_in_prose(self):
        answer = (
            "Here is the result:\n"
            '{"originalText": "出口", "translatedText": "Exit", '
            '"detectedLanguage": "zh", "description": "A sign"}\n'
            "Let me know if you need more."
        )
        result = normalize_image_translation(answer, "auto")

        assert result.original_text == "出口"
        assert result.translated_text == "Exit"
        assert result.detected_language == "zh"
        assert result.description == "A sign"

    def test_json_missing_translation_uses_placeholder(self):
        result = normalize_image_translation('{"originalText": "出口"}')
        assert result.original_text == "出口"
        assert result.translated_text == TRANSLATION_UNAVAILABLE

    def test_labeled_lines(self):
        answer = "**Original Text:** Sortie\n**Translation:** Exit"
        result = normalize_image_translation(answer, "fr")

        assert result.original_text == "Sortie"
        assert result.translated_text == "Exit"
        assert result.detected_language == "fr"

    def test_translation_marker_splits_sections(self):
        answer = "Salida de emergencia\nTranslation: Emergency exit"
        result = normalize_image_translation(answer)

        assert result.original_text == "Salida de emergencia"
        assert result.translated_text == "Emergency exit"

    def test_cjk_only_answer_is_kept_as_original(self):
        answer = "禁止吸烟 请勿入内"
        result = normalize_image_translation(answer)

        assert result.original_text == answer
        assert result.translated_text == TRANSLATION_UNAVAILABLE

    def test_latin_only_answer_is_treated_as_translation(self):
        answer = "The sign says no smoking."
        result = normalize_image_translation(answer)

        assert result.original_text == EXTRACTED_FROM_IMAGE
        assert result.translated_text == answer

    def test_empty_answer_never_raises(self):
        result = normalize_image_translation(None)
        assert result.original_text == EXTRACTED_FROM_IMAGE
        assert result.detected_language == "auto"


class TestParseStructuredAnswer:
    def test_json_answer(self):
        assert parse_structured_answer('Result: {"tips": ["bow"]}') == {"tips": ["bow"]}

    def test_unparsed_answer_is_flagged(self):
        assert parse_structured_answer("Just bow politely.") == {
            "rawResponse": "Just bow politely.",
            "parsed": False,
        }


class TestParseCurrencyConversion:
    def test_conversion_line(self):
        parsed = parse_currency_conversion("Today 100 USD = 92.50 eur at market rate.")

        assert parsed["originalAmount"] == 100.0
        assert parsed["fromCurrency"] == "USD"
        assert parsed["toCurrency"] == "EUR"
        assert parsed["convertedAmount"] == 92.5
        assert parsed["conversionRate"] == 0.925

    def test_json_answer_wins(self):
        assert parse_currency_conversion('{"convertedAmount": 92.5}') == {
            "convertedAmount": 92.5
        }

    def test_unrecognized_answer(self):
        assert parse_currency_conversion("Rates are volatile today.") is None
        assert parse_currency_conversion(None) is None
