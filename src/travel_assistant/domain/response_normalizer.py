"""
Normalization of free-form conversational-AI answers.

The provider returns natural language that may or may not embed the
structure a route asked for. Everything here degrades to placeholder
values instead of raising.
"""

import json
import re
from collections.abc import Callable
from typing import Any

from .models import ImageTranslation

ANSWER_FIELDS = ("answer", "text", "response")

TRANSLATION_UNAVAILABLE = "Translation not available"
EXTRACTED_FROM_IMAGE = "Text extracted from image"
TRANSLATION_MARKER = "Translation:"

_LABEL_PREFIX = r"^[ \t*#>-]*"
_LABEL_SUFFIX = r"(?:\s+text)?\**\s*:[ \t*]*(.+)$"
_ORIGINAL_LINE = re.compile(
    _LABEL_PREFIX + r"(?:original|source)" + _LABEL_SUFFIX, re.IGNORECASE | re.MULTILINE
)
_TRANSLATED_LINE = re.compile(
    _LABEL_PREFIX + r"(?:translated|translation)" + _LABEL_SUFFIX,
    re.IGNORECASE | re.MULTILINE,
)

_NON_LATIN = re.compile(
    "["
    "\u0370-\u03ff"  # Greek
    "\u0400-\u04ff"  # Cyrillic
    "\u0590-\u05ff"  # Hebrew
    "\u0600-\u06ff"  # Arabic
    "\u0900-\u097f"  # Devanagari
    "\u0e00-\u0e7f"  # Thai
    "\u1100-\u11ff"  # Hangul Jamo
    "\u3040-\u30ff"  # Hiragana, Katakana
    "\u3400-\u4dbf"  # CJK Extension A
    "\u4e00-\u9fff"  # CJK Unified Ideographs
    "\uac00-\ud7af"  # Hangul Syllables
    "]"
)

_CONVERSION_LINE = re.compile(
    r"(\d+(?:\.\d+)?)\s+([A-Za-z]{3})\s*=\s*(\d+(?:\.\d+)?)\s+([A-Za-z]{3})"
)


def extract_answer(payload: Any) -> str | None:
    """Returns the first non-empty answer field of a provider payload."""
    if not isinstance(payload, dict):
        return None
    for field in ANSWER_FIELDS:
        value = payload.get(field)
        if isinstance(value, str) and value.strip():
            return value
    return None


def extract_json_object(text: str) -> dict[str, Any] | None:
    """Parses the span from the first '{' to the last '}' as a JSON object."""
    if not text:
        return None
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        parsed = json.loads(text[start : end + 1])
    except ValueError:
        return None
    return parsed if isinstance(parsed, dict) else None


def contains_non_latin(text: str) -> bool:
    return bool(_NON_LATIN.search(text))


ImageStrategy = Callable[[str, str], ImageTranslation | None]


def _from_json(text: str, source_language: str) -> ImageTranslation | None:
    parsed = extract_json_object(text)
    if not parsed:
        return None
    original = parsed.get("originalText")
    translated = parsed.get("translatedText")
    if not original and not translated:
        return None
    return ImageTranslation(
        original_text=str(original) if original else EXTRACTED_FROM_IMAGE,
        translated_text=str(translated) if translated else TRANSLATION_UNAVAILABLE,
        detected_language=str(parsed.get("detectedLanguage") or source_language),
        description=str(parsed.get("description") or ""),
    )


def _from_labeled_lines(text: str, source_language: str) -> ImageTranslation | None:
    original = _ORIGINAL_LINE.search(text)
    translated = _TRANSLATED_LINE.search(text)
    if not original or not translated:
        return None
    original_text = original.group(1).strip().strip("*").strip()
    translated_text = translated.group(1).strip().strip("*").strip()
    if not original_text or not translated_text:
        return None
    return ImageTranslation(
        original_text=original_text,
        translated_text=translated_text,
        detected_language=source_language,
    )


def _from_section_marker(text: str, source_language: str) -> ImageTranslation | None:
    if TRANSLATION_MARKER not in text:
        return None
    before, _, after = text.partition(TRANSLATION_MARKER)
    before, after = before.strip(), after.strip()
    if not before or not after:
        return None
    return ImageTranslation(
        original_text=before,
        translated_text=after,
        detected_language=source_language,
    )


def _from_script(text: str, source_language: str) -> ImageTranslation:
    if contains_non_latin(text):
        return ImageTranslation(
            original_text=text,
            translated_text=TRANSLATION_UNAVAILABLE,
            detected_language=source_language,
        )
    return ImageTranslation(
        original_text=EXTRACTED_FROM_IMAGE,
        translated_text=text,
        detected_language=source_language,
    )


IMAGE_TRANSLATION_STRATEGIES: tuple[ImageStrategy, ...] = (
    _from_json,
    _from_labeled_lines,
    _from_section_marker,
)


def normalize_image_translation(
    raw_answer: str | None, source_language: str = "auto"
) -> ImageTranslation:
    """
    Extracts original/translated text from an image-translation answer.

    Strategies run in order until one yields a result; the script-based
    fallback always does.
    """
    text = (raw_answer or "").strip()
    source_language = source_language or "auto"
    for strategy in IMAGE_TRANSLATION_STRATEGIES:
        result = strategy(text, source_language)
        if result is not None:
            return result
    return _from_script(text, source_language)


def parse_structured_answer(answer: str | None) -> dict[str, Any]:
    """JSON object embedded in an answer, or the raw text flagged unparsed."""
    parsed = extract_json_object(answer or "")
    if parsed is not None:
        return parsed
    return {"rawResponse": answer or "", "parsed": False}


def parse_currency_conversion(answer: str | None) -> dict[str, Any] | None:
    """Reads a conversion from a JSON answer or a "100 USD = 95.24 EUR" line."""
    if not answer:
        return None
    parsed = extract_json_object(answer)
    if parsed is not None:
        return parsed
    match = _CONVERSION_LINE.search(answer)
    if not match:
        return None
    original_amount = float(match.group(1))
    converted_amount = float(match.group(3))
    rate = round(converted_amount / original_amount, 4) if original_amount else None
    return {
        "originalAmount": original_amount,
        "fromCurrency": match.group(2).upper(),
        "toCurrency": match.group(4).upper(),
        "convertedAmount": converted_amount,
        "conversionRate": rate,
    }
