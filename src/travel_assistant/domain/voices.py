"""Language and voice tables shared by the speech adapters and routes."""

from pydantic import BaseModel

FALLBACK_VOICE = "en-US-Wavenet-D"
FALLBACK_LANGUAGE_CODE = "en-US"

PREMIUM_VOICE_TIERS = ("Wavenet", "Neural2", "Studio", "Journey", "Polyglot", "News")


class VoiceDefault(BaseModel, frozen=True):
    language_code: str
    name: str


DEFAULT_VOICES: dict[str, VoiceDefault] = {
    "en": VoiceDefault(language_code="en-US", name="en-US-Wavenet-D"),
    "es": VoiceDefault(language_code="es-ES", name="es-ES-Wavenet-B"),
    "fr": VoiceDefault(language_code="fr-FR", name="fr-FR-Wavenet-A"),
    "de": VoiceDefault(language_code="de-DE", name="de-DE-Wavenet-A"),
    "it": VoiceDefault(language_code="it-IT", name="it-IT-Wavenet-A"),
    "pt": VoiceDefault(language_code="pt-PT", name="pt-PT-Wavenet-A"),
    "ru": VoiceDefault(language_code="ru-RU", name="ru-RU-Wavenet-A"),
    "ja": VoiceDefault(language_code="ja-JP", name="ja-JP-Wavenet-A"),
    "ko": VoiceDefault(language_code="ko-KR", name="ko-KR-Wavenet-A"),
    # Mandarin voices are published under cmn-CN, not zh-CN.
    "zh": VoiceDefault(language_code="cmn-CN", name="cmn-CN-Standard-A"),
    "ar": VoiceDefault(language_code="ar-XA", name="ar-XA-Standard-A"),
    "hi": VoiceDefault(language_code="hi-IN", name="hi-IN-Standard-A"),
    "th": VoiceDefault(language_code="th-TH", name="th-TH-Standard-A"),
    "vi": VoiceDefault(language_code="vi-VN", name="vi-VN-Standard-A"),
}

LANGUAGE_NAMES: dict[str, str] = {
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ru": "Russian",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "ar": "Arabic",
    "hi": "Hindi",
    "th": "Thai",
    "vi": "Vietnamese",
}

COMMON_TOURIST_LANGUAGES = ("en", "es", "fr", "de", "it", "pt", "ja", "ko", "zh", "ar")


def _prefix(language: str) -> str:
    return language.split("-")[0].lower()


def default_voice_for(language_code: str) -> str:
    """Returns the table voice for a language, or the English fallback voice."""
    voice = DEFAULT_VOICES.get(_prefix(language_code))
    return voice.name if voice else FALLBACK_VOICE


def synthesis_language_for(target_language: str) -> str:
    """
    Maps a translation target language to a synthesis language code.

    Full locale codes ("es-MX") pass through; bare codes ("es") go through
    the default-voice table; "auto" and unknown codes use English.
    """
    if not target_language or target_language == "auto":
        return FALLBACK_LANGUAGE_CODE
    if "-" in target_language:
        return target_language
    voice = DEFAULT_VOICES.get(_prefix(target_language))
    return voice.language_code if voice else FALLBACK_LANGUAGE_CODE


def standard_tier_voice(voice_name: str) -> str:
    """Replaces a premium tier keyword in a voice name with "Standard"."""
    for tier in PREMIUM_VOICE_TIERS:
        if tier in voice_name:
            return voice_name.replace(tier, "Standard")
    return voice_name


def basic_voice_for(language_code: str) -> str:
    """Builds the minimal Standard voice name from a language code alone."""
    return f"{language_code}-Standard-A"


def supported_tts_languages() -> list[dict[str, str]]:
    return [
        {
            "code": code,
            "languageCode": voice.language_code,
            "defaultVoice": voice.name,
            "name": LANGUAGE_NAMES.get(code, code),
        }
        for code, voice in DEFAULT_VOICES.items()
    ]


def supported_translation_languages() -> list[dict[str, str]]:
    languages = [{"code": code, "name": name} for code, name in LANGUAGE_NAMES.items()]
    languages.append({"code": "auto", "name": "Auto-detect"})
    return languages
