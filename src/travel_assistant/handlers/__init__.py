"""Request handlers orchestrating domain logic and adapters."""

from .currency import CurrencyHandler
from .image_translation import ImageTranslationHandler
from .recommendations import RecommendationsHandler
from .scam_prevention import ScamPreventionHandler
from .translation_pipeline import TranslationPipeline

__all__ = [
    "CurrencyHandler",
    "ImageTranslationHandler",
    "RecommendationsHandler",
    "ScamPreventionHandler",
    "TranslationPipeline",
]
