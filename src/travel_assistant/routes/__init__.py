"""API routers."""

from .currency import router as currency_router
from .recommendations import router as recommendations_router
from .scam_prevention import router as scam_prevention_router
from .translation import router as translation_router
from .transportation import router as transportation_router

__all__ = [
    "currency_router",
    "recommendations_router",
    "scam_prevention_router",
    "translation_router",
    "transportation_router",
]
