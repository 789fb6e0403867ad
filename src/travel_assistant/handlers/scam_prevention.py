"""Handler for price advice and scam detection."""

from datetime import datetime, timezone
from typing import Any

from travel_assistant.domain.models import ChatTurn
from travel_assistant.domain.prompts import (
    price_advice_prompt,
    safety_advice_prompt,
    scam_detection_prompt,
)
from travel_assistant.infrastructure.interfaces import ConversationService

COMMON_RED_FLAGS = (
    "Asking for money upfront before showing anything",
    "Pushing for immediate decisions",
    "Refusing to show ID or credentials",
    "Offering deals that seem too good to be true",
    "Asking you to go somewhere private or isolated",
    "Refusing to provide written receipts or contracts",
    'Claiming to be an "official" without proper identification',
    "Using high-pressure sales tactics",
    "Asking for personal information unnecessarily",
    "Refusing to accept credit cards or official payment methods",
    "Changing the price or terms after initial agreement",
    'Claiming something is "urgent" or "limited time only"',
    "Asking you to pay in cash only",
    "Refusing to provide contact information or business address",
    "Claiming they know your hotel or personal information",
)
MARKET_TYPES = ("street", "market", "shop", "restaurant", "hotel", "tour", "transportation")
ITEM_CATEGORIES = (
    "food",
    "souvenir",
    "clothing",
    "electronics",
    "art",
    "jewelry",
    "accommodation",
    "service",
    "other",
)
SELLER_TYPES = ("local", "tourist", "official", "street", "online")
ADVICE_TYPES = ("price", "safety", "general", "negotiation", "bargaining")
URGENCY_LEVELS = ("low", "medium", "high")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class ScamPreventionHandler:
    """Sends price and safety questions to the price-advisor chatflow."""

    def __init__(self, conversation: ConversationService, default_chatflow_id: str | None):
        self._conversation = conversation
        self._default_chatflow_id = default_chatflow_id

    def resolve_chatflow(self, chatflow_id: str | None) -> str | None:
        return chatflow_id or self._default_chatflow_id

    def price_advice(
        self,
        chatflow_id: str,
        item: str,
        price: float,
        currency: str,
        location: str | None,
        context: dict[str, Any] | None,
        history: tuple[ChatTurn, ...] = (),
    ) -> dict[str, Any]:
        reply = self._conversation.send_message(
            price_advice_prompt(item, price, currency, location, context),
            chatflow_id,
            history=history,
        )
        return {
            "item": item,
            "price": price,
            "currency": currency,
            "location": location,
            "advice": reply.answer,
            "context": context,
            "timestamp": _now(),
        }

    def detect(
        self,
        chatflow_id: str,
        situation: str,
        location: str | None,
        urgency: str,
        red_flags: list[str],
        history: tuple[ChatTurn, ...] = (),
    ) -> dict[str, Any]:
        reply = self._conversation.send_message(
            scam_detection_prompt(situation, location, urgency, red_flags),
            chatflow_id,
            history=history,
        )
        return {
            "situation": situation,
            "location": location,
            "urgency": urgency,
            "analysis": reply.answer,
            "redFlags": red_flags,
            "timestamp": _now(),
        }

    def advice(
        self,
        chatflow_id: str,
        query: str,
        location: str | None,
        advice_type: str,
        history: tuple[ChatTurn, ...] = (),
    ) -> dict[str, Any]:
        reply = self._conversation.send_message(
            safety_advice_prompt(query, location, advice_type),
            chatflow_id,
            history=history,
        )
        return {
            "query": query,
            "location": location,
            "adviceType": advice_type,
            "advice": reply.answer,
            "timestamp": _now(),
        }

    @staticmethod
    def resources() -> dict[str, list[str]]:
        return {
            "commonRedFlags": list(COMMON_RED_FLAGS),
            "marketTypes": list(MARKET_TYPES),
            "itemCategories": list(ITEM_CATEGORIES),
            "sellerTypes": list(SELLER_TYPES),
            "adviceTypes": list(ADVICE_TYPES),
            "urgencyLevels": list(URGENCY_LEVELS),
        }
