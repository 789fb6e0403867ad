"""Handler for travel recommendations and cultural etiquette."""

from datetime import datetime, timezone
from typing import Any

from travel_assistant.domain.models import ChatTurn
from travel_assistant.domain.prompts import cultural_etiquette_prompt, recommendations_prompt
from travel_assistant.domain.response_normalizer import parse_structured_answer
from travel_assistant.exceptions import ConversationError
from travel_assistant.infrastructure.interfaces import ConversationService
from travel_assistant.logging import setup_logging

logger = setup_logging()

INTERESTS = (
    "culture",
    "history",
    "art",
    "music",
    "food",
    "nightlife",
    "adventure",
    "nature",
    "beaches",
    "mountains",
    "shopping",
    "architecture",
    "photography",
    "sports",
    "wellness",
    "family-friendly",
    "romantic",
    "business",
    "budget-travel",
    "luxury",
    "local-experiences",
    "festivals",
    "museums",
    "religious-sites",
    "outdoor-activities",
)
TRAVEL_STYLES = (
    "backpacker",
    "family",
    "business",
    "luxury",
    "tourist",
    "adventure",
    "cultural",
    "relaxation",
    "photography",
    "foodie",
)
BUDGET_LEVELS = ("low", "medium", "high", "luxury")
COMMON_DURATIONS = ("weekend", "3 days", "1 week", "2 weeks", "1 month", "long-term")


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class RecommendationsHandler:
    """Builds recommendation prompts and parses the structured answers."""

    def __init__(self, conversation: ConversationService):
        self._conversation = conversation

    def personalized(
        self, user_message: str, chatflow_id: str, chat_history: tuple[ChatTurn, ...]
    ) -> dict[str, Any]:
        """
        Forwards a free-form request with prior chat turns.

        Raises:
            ConversationError: If the chatflow call fails.
        """
        reply = self._conversation.send_message(
            user_message, chatflow_id, history=chat_history
        )
        return {
            "recommendations": parse_structured_answer(reply.answer),
            "metadata": {
                "userMessage": user_message,
                "chatHistoryLength": len(chat_history),
                "timestamp": _now(),
            },
        }

    def cultural_etiquette(
        self, location: str, chatflow_id: str, specific_topics: list[str]
    ) -> dict[str, Any]:
        reply = self._conversation.send_message(
            cultural_etiquette_prompt(location, specific_topics), chatflow_id
        )
        return {
            "culturalEtiquette": parse_structured_answer(reply.answer),
            "metadata": {
                "location": location,
                "specificTopics": specific_topics,
                "timestamp": _now(),
            },
        }

    def comprehensive(
        self,
        location: str,
        recommendations_chatflow_id: str,
        interests: list[str],
        budget: str,
        preferences: dict[str, Any],
        duration: str,
        travel_style: str,
        dietary_restrictions: list[str],
        cultural_etiquette_chatflow_id: str | None = None,
        include_cultural_etiquette: bool = True,
    ) -> dict[str, Any]:
        """
        Trip recommendations plus optional cultural etiquette.

        The recommendations call is required. The etiquette call is best
        effort: when it fails the field is null.

        Raises:
            ConversationError: If the recommendations call fails.
        """
        prompt = recommendations_prompt(
            location,
            duration,
            travel_style,
            budget,
            interests,
            dietary_restrictions,
            preferences,
        )
        reply = self._conversation.send_message(prompt, recommendations_chatflow_id)

        etiquette = None
        if include_cultural_etiquette and cultural_etiquette_chatflow_id:
            try:
                etiquette = self.cultural_etiquette(
                    location, cultural_etiquette_chatflow_id, interests
                )
            except ConversationError as e:
                logger.warning(
                    "Cultural etiquette lookup failed",
                    extra={"location": location, "error": str(e)},
                )

        return {
            "recommendations": parse_structured_answer(reply.answer),
            "culturalEtiquette": etiquette,
            "metadata": {
                "location": location,
                "interests": interests,
                "budget": budget,
                "duration": duration,
                "travelStyle": travel_style,
                "timestamp": _now(),
            },
        }

    @staticmethod
    def supported_options() -> dict[str, list[str]]:
        return {
            "interests": list(INTERESTS),
            "travelStyles": list(TRAVEL_STYLES),
            "budgetLevels": list(BUDGET_LEVELS),
            "commonDurations": list(COMMON_DURATIONS),
        }
