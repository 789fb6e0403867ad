"""Travel recommendation and cultural etiquette endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from travel_assistant.dependencies import get_conversation, get_recommendations
from travel_assistant.exceptions import ApiError, ConversationError
from travel_assistant.handlers import RecommendationsHandler
from travel_assistant.infrastructure.interfaces import ConversationService
from travel_assistant.request_models import (
    ComprehensiveRecommendationsBody,
    CulturalEtiquetteBody,
    PersonalizedRecommendationsBody,
    to_turns,
)
from travel_assistant.response_models import success_response

router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])

RecommendationsDep = Annotated[RecommendationsHandler, Depends(get_recommendations)]
ConversationDep = Annotated[ConversationService, Depends(get_conversation)]


@router.post("/personalized")
def personalized(body: PersonalizedRecommendationsBody, handler: RecommendationsDep):
    try:
        data = handler.personalized(
            body.user_message, body.chatflow_id, to_turns(body.chat_history)
        )
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to get personalized recommendations", str(e))
    return success_response(data, "Personalized recommendations generated successfully")


@router.post("/cultural-etiquette")
def cultural_etiquette(body: CulturalEtiquetteBody, handler: RecommendationsDep):
    try:
        data = handler.cultural_etiquette(
            body.location, body.chatflow_id, body.specific_topics
        )
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to get cultural etiquette", str(e))
    return success_response(data, "Cultural etiquette information retrieved successfully")


@router.post("/comprehensive")
def comprehensive(body: ComprehensiveRecommendationsBody, handler: RecommendationsDep):
    """Trip recommendations, plus cultural etiquette when a chatflow is given."""
    try:
        data = handler.comprehensive(
            body.location,
            body.recommendations_chatflow_id,
            interests=body.interests,
            budget=body.budget,
            preferences=body.preferences,
            duration=body.duration,
            travel_style=body.travel_style,
            dietary_restrictions=body.dietary_restrictions,
            cultural_etiquette_chatflow_id=body.cultural_etiquette_chatflow_id,
            include_cultural_etiquette=body.include_cultural_etiquette,
        )
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to get comprehensive recommendations", str(e))
    return success_response(data, "Comprehensive recommendations generated successfully")


@router.get("/interests")
def interests():
    return success_response(
        RecommendationsHandler.supported_options(),
        "Supported interests and options retrieved successfully",
    )


@router.get("/health")
def health(conversation: ConversationDep):
    try:
        conversation.ping()
    except ConversationError as e:
        raise ApiError(503, "Recommendations service unhealthy", str(e))
    return success_response(
        {
            "service": "Recommendations Service",
            "flowiseConnection": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        "Recommendations service is healthy",
    )
