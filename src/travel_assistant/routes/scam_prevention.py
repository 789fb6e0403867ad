"""Price advice, scam detection and safety advice endpoints."""

from datetime import datetime, timezone
from typing import Annotated

from fastapi import APIRouter, Depends

from travel_assistant.dependencies import get_conversation, get_scam_prevention
from travel_assistant.exceptions import ApiError, ConversationError
from travel_assistant.handlers import ScamPreventionHandler
from travel_assistant.infrastructure.interfaces import ConversationService
from travel_assistant.request_models import (
    PriceAdviceBody,
    SafetyAdviceBody,
    ScamDetectionBody,
    to_turns,
)
from travel_assistant.response_models import success_response

router = APIRouter(prefix="/api/scam-prevention", tags=["scam-prevention"])

ScamPreventionDep = Annotated[ScamPreventionHandler, Depends(get_scam_prevention)]
ConversationDep = Annotated[ConversationService, Depends(get_conversation)]


def _require_chatflow(handler: ScamPreventionHandler, chatflow_id: str | None) -> str:
    resolved = handler.resolve_chatflow(chatflow_id)
    if not resolved:
        raise ApiError(
            400,
            "Validation error",
            "chatflowId is required and no default price advisor chatflow is configured",
        )
    return resolved


@router.post("/price-advice")
def price_advice(body: PriceAdviceBody, handler: ScamPreventionDep):
    """Judges whether a quoted price is fair for the item and place."""
    chatflow_id = _require_chatflow(handler, body.chatflow_id)
    context = body.context.model_dump(exclude_none=True) if body.context else None
    try:
        data = handler.price_advice(
            chatflow_id,
            body.item,
            body.price,
            body.currency.upper(),
            body.location,
            context,
            to_turns(body.history),
        )
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to get price advice", str(e))
    return success_response(data, "Price advice generated successfully")


@router.post("/detect")
def detect_scam(body: ScamDetectionBody, handler: ScamPreventionDep):
    chatflow_id = _require_chatflow(handler, body.chatflow_id)
    try:
        data = handler.detect(
            chatflow_id,
            body.situation,
            body.location,
            body.urgency,
            body.red_flags,
            to_turns(body.history),
        )
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to analyze situation", str(e))
    return success_response(data, "Scam analysis completed successfully")


@router.post("/advice")
def safety_advice(body: SafetyAdviceBody, handler: ScamPreventionDep):
    chatflow_id = _require_chatflow(handler, body.chatflow_id)
    try:
        data = handler.advice(
            chatflow_id,
            body.query,
            body.location,
            body.advice_type,
            to_turns(body.history),
        )
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to get safety advice", str(e))
    return success_response(data, "Safety advice generated successfully")


@router.get("/red-flags")
def red_flags():
    return success_response(
        ScamPreventionHandler.resources(), "Scam prevention resources retrieved successfully"
    )


@router.get("/health")
def health(conversation: ConversationDep, handler: ScamPreventionDep):
    try:
        conversation.ping()
    except ConversationError as e:
        raise ApiError(503, "Scam prevention service unhealthy", str(e))
    return success_response(
        {
            "service": "Scam Prevention Service",
            "flowiseConnection": "healthy",
            "defaultChatflowConfigured": handler.resolve_chatflow(None) is not None,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        },
        "Scam prevention service is healthy",
    )
