"""Flowise implementation of the ConversationService interface."""

import base64
from typing import Any

import httpx

from travel_assistant.config import FlowiseConfig
from travel_assistant.domain.models import ChatTurn, ConversationReply
from travel_assistant.domain.prompts import translation_instruction
from travel_assistant.domain.response_normalizer import extract_answer
from travel_assistant.exceptions import ConversationError
from travel_assistant.logging import setup_logging

from .interfaces import ConversationService

logger = setup_logging()


def _history_payload(history: tuple[ChatTurn, ...]) -> list[dict[str, str]]:
    return [{"role": turn.role, "content": turn.content} for turn in history]


def _error_from_response(response: httpx.Response, fallback: str) -> ConversationError:
    try:
        body = response.json()
    except ValueError:
        body = None
    message = body.get("message") if isinstance(body, dict) else None
    return ConversationError(
        str(message) if message else fallback, status_code=response.status_code
    )


class FlowiseClient(ConversationService):
    """Sends prompts to Flowise chatflows over the prediction REST API."""

    def __init__(self, client: httpx.Client, config: FlowiseConfig):
        self._client = client
        self._config = config

    def send_message(
        self,
        message: str,
        chatflow_id: str,
        source_language: str | None = None,
        target_language: str | None = None,
        history: tuple[ChatTurn, ...] = (),
        override_config: dict[str, Any] | None = None,
    ) -> ConversationReply:
        question = message
        if source_language or target_language:
            question = translation_instruction(message, source_language, target_language)

        payload: dict[str, Any] = {
            "question": question,
            "history": _history_payload(history),
        }
        if override_config:
            payload["overrideConfig"] = override_config

        logger.info(
            "Sending message to Flowise",
            extra={
                "chatflow_id": chatflow_id,
                "translating": bool(source_language or target_language),
                "history_length": len(history),
            },
        )
        return self._predict(
            chatflow_id,
            payload,
            self._config.timeout_seconds,
            "Failed to process translation request",
        )

    def send_image(
        self,
        image: bytes,
        mime_type: str,
        chatflow_id: str,
        prompt: str,
        history: tuple[ChatTurn, ...] = (),
    ) -> ConversationReply:
        """
        Sends an image as a Flowise upload alongside the prompt.

        The image travels as a base64 data URL and gets the longer image
        timeout.
        """
        data_url = f"data:{mime_type};base64,{base64.b64encode(image).decode('ascii')}"
        subtype = mime_type.split("/")[-1]
        payload = {
            "question": prompt,
            "uploads": [
                {
                    "data": data_url,
                    "type": "file",
                    "name": f"image.{subtype}",
                    "mime": mime_type,
                }
            ],
            "history": _history_payload(history),
        }

        logger.info(
            "Sending image to Flowise",
            extra={"chatflow_id": chatflow_id, "image_size": len(image), "mime_type": mime_type},
        )
        return self._predict(
            chatflow_id,
            payload,
            self._config.image_timeout_seconds,
            "Failed to process image request",
        )

    def list_chatflows(self) -> Any:
        return self._get("/api/v1/chatflows", "Failed to retrieve chatflows")

    def ping(self) -> Any:
        return self._get("/api/v1/ping", "Flowise connection failed")

    def _predict(
        self,
        chatflow_id: str,
        payload: dict[str, Any],
        timeout: float,
        fallback_message: str,
    ) -> ConversationReply:
        try:
            response = self._client.post(
                f"/api/v1/prediction/{chatflow_id}", json=payload, timeout=timeout
            )
        except httpx.HTTPError as e:
            logger.exception("Flowise request failed", extra={"chatflow_id": chatflow_id})
            raise ConversationError(str(e) or fallback_message, cause=e) from e

        if response.is_error:
            error = _error_from_response(response, fallback_message)
            logger.error(
                "Flowise returned an error",
                extra={
                    "chatflow_id": chatflow_id,
                    "status_code": response.status_code,
                    "error": str(error),
                },
            )
            raise error

        try:
            data = response.json()
        except ValueError as e:
            raise ConversationError(
                "Flowise returned a non-JSON response", status_code=502, cause=e
            ) from e
        if not isinstance(data, dict):
            data = {"response": data}

        return ConversationReply(data=data, answer=extract_answer(data))

    def _get(self, path: str, fallback_message: str) -> Any:
        try:
            response = self._client.get(path, timeout=self._config.timeout_seconds)
        except httpx.HTTPError as e:
            logger.exception("Flowise request failed", extra={"path": path})
            raise ConversationError(str(e) or fallback_message, cause=e) from e
        if response.is_error:
            raise _error_from_response(response, fallback_message)
        try:
            return response.json()
        except ValueError:
            return response.text
