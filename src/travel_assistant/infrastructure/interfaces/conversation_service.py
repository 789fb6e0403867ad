"""Abstract interface for conversational-AI operations."""

from abc import ABC, abstractmethod
from typing import Any

from travel_assistant.domain.models import ChatTurn, ConversationReply


class ConversationService(ABC):
    """Abstract base class for conversational-AI backends."""

    @abstractmethod
    def send_message(
        self,
        message: str,
        chatflow_id: str,
        source_language: str | None = None,
        target_language: str | None = None,
        history: tuple[ChatTurn, ...] = (),
        override_config: dict[str, Any] | None = None,
    ) -> ConversationReply:
        """
        Sends one message to a chatflow.

        When either language is given the message is wrapped in a
        translation instruction; otherwise it is sent verbatim.

        Args:
            message: The user message.
            chatflow_id: Destination chatflow identifier.
            source_language: Language of the message, if translating.
            target_language: Language to translate into, if translating.
            history: Prior conversation turns.
            override_config: Chatflow settings overridden for this call.

        Returns:
            ConversationReply with the raw payload and extracted answer.

        Raises:
            ConversationError: If the provider call fails.
        """
        pass

    @abstractmethod
    def send_image(
        self,
        image: bytes,
        mime_type: str,
        chatflow_id: str,
        prompt: str,
        history: tuple[ChatTurn, ...] = (),
    ) -> ConversationReply:
        """
        Sends an image with a prompt to a chatflow.

        Raises:
            ConversationError: If the provider call fails.
        """
        pass

    @abstractmethod
    def list_chatflows(self) -> Any:
        """Returns the chatflows visible to the configured API key."""
        pass

    @abstractmethod
    def ping(self) -> Any:
        """Checks that the provider is reachable."""
        pass
