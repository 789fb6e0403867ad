"""Handler for translating text found in images."""

from travel_assistant.domain.models import ImageTranslation
from travel_assistant.domain.prompts import image_translation_prompt
from travel_assistant.domain.response_normalizer import normalize_image_translation
from travel_assistant.exceptions import InputError
from travel_assistant.infrastructure.interfaces import ConversationService
from travel_assistant.logging import setup_logging

logger = setup_logging()

SUPPORTED_IMAGE_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp")


class ImageTranslationHandler:
    """Sends an image to a vision chatflow and normalizes the answer."""

    def __init__(self, conversation: ConversationService):
        self._conversation = conversation

    def translate(
        self,
        image: bytes,
        mime_type: str | None,
        chatflow_id: str,
        source_language: str,
        target_language: str,
        prompt_template: str | None = None,
    ) -> tuple[ImageTranslation, str | None]:
        """
        Translates the text in an image.

        Returns:
            The normalized translation and the raw answer text.

        Raises:
            InputError: If the image is empty or not a supported type.
            ConversationError: If the chatflow call fails.
        """
        if not image:
            raise InputError("Image file is required", error="Missing required fields")
        if mime_type not in SUPPORTED_IMAGE_TYPES:
            raise InputError(
                f"Unsupported image type: {mime_type}. "
                f"Supported types: {', '.join(SUPPORTED_IMAGE_TYPES)}"
            )

        prompt = image_translation_prompt(prompt_template, source_language, target_language)
        reply = self._conversation.send_image(image, mime_type, chatflow_id, prompt)
        result = normalize_image_translation(reply.answer, source_language)

        logger.info(
            "Image translation completed",
            extra={
                "chatflow_id": chatflow_id,
                "image_size": len(image),
                "detected_language": result.detected_language,
            },
        )
        return result, reply.answer
