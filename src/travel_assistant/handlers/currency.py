"""Handler for AI-assisted currency conversion and market insights."""

import re
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from travel_assistant.domain import market_clock
from travel_assistant.domain.models import ConversationReply
from travel_assistant.domain.prompts import (
    currency_conversion_prompt,
    currency_info_prompt,
    exchange_rates_prompt,
    market_insights_prompt,
)
from travel_assistant.domain.response_normalizer import parse_currency_conversion
from travel_assistant.exceptions import ConversationError, InputError
from travel_assistant.infrastructure.interfaces import ConversationService
from travel_assistant.logging import setup_logging

logger = setup_logging()

SUPPORTED_CURRENCIES = (
    "USD", "EUR", "GBP", "JPY", "AUD", "CAD", "CHF", "CNY", "SEK", "NZD",
    "MXN", "SGD", "HKD", "NOK", "TRY", "RUB", "INR", "BRL", "ZAR", "KRW",
    "AED", "SAR", "QAR", "KWD", "BHD", "OMR", "JOD", "LBP", "EGP", "MAD",
    "TND", "DZD", "LYD", "SDG", "ETB", "KES", "UGX", "TZS", "ZMW", "BWP",
    "NAD", "SZL", "LSL", "MZN", "AOA", "XOF", "XAF", "CDF", "RWF", "BIF",
)  # fmt: skip
DEFAULT_RATE_TARGETS = 10
MARKET_INSIGHTS_OVERRIDES = {"temperature": 0.8, "maxTokens": 2500}

_CURRENCY_CODE = re.compile(r"^[A-Z]{3}$")


def is_currency_code(code: str | None) -> bool:
    return bool(code) and bool(_CURRENCY_CODE.match(code.upper()))


def _require_code(code: str, label: str) -> str:
    if not is_currency_code(code):
        raise InputError(
            f"Invalid {label}: {code}. Must be a 3-letter currency code.",
            error="Validation error",
        )
    return code.upper()


class CurrencyHandler:
    """Sends currency questions to the currency chatflow with market context."""

    def __init__(
        self,
        conversation: ConversationService,
        chatflow_id: str | None,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._conversation = conversation
        self._chatflow_id = chatflow_id
        self._clock = clock

    def convert(self, amount: float, from_currency: str, to_currency: str) -> dict[str, Any]:
        """
        Converts an amount, parsing the answer as JSON or "100 USD = 95 EUR".

        Raises:
            InputError: If the amount or currency codes are invalid.
            ConversationError: If the chatflow call fails.
        """
        if amount <= 0:
            raise InputError("Amount must be a positive number", error="Validation error")
        source = _require_code(from_currency, "source currency")
        target = _require_code(to_currency, "target currency")
        if source == target:
            raise InputError(
                "Source and target currencies cannot be the same", error="Validation error"
            )

        market = market_clock.snapshot(self._clock())
        reply = self._send(currency_conversion_prompt(amount, source, target, market.timestamp))
        return {
            "originalAmount": amount,
            "fromCurrency": source,
            "toCurrency": target,
            "aiResponse": reply.answer or "",
            "parsedResponse": parse_currency_conversion(reply.answer),
            "timestamp": market.timestamp,
            "marketContext": market.market_context,
            "timeContext": market.time_context,
        }

    def exchange_rates(self, base_currency: str, target_currencies: list[str]) -> dict[str, Any]:
        base = _require_code(base_currency, "base currency")
        targets = [_require_code(code, "target currency") for code in target_currencies]
        targets = targets or list(SUPPORTED_CURRENCIES[:DEFAULT_RATE_TARGETS])

        market = market_clock.snapshot(self._clock())
        reply = self._send(exchange_rates_prompt(base, targets, market.timestamp))
        return {
            "baseCurrency": base,
            "targetCurrencies": targets,
            "aiResponse": reply.answer or "",
            "timestamp": market.timestamp,
            "marketContext": market.market_context,
            "timeContext": market.time_context,
        }

    def info(self, currency: str) -> dict[str, Any]:
        code = _require_code(currency, "currency")
        market = market_clock.snapshot(self._clock())
        reply = self._send(currency_info_prompt(code))
        return {
            "currency": code,
            "aiResponse": reply.answer or "",
            "timestamp": market.timestamp,
            "marketContext": market.market_context,
            "timeContext": market.time_context,
        }

    def market_insights(
        self, base_currency: str, target_currencies: list[str]
    ) -> dict[str, Any]:
        base = _require_code(base_currency, "base currency")
        targets = [_require_code(code, "target currency") for code in target_currencies]

        market = market_clock.snapshot(self._clock())
        prompt = market_insights_prompt(
            base,
            targets,
            market.timestamp,
            market.time_context,
            market.market_context,
            market.volatility,
        )
        reply = self._send(prompt, override_config=MARKET_INSIGHTS_OVERRIDES)
        return {
            "baseCurrency": base,
            "targetCurrencies": targets,
            "aiResponse": reply.answer or "",
            "timestamp": market.timestamp,
            "marketContext": market.market_context,
            "timeContext": market.time_context,
            "volatility": market.volatility,
        }

    def health(self) -> dict[str, Any]:
        self._conversation.ping()
        market = market_clock.snapshot(self._clock())
        return {
            "service": "Currency Conversion Service",
            "flowiseConnection": "healthy",
            "supportedCurrencies": len(SUPPORTED_CURRENCIES),
            "chatflowConfigured": bool(self._chatflow_id),
            "currentTime": market.timestamp,
            "timeContext": market.time_context,
            "marketContext": market.market_context,
            "volatility": market.volatility,
        }

    def _send(
        self, prompt: str, override_config: dict[str, Any] | None = None
    ) -> ConversationReply:
        if not self._chatflow_id:
            raise ConversationError("CURRENCY_CHATFLOW_ID is not configured", status_code=503)
        return self._conversation.send_message(
            prompt, self._chatflow_id, override_config=override_config
        )
