"""Currency conversion and market insight endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from travel_assistant.dependencies import get_currency
from travel_assistant.exceptions import ApiError, ConversationError, InputError
from travel_assistant.handlers import CurrencyHandler
from travel_assistant.handlers.currency import SUPPORTED_CURRENCIES
from travel_assistant.request_models import CurrencyConversionBody, ExchangeRatesBody
from travel_assistant.response_models import success_response

router = APIRouter(prefix="/api/currency", tags=["currency"])

CurrencyDep = Annotated[CurrencyHandler, Depends(get_currency)]


@router.post("/convert")
def convert(body: CurrencyConversionBody, handler: CurrencyDep):
    try:
        data = handler.convert(body.amount, body.from_currency, body.to_currency)
    except InputError as e:
        raise ApiError(e.status_code, e.error, str(e))
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to convert currency", str(e))
    return success_response(data, "Currency conversion completed successfully")


@router.post("/exchange-rates")
def exchange_rates(body: ExchangeRatesBody, handler: CurrencyDep):
    try:
        data = handler.exchange_rates(body.base_currency, body.target_currencies)
    except InputError as e:
        raise ApiError(e.status_code, e.error, str(e))
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to get exchange rates", str(e))
    return success_response(data, "Exchange rates retrieved successfully")


@router.get("/info/{currency}")
def currency_info(currency: str, handler: CurrencyDep):
    try:
        data = handler.info(currency)
    except InputError as e:
        raise ApiError(e.status_code, e.error, str(e))
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to get currency information", str(e))
    return success_response(data, "Currency information retrieved successfully")


@router.post("/market-insights")
def market_insights(body: ExchangeRatesBody, handler: CurrencyDep):
    """AI market analysis with time-of-day and weekday context."""
    try:
        data = handler.market_insights(body.base_currency, body.target_currencies)
    except InputError as e:
        raise ApiError(e.status_code, e.error, str(e))
    except ConversationError as e:
        raise ApiError(e.status_code, "Failed to get market insights", str(e))
    return success_response(data, "Market insights retrieved successfully")


@router.get("/supported")
def supported_currencies():
    return success_response(
        {"currencies": list(SUPPORTED_CURRENCIES), "count": len(SUPPORTED_CURRENCIES)},
        "Supported currencies retrieved successfully",
    )


@router.get("/health")
def health(handler: CurrencyDep):
    try:
        data = handler.health()
    except ConversationError as e:
        raise ApiError(503, "Currency service unhealthy", str(e))
    return success_response(data, "Currency service is healthy")
