"""Trading-session context derived from the wall clock."""

from datetime import datetime

from pydantic import BaseModel

MARKET_OPEN_HOUR = 9
MARKET_CLOSE_HOUR = 16
AFTER_HOURS_END = 21
PRE_MARKET_START = 6


class MarketSnapshot(BaseModel, frozen=True):
    timestamp: str
    time_context: str
    market_context: str
    volatility: str


def _is_weekday(now: datetime) -> bool:
    return now.weekday() < 5


def _is_market_hours(now: datetime) -> bool:
    return MARKET_OPEN_HOUR <= now.hour < MARKET_CLOSE_HOUR


def time_context(now: datetime) -> str:
    if _is_market_hours(now):
        session = "Market Hours (Active Trading)"
    elif MARKET_CLOSE_HOUR <= now.hour < AFTER_HOURS_END:
        session = "After Hours Trading"
    else:
        session = "Extended Hours/Pre-Market"

    if now.weekday() == 6:
        day = "Sunday (Market Closed)"
    elif now.weekday() == 5:
        day = "Saturday (Market Closed)"
    else:
        day = "Weekday"
    return f"{session} - {day}"


def market_context(now: datetime) -> str:
    if not _is_weekday(now):
        return "Markets Closed - Weekend"
    if _is_market_hours(now):
        return "Markets Open - High Activity"
    return "Markets Closed - Low Activity"


def volatility(now: datetime) -> str:
    """high while markets are open, medium in extended sessions, else low."""
    if not _is_weekday(now):
        return "low"
    if _is_market_hours(now):
        return "high"
    if MARKET_CLOSE_HOUR <= now.hour < AFTER_HOURS_END:
        return "medium"
    if PRE_MARKET_START <= now.hour < MARKET_OPEN_HOUR:
        return "medium"
    return "low"


def snapshot(now: datetime) -> MarketSnapshot:
    return MarketSnapshot(
        timestamp=now.isoformat(),
        time_context=time_context(now),
        market_context=market_context(now),
        volatility=volatility(now),
    )
