"""Prompt templates sent to the conversational-AI chatflows."""

import json
from typing import Any

DEFAULT_IMAGE_PROMPT = (
    "Please analyze this image and translate any text you find from "
    "{sourceLanguage} to {targetLanguage}. Respond in JSON format: "
    '{"originalText": "text found in the image", "translatedText": "translation", '
    '"detectedLanguage": "language of the original text", '
    '"description": "short description of the image"}. '
    "If no text is found, describe what you see in the image."
)


def translation_instruction(
    message: str, source_language: str | None, target_language: str | None
) -> str:
    """Wraps a message in the translator instruction."""
    system_prompt = (
        f"You are a translator, translate from language {source_language or 'auto'} "
        f"to language {target_language or 'auto'}"
    )
    return f'{system_prompt}\n\nText to translate: "{message}"'


def image_translation_prompt(
    template: str | None, source_language: str, target_language: str
) -> str:
    """Fills the {sourceLanguage}/{targetLanguage} placeholders of an image prompt."""
    prompt = template or DEFAULT_IMAGE_PROMPT
    return prompt.replace("{sourceLanguage}", source_language).replace(
        "{targetLanguage}", target_language
    )


def price_advice_prompt(
    item: str,
    price: float,
    currency: str,
    location: str | None,
    context: dict[str, Any] | None,
) -> str:
    return (
        "I need price advice for an item. Here are the details:\n"
        f"Item: {item}\n"
        f"Price: {price:g} {currency}\n"
        f"Location: {location or 'Not specified'}\n"
        f"Context: {json.dumps(context or {})}\n\n"
        "Please provide advice on whether this price is fair, typical market rates, "
        "negotiation tips, and any red flags to watch for."
    )


def scam_detection_prompt(
    situation: str, location: str | None, urgency: str, red_flags: list[str]
) -> str:
    flags = ", ".join(red_flags) if red_flags else "None specified"
    return (
        "I need help analyzing a potentially suspicious situation for scams or fraud. "
        "Here are the details:\n"
        f"Situation: {situation}\n"
        f"Location: {location or 'Not specified'}\n"
        f"Urgency Level: {urgency}\n"
        f"Red Flags I've noticed: {flags}\n\n"
        "Please analyze this situation for potential scams, provide safety advice, "
        "and suggest appropriate actions."
    )


def safety_advice_prompt(query: str, location: str | None, advice_type: str) -> str:
    return (
        "I need general advice about travel safety and scam prevention. "
        "Here are the details:\n"
        f"Query: {query}\n"
        f"Location: {location or 'Not specified'}\n"
        f"Advice Type: {advice_type}\n\n"
        "Please provide helpful advice, tips, and guidance related to travel safety, "
        "scam prevention, and best practices."
    )


def cultural_etiquette_prompt(location: str, specific_topics: list[str]) -> str:
    topics = ", ".join(specific_topics) or "general etiquette"
    return f"Provide cultural etiquette information for {location}. Focus on: {topics}."


_RECOMMENDATIONS_FORMAT = {
    "attractions": [
        {
            "name": "Attraction Name",
            "type": "museum|restaurant|activity|landmark|entertainment",
            "description": "Brief description",
            "budgetLevel": "low|medium|high|luxury",
            "estimatedCost": "Cost range or free",
            "duration": "Time needed to visit",
            "bestTimeToVisit": "When to go",
            "whyRecommended": "Why this fits the user's interests",
        }
    ],
    "restaurants": [
        {
            "name": "Restaurant Name",
            "cuisine": "Type of cuisine",
            "priceRange": "$|$$|$$$|$$$$",
            "description": "What makes it special",
            "dietaryFriendly": "Vegetarian/Vegan/Gluten-free options",
            "location": "Area/neighborhood",
            "whyRecommended": "Why this fits the user's preferences",
        }
    ],
    "activities": [
        {
            "name": "Activity Name",
            "type": "outdoor|indoor|cultural|adventure|relaxation",
            "description": "What the activity involves",
            "budgetLevel": "low|medium|high|luxury",
            "estimatedCost": "Cost range",
            "duration": "How long it takes",
            "bestTimeToDo": "When to do this activity",
            "whyRecommended": "Why this fits the user's interests",
        }
    ],
    "itinerary": {
        "day1": "Suggested activities for first day",
        "day2": "Suggested activities for second day",
        "day3": "Suggested activities for third day",
    },
    "tips": [
        "Practical travel tips for this destination",
        "Money-saving tips",
        "Safety considerations",
    ],
}


def recommendations_prompt(
    location: str,
    duration: str,
    travel_style: str,
    budget: str,
    interests: list[str],
    dietary_restrictions: list[str],
    preferences: dict[str, Any],
) -> str:
    """Builds the full trip-recommendations request with its JSON answer format."""
    lines = [
        "You are a professional travel advisor. Provide personalized "
        f"recommendations for a trip to {location}.",
        "",
        "**Trip Details:**",
        f"- Location: {location}",
        f"- Duration: {duration}",
        f"- Travel Style: {travel_style}",
        f"- Budget Level: {budget}",
    ]
    if interests:
        lines.append(f"- Interests: {', '.join(interests)}")
    if dietary_restrictions:
        lines.append(f"- Dietary Restrictions: {', '.join(dietary_restrictions)}")
    if preferences:
        lines.append(f"- Additional Preferences: {json.dumps(preferences)}")
    lines += [
        "",
        "**Please provide recommendations in the following JSON format:**",
        json.dumps(_RECOMMENDATIONS_FORMAT, indent=2),
        "",
        "Focus on providing practical, actionable recommendations that match the "
        "user's budget, interests, and travel style. Include both popular "
        "attractions and hidden gems.",
    ]
    return "\n".join(lines)


def currency_conversion_prompt(
    amount: float, from_currency: str, to_currency: str, timestamp: str
) -> str:
    answer_format = {
        "originalAmount": amount,
        "fromCurrency": from_currency,
        "toCurrency": to_currency,
        "conversionRate": "rate_used",
        "convertedAmount": "calculated_amount",
        "timestamp": timestamp,
    }
    return (
        f"Convert {amount:g} {from_currency} to {to_currency}. "
        f"Please respond in JSON format:\n{json.dumps(answer_format, indent=2)}"
    )


def exchange_rates_prompt(
    base_currency: str, target_currencies: list[str], timestamp: str
) -> str:
    answer_format = {
        "baseCurrency": base_currency,
        "timestamp": timestamp,
        "rates": {"EUR": "1.05", "GBP": "0.79", "JPY": "150.00"},
    }
    return (
        f"Get exchange rates for {base_currency} to: {', '.join(target_currencies)}. "
        f"Please respond in JSON format:\n{json.dumps(answer_format, indent=2)}"
    )


def currency_info_prompt(currency: str) -> str:
    answer_format = {
        "currency": {
            "code": currency,
            "name": "currency_name",
            "country": "issuing_country",
        },
        "currentStatus": {
            "trend": "bullish/bearish/stable",
            "volatility": "low/medium/high",
        },
    }
    return (
        f"Get information about {currency}. "
        f"Please respond in JSON format:\n{json.dumps(answer_format, indent=2)}"
    )


def market_insights_prompt(
    base_currency: str,
    target_currencies: list[str],
    timestamp: str,
    time_context: str,
    market_context: str,
    volatility: str,
) -> str:
    answer_format = {
        "marketOverview": {
            "currentStatus": "market_status",
            "volatility": volatility,
            "sentiment": "bullish/bearish/neutral",
            "keyDrivers": ["driver1", "driver2"],
        },
        "opportunities": {
            "immediate": ["opportunity1", "opportunity2"],
            "shortTerm": ["opportunity1", "opportunity2"],
            "riskLevel": "low/medium/high",
        },
        "news": {
            "breaking": ["news1", "news2"],
            "economicEvents": ["event1", "event2"],
            "marketImpact": "impact_assessment",
        },
        "recommendations": {
            "trading": ["strategy1", "strategy2"],
            "timing": "optimal_timing",
            "riskManagement": ["tip1", "tip2"],
        },
    }
    return (
        "You are a real-time market intelligence analyst.\n\n"
        "CURRENT MARKET CONTEXT:\n"
        f"- Time: {timestamp} ({time_context})\n"
        f"- Market Status: {market_context}\n"
        f"- Volatility Level: {volatility}\n"
        f"- Base Currency: {base_currency}\n"
        f"- Target Currencies: {', '.join(target_currencies)}\n\n"
        "Provide real-time market insights, current sentiment, key opportunities "
        "and risks, economic events and trading recommendations.\n\n"
        f"RESPONSE FORMAT (JSON):\n{json.dumps(answer_format, indent=2)}\n\n"
        f"Provide comprehensive market insights for {base_currency} and related "
        "currencies."
    )
