"""Reply templates and terminal output formatters."""

import json
from dataclasses import asdict
from datetime import datetime

from weatherchat.models.chat import ChatMessage
from weatherchat.models.weather import (
    LocationMatch,
    ProbabilityResult,
    WeatherSnapshot,
)

GLOBAL_WEATHER_HINT = (
    "For detailed forecasts, please use the Global Weather tab to get 5-day "
    "weather predictions."
)


def fmt_number(value: float) -> str:
    """Render a provider number the way it was sent: 32 stays 32, 21.5 stays 21.5."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


def temperature_feel(temp: float) -> str:
    if temp > 30:
        return "quite warm"
    if temp > 25:
        return "pleasant and warm"
    if temp > 20:
        return "mild and comfortable"
    if temp > 15:
        return "cool"
    return "cold"


def describe_conditions(temp: float, humidity: float, condition: str) -> str:
    """Short phrase such as "hot and humid with rain"."""
    if temp > 30:
        description = "hot and "
    elif temp < 15:
        description = "cool and "
    else:
        description = "pleasant and "

    if humidity > 70:
        description += "humid"
    elif humidity < 30:
        description += "dry"
    else:
        description += "comfortable"

    lower = condition.lower()
    if "clear" in lower:
        description += " with clear skies"
    elif "cloud" in lower:
        description += " with cloudy skies"
    elif "rain" in lower:
        description += " with rain"
    return description


def response_branch(query: str) -> str:
    """Name of the template ``generate_weather_response`` picks for a query."""
    q = query.lower()
    if "temperature" in q or "hot" in q or "cold" in q:
        return "temperature"
    if "rain" in q or "precipitation" in q:
        return "rain"
    if "weather" in q or "like" in q:
        return "weather"
    if "forecast" in q or "tomorrow" in q:
        return "forecast"
    return "default"


def generate_weather_response(query: str, snapshot: WeatherSnapshot, location: str) -> str:
    """Conversational answer to a weather question.

    The template is picked by the first keyword group present in the query:
    temperature, rain, general weather, forecast, then a default summary.
    """
    branch = response_branch(query)
    temp = fmt_number(snapshot.current.temperature)
    humidity = fmt_number(snapshot.current.humidity)
    condition = snapshot.current.description

    if branch == "temperature":
        feel = temperature_feel(snapshot.current.temperature)
        return (
            f"The current temperature in {location} is {temp}°C, which is {feel}. "
            f"The humidity is {humidity}% and the weather condition is {condition}."
        )

    if branch == "rain":
        if "rain" in condition.lower():
            rain_info = "It is currently raining"
        else:
            rain_info = "It is not raining right now"
        return (
            f"In {location}: {rain_info}. Current conditions are {condition} "
            f"with a temperature of {temp}°C and humidity at {humidity}%."
        )

    described = describe_conditions(
        snapshot.current.temperature, snapshot.current.humidity, condition
    )

    if branch == "weather":
        return (
            f"Current weather in {location}: {condition}, {temp}°C, "
            f"with {humidity}% humidity. The conditions are {described}."
        )

    if branch == "forecast":
        head = (
            f"Current weather in {location}: {condition}, {temp}°C, "
            f"humidity {humidity}%."
        )
        if snapshot.forecast:
            return f"{head}\n{format_forecast_lines(snapshot)}"
        return f"{head} {GLOBAL_WEATHER_HINT}"

    return (
        f"Here's the current weather in {location}: {condition}, {temp}°C, "
        f"with {humidity}% humidity. The weather is {described}."
    )


def format_forecast_lines(snapshot: WeatherSnapshot) -> str:
    lines = []
    for day in snapshot.forecast:
        lines.append(
            f"- {day.date}: {day.description}, "
            f"{fmt_number(day.temp_min)}-{fmt_number(day.temp_max)}°C, "
            f"{round(day.rain_probability * 100)}% chance of rain"
        )
    return "\n".join(lines)


_EXPLANATIONS = {
    "rain": {
        "high": "High chance of rain - definitely carry an umbrella!",
        "medium": "Moderate chance of rain - keep an umbrella handy.",
        "low": "Low chance of rain - you'll likely stay dry.",
    },
    "sunny": {
        "high": "Very sunny day ahead - perfect for outdoor activities!",
        "medium": "Partly sunny - good weather for most activities.",
        "low": "Limited sunshine - might be cloudy or overcast.",
    },
    "temperature": {
        "high": "Warm temperatures expected - dress lightly.",
        "medium": "Moderate temperatures - comfortable weather.",
        "low": "Cool temperatures - consider a jacket.",
    },
}


def probability_category(probability: float) -> str:
    if probability >= 70:
        return "high"
    if probability >= 40:
        return "medium"
    return "low"


def probability_explanation(probability: float, weather_type: str) -> str:
    category = probability_category(probability)
    explanation = _EXPLANATIONS.get(weather_type, {}).get(category)
    if explanation:
        return explanation
    return f"A {fmt_number(probability)}% chance means it's {category} probability."


def weather_tips(probability: float, weather_type: str) -> list[str]:
    tips: list[str] = []
    if weather_type == "rain" and probability >= 70:
        tips.append("🌧️ Carry an umbrella and waterproof gear")
        tips.append("🚗 Drive carefully on wet roads")
    elif weather_type == "rain" and probability >= 40:
        tips.append("☔ Keep an umbrella handy")

    if weather_type == "sunny" and probability >= 70:
        tips.append("☀️ Apply sunscreen and stay hydrated")
        tips.append("👒 Wear a hat and light clothing")

    if weather_type == "temperature" and probability >= 80:
        tips.append("🌡️ Dress appropriately for the temperature")
    return tips


# --- Terminal rendering ---


def confidence_label(confidence: float | None) -> str:
    if not confidence:
        return "Unknown"
    if confidence >= 0.8:
        return "High"
    if confidence >= 0.6:
        return "Medium"
    return "Low"


def format_time(ts: datetime) -> str:
    return ts.astimezone().strftime("%I:%M %p")


def format_message(message: ChatMessage) -> str:
    """One transcript entry as printed by the terminal chat."""
    if message.is_user:
        return f"[{format_time(message.timestamp)}] You: {message.text}"
    footer = f"Confidence: {confidence_label(message.confidence)}"
    if message.sources:
        footer += f" • {', '.join(message.sources)}"
    return (
        f"[{format_time(message.timestamp)}] Assistant: {message.text}\n"
        f"    ({footer})"
    )


def format_snapshot_text(snapshot: WeatherSnapshot) -> str:
    loc = snapshot.location
    cur = snapshot.current
    lines = [
        f"=== {loc.name}, {loc.country} ({loc.lat:.2f}, {loc.lon:.2f}) ===",
        f"{cur.description}, {fmt_number(cur.temperature)}°C",
        f"Humidity: {fmt_number(cur.humidity)}% | Pressure: {fmt_number(cur.pressure)} hPa"
        f" | Wind: {fmt_number(cur.wind_speed)} m/s",
    ]
    if snapshot.forecast:
        lines.append("Forecast:")
        lines.append(format_forecast_lines(snapshot))
    return "\n".join(lines)


def format_locations_text(matches: list[LocationMatch]) -> str:
    if not matches:
        return "No matching locations"
    return "\n".join(
        f"{m.name}, {m.country} ({m.lat:.4f}, {m.lon:.4f})" for m in matches
    )


def format_probability_text(result: ProbabilityResult) -> str:
    if not result.success:
        return f"Probability lookup failed: {result.error}"
    if not result.data:
        return "No probability data for that weather event"
    lines = []
    for p in result.data:
        lines.append(
            f"{p.location} on {p.date}: {fmt_number(p.probability)}% chance of {p.weather_event}"
        )
        if p.description:
            lines.append(f"  {p.description}")
        lines.append(f"  {probability_explanation(p.probability, p.weather_event)}")
        lines.extend(f"  {tip}" for tip in weather_tips(p.probability, p.weather_event))
    return "\n".join(lines)


def format_snapshot_json(snapshot: WeatherSnapshot) -> str:
    return json.dumps(asdict(snapshot), indent=2)
