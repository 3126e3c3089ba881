from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .inference_request import PredictionRequest


def render_prompt(request: PredictionRequest) -> str:
    lines = [
        f"You are a predictive model for the {request.network_name} sharing scheme. "
        "Your task is to predict the number of available bikes at a specific station "
        "based on historical patterns and current conditions.",
        "",
        "Station Details:",
        f"- Name: {request.station_name}",
        f"- Total Docks: {request.total_docks}",
        "",
        "Contextual Information:",
        f"- Requested Day: {request.day.value}",
        f"- Requested Time: {request.hour}:00",
        f"- Weather Forecast: {request.weather.value}",
    ]
    if request.current_free_bikes is not None:
        lines.append(
            f"- Current Real-time Availability: {request.current_free_bikes} "
            "bikes available right now."
        )
    lines += [
        "",
        "Task:",
        "Analyze the provided historical data in conjunction with the weather and "
        "real-time context. Heavy rain or strong wind typically reduces bike usage. "
        "Good weather increases it. The current availability provides a very recent "
        "baseline.",
        "",
        f"Historical average availability for a typical {request.day_class}:",
        json.dumps(request.historical_by_hour(), indent=2),
        "",
        "Based on all available information, predict the number of available bikes "
        "for the requested day and time. The prediction must be a whole number "
        f"between 0 and the total number of docks ({request.total_docks}).",
        "",
        "Provide your answer ONLY in the specified JSON format. Do not include any "
        "other text, explanation, or markdown formatting.",
    ]
    return "\n".join(lines)
