"""Weight adjustment advice from a text-generation service."""

import json
import logging
import os

import httpx

from wendler_mcp.wendler.constants import LIFT_NAMES
from wendler_mcp.wendler.display import format_number
from wendler_mcp.wendler.exceptions import AdviceError, NoWorkoutHistoryError
from wendler_mcp.wendler.logbook import recent_logs
from wendler_mcp.wendler.models import MainLift, UserProfile, WorkoutLogEntry

logger = logging.getLogger(__name__)

DEFAULT_ADVICE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_ADVICE_MODEL = "gemini-2.0-flash"

PROMPT_TEMPLATE = """You are an expert in the Wendler 5/3/1 training program.

You will analyze the user's workout history and provide a recommendation for weight adjustments in the next cycle.

Consider the following:

- If the user consistently failed to hit the target reps, recommend reducing the weight.
- If the user consistently exceeded the target reps, recommend increasing the weight.
- If the user was able to hit the target reps, recommend a standard weight increase.
- If there is not enough workout history, recommend continuing with the same weight.

Workout History: {workoutHistory}

Current Max: {currentMax}

Exercise: {exercise}

Based on this information, what adjustment to the training max do you recommend? Explain your reasoning.

Reply with a JSON object with a single string field "adjustmentRecommendation"."""


def build_advice_request(profile: UserProfile, logs: list[WorkoutLogEntry], lift: MainLift) -> dict:
    """Collaborator input for ``lift``: the last four sessions as a JSON string, plus the 1RM."""
    name = LIFT_NAMES[lift]
    relevant = recent_logs(logs, lift, limit=4)
    if not relevant:
        raise NoWorkoutHistoryError(f"No workout history found for {name}. Log some workouts first.")

    history = []
    for log in relevant:
        last = log.completed_sets[-1] if log.completed_sets else None
        history.append({
            "date": log.date.isoformat(),
            "exercise": name,
            "prescribedWeight": last.prescribed_weight if last else None,
            "actualRepsCompleted": last.actual_reps if last else None,
            "targetReps": last.prescribed_reps.replace("+", "") if last else None,
            "notes": f"TM used: {format_number(log.training_max_used)}",
        })

    return {
        "workoutHistory": json.dumps(history),
        "currentMax": profile.one_rep_maxes.get(lift, 0),
        "exercise": name,
    }


class AdviceClient:
    """Client for a Gemini-style ``generateContent`` endpoint."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key or os.environ.get("WENDLER_ADVICE_API_KEY") or os.environ.get("GEMINI_API_KEY")
        self.model = model or os.environ.get("WENDLER_ADVICE_MODEL", DEFAULT_ADVICE_MODEL)
        self.base_url = (base_url or os.environ.get("WENDLER_ADVICE_URL", DEFAULT_ADVICE_URL)).rstrip("/")
        self._transport = transport

    async def _generate(self, prompt: str) -> str:
        if not self.api_key:
            raise AdviceError("No advice API key configured. Set WENDLER_ADVICE_API_KEY.")

        async with httpx.AsyncClient(timeout=60, transport=self._transport) as client:
            try:
                response = await client.post(
                    f"{self.base_url}/models/{self.model}:generateContent",
                    params={"key": self.api_key},
                    json={
                        "contents": [{"parts": [{"text": prompt}]}],
                        "generationConfig": {"responseMimeType": "application/json"},
                    },
                )
            except httpx.HTTPError as exc:
                raise AdviceError(f"Advice request failed: {exc}") from exc

            if response.status_code >= 400:
                raise AdviceError(
                    f"Advice request failed: {response.text}",
                    status_code=response.status_code,
                )

            data = response.json()

        try:
            return data["candidates"][0]["content"]["parts"][0]["text"]
        except (KeyError, IndexError, TypeError) as exc:
            raise AdviceError("Advice response had no text") from exc

    @staticmethod
    def _parse_recommendation(text: str) -> str:
        try:
            parsed = json.loads(text)
        except ValueError:
            return text.strip()
        if isinstance(parsed, dict) and isinstance(parsed.get("adjustmentRecommendation"), str):
            return parsed["adjustmentRecommendation"]
        return text.strip()

    async def suggest(self, request: dict) -> dict:
        """Ask for a training max adjustment.

        Returns ``{"adjustmentRecommendation": str}`` or ``{"error": str}``;
        never raises.
        """
        history = request.get("workoutHistory")
        if not isinstance(history, str):
            history = json.dumps(history)
        try:
            json.loads(history)
        except ValueError:
            return {"error": "Workout history is not valid JSON."}

        prompt = PROMPT_TEMPLATE.format(
            workoutHistory=history,
            currentMax=request.get("currentMax"),
            exercise=request.get("exercise"),
        )
        try:
            text = await self._generate(prompt)
        except AdviceError as exc:
            logger.warning("Weight adjustment advice failed: %s", exc)
            return {"error": str(exc)}
        return {"adjustmentRecommendation": self._parse_recommendation(text)}
