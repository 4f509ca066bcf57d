"""
Tests for the MCP tool functions.

Tools run against a JsonStore in a temporary directory and an advice
client backed by httpx.MockTransport.
"""

import datetime as dt
import json

import httpx
import pytest
import pytest_asyncio

from wendler_mcp import server
from wendler_mcp.wendler.advice import AdviceClient
from wendler_mcp.wendler.models import MainLift
from wendler_mcp.wendler.store import JsonStore


@pytest.fixture
def tool_store(tmp_path, monkeypatch):
    store = JsonStore(tmp_path)
    monkeypatch.setattr(server, "store", store)
    return store


@pytest.fixture
def advice_text(monkeypatch):
    def handler(request):
        text = json.dumps({"adjustmentRecommendation": "Increase your squat training max by 10 lb."})
        return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]})

    monkeypatch.setattr(server, "advice", AdviceClient(api_key="k", transport=httpx.MockTransport(handler)))


@pytest_asyncio.fixture
async def saved_profile(tool_store):
    await server.save_profile(
        start_date="2024-01-01",
        schedule={"Monday": "squat", "wednesday": "Bench Press"},
        squat=300,
        bench_press=225,
        deadlift=405,
        overhead_press=135,
    )
    return tool_store.load_profile()


class TestProfileTools:

    @pytest.mark.asyncio
    async def test_no_profile(self, tool_store):
        assert await server.get_profile() == server.SETUP_MESSAGE
        assert await server.get_today("2024-01-01") == server.SETUP_MESSAGE

    @pytest.mark.asyncio
    async def test_save_profile(self, saved_profile):
        assert saved_profile.training_maxes[MainLift.SQUAT] == 270
        assert [e.lift for e in saved_profile.workout_schedule] == [MainLift.SQUAT, MainLift.BENCH_PRESS]
        text = await server.get_profile()
        assert "Monday: Squat" in text
        assert "Squat: 1RM 300 lb, TM 270 lb" in text

    @pytest.mark.asyncio
    async def test_save_profile_rejects_bad_input(self, tool_store):
        result = await server.save_profile(
            start_date="2024-01-01", schedule={"Funday": "squat"},
            squat=300, bench_press=225, deadlift=405, overhead_press=135,
        )
        assert result.startswith("Profile not saved")
        assert tool_store.load_profile() is None

    @pytest.mark.asyncio
    async def test_reset_progress(self, saved_profile, tool_store):
        await server.log_workout("2024-01-01", "squat", [5, 5, 8])
        result = await server.reset_progress()
        assert "Progress reset" in result
        profile = tool_store.load_profile()
        assert profile.workout_schedule == []
        assert profile.start_date == dt.date.today()
        assert tool_store.load_logs() == []
        assert "incomplete" in await server.get_today()


class TestPlanTools:

    @pytest.mark.asyncio
    async def test_today(self, saved_profile):
        text = await server.get_today("2024-01-01")
        assert text.startswith("Cycle 1, week 1")
        assert "175 lb x 5 @ 65%" in text
        assert "225 lb x 5+ @ 85% (AMRAP)" in text

    @pytest.mark.asyncio
    async def test_rest_day(self, saved_profile):
        assert "Rest day" in await server.get_today("2024-01-02")

    @pytest.mark.asyncio
    async def test_before_start(self, saved_profile):
        assert await server.get_today("2023-12-25") == "The program starts on 2024-01-01."

    @pytest.mark.asyncio
    async def test_bad_date(self, saved_profile):
        assert "Invalid date" in await server.get_today("01/01/2024")

    @pytest.mark.asyncio
    async def test_cycle(self, saved_profile):
        text = await server.get_cycle(2)
        assert text.startswith("# Cycle 2: 2024-01-29 to 2024-02-25")
        assert "## Week 4 (Deload)" in text

    @pytest.mark.asyncio
    async def test_invalid_cycle(self, saved_profile):
        assert "No cycle available" in await server.get_cycle(0)

    @pytest.mark.asyncio
    async def test_week(self, saved_profile):
        text = await server.get_week(1, 2)
        assert "Monday 2024-01-08: Squat" in text
        assert "Wednesday 2024-01-10: Bench Press" in text
        assert await server.get_week(1, 5) == "No week 5 in cycle 1."

    @pytest.mark.asyncio
    async def test_week_shows_logged_reps(self, saved_profile):
        await server.log_workout("2024-01-01", "squat", [5, 5, 9])
        text = await server.get_week(1, 1)
        assert "Monday 2024-01-01: Squat ✓" in text
        assert "-> 9 reps" in text
        assert "Wednesday 2024-01-03: Bench Press ✓" not in text


class TestLoggingTools:

    @pytest.mark.asyncio
    async def test_log_planned_workout(self, saved_profile, tool_store):
        text = await server.log_workout("2024-01-01", "squat", [5, 5, 9])
        assert text.startswith("Logged Squat on 2024-01-01.")
        assert "estimated 1RM 290 lb" in text

        logs = tool_store.load_logs()
        assert len(logs) == 1
        assert [s.actual_reps for s in logs[0].completed_sets] == [5, 5, 9]
        assert logs[0].training_max_used == 270

        today = await server.get_today("2024-01-01")
        assert "Squat ✓" in today
        assert "-> 9 reps" in today

    @pytest.mark.asyncio
    async def test_too_few_reps_for_planned_session(self, saved_profile, tool_store):
        text = await server.log_workout("2024-01-01", "squat", [3])
        assert "has 3 sets; got 1 rep counts" in text
        assert tool_store.load_logs() == []

    @pytest.mark.asyncio
    async def test_too_many_reps_for_planned_session(self, saved_profile, tool_store):
        text = await server.log_workout("2024-01-08", "squat", [3, 3, 6, 9, 9])
        assert "has 3 sets; got 5 rep counts" in text
        assert tool_store.load_logs() == []

    @pytest.mark.asyncio
    async def test_off_plan_needs_weights(self, saved_profile, tool_store):
        text = await server.log_workout("2024-01-02", "squat", [5])
        assert "No Squat session is planned" in text
        assert tool_store.load_logs() == []

    @pytest.mark.asyncio
    async def test_off_plan_with_weights(self, saved_profile, tool_store):
        text = await server.log_workout("2024-01-02", "deadlift", [5, 3], weights=[315, 365])
        assert "not part of the planned cycle" in text
        logs = tool_store.load_logs()
        assert logs[0].exercise == MainLift.DEADLIFT
        assert logs[0].completed_sets[-1].is_amrap

    @pytest.mark.asyncio
    async def test_negative_reps_rejected(self, saved_profile, tool_store):
        text = await server.log_workout("2024-01-01", "squat", [5, -1, 3])
        assert text.startswith("Workout not logged")
        assert tool_store.load_logs() == []

    @pytest.mark.asyncio
    async def test_unknown_lift(self, saved_profile):
        assert "Unknown lift" in await server.log_workout("2024-01-01", "curl", [10])

    @pytest.mark.asyncio
    async def test_progress(self, saved_profile):
        await server.log_workout("2024-01-01", "squat", [5, 5, 9])
        await server.log_workout("2024-01-08", "squat", [3, 3, 6])
        text = await server.get_progress("squat")
        assert "## Squat" in text
        assert "2024-01-01: e1RM 290 lb (225 x 9)" in text
        assert "Recent sessions:" in text

    @pytest.mark.asyncio
    async def test_weight_adjustment(self, saved_profile, advice_text):
        assert "No workout history" in await server.get_weight_adjustment("squat")
        await server.log_workout("2024-01-01", "squat", [5, 5, 9])
        assert await server.get_weight_adjustment("squat") == "Increase your squat training max by 10 lb."
