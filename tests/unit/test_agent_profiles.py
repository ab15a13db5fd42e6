import json
from pathlib import Path

import pytest

from adc.adapters.outbound.agent_profiles import (
    AgentProfileError,
    ReflexAgentProfile,
    TableAgentProfile,
    TableEntryProfile,
    build_agent,
    load_agent_profile,
)
from adc.application.use_cases.simple_reflex_agent import SimpleReflexAgent
from adc.application.use_cases.table_driven_agent import TableDrivenAgent
from adc.domain.services.table_enumeration import TableTooLargeError
from adc.domain.value_objects.decision import DecisionErrorKind, DecisionResult
from adc.domain.value_objects.decision_table import DuplicateTableKeyError


def _write_json(path: Path, payload: object) -> Path:
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_load_table_profile_and_build_agent(tmp_path: Path) -> None:
    path = _write_json(
        tmp_path / "table.json",
        {
            "strategy": "table",
            "entries": [
                {"percepts": ["Sunny"], "action": "Open"},
                {"percepts": ["Rainy"], "action": "Close"},
            ],
        },
    )

    profile = load_agent_profile(path)
    agent = build_agent(profile)

    assert isinstance(profile, TableAgentProfile)
    assert isinstance(agent, TableDrivenAgent)
    assert agent.table.horizon == 1
    assert agent.advance("Sunny") == DecisionResult.success("Open")
    assert agent.advance("Rainy").error_kind is DecisionErrorKind.NO_MATCHING_HISTORY


def test_load_reflex_profile_and_build_agent(tmp_path: Path) -> None:
    path = _write_json(
        tmp_path / "reflex.json",
        {
            "strategy": "reflex",
            "interpretation": {"Sunny": "Good", "Rainy": "Bad"},
            "rules": {"Good": "Open", "Bad": "Close"},
        },
    )

    profile = load_agent_profile(path)
    agent = build_agent(profile)

    assert isinstance(profile, ReflexAgentProfile)
    assert profile.unrecognized_fallback is None
    assert isinstance(agent, SimpleReflexAgent)
    assert agent.advance("Rainy") == DecisionResult.success("Close")
    assert agent.advance("Cloudy").error_kind is DecisionErrorKind.NO_APPLICABLE_RULE


def test_reflex_profile_fallback_is_applied_only_when_configured() -> None:
    profile = ReflexAgentProfile(
        strategy="reflex",
        interpretation={"Sunny": "Good"},
        rules={"Good": "Open"},
        unrecognized_fallback="Close",
    )

    agent = build_agent(profile)

    assert agent.advance("Cloudy") == DecisionResult.success("Close")


def test_load_agent_profile_rejects_invalid_payload(tmp_path: Path) -> None:
    path = _write_json(tmp_path / "bad.json", {"strategy": "utility"})

    with pytest.raises(AgentProfileError, match="形式"):
        load_agent_profile(path)


def test_load_agent_profile_rejects_missing_file(tmp_path: Path) -> None:
    with pytest.raises(AgentProfileError, match="読み込めません"):
        load_agent_profile(tmp_path / "missing.json")


def test_build_agent_rejects_duplicate_table_entries() -> None:
    profile = TableAgentProfile(
        strategy="table",
        entries=[
            TableEntryProfile(percepts=["Sunny"], action="Open"),
            TableEntryProfile(percepts=["Sunny"], action="Close"),
        ],
    )

    with pytest.raises(DuplicateTableKeyError):
        build_agent(profile)


def test_build_agent_enforces_max_table_entries() -> None:
    profile = TableAgentProfile(
        strategy="table",
        entries=[
            TableEntryProfile(percepts=["Sunny"], action="Open"),
            TableEntryProfile(percepts=["Rainy"], action="Close"),
        ],
    )

    with pytest.raises(TableTooLargeError, match="max_entries=1"):
        build_agent(profile, max_table_entries=1)
