"""JSON プロファイルからエージェントを構築するアダプタ。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from adc.adapters.outbound.mapping_reflex_components import (
    NO_FALLBACK,
    MappingPerceptInterpreter,
    MappingRuleMatcher,
)
from adc.application.use_cases.simple_reflex_agent import SimpleReflexAgent
from adc.application.use_cases.table_driven_agent import TableDrivenAgent
from adc.domain.services.table_enumeration import DEFAULT_MAX_TABLE_ENTRIES, TableTooLargeError
from adc.domain.value_objects.decision_table import DecisionTable
from adc.ports.inbound.agent_decision_core_port import AgentDecisionCorePort

_LOG = logging.getLogger(__name__)


class AgentProfileError(ValueError):
    """プロファイルの読み込み・検証失敗を表す例外。"""


class TableEntryProfile(BaseModel):
    """決定テーブルの 1 項目。"""

    percepts: list[str] = Field(min_length=1)
    action: str = Field(min_length=1)


class TableAgentProfile(BaseModel):
    """テーブル駆動エージェントの設定。"""

    strategy: Literal["table"]
    entries: list[TableEntryProfile] = Field(default_factory=list)


class ReflexAgentProfile(BaseModel):
    """単純反射エージェントの設定。"""

    strategy: Literal["reflex"]
    interpretation: dict[str, str]
    rules: dict[str, str]
    unrecognized_fallback: str | None = None


AgentProfile = Annotated[
    TableAgentProfile | ReflexAgentProfile,
    Field(discriminator="strategy"),
]

_PROFILE_ADAPTER: TypeAdapter[TableAgentProfile | ReflexAgentProfile] = TypeAdapter(AgentProfile)


def load_agent_profile(path: Path) -> TableAgentProfile | ReflexAgentProfile:
    """JSON ファイルを読み込んでプロファイルを検証する。"""
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AgentProfileError(f"プロファイルを読み込めません: {path}") from exc

    try:
        profile = _PROFILE_ADAPTER.validate_json(raw_text)
    except ValidationError as exc:
        raise AgentProfileError(
            f"プロファイルの形式が不正です: {path} errors={exc.error_count()}"
        ) from exc

    _LOG.info("Agent profile loaded: path=%s strategy=%s", path, profile.strategy)
    return profile


def build_agent(
    profile: TableAgentProfile | ReflexAgentProfile,
    *,
    max_table_entries: int = DEFAULT_MAX_TABLE_ENTRIES,
) -> AgentDecisionCorePort:
    """プロファイルの戦略に応じたエージェントを返す。"""
    if isinstance(profile, TableAgentProfile):
        return _build_table_agent(profile, max_table_entries=max_table_entries)
    return _build_reflex_agent(profile)


def _build_table_agent(
    profile: TableAgentProfile,
    *,
    max_table_entries: int,
) -> TableDrivenAgent[str]:
    if len(profile.entries) > max_table_entries:
        raise TableTooLargeError(
            "テーブル項目数が上限を超えます:"
            f" entries={len(profile.entries)} max_entries={max_table_entries}"
        )
    table = DecisionTable.from_entries((entry.percepts, entry.action) for entry in profile.entries)
    return TableDrivenAgent(table)


def _build_reflex_agent(profile: ReflexAgentProfile) -> SimpleReflexAgent[str, object, str]:
    fallback = NO_FALLBACK if profile.unrecognized_fallback is None else profile.unrecognized_fallback
    return SimpleReflexAgent(
        interpret=MappingPerceptInterpreter(profile.interpretation),
        match_rule=MappingRuleMatcher(profile.rules, unrecognized_fallback=fallback),
    )
