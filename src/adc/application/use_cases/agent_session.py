"""エージェントインスタンスをセッション単位で保持するユースケース。"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import uuid4

from adc.application.use_cases.table_driven_agent import TableDrivenAgent
from adc.domain.value_objects.decision import DecisionResult
from adc.ports.inbound.agent_decision_core_port import AgentDecisionCorePort

_LOG = logging.getLogger(__name__)


class AgentSessionNotFoundError(KeyError):
    """指定セッションが存在しない場合の例外。"""


@dataclass(frozen=True, slots=True)
class PerceptReply:
    """percept 1 件の処理結果。"""

    session_id: str
    step: int
    result: DecisionResult[object]


@dataclass(frozen=True, slots=True)
class SessionSummary:
    """UI/API 向けに公開するセッション状態。"""

    session_id: str
    strategy: str
    step_count: int
    percepts: tuple[object, ...]


@dataclass(slots=True)
class _SessionContext:
    """内部セッション状態。"""

    agent: AgentDecisionCorePort
    strategy: str
    step_count: int


class AgentSessionUseCase:
    """独立したエージェントをセッションごとに保持し、percept を配送する。"""

    def __init__(self, *, max_sessions: int = 200) -> None:
        if max_sessions < 1:
            raise ValueError("max_sessions は 1 以上である必要があります。")
        self._max_sessions = max_sessions
        self._sessions: dict[str, _SessionContext] = {}

    def create_session(self, *, agent: AgentDecisionCorePort, strategy: str) -> str:
        """構築済みエージェントを登録して session_id を返す。"""
        if not strategy:
            raise ValueError("strategy は空にできません。")
        if len(self._sessions) >= self._max_sessions:
            self._evict_oldest_session()

        session_id = str(uuid4())
        self._sessions[session_id] = _SessionContext(agent=agent, strategy=strategy, step_count=0)
        return session_id

    def submit_percept(self, *, session_id: str, percept: object) -> PerceptReply:
        """指定セッションのエージェントへ percept を 1 件渡す。"""
        session = self._get_session(session_id)
        result = session.agent.advance(percept)
        session.step_count += 1

        if not result.is_ok:
            _LOG.info(
                "Decision failed: session_id=%s step=%s kind=%s",
                session_id,
                session.step_count,
                result.error_kind,
            )

        return PerceptReply(session_id=session_id, step=session.step_count, result=result)

    def describe_session(self, session_id: str) -> SessionSummary:
        """セッションの戦略・ステップ数・保持中の履歴を返す。"""
        session = self._get_session(session_id)
        percepts: tuple[object, ...] = ()
        if isinstance(session.agent, TableDrivenAgent):
            percepts = session.agent.percepts
        return SessionSummary(
            session_id=session_id,
            strategy=session.strategy,
            step_count=session.step_count,
            percepts=percepts,
        )

    def _get_session(self, session_id: str) -> _SessionContext:
        session = self._sessions.get(session_id)
        if session is None:
            raise AgentSessionNotFoundError(f"session_id が存在しません: {session_id}")
        return session

    def _evict_oldest_session(self) -> None:
        """最大セッション数超過時に最古セッションを削除する。"""
        oldest_session_id = next(iter(self._sessions))
        del self._sessions[oldest_session_id]
        _LOG.info("Session evicted: session_id=%s", oldest_session_id)
