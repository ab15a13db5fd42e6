"""percept 列をエージェントへ順に入力する環境ドライバ。"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from adc.domain.value_objects.decision import DecisionResult
from adc.ports.inbound.agent_decision_core_port import AgentDecisionCorePort

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DecisionStep:
    """1 ステップ分の入力と結果。"""

    step: int
    percept: object
    result: DecisionResult[object]


@dataclass(frozen=True, slots=True)
class EpisodeResult:
    """episode 全体の実行結果。"""

    steps: tuple[DecisionStep, ...]
    stopped_early: bool = False

    @property
    def actions(self) -> tuple[object, ...]:
        """成功したステップの action を順に返す。"""
        return tuple(step.result.action for step in self.steps if step.result.is_ok)

    @property
    def failures(self) -> tuple[DecisionStep, ...]:
        return tuple(step for step in self.steps if not step.result.is_ok)


class EnvironmentDriverUseCase:
    """受信順を保って percept を 1 件ずつ advance に渡す。"""

    def __init__(self, agent: AgentDecisionCorePort, *, stop_on_failure: bool = False) -> None:
        """駆動対象エージェントと失敗時の停止方針を受け取る。"""
        self._agent = agent
        self._stop_on_failure = stop_on_failure

    def run_episode(self, percepts: Iterable[object]) -> EpisodeResult:
        """percept 列を順に処理し、各ステップの結果を返す。"""
        steps: list[DecisionStep] = []

        for step, percept in enumerate(percepts, start=1):
            result = self._agent.advance(percept)
            steps.append(DecisionStep(step=step, percept=percept, result=result))
            if result.is_ok:
                continue

            _LOG.info(
                "Decision failed: step=%s kind=%s",
                step,
                result.error_kind,
            )
            if self._stop_on_failure:
                return EpisodeResult(steps=tuple(steps), stopped_early=True)

        return EpisodeResult(steps=tuple(steps))
