"""環境ドライバから呼ばれる意思決定コアの契約。"""

from __future__ import annotations

from typing import Protocol

from adc.domain.value_objects.decision import DecisionResult


class AgentDecisionCorePort(Protocol):
    """percept を 1 件ずつ受けて action か失敗を返す抽象ポート。"""

    def advance(self, percept: object) -> DecisionResult[object]:
        """受信順に 1 回ずつ呼ばれ、成否を結果値として返す。"""
