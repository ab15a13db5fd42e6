"""percept 履歴全体で決定するテーブル駆動エージェント。"""

from __future__ import annotations

from typing import Generic, TypeVar

from adc.domain.entities.percept_log import PerceptLog
from adc.domain.services.table_resolution import resolve_from_table
from adc.domain.value_objects.decision import DecisionResult
from adc.domain.value_objects.decision_table import DecisionTable

ActionT = TypeVar("ActionT")


class TableDrivenAgent(Generic[ActionT]):
    """受信した全 percept を記録し、系列の完全一致で action を引く。"""

    def __init__(self, table: DecisionTable[ActionT]) -> None:
        """構築済みのテーブルを受け取り、空のログで初期化する。"""
        self._table = table
        self._log: PerceptLog[object] = PerceptLog()

    @property
    def table(self) -> DecisionTable[ActionT]:
        return self._table

    @property
    def percepts(self) -> tuple[object, ...]:
        """これまでに受信した percept 系列を返す。"""
        return self._log.as_sequence()

    def advance(self, percept: object) -> DecisionResult[ActionT]:
        """percept を記録し、記録後の履歴に対応する action を返す。"""
        return resolve_from_table(percept, self._log, self._table)
