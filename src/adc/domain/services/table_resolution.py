"""percept 履歴全体の完全一致でテーブルから action を引く。"""

from __future__ import annotations

from typing import TypeVar

from adc.domain.entities.percept_log import PerceptLog
from adc.domain.value_objects.decision import DecisionResult, NoMatchingHistoryError
from adc.domain.value_objects.decision_table import DecisionTable

ActionT = TypeVar("ActionT")


def resolve_from_table(
    percept: object,
    log: PerceptLog[object],
    table: DecisionTable[ActionT],
) -> DecisionResult[ActionT]:
    """percept をログへ追記し、追記後の系列でテーブルを検索する。

    一致しない場合は既定 action を作らず NoMatchingHistoryError を返す。
    """
    log.append(percept)
    sequence = log.as_sequence()
    if sequence not in table:
        return DecisionResult.failure(NoMatchingHistoryError(sequence))
    return DecisionResult.success(table[sequence])
