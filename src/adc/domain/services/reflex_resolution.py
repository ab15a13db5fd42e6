"""単一 percept を解釈とルール照合で action に写す。"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from adc.domain.value_objects.decision import DecisionResult

PerceptT = TypeVar("PerceptT")
StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")


def identity(percept: PerceptT) -> PerceptT:
    """percept をそのまま状態として返す解釈関数。"""
    return percept


def resolve_by_reflex(
    percept: PerceptT,
    interpret: Callable[[PerceptT], StateT],
    match_rule: Callable[[StateT], DecisionResult[ActionT]],
) -> DecisionResult[ActionT]:
    """interpret で状態に変換し、match_rule の結果をそのまま返す。

    interpret は全域関数であること。履歴は参照も保持もしない。
    """
    state = interpret(percept)
    result = match_rule(state)
    if not isinstance(result, DecisionResult):
        raise TypeError(
            f"match_rule は DecisionResult を返す必要があります: {type(result).__name__}"
        )
    return result
