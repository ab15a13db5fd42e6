"""最新 percept のみで決定する単純反射エージェント。"""

from __future__ import annotations

from collections.abc import Callable
from typing import Generic, TypeVar

from adc.domain.services.reflex_resolution import resolve_by_reflex
from adc.domain.value_objects.decision import DecisionResult

PerceptT = TypeVar("PerceptT")
StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")


class SimpleReflexAgent(Generic[PerceptT, StateT, ActionT]):
    """interpret と match_rule の合成で action を決める。履歴は持たない。"""

    def __init__(
        self,
        interpret: Callable[[PerceptT], StateT],
        match_rule: Callable[[StateT], DecisionResult[ActionT]],
    ) -> None:
        self._interpret = interpret
        self._match_rule = match_rule

    def advance(self, percept: PerceptT) -> DecisionResult[ActionT]:
        return resolve_by_reflex(percept, self._interpret, self._match_rule)
