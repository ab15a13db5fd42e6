"""対応表から構成する reflex 戦略用アダプタ群。"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final, Generic, TypeVar

from adc.domain.value_objects.decision import DecisionResult, NoApplicableRuleError
from adc.domain.value_objects.state import Unrecognized

PerceptT = TypeVar("PerceptT")
StateT = TypeVar("StateT")
ActionT = TypeVar("ActionT")


class _NoFallback:
    """フォールバック未設定を表す番兵。"""

    def __repr__(self) -> str:
        return "NO_FALLBACK"


NO_FALLBACK: Final = _NoFallback()


class MappingPerceptInterpreter(Generic[PerceptT, StateT]):
    """percept→状態の対応表で解釈する全域関数。

    対応表に無い percept（ハッシュ不能なものを含む）は Unrecognized に写す。
    """

    def __init__(self, interpretation: Mapping[PerceptT, StateT]) -> None:
        self._interpretation = dict(interpretation)

    def __call__(self, percept: PerceptT) -> StateT | Unrecognized[PerceptT]:
        try:
            return self._interpretation[percept]
        except (KeyError, TypeError):
            return Unrecognized(percept)


class MappingRuleMatcher(Generic[StateT, ActionT]):
    """状態→action の対応表でルール照合する。"""

    def __init__(
        self,
        rules: Mapping[StateT, ActionT],
        *,
        unrecognized_fallback: ActionT | _NoFallback = NO_FALLBACK,
    ) -> None:
        """ルール表と、Unrecognized 状態に対する任意のフォールバック action を受け取る。"""
        self._rules = dict(rules)
        self._unrecognized_fallback = unrecognized_fallback

    @property
    def has_fallback(self) -> bool:
        return self._unrecognized_fallback is not NO_FALLBACK

    def __call__(self, state: StateT | Unrecognized[object]) -> DecisionResult[ActionT]:
        if isinstance(state, Unrecognized):
            if isinstance(self._unrecognized_fallback, _NoFallback):
                # フォールバックは明示設定された場合のみ使う。
                return DecisionResult.failure(NoApplicableRuleError(state))
            return DecisionResult.success(self._unrecognized_fallback)

        try:
            action = self._rules[state]
        except (KeyError, TypeError):
            return DecisionResult.failure(NoApplicableRuleError(state))
        return DecisionResult.success(action)
