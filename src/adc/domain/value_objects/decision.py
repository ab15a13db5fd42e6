"""意思決定の成否を表す値オブジェクトとエラー分類。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import ClassVar, Generic, TypeVar

ActionT = TypeVar("ActionT")


class DecisionErrorKind(StrEnum):
    """Resolver が返しうる失敗種別。"""

    NO_MATCHING_HISTORY = "no_matching_history"
    NO_APPLICABLE_RULE = "no_applicable_rule"


class DecisionError(Exception):
    """意思決定失敗の基底例外。

    advance からは送出されず DecisionResult に格納して返される。
    同じ型かつ同じ detail を持つ場合に等価とみなす。
    """

    kind: ClassVar[DecisionErrorKind]

    def __init__(self, message: str, detail: object) -> None:
        super().__init__(message)
        self.detail = detail

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecisionError):
            return NotImplemented
        return type(self) is type(other) and self.detail == other.detail

    def __hash__(self) -> int:
        return hash(type(self))


class NoMatchingHistoryError(DecisionError):
    """percept 系列に一致するテーブル項目が無い。"""

    kind = DecisionErrorKind.NO_MATCHING_HISTORY

    def __init__(self, percepts: tuple[object, ...]) -> None:
        super().__init__(
            f"percept 系列に一致するテーブル項目がありません: length={len(percepts)}",
            percepts,
        )

    @property
    def percepts(self) -> tuple[object, ...]:
        return self.detail  # type: ignore[return-value]


class NoApplicableRuleError(DecisionError):
    """状態に適用できるルールが無い。"""

    kind = DecisionErrorKind.NO_APPLICABLE_RULE

    def __init__(self, state: object) -> None:
        super().__init__(f"状態に適用できるルールがありません: {state!r}", state)

    @property
    def state(self) -> object:
        return self.detail


@dataclass(frozen=True, slots=True)
class DecisionResult(Generic[ActionT]):
    """action か DecisionError のどちらか一方を保持する結果。"""

    action: ActionT | None = None
    error: DecisionError | None = None

    def __post_init__(self) -> None:
        """action と error の排他性を検証する。"""
        if self.error is not None and self.action is not None:
            raise ValueError("action と error は同時に指定できません。")

    @classmethod
    def success(cls, action: ActionT) -> DecisionResult[ActionT]:
        return cls(action=action)

    @classmethod
    def failure(cls, error: DecisionError) -> DecisionResult[ActionT]:
        return cls(error=error)

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> DecisionErrorKind | None:
        if self.error is None:
            return None
        return self.error.kind

    def unwrap(self) -> ActionT:
        """成功時は action を返し、失敗時は保持している DecisionError を送出する。"""
        if self.error is not None:
            raise self.error
        return self.action  # type: ignore[return-value]
