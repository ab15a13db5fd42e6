"""percept 系列から action への静的な対応表。"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from types import MappingProxyType
from typing import Generic, TypeVar

from adc.domain.value_objects.percept_sequence import PerceptSequence

ActionT = TypeVar("ActionT")


class DuplicateTableKeyError(ValueError):
    """同じ percept 系列が複数回登録された場合の例外。"""


class DecisionTable(Mapping[PerceptSequence, ActionT], Generic[ActionT]):
    """起動前に構築され、運用中は変更されない決定テーブル。"""

    __slots__ = ("_entries", "_horizon")

    def __init__(self, entries: Mapping[Sequence[object], ActionT] | None = None) -> None:
        """系列→action の対応を受け取り、キーを tuple に正規化して保持する。"""
        self._entries: Mapping[PerceptSequence, ActionT] = MappingProxyType({})
        self._horizon = 0
        self._freeze((entries or {}).items())

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[tuple[Sequence[object], ActionT]],
    ) -> DecisionTable[ActionT]:
        """(系列, action) の列から重複を許さずにテーブルを構築する。"""
        table: DecisionTable[ActionT] = cls()
        table._freeze(entries)
        return table

    @property
    def horizon(self) -> int:
        """登録済みキーの最大長を返す。"""
        return self._horizon

    def _freeze(self, entries: Iterable[tuple[Sequence[object], ActionT]]) -> None:
        normalized: dict[PerceptSequence, ActionT] = {}
        for percepts, action in entries:
            key = tuple(percepts)
            if not key:
                raise ValueError("percept 系列は空にできません。")
            if key in normalized:
                raise DuplicateTableKeyError(f"percept 系列が重複しています: {key!r}")
            normalized[key] = action
        self._entries = MappingProxyType(normalized)
        self._horizon = max((len(key) for key in normalized), default=0)

    def __getitem__(self, key: PerceptSequence) -> ActionT:
        return self._entries[key]

    def __iter__(self) -> Iterator[PerceptSequence]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DecisionTable(entries={len(self)}, horizon={self._horizon})"
