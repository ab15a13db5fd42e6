"""有限 horizon の決定テーブルを列挙して構築する。"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from itertools import product
from typing import TypeVar

from adc.domain.value_objects.decision_table import DecisionTable
from adc.domain.value_objects.percept_sequence import PerceptSequence

ActionT = TypeVar("ActionT")

DEFAULT_MAX_TABLE_ENTRIES = 10_000


class TableTooLargeError(ValueError):
    """テーブル項目数が上限を超える場合の例外。"""


def count_table_entries(alphabet_size: int, horizon: int) -> int:
    """長さ 1..horizon の全系列数 sum(|P|^t) を返す。"""
    if alphabet_size < 0:
        raise ValueError("alphabet_size は 0 以上である必要があります。")
    if horizon < 0:
        raise ValueError("horizon は 0 以上である必要があります。")
    return sum(alphabet_size**length for length in range(1, horizon + 1))


def build_bounded_table(
    alphabet: Iterable[object],
    horizon: int,
    policy: Callable[[PerceptSequence], ActionT],
    *,
    max_entries: int = DEFAULT_MAX_TABLE_ENTRIES,
) -> DecisionTable[ActionT]:
    """alphabet 上の長さ 1..horizon の全系列を policy で action に写したテーブルを返す。"""
    if horizon < 1:
        raise ValueError("horizon は 1 以上である必要があります。")
    percepts = tuple(dict.fromkeys(alphabet))
    if not percepts:
        raise ValueError("alphabet は 1 件以上必要です。")

    expected_entries = count_table_entries(len(percepts), horizon)
    if expected_entries > max_entries:
        raise TableTooLargeError(
            "テーブル項目数が上限を超えます:"
            f" alphabet={len(percepts)} horizon={horizon}"
            f" entries={expected_entries} max_entries={max_entries}"
        )

    return DecisionTable.from_entries(
        (sequence, policy(sequence)) for sequence in _enumerate_sequences(percepts, horizon)
    )


def _enumerate_sequences(
    percepts: tuple[object, ...],
    horizon: int,
) -> Iterator[PerceptSequence]:
    """短い系列から順に全系列を返す。"""
    for length in range(1, horizon + 1):
        yield from product(percepts, repeat=length)
