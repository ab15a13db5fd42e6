"""エージェントが受け取った percept の追記専用ログ。"""

from __future__ import annotations

from typing import Generic, TypeVar

PerceptT = TypeVar("PerceptT")


class PerceptLog(Generic[PerceptT]):
    """到着順に percept を保持する。

    切り詰めや並べ替えは行わないため、長さは呼び出し回数に比例して増え続ける。
    """

    def __init__(self) -> None:
        self._percepts: list[PerceptT] = []

    def append(self, percept: PerceptT) -> None:
        """percept を末尾に追加する。"""
        self._percepts.append(percept)

    def as_sequence(self) -> tuple[PerceptT, ...]:
        """現時点の内容を検索キーとして返す。"""
        return tuple(self._percepts)

    def __len__(self) -> int:
        return len(self._percepts)
