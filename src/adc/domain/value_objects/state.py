"""Reflex 戦略で扱う内部状態の値オブジェクト。"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

PerceptT = TypeVar("PerceptT")


@dataclass(frozen=True, slots=True)
class Unrecognized(Generic[PerceptT]):
    """解釈できなかった percept を捨てずに保持する状態。

    等価性は保持している percept の等価性で決まる。
    """

    percept: PerceptT
