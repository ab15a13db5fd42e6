"""percept 系列を表す型。"""

from __future__ import annotations

from typing import TypeAlias

# 長さと要素順を含めて等価比較され、テーブル検索キーになる。
PerceptSequence: TypeAlias = tuple[object, ...]
