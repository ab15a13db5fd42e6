"""HTTP API の入出力スキーマ。"""

from __future__ import annotations

from pydantic import BaseModel, Field

from adc.adapters.outbound.agent_profiles import AgentProfile


class HealthResponse(BaseModel):
    """ヘルスチェックレスポンス。"""

    status: str = "ok"


class CreateAgentSessionRequest(BaseModel):
    """エージェントセッション作成リクエスト。省略時は既定プロファイルを使う。"""

    profile: AgentProfile | None = None


class CreateAgentSessionResponse(BaseModel):
    """エージェントセッション作成レスポンス。"""

    session_id: str
    strategy: str


class PerceptRequest(BaseModel):
    """percept 送信リクエスト。"""

    percept: str = Field(min_length=1, max_length=1_000)


class DecisionResponse(BaseModel):
    """percept 1 件に対する決定結果。失敗は ok=false と error_kind で表す。"""

    session_id: str
    step: int = Field(ge=1)
    ok: bool
    action: str | None = None
    error_kind: str | None = None
    error: str | None = None


class SessionSummaryResponse(BaseModel):
    """セッション状態レスポンス。"""

    session_id: str
    strategy: str
    step_count: int = Field(ge=0)
    percepts: list[str]


class ErrorResponse(BaseModel):
    """API エラーレスポンス。"""

    error: str
