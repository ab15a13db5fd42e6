"""FastAPI ベースのエージェント意思決定 API。"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, HTTPException, status

from adc.adapters.inbound.http.schemas import (
    CreateAgentSessionRequest,
    CreateAgentSessionResponse,
    DecisionResponse,
    ErrorResponse,
    HealthResponse,
    PerceptRequest,
    SessionSummaryResponse,
)
from adc.adapters.outbound.agent_profiles import (
    ReflexAgentProfile,
    TableAgentProfile,
    build_agent,
    load_agent_profile,
)
from adc.application.use_cases.agent_session import (
    AgentSessionNotFoundError,
    AgentSessionUseCase,
)
from adc.domain.services.table_enumeration import DEFAULT_MAX_TABLE_ENTRIES

_DEFAULT_MAX_SESSIONS = 200


def create_app(
    *,
    agent_session_use_case: AgentSessionUseCase | None = None,
    max_table_entries: int | None = None,
    default_profile: TableAgentProfile | ReflexAgentProfile | None = None,
) -> FastAPI:
    """エージェント意思決定 API アプリを構築する。"""
    _load_runtime_env()
    use_case = agent_session_use_case or AgentSessionUseCase(
        max_sessions=_resolve_positive_int_env("ADC_MAX_SESSIONS", default=_DEFAULT_MAX_SESSIONS)
    )

    app = FastAPI(
        title="Agent Decision Core API",
        version="0.1.0",
    )
    app.state.agent_session_use_case = use_case
    app.state.max_table_entries = max_table_entries or _resolve_positive_int_env(
        "ADC_MAX_TABLE_ENTRIES",
        default=DEFAULT_MAX_TABLE_ENTRIES,
    )
    app.state.default_profile = default_profile or _load_default_profile()
    _register_routes(app)
    return app


def _register_routes(app: FastAPI) -> None:
    api = APIRouter(prefix="/api")

    @api.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @api.post(
        "/agents",
        response_model=CreateAgentSessionResponse,
        responses={400: {"model": ErrorResponse}},
    )
    def create_agent_session(
        request: CreateAgentSessionRequest | None = None,
    ) -> CreateAgentSessionResponse:
        use_case: AgentSessionUseCase = app.state.agent_session_use_case
        profile = request.profile if request is not None else None
        profile = profile or app.state.default_profile
        if profile is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="profile が指定されておらず、既定プロファイルもありません。",
            )

        try:
            agent = build_agent(profile, max_table_entries=app.state.max_table_entries)
        except ValueError as exc:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

        session_id = use_case.create_session(agent=agent, strategy=profile.strategy)
        return CreateAgentSessionResponse(session_id=session_id, strategy=profile.strategy)

    @api.post(
        "/agents/{session_id}/percepts",
        response_model=DecisionResponse,
        responses={404: {"model": ErrorResponse}},
    )
    def submit_percept(session_id: str, request: PerceptRequest) -> DecisionResponse:
        use_case: AgentSessionUseCase = app.state.agent_session_use_case
        try:
            reply = use_case.submit_percept(session_id=session_id, percept=request.percept)
        except AgentSessionNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

        result = reply.result
        return DecisionResponse(
            session_id=reply.session_id,
            step=reply.step,
            ok=result.is_ok,
            action=None if result.action is None else str(result.action),
            error_kind=None if result.error_kind is None else str(result.error_kind),
            error=None if result.error is None else str(result.error),
        )

    @api.get(
        "/agents/{session_id}",
        response_model=SessionSummaryResponse,
        responses={404: {"model": ErrorResponse}},
    )
    def describe_agent_session(session_id: str) -> SessionSummaryResponse:
        use_case: AgentSessionUseCase = app.state.agent_session_use_case
        try:
            summary = use_case.describe_session(session_id)
        except AgentSessionNotFoundError as exc:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc

        return SessionSummaryResponse(
            session_id=summary.session_id,
            strategy=summary.strategy,
            step_count=summary.step_count,
            percepts=[str(percept) for percept in summary.percepts],
        )

    app.include_router(api)


def _load_default_profile() -> TableAgentProfile | ReflexAgentProfile | None:
    raw_path = os.getenv("ADC_DEFAULT_PROFILE", "").strip()
    if not raw_path:
        return None
    return load_agent_profile(Path(raw_path))


def _resolve_positive_int_env(name: str, *, default: int) -> int:
    """環境変数を正の整数として読み、不正値なら既定値を返す。"""
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        value = int(raw_value.strip())
    except ValueError:
        return default
    if value < 1:
        return default
    return value


def _load_runtime_env() -> None:
    app_env = os.getenv("APP_ENV", "development")
    env_file = Path(f".env.{app_env}")
    if env_file.exists():
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)
