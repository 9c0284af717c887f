"""FastAPI application: request execution backend"""
from datetime import datetime, timezone
from typing import Dict, Optional

from fastapi import Body, FastAPI, HTTPException, Response
from pydantic import BaseModel, Field

from application.exceptions import RequestExecutionError
from application.ports.requests_client import RequestsSessionHttpClient
from application.services.auth_config_builder import build_auth_config
from application.services.request_executor import RequestExecutor
from application.services.request_service import RequestService
from domain.exceptions import RequestNotFoundError, ValidationError
from domain.request import (
    AuthConfig,
    AuthType,
    BodyType,
    HttpMethod,
    RequestAuth,
    RequestBody,
    RequestDescriptor,
    request_display_name,
)
from domain.request_fields import AuthFieldValues
from infrastructure.config.settings import Settings
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.requests_store.in_memory_request_repository import InMemoryRequestRepository


# Request models
class RequestBodyModel(BaseModel):
    type: BodyType = Field(description="json / xml / form / raw")
    content: str = Field(default="", description="Raw body text")


class RequestAuthModel(BaseModel):
    type: AuthType = Field(description="basic / bearer / apikey")
    config: Dict[str, str] = Field(default_factory=dict, description="Per-type auth fields")


class CreateRequestModel(BaseModel):
    """Request descriptor as sent by the composer"""
    name: Optional[str] = Field(default=None, description="Display label")
    method: HttpMethod = Field(default=HttpMethod.GET, description="HTTP method")
    url: str = Field(description="Absolute target URL")
    headers: Dict[str, str] = Field(default_factory=dict, description="Request headers")
    query_params: Dict[str, str] = Field(default_factory=dict, description="Query parameters")
    body: Optional[RequestBodyModel] = Field(default=None, description="Request body")
    auth: Optional[RequestAuthModel] = Field(default=None, description="Authentication")


class StoredRequestResponse(BaseModel):
    id: str = Field(description="Server generated request id")
    name: str
    method: str
    url: str
    headers: Dict[str, str]
    query_params: Dict[str, str]
    body: Optional[Dict[str, str]] = None
    auth: Optional[Dict[str, object]] = None
    created_at: datetime
    updated_at: datetime


class ExecuteResponse(BaseModel):
    """Outcome of the outbound call"""
    status_code: int = Field(description="HTTP status of the target")
    duration: float = Field(description="Elapsed time in milliseconds")
    size: int = Field(description="Body size in bytes")
    headers: Dict[str, str] = Field(description="Response headers")
    body: str = Field(description="Response body text")


def to_descriptor(model: CreateRequestModel) -> RequestDescriptor:
    body = None
    if model.body is not None and model.body.type is not BodyType.NONE and model.body.content:
        body = RequestBody(type=model.body.type, content=model.body.content)
    auth = None
    if model.auth is not None and model.auth.type is not AuthType.NONE:
        auth = RequestAuth(type=model.auth.type, config=_auth_config(model.auth))
    return RequestDescriptor(
        name=model.name or request_display_name(model.url),
        method=model.method,
        url=model.url,
        headers={k: v for k, v in model.headers.items() if k and v},
        query_params={k: v for k, v in model.query_params.items() if k and v},
        body=body,
        auth=auth,
    )


def _auth_config(model: RequestAuthModel) -> AuthConfig:
    config = model.config
    fields = AuthFieldValues(
        username=config.get("username"),
        password=config.get("password"),
        token=config.get("token"),
        key=config.get("key"),
        value=config.get("value"),
        header=config.get("header"),
    )
    built = build_auth_config(model.type, fields)
    if built is None:
        raise ValidationError(f"Unsupported auth type: {model.type.value}")
    return built


# FastAPI application
app = FastAPI(
    title="Litepost Execution Backend",
    description="Stores composed requests and executes them",
    version="1.0.0"
)

# Settings and shared adapters
SETTINGS = Settings.from_env()
setup_console_logging(level=SETTINGS.log_level)
LOGGER = ConsoleLogger()
REQUEST_REPOSITORY = InMemoryRequestRepository(max_records=SETTINGS.max_stored_requests)
HTTP_CLIENT = RequestsSessionHttpClient(
    base_headers={"User-Agent": SETTINGS.user_agent},
    timeout_sec=SETTINGS.http_timeout_sec,
)


def _build_request_service() -> RequestService:
    executor = RequestExecutor(HTTP_CLIENT, LOGGER)
    return RequestService(REQUEST_REPOSITORY, executor, LOGGER)


@app.get("/health")
def health():
    """Liveness check"""
    return {
        "status": "ok",
        "service": "litepost",
        "time": datetime.now(timezone.utc).isoformat(),
    }


@app.post("/api/requests", response_model=StoredRequestResponse)
def create_request(request: CreateRequestModel = Body(...)) -> StoredRequestResponse:
    """
    Store a composed request.

    Returns:
        The stored request with its server generated id
    """
    try:
        record = _build_request_service().create(to_descriptor(request))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return StoredRequestResponse(**record.to_payload())


@app.get("/api/requests/{request_id}", response_model=StoredRequestResponse)
def get_request(request_id: str) -> StoredRequestResponse:
    try:
        record = _build_request_service().get(request_id)
    except RequestNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return StoredRequestResponse(**record.to_payload())


@app.post("/api/requests/{request_id}/execute", response_model=ExecuteResponse)
def execute_request(request_id: str) -> ExecuteResponse:
    """
    Execute a stored request against its target.

    Args:
        request_id: id returned by POST /api/requests

    Returns:
        Status, headers, body, duration and size of the target response
    """
    logger = LOGGER.bind(request_id=request_id)
    try:
        response = _build_request_service().execute(request_id)
    except RequestNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValidationError as e:
        logger.error("backend.execute_failed", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except RequestExecutionError as e:
        logger.error("backend.execute_failed", error=str(e))
        raise HTTPException(status_code=502, detail=str(e))
    return ExecuteResponse(**response.to_payload())


@app.delete("/api/requests/{request_id}", status_code=204)
def delete_request(request_id: str) -> Response:
    """Drop a stored request once the client no longer needs it."""
    try:
        _build_request_service().delete(request_id)
    except RequestNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
