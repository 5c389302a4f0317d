"""FastAPI application exposing the chat relay.

Everything the endpoints need (settings, availability registry, router and
access gate) is built once in :func:`create_app` and kept on ``app.state``.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Mapping
from contextlib import asynccontextmanager

import httpx
from fastapi import APIRouter, Depends, FastAPI, Header, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from chat_relay.auth import AccessGate
from chat_relay.availability import AvailabilityRegistry
from chat_relay.catalog import TOP5_MODELS
from chat_relay.config import Settings
from chat_relay.errors import ChatRelayError, ValidationError
from chat_relay.providers import BaseProvider, build_providers
from chat_relay.router import Router
from chat_relay.schemas import (
    AuthBody,
    ChatResponse,
    ConfigResponse,
    ConversationBody,
    TitleResponse,
    TokenResponse,
)
from chat_relay.types import ModelListing, ProviderName

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Solicitud invalida."
INTERNAL_ERROR = "Error al generar respuesta."

api = APIRouter(prefix="/api")


def get_router(request: Request) -> Router:
    return request.app.state.router


def get_gate(request: Request) -> AccessGate:
    return request.app.state.gate


@api.get("/config", response_model=ConfigResponse)
async def read_config(router: Router = Depends(get_router)) -> ConfigResponse:
    registry = router.registry
    return ConfigResponse(
        hasOpenAIKey=registry.is_available(ProviderName.OPENAI),
        hasAnyProviderKey=registry.any(),
        providerStatus=registry.status(),
        top5=list(TOP5_MODELS),
    )


@api.post("/auth", response_model=TokenResponse)
async def login(body: AuthBody, gate: AccessGate = Depends(get_gate)) -> TokenResponse:
    return TokenResponse(token=gate.authenticate(body.username, body.password))


@api.get("/models", response_model=ModelListing)
async def list_models(
    x_demo_token: str | None = Header(default=None),
    router: Router = Depends(get_router),
    gate: AccessGate = Depends(get_gate),
) -> ModelListing:
    gate.require(x_demo_token)
    return await router.list_models()


@api.post("/chat", response_model=ChatResponse)
async def chat(
    body: ConversationBody,
    x_demo_token: str | None = Header(default=None),
    router: Router = Depends(get_router),
    gate: AccessGate = Depends(get_gate),
) -> ChatResponse:
    gate.require(x_demo_token)
    text = await router.route_chat(body.provider, body.model, body.messages)
    return ChatResponse(text=text)


@api.post("/title", response_model=TitleResponse)
async def title(
    body: ConversationBody,
    x_demo_token: str | None = Header(default=None),
    router: Router = Depends(get_router),
    gate: AccessGate = Depends(get_gate),
) -> TitleResponse:
    gate.require(x_demo_token)
    return TitleResponse(title=await router.route_title(body.provider, body.model, body.messages))


def error_response(exc: ChatRelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content={"error": exc.message})


def create_app(
    settings: Settings | None = None,
    *,
    providers: Mapping[ProviderName, BaseProvider] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create the FastAPI app.

    ``providers`` replaces the adapters built from ``settings``; ``transport``
    is handed to the built adapters instead. Both exist for tests.
    """
    settings = settings or Settings.from_env()
    registry = AvailabilityRegistry.from_settings(settings)
    if providers is None:
        providers = build_providers(settings, registry, transport=transport)
    router = Router(registry, providers)

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
        logger.info("Provider status: %s", registry.status())
        yield
        await router.aclose()

    app = FastAPI(title="chat-relay", lifespan=lifespan)
    app.state.settings = settings
    app.state.router = router
    app.state.gate = AccessGate(settings, registry)

    app.include_router(api)
    app.add_api_route("/health", endpoint=lambda: {"status": "ok"}, methods=["GET"])

    @app.exception_handler(ChatRelayError)
    async def _relay_error_handler(_request: Request, exc: ChatRelayError) -> JSONResponse:
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def _validation_error_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.debug("Rejected request body: %s", exc.errors())
        return error_response(ValidationError(INVALID_REQUEST))

    @app.exception_handler(Exception)
    async def _unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return error_response(ChatRelayError(INTERNAL_ERROR))

    # Mounted last so it never shadows the API routes.
    if settings.static_dir is not None and settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=str(settings.static_dir), html=True), name="static")

    return app
