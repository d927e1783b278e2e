from __future__ import annotations

import os
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from multichat_providers.config.defaults import SERVICE_CORS_DEFAULT_ORIGINS
from multichat_providers.dispatcher import Dispatcher, get_dispatcher

from .app_parts.app_core import (
    ChatBody,
    _build_ollama_status_response,
    _build_providers_response,
    _handle_chat,
)


app = FastAPI(title="Multichat Service", version="0.1.0")


# ---------------------------------------------------------------------------
# CORS configuration
# ---------------------------------------------------------------------------

cors_origins_env = os.getenv("MULTICHAT_CORS_ORIGINS", SERVICE_CORS_DEFAULT_ORIGINS)
allow_origins = [o.strip() for o in cors_origins_env.split(",") if o.strip()]
app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_dispatcher_dep() -> Dispatcher:
    """FastAPI dependency returning the process-wide dispatcher."""
    return get_dispatcher()


# ---------------------------------------------------------------------------
# Health endpoint
# ---------------------------------------------------------------------------


@app.get("/api/health")
def health() -> Dict[str, Any]:
    """Check the health status of the service."""
    return {"ok": True}


# ---------------------------------------------------------------------------
# Providers and status endpoints
# ---------------------------------------------------------------------------


@app.get("/api/providers")
def get_providers() -> Dict[str, Any]:
    """List the supported providers and their suggested models."""
    return _build_providers_response()


@app.get("/api/ollama/status")
def get_ollama_status(host: Optional[str] = None) -> Dict[str, Any]:
    """Report whether the Ollama daemon is reachable and which models it has.

    Daemon failures are part of the payload, not an HTTP error.
    """
    return _build_ollama_status_response(host)


# ---------------------------------------------------------------------------
# Chat endpoint
# ---------------------------------------------------------------------------


@app.post("/api/chat")
def post_chat(body: ChatBody, dispatcher: Dispatcher = Depends(get_dispatcher_dep)) -> Any:
    """Send one user turn and return the assistant's reply text."""
    return _handle_chat(body, dispatcher)


# ---------------------------------------------------------------------------
# Application factory
# ---------------------------------------------------------------------------


def get_app() -> FastAPI:
    """Return the FastAPI application instance."""
    return app
