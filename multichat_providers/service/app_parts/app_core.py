from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from fastapi import HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from multichat_providers.base.errors import ErrorCode, ProviderError
from multichat_providers.base.models import Attachment, ChatRequest
from multichat_providers.base.utils.images import decode_image
from multichat_providers.catalog import list_providers
from multichat_providers.dispatcher import Dispatcher, get_dispatcher
from multichat_providers.ollama.status import check_ollama_status


class AttachmentDTO(BaseModel):
    """One image attachment carried as base64 text in the JSON body."""

    media_type: str
    data: str


class ChatBody(BaseModel):
    """Represents the body of a chat request.

    ``model`` may be omitted to use the provider default. The credential is
    used for this request only and is never stored by the service.
    """

    provider: str
    model: Optional[str] = None
    text: str = ""
    system_prompt: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    credential: Optional[str] = Field(default=None, repr=False)
    attachments: List[AttachmentDTO] = Field(default_factory=list)


_STATUS_BY_CODE: Dict[ErrorCode, int] = {
    ErrorCode.AUTHENTICATION_FAILED: 401,
    ErrorCode.RATE_LIMITED: 429,
    ErrorCode.CONNECTION_REFUSED: 503,
}


def _status_for(code: ErrorCode) -> int:
    """Map a normalized error code to the HTTP status of the error response."""
    if code.is_validation:
        return 400
    return _STATUS_BY_CODE.get(code, 502)


def _decode_attachments(items: List[AttachmentDTO]) -> Tuple[Attachment, ...]:
    """Decode base64 attachments or raise a 400 HTTP error."""
    out: List[Attachment] = []
    for idx, item in enumerate(items):
        try:
            out.append(Attachment(data=decode_image(item.data), media_type=item.media_type))
        except ValueError as e:
            raise HTTPException(
                status_code=400, detail=f"attachments[{idx}].data is not valid base64"
            ) from e
    return tuple(out)


def _build_request(body: ChatBody) -> ChatRequest:
    return ChatRequest(
        provider_id=body.provider,
        model_id=body.model,
        text=body.text,
        attachments=_decode_attachments(body.attachments),
        system_prompt=body.system_prompt,
        temperature=body.temperature,
        max_tokens=body.max_tokens,
        credential=body.credential,
    )


def _build_providers_response() -> Dict[str, Any]:
    """Return the providers endpoint payload from the static catalog."""
    return {"ok": True, "providers": [p.to_dict() for p in list_providers()]}


def _build_ollama_status_response(host: Optional[str] = None) -> Dict[str, Any]:
    return {"ok": True, "status": check_ollama_status(host).to_dict()}


def _handle_chat(body: ChatBody, dispatcher: Optional[Dispatcher] = None) -> Any:
    """Validate and dispatch a chat request, returning a response payload.

    Provider failures are returned as ``{"ok": false, "error": {kind, message}}``
    with a status derived from the error kind.
    """
    req = _build_request(body)
    try:
        resp = (dispatcher or get_dispatcher()).send(req)
    except ProviderError as err:
        return JSONResponse(
            status_code=_status_for(err.code),
            content={"ok": False, "error": err.to_dict()},
        )
    return {"ok": True, "text": resp.text}


__all__ = [
    "AttachmentDTO",
    "ChatBody",
    "_build_ollama_status_response",
    "_build_providers_response",
    "_handle_chat",
    "_status_for",
]
