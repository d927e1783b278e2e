"""Image attachment encoding shared by the vision-capable adapters.

Adapters receive raw bytes on ``Attachment`` and need base64 text on the
wire: openai as a ``data:`` URI inside an ``image_url`` part, google as an
inline data part. Encoding happens once per send, before the network call.

Public API
----------
* encode_image(data) -> str: plain base64 (no ``data:`` prefix).
* decode_image(text) -> bytes: inverse of ``encode_image`` (byte-exact).
* EncodedImage: media type plus base64 text; ``data_uri`` renders the URI form.
* encode_attachments(attachments) -> list[EncodedImage]: parallel, input order.
"""
from __future__ import annotations

import base64
import binascii
import concurrent.futures as cf
from dataclasses import dataclass
from typing import Iterable, List

from ...config.defaults import ATTACHMENT_ENCODE_MAX_WORKERS
from ..models import Attachment


def encode_image(data: bytes) -> str:
    """Return the standard base64 encoding of ``data`` as ASCII text."""
    return base64.b64encode(bytes(data)).decode("ascii")


def decode_image(text: str) -> bytes:
    """Decode base64 text produced by :func:`encode_image`.

    Raises:
        ValueError: ``text`` is not valid base64.
    """
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 image data: {exc}") from exc


@dataclass(frozen=True)
class EncodedImage:
    """Base64 form of one attachment."""

    media_type: str
    data: str

    @property
    def data_uri(self) -> str:
        return f"data:{self.media_type};base64,{self.data}"


def _encode_one(attachment: Attachment) -> EncodedImage:
    return EncodedImage(media_type=attachment.media_type, data=encode_image(attachment.data))


def encode_attachments(
    attachments: Iterable[Attachment],
    max_workers: int = ATTACHMENT_ENCODE_MAX_WORKERS,
) -> List[EncodedImage]:
    """Encode attachments in parallel and return them in input order.

    A single attachment (or ``max_workers <= 1``) is encoded inline without a
    thread pool.
    """
    items = list(attachments)
    if len(items) <= 1 or max_workers <= 1:
        return [_encode_one(a) for a in items]
    with cf.ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as executor:
        # Executor.map yields results in submission order.
        return list(executor.map(_encode_one, items))


__all__ = [
    "EncodedImage",
    "decode_image",
    "encode_attachments",
    "encode_image",
]
