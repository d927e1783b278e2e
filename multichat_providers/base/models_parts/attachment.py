"""
Attachment DTO for image input.

An attachment is raw binary image data plus its declared media type, captured
by the caller's file-selection component. It lives only for the duration of a
single request and is never persisted.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Attachment:
    """Immutable image payload attached to a chat request.

    Attributes:
        data: Raw image bytes (excluded from repr to keep logs small).
        media_type: Declared MIME type, e.g. ``"image/png"``.
    """

    data: bytes = field(repr=False)
    media_type: str

    def __post_init__(self) -> None:
        if not isinstance(self.data, (bytes, bytearray, memoryview)):
            raise TypeError("Attachment.data must be bytes")
        # Freeze mutable buffers so the attachment cannot change after capture.
        if not isinstance(self.data, bytes):
            object.__setattr__(self, "data", bytes(self.data))

    @property
    def size(self) -> int:
        """Return the payload size in bytes."""
        return len(self.data)


__all__ = ["Attachment"]
