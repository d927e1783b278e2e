"""In-memory chat session.

Holds the transcript of one conversation for the lifetime of the process.
A send appends the user turn optimistically, then either appends the
assistant reply or removes the user turn again and records the error.
Only one send may be in flight per session.

Transcripts are never persisted and only the current turn is sent to the
provider; earlier turns are display state.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional

from ..base.errors import ProviderError
from ..base.models import Attachment, ChatResponse, ChatSettings
from ..dispatcher import Dispatcher, get_dispatcher


class SessionBusyError(RuntimeError):
    """Raised when a send starts while another send of the session is in flight."""


@dataclass(frozen=True)
class TranscriptEntry:
    """One rendered turn.

    Attributes:
        role: ``"user"`` or ``"assistant"``.
        text: Message text (markdown for assistant turns).
        attachment_count: Number of images sent with a user turn.
    """

    role: str
    text: str
    attachment_count: int = 0


class ChatSession:
    """Transcript plus busy flag for one conversation.

    Parameters:
        dispatcher: Dispatcher used for sends; defaults to the process-wide one.
    """

    def __init__(self, dispatcher: Optional[Dispatcher] = None) -> None:
        self._dispatcher = dispatcher
        self._entries: List[TranscriptEntry] = []
        self._lock = threading.Lock()
        self._busy = False
        self.last_error: Optional[ProviderError] = None

    @property
    def busy(self) -> bool:
        return self._busy

    @property
    def transcript(self) -> List[TranscriptEntry]:
        """Return a copy of the transcript in send order."""
        with self._lock:
            return list(self._entries)

    def send(
        self,
        settings: ChatSettings,
        text: str,
        credentials: Optional[Mapping[str, str]] = None,
        attachments: Iterable[Attachment] = (),
    ) -> ChatResponse:
        """Send one user turn built from ``settings`` and record the outcome.

        Raises:
            SessionBusyError: a previous send has not finished.
            ProviderError: validation or provider failure; the user turn is
                rolled back and the error kept on ``last_error``.
        """
        request = settings.to_request(text, credentials=credentials, attachments=attachments)
        user_entry = TranscriptEntry(role="user", text=text, attachment_count=len(request.attachments))
        with self._lock:
            if self._busy:
                raise SessionBusyError("a message is already being sent")
            self._busy = True
            self.last_error = None
            self._entries.append(user_entry)
        try:
            response = (self._dispatcher or get_dispatcher()).send(request)
        except ProviderError as err:
            with self._lock:
                self._rollback(user_entry)
                self.last_error = err
                self._busy = False
            raise
        except BaseException:
            with self._lock:
                self._rollback(user_entry)
                self._busy = False
            raise
        with self._lock:
            self._entries.append(TranscriptEntry(role="assistant", text=response.text))
            self._busy = False
        return response

    def clear(self) -> None:
        """Drop the transcript and the last error."""
        with self._lock:
            self._entries.clear()
            self.last_error = None

    def _rollback(self, entry: TranscriptEntry) -> None:
        # Remove the optimistic user turn (last occurrence; sends are serialized).
        for idx in range(len(self._entries) - 1, -1, -1):
            if self._entries[idx] is entry:
                del self._entries[idx]
                return


__all__ = ["ChatSession", "SessionBusyError", "TranscriptEntry"]
