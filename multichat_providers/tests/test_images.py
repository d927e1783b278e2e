"""Tests for the shared image encoder."""
from __future__ import annotations

import pytest

from multichat_providers.base.models import Attachment
from multichat_providers.base.utils.images import (
    EncodedImage,
    decode_image,
    encode_attachments,
    encode_image,
)


def test_encode_is_plain_base64():
    assert encode_image(b"hello") == "aGVsbG8="  # nosec B101
    assert decode_image("aGVsbG8=") == b"hello"  # nosec B101


def test_decode_rejects_garbage():
    with pytest.raises(ValueError):
        decode_image("not base64!!")


def test_data_uri():
    img = EncodedImage(media_type="image/png", data="AAAA")
    assert img.data_uri == "data:image/png;base64,AAAA"  # nosec B101


def test_encode_attachments_preserves_order_in_parallel():
    atts = [Attachment(data=bytes([i]) * (i + 1), media_type=f"image/t{i}") for i in range(12)]
    out = encode_attachments(atts, max_workers=4)
    assert [e.media_type for e in out] == [a.media_type for a in atts]  # nosec B101
    assert [decode_image(e.data) for e in out] == [a.data for a in atts]  # nosec B101


def test_encode_attachments_empty_and_single():
    assert encode_attachments([]) == []  # nosec B101
    (only,) = encode_attachments([Attachment(data=b"\x00", media_type="image/gif")])
    assert only == EncodedImage(media_type="image/gif", data="AA==")  # nosec B101


def test_round_trip_is_byte_exact_on_arbitrary_binary():
    blob = bytes(range(256)) * 37 + b"\x00\xff"
    assert decode_image(encode_image(blob)) == blob  # nosec B101
    (encoded,) = encode_attachments([Attachment(data=blob, media_type="image/jpeg")])
    assert decode_image(encoded.data) == blob  # nosec B101
