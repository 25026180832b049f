"""Image payload checks shared by the image adapters."""

from typing import Optional

_SIGNATURES = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF87a", "image/gif"),
    (b"GIF89a", "image/gif"),
)


def sniff_image_type(data: bytes) -> Optional[str]:
    """Mime type from the leading magic bytes, ``None`` when not a known image."""
    for signature, mime_type in _SIGNATURES:
        if data.startswith(signature):
            return mime_type
    if len(data) >= 12 and data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return None


def parse_image_content_type(header: Optional[str]) -> Optional[str]:
    """``image/png; charset=...`` -> ``image/png``; ``None`` for non-image types."""
    if not header:
        return None
    mime_type = header.split(";", 1)[0].strip().lower()
    return mime_type if mime_type.startswith("image/") else None
