"""Error body models."""

import json
from dataclasses import dataclass
from typing import Any


@dataclass
class ErrorDetail:
    """Decoded JSON error body.

    Courier answers errors with `{"message": ..., "type": ...}`. RFC 7807
    problem fields (`title`, `detail`, `status`, `instance`) are read too, in
    case a gateway in front of the API rewrites the error.

    See: https://datatracker.ietf.org/doc/html/rfc7807
    """

    message: str | None = None
    type: str | None = None
    title: str | None = None
    detail: str | None = None
    status: int | None = None
    instance: str | None = None

    # Any other top-level fields
    extensions: dict[str, Any] | None = None

    KNOWN_FIELDS = frozenset({"message", "type", "title", "detail", "status", "instance"})

    @classmethod
    def from_body(cls, raw_body: bytes) -> "ErrorDetail | None":
        """Parse an error body.

        Returns:
            ErrorDetail, or None if the body is not a JSON object
        """
        if not raw_body:
            return None

        try:
            data = json.loads(raw_body)
        except (ValueError, UnicodeDecodeError):
            return None

        if not isinstance(data, dict):
            return None

        extensions = {k: v for k, v in data.items() if k not in cls.KNOWN_FIELDS}

        return cls(
            message=data.get("message"),
            type=data.get("type"),
            title=data.get("title"),
            detail=data.get("detail"),
            status=data.get("status"),
            instance=data.get("instance"),
            extensions=extensions or None,
        )

    def to_exception_message(self) -> str:
        """Convert the error body to an exception message."""
        lines = []

        summary = self.message or self.title or self.detail
        if summary:
            lines.append(summary)

        if self.detail and self.detail != summary:
            lines.append(self.detail)

        if self.type:
            lines.append(f"Error Type: {self.type}")

        if self.instance:
            lines.append(f"Instance: {self.instance}")

        if self.extensions:
            lines.append("Extension fields:")
            for key, value in self.extensions.items():
                lines.append(f"  - {key}: {value}")

        return "\n".join(lines) if lines else "Unknown API error"
