"""
Responses - Result model returned by providers and by dispatch

Content items are tagged "text" or "binary" on the wire:

    {"type": "text", "text": "..."}
    {"type": "binary", "data": "<base64>", "mime_type": "image/png"}

A Response carries a status flag ("success" / "error") and an ordered list
of content items.
"""

from __future__ import annotations

import base64
import json
from typing import Annotated, Any, ClassVar, Literal, Union

from pydantic import BaseModel, Field


class TextResponseItem(BaseModel):
    """Plain text content."""

    type: Literal["text"] = "text"
    text: str

    def __init__(self, text: str | None = None, **data: Any):
        if text is not None:
            data["text"] = text
        super().__init__(**data)


class BinaryResponseItem(BaseModel):
    """Binary content, base64 encoded."""

    type: Literal["binary"] = "binary"
    data: str = Field(..., description="Base64 payload")
    mime_type: str = Field(..., description="MIME type of the decoded payload")

    @classmethod
    def from_bytes(cls, raw: bytes, mime_type: str) -> BinaryResponseItem:
        return cls(data=base64.b64encode(raw).decode("ascii"), mime_type=mime_type)

    def to_bytes(self) -> bytes:
        return base64.b64decode(self.data)


ResponseItem = Annotated[
    Union[TextResponseItem, BinaryResponseItem],
    Field(discriminator="type"),
]


class Response(BaseModel):
    """Outcome of a function call."""

    STATUS_SUCCESS: ClassVar[str] = "success"
    STATUS_ERROR: ClassVar[str] = "error"

    status: Literal["success", "error"] = "success"
    content: list[ResponseItem] = Field(default_factory=list)

    @property
    def is_error(self) -> bool:
        return self.status == self.STATUS_ERROR

    @classmethod
    def success(cls, *items: TextResponseItem | BinaryResponseItem) -> Response:
        return cls(status=cls.STATUS_SUCCESS, content=list(items))

    @classmethod
    def error(cls, message: str) -> Response:
        return cls(status=cls.STATUS_ERROR, content=[TextResponseItem(message)])

    @classmethod
    def from_result(cls, value: Any) -> Response:
        """
        Normalize whatever a provider method returned into a Response.

        - Response: returned unchanged
        - single content item / list of items: success response
        - str: single text item
        - anything else: JSON (or str) rendering as a text item
        """
        if isinstance(value, Response):
            return value
        if isinstance(value, (TextResponseItem, BinaryResponseItem)):
            return cls.success(value)
        if isinstance(value, (list, tuple)) and all(
            isinstance(v, (TextResponseItem, BinaryResponseItem)) for v in value
        ):
            return cls.success(*value)
        if isinstance(value, str):
            return cls.success(TextResponseItem(value))
        if value is None:
            return cls.success()
        try:
            text = json.dumps(value, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            text = str(value)
        return cls.success(TextResponseItem(text))

    def text(self) -> str:
        """All text items joined by newlines."""
        return "\n".join(
            item.text for item in self.content if isinstance(item, TextResponseItem)
        )

    def to_content(self) -> list[dict[str, Any]]:
        """Serialize the content items to their wire format."""
        return [item.model_dump() for item in self.content]


__all__ = [
    "TextResponseItem",
    "BinaryResponseItem",
    "ResponseItem",
    "Response",
]
