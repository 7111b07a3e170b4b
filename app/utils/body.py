"""Request body decoding.

Turns JSON and form-encoded bodies into the same flat key/value record so
that validation never needs to know how the client sent its data.
"""

import logging
from typing import Any

from fastapi import Request

logger = logging.getLogger("intake.body")

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


class BodyParseError(Exception):
    """Raised when a body claims a supported type but cannot be decoded."""


def media_type(request: Request) -> str:
    """Content-Type without parameters, lower-cased."""
    return request.headers.get("content-type", "").split(";", 1)[0].strip().lower()


def is_json(content_type: str) -> bool:
    return content_type == "application/json" or content_type.endswith("+json")


async def parse_submission_body(request: Request) -> dict[str, Any]:
    """Decode the request body into a flat record.

    Unknown or missing content types, like empty bodies, decode to ``{}``.
    """
    content_type = media_type(request)

    if is_json(content_type):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            payload = await request.json()
        except ValueError as exc:
            raise BodyParseError("Invalid JSON body") from exc
        if not isinstance(payload, dict):
            raise BodyParseError(f"Expected a JSON object, got {type(payload).__name__}")
        return payload

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        # Uploaded files are not record fields.
        return {key: value for key, value in form.items() if isinstance(value, str)}

    if content_type:
        logger.debug(f"Ignoring body with unsupported content type: {content_type}")
    return {}
