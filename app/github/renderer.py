"""
Renders a GitHub user profile as an HTTP response.

The profile is re-indented at the token level: strings, numbers and
literals are copied byte for byte, so only whitespace differs from what
GitHub sent.
"""

import json
import logging
from collections.abc import Iterator

from fastapi import Response, status
from fastapi.responses import PlainTextResponse

from app.core.exceptions import ProfileRenderError


logger = logging.getLogger(__name__)

INDENT = "\t"
WHITESPACE = " \t\r\n"
PUNCTUATION = "{}[],:"


def _reject_constant(name: str) -> None:
    raise ProfileRenderError(f"User profile is not valid JSON: {name} is not allowed")


def _tokens(text: str) -> Iterator[str]:
    """Split a validated JSON document into tokens, dropping whitespace."""
    i = 0
    n = len(text)
    while i < n:
        c = text[i]
        if c in WHITESPACE:
            i += 1
        elif c in PUNCTUATION:
            yield c
            i += 1
        elif c == '"':
            j = i + 1
            while text[j] != '"':
                j += 2 if text[j] == "\\" else 1
            yield text[i : j + 1]
            i = j + 1
        else:
            j = i
            while j < n and text[j] not in WHITESPACE and text[j] not in PUNCTUATION:
                j += 1
            yield text[i:j]
            i = j


def pretty_print_json(data: bytes) -> str:
    """
    Re-indent a JSON document with one tab per nesting level.

    Empty objects and arrays stay collapsed, keys are followed by ": "
    and there is no trailing newline.

    Raises:
        ProfileRenderError: If data is not valid UTF-8 JSON, including
            the non-standard NaN and Infinity literals
    """
    try:
        text = data.decode("utf-8")
        json.loads(text, parse_constant=_reject_constant)
    except ValueError as e:
        raise ProfileRenderError(f"User profile is not valid JSON: {e}") from e

    out: list[str] = []
    depth = 0
    # set after an opening bracket or comma; the next value starts a new line
    pending_newline = False

    for token in _tokens(text):
        if token in ("}", "]"):
            depth -= 1
            if not pending_newline:
                out.append("\n" + INDENT * depth)
            out.append(token)
            pending_newline = False
            continue

        if pending_newline:
            out.append("\n" + INDENT * depth)
            pending_newline = False

        out.append(token)
        if token in ("{", "["):
            depth += 1
            pending_newline = True
        elif token == ",":
            pending_newline = True
        elif token == ":":
            out.append(" ")

    return "".join(out)


def render_profile(user_data: bytes) -> Response:
    """
    Build the callback response for a fetched profile.

    Empty profile bodies mean the user is not authenticated.
    """
    if not user_data:
        logger.info("Empty user profile, responding unauthorized")
        return PlainTextResponse(
            "unauthorized", status_code=status.HTTP_401_UNAUTHORIZED
        )

    return Response(content=pretty_print_json(user_data), media_type="application/json")
