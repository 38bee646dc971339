#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/utils/boundaries.py
"""Boundary tokens and collision detection.

The MIME format has no escaping for part delimiters: a boundary token that
appears inside a header, body or payload ends the enclosing part early. The
default tokens are fixed literals, so keeping them out of caller content is
the caller's responsibility. This module offers two ways to reduce that risk:
per-call random tokens via :meth:`Boundaries.generate` and an explicit scan
via :func:`find_boundary_collisions`.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass, fields
from typing import Iterator

from mimebody.constants import (
    DEFAULT_ALTERNATIVE_BOUNDARY,
    DEFAULT_OUTER_BOUNDARY,
    DEFAULT_RELATED_BOUNDARY,
    DEFAULT_RFC822_BOUNDARY,
    RANDOM_BOUNDARY_BYTES,
    RANDOM_BOUNDARY_PREFIX,
)
from mimebody.request import MessageRequest


@dataclass(frozen=True)
class Boundaries:
    """The four boundary tokens, one per nesting level.

    Parameters
    ----------
    outer : str
        Delimits the JSON metadata part and the RFC 822 part
    rfc822 : str
        Delimits the text section and the attachments inside the message
    alternative : str
        Delimits the plain and HTML alternatives
    related : str
        Delimits the text section and its inline objects

    """

    outer: str = DEFAULT_OUTER_BOUNDARY
    rfc822: str = DEFAULT_RFC822_BOUNDARY
    alternative: str = DEFAULT_ALTERNATIVE_BOUNDARY
    related: str = DEFAULT_RELATED_BOUNDARY

    def __post_init__(self) -> None:
        """Reject empty and duplicate tokens.

        Raises
        ------
        ValueError
            If a token is empty or two levels share a token

        """
        tokens = list(self.tokens())
        for level, token in zip(self.levels(), tokens):
            if not isinstance(token, str) or not token:
                raise ValueError(f"Boundary for level '{level}' must be a non-empty string")
        if len(set(tokens)) != len(tokens):
            raise ValueError(f"Boundary tokens must be distinct, got {tokens}")

    @classmethod
    def levels(cls) -> tuple[str, ...]:
        """Return the nesting level names in outer-to-inner order."""
        return tuple(f.name for f in fields(cls))

    def tokens(self) -> Iterator[str]:
        """Iterate over the tokens in outer-to-inner order."""
        for level in self.levels():
            yield getattr(self, level)

    @classmethod
    def generate(cls) -> Boundaries:
        """Create a set of random tokens for a single document.

        Returns
        -------
        Boundaries
            Tokens of the form ``mimebody_<level>_<hex>``

        """
        return cls(
            **{
                level: f"{RANDOM_BOUNDARY_PREFIX}_{level}_{secrets.token_hex(RANDOM_BOUNDARY_BYTES)}"
                for level in cls.levels()
            }
        )


def iter_request_content(request: MessageRequest) -> Iterator[tuple[str, str]]:
    """Yield ``(field_path, value)`` for every caller string written to the body.

    Parameters
    ----------
    request : MessageRequest
        The request to scan

    Yields
    ------
    tuple[str, str]
        Field path and its string value; ``None`` values are skipped

    """
    candidates: list[tuple[str, object]] = []
    if request.draft is not None:
        candidates.append(("draft.id", request.draft.id))
    candidates.append(("threadId", request.thread_id))
    for name, value in request.headers.items():
        candidates.append((f"headers[{name!r}].name", name))
        candidates.append((f"headers[{name!r}]", value))
    candidates.append(("textPlain", request.text_plain))
    candidates.append(("textHtml", request.text_html))
    for index, obj in enumerate(request.embedded):
        for attr in ("type", "id", "name", "data"):
            candidates.append((f"embedded[{index}].{attr}", getattr(obj, attr)))
    for index, attachment in enumerate(request.attachments):
        for attr in ("type", "name", "data"):
            candidates.append((f"attachments[{index}].{attr}", getattr(attachment, attr)))

    for path, value in candidates:
        if isinstance(value, str) and value:
            yield path, value


def find_boundary_collisions(request: MessageRequest, boundaries: Boundaries | None = None) -> list[tuple[str, str]]:
    """Find every reserved boundary token that appears inside caller content.

    Matching is a plain substring test, so the short default tokens also flag
    ordinary words that contain them. Random tokens make false positives
    practically impossible.

    Parameters
    ----------
    request : MessageRequest
        The request to scan
    boundaries : Boundaries or None, default = None
        Tokens to look for; the fixed defaults when None

    Returns
    -------
    list[tuple[str, str]]
        ``(field_path, token)`` pairs in scan order, empty when clean

    """
    boundaries = boundaries or Boundaries()
    tokens = list(boundaries.tokens())
    collisions: list[tuple[str, str]] = []
    for path, value in iter_request_content(request):
        for token in tokens:
            if token in value:
                collisions.append((path, token))
    return collisions
