#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/request.py
"""Caller-facing value types describing a message to serialize.

A :class:`MessageRequest` mirrors the parameter object accepted by the
message-store upload endpoint: optional draft and thread association, the
RFC 822 headers, plain and HTML bodies, inline embedded objects referenced
from HTML via ``cid:`` and ordinary attachments. Payloads are expected to be
base64 encoded already; nothing here encodes or inspects them.

All types are frozen dataclasses. The library only reads them.

Examples
--------
    >>> from mimebody.request import Attachment, MessageRequest
    >>> request = MessageRequest(
    ...     headers={"To": "a@b.com", "Subject": "Report"},
    ...     text_plain="See attached.",
    ...     attachments=(Attachment(type="text/csv", name="f.csv", data="MSwyLDM="),),
    ... )

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence

from mimebody.exceptions import ValidationError

logger = logging.getLogger(__name__)

# Wire names used by the upload API, mapped to field names
_TOP_LEVEL_KEYS = {
    "draft": "draft",
    "headers": "headers",
    "threadId": "thread_id",
    "thread_id": "thread_id",
    "textPlain": "text_plain",
    "text_plain": "text_plain",
    "textHtml": "text_html",
    "text_html": "text_html",
    "embedded": "embedded",
    "attachments": "attachments",
}


@dataclass(frozen=True)
class Draft:
    """Draft association for the JSON metadata part.

    Parameters
    ----------
    id : str or None, default = None
        Id of an existing draft to update. A draft without an id still opens
        the ``message`` object in the metadata part.

    """

    id: Optional[str] = None


@dataclass(frozen=True)
class EmbeddedObject:
    """Inline object referenced from the HTML body by ``cid:<id>``.

    Parameters
    ----------
    type : str
        MIME type of the object (e.g. ``image/png``)
    id : str
        Content-ID, written between angle brackets
    data : str
        Base64 encoded payload, written verbatim
    name : str or None, default = None
        Display and file name

    """

    type: str
    id: str
    data: str
    name: Optional[str] = None


@dataclass(frozen=True)
class Attachment:
    """File attached to the message.

    Parameters
    ----------
    type : str
        MIME type of the attachment
    data : str
        Base64 encoded payload, written verbatim
    name : str or None, default = None
        File name for the Content-Disposition header

    """

    type: str
    data: str
    name: Optional[str] = None


@dataclass(frozen=True)
class MessageRequest:
    """Complete description of a message to serialize.

    Parameters
    ----------
    draft : Draft or None, default = None
        Draft association; ``None`` means no ``message`` object in the metadata
    headers : dict[str, str], default = empty dict
        RFC 822 headers in emission order
    thread_id : str or None, default = None
        Thread to file the message into. Only written when ``draft`` is set
    text_plain : str or None, default = None
        Plain text body
    text_html : str or None, default = None
        HTML body
    embedded : tuple of EmbeddedObject, default = ()
        Inline objects, emitted in order
    attachments : tuple of Attachment, default = ()
        Attachments, emitted in order

    """

    draft: Optional[Draft] = None
    headers: dict[str, str] = field(default_factory=dict)
    thread_id: Optional[str] = None
    text_plain: Optional[str] = None
    text_html: Optional[str] = None
    embedded: Sequence[EmbeddedObject] = ()
    attachments: Sequence[Attachment] = ()

    def __post_init__(self) -> None:
        """Freeze sequence fields and copy the header mapping."""
        object.__setattr__(self, "headers", dict(self.headers or {}))
        object.__setattr__(self, "embedded", tuple(self.embedded or ()))
        object.__setattr__(self, "attachments", tuple(self.attachments or ()))

    def validate(self) -> None:
        """Check that every embedded object and attachment carries its required fields.

        Raises
        ------
        ValidationError
            For the first missing or non-string required field found

        """
        for index, obj in enumerate(self.embedded):
            for name in ("type", "id", "data"):
                _require_string(getattr(obj, name), f"embedded[{index}].{name}")
        for index, attachment in enumerate(self.attachments):
            for name in ("type", "data"):
                _require_string(getattr(attachment, name), f"attachments[{index}].{name}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> MessageRequest:
        """Build a request from the API's parameter mapping.

        Accepts the camelCase wire names (``threadId``, ``textPlain``,
        ``textHtml``) as well as the snake_case field names. A header whose
        value is null is kept with an empty value rather than the text
        ``null``. Missing required fields on embedded objects and attachments
        are kept as ``None`` so the renderer options decide whether they are
        an error.

        Parameters
        ----------
        data : Mapping[str, Any]
            Parameter mapping

        Returns
        -------
        MessageRequest
            The parsed request

        Raises
        ------
        ValidationError
            If a field has the wrong type

        """
        if not isinstance(data, Mapping):
            raise ValidationError(
                f"Message request must be a mapping, got {type(data).__name__}",
                parameter_name="request",
                parameter_value=data,
            )

        kwargs: dict[str, Any] = {}
        for key, value in data.items():
            field_name = _TOP_LEVEL_KEYS.get(key)
            if field_name is None:
                logger.warning("Ignoring unknown message request key: %s", key)
                continue
            kwargs[field_name] = value

        return cls(
            draft=_parse_draft(kwargs.get("draft")),
            headers=_parse_headers(kwargs.get("headers")),
            thread_id=_optional_string(kwargs.get("thread_id"), "threadId"),
            text_plain=_optional_string(kwargs.get("text_plain"), "textPlain"),
            text_html=_optional_string(kwargs.get("text_html"), "textHtml"),
            embedded=tuple(
                EmbeddedObject(
                    type=_optional_string(item.get("type"), f"embedded[{i}].type"),  # type: ignore[arg-type]
                    id=_optional_string(item.get("id"), f"embedded[{i}].id"),  # type: ignore[arg-type]
                    data=_optional_string(item.get("data"), f"embedded[{i}].data"),  # type: ignore[arg-type]
                    name=_optional_string(item.get("name"), f"embedded[{i}].name"),
                )
                for i, item in enumerate(_parse_items(kwargs.get("embedded"), "embedded"))
            ),
            attachments=tuple(
                Attachment(
                    type=_optional_string(item.get("type"), f"attachments[{i}].type"),  # type: ignore[arg-type]
                    data=_optional_string(item.get("data"), f"attachments[{i}].data"),  # type: ignore[arg-type]
                    name=_optional_string(item.get("name"), f"attachments[{i}].name"),
                )
                for i, item in enumerate(_parse_items(kwargs.get("attachments"), "attachments"))
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the request as an API parameter mapping, omitting absent fields."""
        result: dict[str, Any] = {}
        if self.draft is not None:
            result["draft"] = {} if self.draft.id is None else {"id": self.draft.id}
        if self.headers:
            result["headers"] = dict(self.headers)
        for key, value in (("threadId", self.thread_id), ("textPlain", self.text_plain), ("textHtml", self.text_html)):
            if value is not None:
                result[key] = value
        if self.embedded:
            result["embedded"] = [_drop_none({"type": o.type, "id": o.id, "name": o.name, "data": o.data}) for o in self.embedded]
        if self.attachments:
            result["attachments"] = [_drop_none({"type": a.type, "name": a.name, "data": a.data}) for a in self.attachments]
        return result


def _drop_none(item: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in item.items() if value is not None}


def _require_string(value: Any, path: str) -> None:
    if value is None:
        raise ValidationError(f"Missing required field: {path}", parameter_name=path)
    if not isinstance(value, str):
        raise ValidationError(
            f"Field {path} must be a string, got {type(value).__name__}",
            parameter_name=path,
            parameter_value=value,
        )


def _optional_string(value: Any, path: str) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise ValidationError(
        f"Field {path} must be a string, got {type(value).__name__}",
        parameter_name=path,
        parameter_value=value,
    )


def _parse_draft(value: Any) -> Optional[Draft]:
    if value is None:
        return None
    if isinstance(value, Draft):
        return value
    if not isinstance(value, Mapping):
        raise ValidationError(
            f"Field draft must be a mapping, got {type(value).__name__}",
            parameter_name="draft",
            parameter_value=value,
        )
    return Draft(id=_optional_string(value.get("id"), "draft.id"))


def _parse_headers(value: Any) -> dict[str, str]:
    """Copy the header mapping, writing a null value as an empty header value.

    A null value would otherwise reach the wire as the literal text ``null``.
    """
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValidationError(
            f"Field headers must be a mapping, got {type(value).__name__}",
            parameter_name="headers",
            parameter_value=value,
        )
    headers: dict[str, str] = {}
    for name, header_value in value.items():
        if not isinstance(name, str):
            raise ValidationError(
                f"Header names must be strings, got {type(name).__name__}",
                parameter_name="headers",
                parameter_value=name,
            )
        headers[name] = _optional_string(header_value, f"headers.{name}") or ""
    return headers


def _parse_items(value: Any, path: str) -> list[Mapping[str, Any]]:
    if value is None:
        return []
    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise ValidationError(
            f"Field {path} must be a list, got {type(value).__name__}",
            parameter_name=path,
            parameter_value=value,
        )
    for index, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise ValidationError(
                f"Field {path}[{index}] must be a mapping, got {type(item).__name__}",
                parameter_name=f"{path}[{index}]",
                parameter_value=item,
            )
    return list(value)
