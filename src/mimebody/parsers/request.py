#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/parsers/request.py
"""Load message requests from JSON, YAML or TOML documents.

Request documents use the upload API's parameter names::

    {
      "draft": {"id": "r-123"},
      "headers": {"To": "a@b.com", "Subject": "Hello"},
      "threadId": "t-456",
      "textPlain": "hi",
      "textHtml": "<p>hi <img src=\\"cid:logo\\"></p>",
      "embedded": [{"type": "image/png", "id": "logo", "data": "iVBOR..."}],
      "attachments": [{"type": "text/csv", "name": "f.csv", "data": "MSwyLDM="}]
    }

"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import IO, Any, Literal, Mapping, Union

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

from mimebody.constants import REQUEST_FILE_EXTENSIONS
from mimebody.exceptions import ParsingError, ValidationError
from mimebody.request import MessageRequest

logger = logging.getLogger(__name__)

RequestFormat = Literal["json", "yaml", "toml"]


def _decode(text: str, fmt: RequestFormat, source: str) -> Any:
    try:
        if fmt == "json":
            return json.loads(text)
        if fmt == "yaml":
            return yaml.safe_load(text)
        return tomllib.loads(text)
    except json.JSONDecodeError as e:
        raise ParsingError(f"Invalid JSON in request {source}: {e}", source=source, original_error=e) from e
    except yaml.YAMLError as e:
        raise ParsingError(f"Invalid YAML in request {source}: {e}", source=source, original_error=e) from e
    except tomllib.TOMLDecodeError as e:
        raise ParsingError(f"Invalid TOML in request {source}: {e}", source=source, original_error=e) from e


def parse_request_text(text: str, fmt: RequestFormat = "json", source: str = "<string>") -> MessageRequest:
    """Parse a request document held in a string.

    Parameters
    ----------
    text : str
        Document text
    fmt : {"json", "yaml", "toml"}, default "json"
        Document format
    source : str, default "<string>"
        Description of the source for error messages

    Returns
    -------
    MessageRequest
        The parsed request

    Raises
    ------
    ParsingError
        If the document cannot be decoded
    ValidationError
        If the document is not a mapping or a field has the wrong type

    """
    data = _decode(text, fmt, source)
    if not isinstance(data, Mapping):
        raise ValidationError(
            f"Request document {source} must contain a mapping, got {type(data).__name__}",
            parameter_name="request",
            parameter_value=data,
        )
    return MessageRequest.from_dict(data)


def _format_for_path(path: Path) -> RequestFormat:
    ext = path.suffix.lower()
    if ext not in REQUEST_FILE_EXTENSIONS:
        raise ParsingError(
            f"Unsupported request file format: {ext or '(none)'}. Use .json, .yaml, .yml, or .toml",
            source=str(path),
        )
    if ext == ".json":
        return "json"
    if ext == ".toml":
        return "toml"
    return "yaml"


def load_request(source: Union[MessageRequest, Mapping[str, Any], str, Path, IO[str], IO[bytes]]) -> MessageRequest:
    """Load a message request from any supported source.

    Parameters
    ----------
    source : MessageRequest, Mapping, str, Path, or file-like object
        An existing request (returned as is), a parameter mapping, a path to
        a ``.json``/``.yaml``/``.yml``/``.toml`` file, or a stream containing
        JSON. Strings are always treated as paths.

    Returns
    -------
    MessageRequest
        The loaded request

    Raises
    ------
    ParsingError
        If the file cannot be read or decoded
    ValidationError
        If the content has the wrong shape

    """
    if isinstance(source, MessageRequest):
        return source
    if isinstance(source, Mapping):
        return MessageRequest.from_dict(source)

    if isinstance(source, (str, Path)):
        path = Path(source)
        fmt = _format_for_path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ParsingError(f"Cannot read request file {path}: {e}", source=str(path), original_error=e) from e
        logger.debug("Loaded %s request from %s", fmt, path)
        return parse_request_text(text, fmt, source=str(path))

    if hasattr(source, "read"):
        raw = source.read()
        if isinstance(raw, bytes):
            try:
                raw = raw.decode("utf-8")
            except UnicodeDecodeError as e:
                raise ParsingError(f"Request stream is not valid UTF-8: {e}", source="<stream>", original_error=e) from e
        return parse_request_text(raw, "json", source="<stream>")

    raise ValidationError(
        f"Unsupported request source type: {type(source).__name__}",
        parameter_name="source",
        parameter_value=source,
    )
