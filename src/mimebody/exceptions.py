#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mimebody library.

This module defines the exception classes raised while loading a message
request and serializing it into a MIME body. Serialization itself is total
over well-formed input; these exceptions cover the hardened checks that run
before any output is produced.

Exception Hierarchy
-------------------
- MimeBodyError (base exception)

  - ValidationError (missing or mistyped request fields)
    - InvalidOptionsError (wrong options class for renderer)
    - BoundaryCollisionError (reserved boundary token inside content)

  - ParsingError (request file or string cannot be decoded)

  - RenderingError (output generation failures)

"""

from typing import Any


class MimeBodyError(Exception):
    """Base exception class for all mimebody-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(MimeBodyError):
    """Exception raised for invalid request fields or options.

    Raised for missing required fields (``type``, ``data`` and ``id`` on
    embedded objects, ``type`` and ``data`` on attachments) and for values
    of the wrong type when a request is built from a mapping.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Dotted path of the invalid field (e.g. ``attachments[1].data``)
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided to a renderer.

    Parameters
    ----------
    converter_name : str
        Name of the renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error with type information."""
        if message is None:
            message = (
                f"Invalid options type for '{converter_name}' renderer. "
                f"Expected {expected_type.__name__}, but received {received_type.__name__}."
            )

        super().__init__(
            message,
            parameter_name="options",
            parameter_value=received_type,
            original_error=original_error,
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class BoundaryCollisionError(ValidationError):
    """Exception raised when caller content contains a reserved boundary token.

    The MIME format has no escaping for boundary delimiters, so a token that
    appears inside a header, body or payload corrupts the produced document.
    This error is only raised when collision checking is enabled.

    Parameters
    ----------
    collisions : list of tuple[str, str]
        ``(field_path, boundary)`` pairs describing every collision found

    """

    def __init__(self, collisions: list[tuple[str, str]], original_error: Exception | None = None):
        """Initialize the collision error from the detected collisions."""
        first_field, first_boundary = collisions[0]
        message = f"Reserved boundary '{first_boundary}' appears in {first_field}"
        if len(collisions) > 1:
            message += f" (and {len(collisions) - 1} more collision(s))"
        super().__init__(
            message,
            parameter_name=first_field,
            parameter_value=first_boundary,
            original_error=original_error,
        )
        self.collisions = collisions


class ParsingError(MimeBodyError):
    """Exception raised when a request document cannot be decoded.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    source : str, optional
        Path or description of the request source
    original_error : Exception, optional
        The underlying decoder exception

    """

    def __init__(self, message: str, source: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error with source information."""
        super().__init__(message, original_error=original_error)
        self.source = source


class RenderingError(MimeBodyError):
    """Exception raised when the rendered body cannot be written.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    original_error : Exception, optional
        The original exception that caused this error

    """

    pass
