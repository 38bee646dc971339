#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Loaders that turn request documents into MessageRequest objects."""

from mimebody.parsers.request import load_request, parse_request_text

__all__ = ["load_request", "parse_request_text"]
