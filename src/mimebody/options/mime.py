#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mimebody/options/mime.py
"""Configuration options for MIME body rendering.

This module defines options for serializing a message request into the
nested multipart body.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from mimebody.constants import DEFAULT_CHECK_BOUNDARY_COLLISIONS, DEFAULT_VALIDATE_REQUIRED_FIELDS
from mimebody.options.base import BaseRendererOptions
from mimebody.utils.boundaries import Boundaries


@dataclass(frozen=True)
class MimeRendererOptions(BaseRendererOptions):
    """Configuration options for MIME body rendering.

    Parameters
    ----------
    boundaries : Boundaries
        Boundary tokens for the four nesting levels. The defaults are the
        fixed literals; use ``Boundaries.generate()`` for per-document tokens.
    validate_required_fields : bool, default True
        Raise ValidationError when an embedded object lacks ``type``, ``id`` or
        ``data`` or an attachment lacks ``type`` or ``data``. When False the
        missing values render as empty strings.
    check_boundary_collisions : bool, default False
        Raise BoundaryCollisionError when any boundary token appears inside
        caller content.

    Examples
    --------
    Per-document random boundaries with collision checking:
        >>> from mimebody.utils.boundaries import Boundaries
        >>> options = MimeRendererOptions(
        ...     boundaries=Boundaries.generate(),
        ...     check_boundary_collisions=True,
        ... )

    """

    boundaries: Boundaries = field(
        default_factory=Boundaries,
        metadata={"help": "Boundary tokens for the outer, rfc822, alternative and related levels"},
    )
    validate_required_fields: bool = field(
        default=DEFAULT_VALIDATE_REQUIRED_FIELDS,
        metadata={"help": "Raise ValidationError for embedded objects or attachments missing required fields"},
    )
    check_boundary_collisions: bool = field(
        default=DEFAULT_CHECK_BOUNDARY_COLLISIONS,
        metadata={"help": "Raise BoundaryCollisionError when a boundary token appears in caller content"},
    )

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> MimeRendererOptions:
        """Build options from a loaded configuration mapping.

        Recognized keys are ``validate_required_fields``,
        ``check_boundary_collisions``, ``random_boundaries`` and a
        ``boundaries`` table with any of ``outer``, ``rfc822``,
        ``alternative`` and ``related``. ``random_boundaries`` wins over an
        explicit ``boundaries`` table.

        Parameters
        ----------
        config : Mapping[str, Any]
            Configuration mapping (e.g. from ``load_config_with_priority``)

        Returns
        -------
        MimeRendererOptions
            Options reflecting the configuration

        Raises
        ------
        ValueError
            If a value has the wrong type or a key is not recognized

        """
        known = {"validate_required_fields", "check_boundary_collisions", "random_boundaries", "boundaries"}
        unknown = sorted(set(config) - known)
        if unknown:
            raise ValueError(f"Unknown configuration key(s): {', '.join(unknown)}")

        kwargs: dict[str, Any] = {}
        for key in ("validate_required_fields", "check_boundary_collisions"):
            if key in config:
                value = config[key]
                if not isinstance(value, bool):
                    raise ValueError(f"{key} must be a boolean, got {type(value).__name__}")
                kwargs[key] = value

        random_boundaries = config.get("random_boundaries", False)
        if not isinstance(random_boundaries, bool):
            raise ValueError(f"random_boundaries must be a boolean, got {type(random_boundaries).__name__}")

        if random_boundaries:
            kwargs["boundaries"] = Boundaries.generate()
        elif "boundaries" in config:
            table = config["boundaries"]
            if not isinstance(table, Mapping):
                raise ValueError(f"boundaries must be a table, got {type(table).__name__}")
            bad = sorted(set(table) - set(Boundaries.levels()))
            if bad:
                raise ValueError(f"Unknown boundary level(s): {', '.join(bad)}")
            kwargs["boundaries"] = Boundaries(**table)

        return cls(**kwargs)
