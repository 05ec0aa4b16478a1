"""
Model bases shared by every svnprovider value type.

Repository references, working sets and command results cross the boundary
to backend code, so they are validated strictly and reject unknown fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SvnBaseModel(BaseModel):
    """Strict model: no type coercion, no extra fields, checked on assignment.

    Enum fields store their string value, so results compare equal to the
    plain status strings a backend may produce.
    """

    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        validate_assignment=True,
        use_enum_values=True,
    )


class ImmutableModel(SvnBaseModel):
    """Frozen variant, safe to share between operations.

    Inherits the strict configuration of SvnBaseModel.
    """

    model_config = ConfigDict(frozen=True)
