from typing import ClassVar, List, Optional, Tuple
from pydantic import Field
from ..exceptions import SCIMError
from .base import SCIMSchemaUri, ScimModel


class ScimHttpError(ScimModel):
    """SCIM error response body (RFC 7644 section 3.12). ``status`` is a JSON string."""

    wire_required: ClassVar[Tuple[str, ...]] = ("schemas", "status")

    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.ERROR.value])
    scim_type: Optional[str] = Field(None, alias="scimType")
    detail: Optional[str] = None
    status: str = ""

    @classmethod
    def from_error(cls, error: SCIMError) -> "ScimHttpError":
        return cls(
            status=error.status,
            detail=error.message,
            scim_type=error.scim_type,
        )
