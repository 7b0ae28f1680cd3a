from typing import ClassVar, List, Optional, Tuple
from pydantic import Field
from ..exceptions import MissingRequiredField
from .base import ExtensibleResource, SCIMSchemaUri, ScimModel


class GroupMember(ScimModel):
    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    type: Optional[str] = None
    display: Optional[str] = None


class Group(ExtensibleResource):
    wire_required: ClassVar[Tuple[str, ...]] = ("schemas", "displayName")

    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.GROUP.value])
    display_name: str = Field("default_display_name", alias="displayName")
    members: Optional[List[GroupMember]] = None

    def validate(self) -> None:
        if not self.schemas:
            raise MissingRequiredField("schemas")
        if not self.display_name:
            raise MissingRequiredField("display_name")
