from typing import Annotated, Any, ClassVar, Dict, List, Optional, Sequence, Tuple, Union
from pydantic import Field
from ..config import settings
from ..exceptions import InvalidFieldValue, MissingRequiredField
from .base import SCIMSchemaUri, ScimModel
from .group import Group
from .meta import ResourceType, Schema
from .user import User


ALLOWED_PATCH_OPS = ("add", "remove", "replace")


def _check_window(start_index: Optional[int], count: Optional[int]) -> None:
    if start_index is not None and start_index < 1:
        raise InvalidFieldValue("start_index")
    if count is not None and count < 0:
        raise InvalidFieldValue("count")


class ListQuery(ScimModel):
    """Query-string parameters of a list request."""

    filter: Optional[str] = ""
    start_index: Optional[int] = Field(1, alias="startIndex")
    count: Optional[int] = Field(settings.default_page_size)
    attributes: Optional[str] = ""
    excluded_attributes: Optional[str] = Field("", alias="excludedAttributes")

    @property
    def offset(self) -> int:
        return (self.start_index or 1) - 1  # SCIM uses 1-based indexing

    @property
    def limit(self) -> int:
        if self.count is None:
            return settings.default_page_size
        return min(self.count, settings.max_page_size)

    def validate(self) -> None:
        _check_window(self.start_index, self.count)


class SearchRequest(ScimModel):
    """Body of a POST ``.search`` request."""

    wire_required: ClassVar[Tuple[str, ...]] = ("schemas", "filter", "startIndex", "count")

    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.SEARCH_REQUEST.value])
    attributes: Optional[List[str]] = None
    excluded_attributes: Optional[List[str]] = Field(None, alias="excludedAttributes")
    filter: str = ""
    start_index: int = Field(1, alias="startIndex")
    count: int = Field(settings.default_page_size)

    def validate(self) -> None:
        _check_window(self.start_index, self.count)


class PatchOperation(ScimModel):
    wire_required: ClassVar[Tuple[str, ...]] = ("op", "value")

    op: str = ""
    path: Optional[str] = None
    value: Dict[str, Any] = Field(default_factory=dict)


class PatchOp(ScimModel):
    """A PATCH request body. Operations are carried as data and never applied here."""

    wire_required: ClassVar[Tuple[str, ...]] = ("schemas", "Operations")

    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.PATCH_OP.value])
    operations: List[PatchOperation] = Field(default_factory=lambda: [PatchOperation()], alias="Operations")

    def validate(self) -> None:
        if not self.schemas:
            raise MissingRequiredField("schemas")
        if not self.operations:
            raise MissingRequiredField("operations")
        for operation in self.operations:
            if operation.op.lower() not in ALLOWED_PATCH_OPS:
                raise InvalidFieldValue("op")


# Payloads carry no type tag, so each candidate is tried in this order and the
# first one whose required keys are all present wins. userName, attributes,
# displayName and endpoint are the keys that tell the candidates apart.
Resource = Annotated[Union[User, Schema, Group, ResourceType], Field(union_mode="left_to_right")]


class ListResponse(ScimModel):
    wire_required: ClassVar[Tuple[str, ...]] = (
        "schemas",
        "totalResults",
        "itemsPerPage",
        "startIndex",
        "Resources",
    )

    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.LIST_RESPONSE.value])
    total_results: int = Field(0, alias="totalResults")
    items_per_page: int = Field(0, alias="itemsPerPage")
    start_index: int = Field(1, alias="startIndex")
    resources: List[Resource] = Field(default_factory=list, alias="Resources")

    @classmethod
    def create(
        cls,
        resources: Sequence[Union[User, Schema, Group, ResourceType]],
        total_results: int,
        query: Optional[ListQuery] = None,
    ) -> "ListResponse":
        query = query or ListQuery()
        return cls(
            total_results=total_results,
            items_per_page=len(resources),
            start_index=query.start_index or 1,
            resources=list(resources),
        )
