from typing import Any, ClassVar, Dict, List, Optional, Tuple, Type, TypeVar
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    ValidationError,
    ValidationInfo,
    model_serializer,
    model_validator,
)
from pydantic_core import PydanticSerializationError
from enum import Enum
from ..exceptions import DeserializationError, SerializationError
from ..utils.logging import logger


class SCIMSchemaUri(str, Enum):
    USER = "urn:ietf:params:scim:schemas:core:2.0:User"
    GROUP = "urn:ietf:params:scim:schemas:core:2.0:Group"
    ENTERPRISE_USER = "urn:ietf:params:scim:schemas:extension:enterprise:2.0:User"
    RESOURCE_TYPE = "urn:ietf:params:scim:schemas:core:2.0:ResourceType"
    SERVICE_PROVIDER_CONFIG = "urn:ietf:params:scim:schemas:core:2.0:ServiceProviderConfig"
    LIST_RESPONSE = "urn:ietf:params:scim:api:messages:2.0:ListResponse"
    SEARCH_REQUEST = "urn:ietf:params:scim:api:messages:2.0:SearchRequest"
    ERROR = "urn:ietf:params:scim:api:messages:2.0:Error"
    PATCH_OP = "urn:ietf:params:scim:api:messages:2.0:PatchOp"


# Validation context flag set while decoding wire text.
WIRE_CONTEXT = "scim_wire"

ModelT = TypeVar("ModelT", bound="ScimModel")


class ScimModel(BaseModel):
    """Common codec behaviour for every SCIM structure.

    On the wire, keys use the field aliases and unset optional values are
    left out. Unknown keys are ignored when decoding, but known ones must
    already carry their JSON type: "5" is not an int and "yes" is not a bool.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    # Wire keys that must be present in decoded text even though the field
    # has an in-memory default.
    wire_required: ClassVar[Tuple[str, ...]] = ()

    @model_validator(mode="before")
    @classmethod
    def require_wire_fields(cls, data: Any, info: ValidationInfo) -> Any:
        if info.context and info.context.get(WIRE_CONTEXT) and isinstance(data, dict):
            for key in cls.wire_required:
                if key not in data:
                    raise ValueError(f"missing field `{key}`")
        return data

    def serialize(self) -> str:
        try:
            return self.model_dump_json(by_alias=True, exclude_none=True)
        except PydanticSerializationError as e:
            logger.debug(f"Failed to serialize {type(self).__name__}: {e}")
            raise SerializationError(e) from e

    @classmethod
    def deserialize(cls: Type[ModelT], json_data: str) -> ModelT:
        try:
            return cls.model_validate_json(json_data, strict=True, context={WIRE_CONTEXT: True})
        except ValidationError as e:
            logger.debug(f"Failed to deserialize {cls.__name__}: {e}")
            raise DeserializationError(e) from e

    @classmethod
    def try_from(cls: Type[ModelT], value: str) -> ModelT:
        return cls.deserialize(value)


class Meta(ScimModel):
    resource_type: Optional[str] = Field(None, alias="resourceType")
    created: Optional[str] = None
    last_modified: Optional[str] = Field(None, alias="lastModified")
    version: Optional[str] = None
    location: Optional[str] = None


class MultiValuedAttribute(ScimModel):
    value: Optional[str] = None
    display: Optional[str] = None
    type: Optional[str] = None
    primary: Optional[bool] = None


class Name(ScimModel):
    formatted: Optional[str] = None
    family_name: Optional[str] = Field(None, alias="familyName")
    given_name: Optional[str] = Field(None, alias="givenName")
    middle_name: Optional[str] = Field(None, alias="middleName")
    honorific_prefix: Optional[str] = Field(None, alias="honorificPrefix")
    honorific_suffix: Optional[str] = Field(None, alias="honorificSuffix")


class Address(ScimModel):
    formatted: Optional[str] = None
    street_address: Optional[str] = Field(None, alias="streetAddress")
    locality: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = Field(None, alias="postalCode")
    country: Optional[str] = None
    type: Optional[str] = None
    primary: Optional[bool] = None


class BaseResource(ScimModel):
    schemas: List[str]
    id: Optional[str] = None
    external_id: Optional[str] = Field(None, alias="externalId")
    meta: Optional[Meta] = None


class ExtensibleResource(BaseResource):
    """A resource that may embed schema extensions under their URN.

    Extensions modeled as fields are listed in ``known_extensions``; any other
    ``urn:`` keyed object is kept verbatim in ``extensions`` and written back
    at the top level on encode.
    """

    known_extensions: ClassVar[Tuple[str, ...]] = ()
    # Non-standard extension keys accepted as synonyms of a known one.
    extension_key_aliases: ClassVar[Dict[str, str]] = {}

    extensions: Dict[str, Any] = Field(default_factory=dict, exclude=True)

    @model_validator(mode="before")
    @classmethod
    def collect_extensions(cls, data: Any, info: ValidationInfo) -> Any:
        if not isinstance(data, dict):
            return data

        data = dict(data)
        if info.context and info.context.get(WIRE_CONTEXT):
            # Filled from urn: keys only.
            data.pop("extensions", None)

        for legacy_key, standard_key in cls.extension_key_aliases.items():
            if legacy_key in data and standard_key not in data:
                logger.debug(f"Converting non-standard extension key {legacy_key} to {standard_key}")
                data[standard_key] = data.pop(legacy_key)

        found = {
            key: value
            for key, value in data.items()
            if key.startswith("urn:") and key not in cls.known_extensions
        }
        if found:
            existing = data.get("extensions")
            data["extensions"] = {**existing, **found} if isinstance(existing, dict) else found
        return data

    @model_serializer(mode="wrap")
    def emit_extensions(self, handler: SerializerFunctionWrapHandler) -> Dict[str, Any]:
        data = handler(self)
        for urn, value in self.extensions.items():
            data.setdefault(urn, value)
        return data
