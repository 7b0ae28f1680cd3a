"""SCIM 2.0 resource models, JSON codec and discovery registries.

Every model serializes to and from its SCIM wire form::

    from scim_v2 import User

    user = User.deserialize('{"schemas": ["urn:ietf:params:scim:schemas:core:2.0:User"], "userName": "jdoe"}')
    user.validate()
    user.serialize()

Validation is light on purpose: it checks which required fields are
present, not whether values are well formed.
"""
from .exceptions import (
    SCIMError,
    ConflictError,
    DeserializationError,
    InvalidFieldValue,
    InvalidJsonFormat,
    MissingRequiredField,
    NotFoundError,
    OtherError,
    RequestError,
    ResourceTypeNotFound,
    SchemaNotFound,
    SerializationError,
)
from .schemas import (
    User,
    EnterpriseUser,
    Group,
    ResourceType,
    Schema,
    ServiceProviderConfig,
    ListQuery,
    ListResponse,
    PatchOp,
    SearchRequest,
    ScimHttpError,
)
from .discovery import get_resource_types, get_schemas, get_service_provider_config

__version__ = "0.2.0"

__all__ = [
    "SCIMError",
    "ConflictError",
    "DeserializationError",
    "InvalidFieldValue",
    "InvalidJsonFormat",
    "MissingRequiredField",
    "NotFoundError",
    "OtherError",
    "RequestError",
    "ResourceTypeNotFound",
    "SchemaNotFound",
    "SerializationError",
    "User",
    "EnterpriseUser",
    "Group",
    "ResourceType",
    "Schema",
    "ServiceProviderConfig",
    "ListQuery",
    "ListResponse",
    "PatchOp",
    "SearchRequest",
    "ScimHttpError",
    "get_resource_types",
    "get_schemas",
    "get_service_provider_config",
]
