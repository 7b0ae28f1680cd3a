from .base import (
    ScimModel,
    BaseResource,
    ExtensibleResource,
    Meta,
    MultiValuedAttribute,
    Name,
    Address,
    SCIMSchemaUri,
)
from .user import (
    User,
    EnterpriseUser,
    Manager,
    UserGroup,
)
from .group import (
    Group,
    GroupMember,
)
from .meta import (
    Schema,
    Attributes,
    SubAttributes,
    ResourceType,
    SchemaExtension,
    ServiceProviderConfig,
    AuthenticationScheme,
    Supported,
    Bulk,
    Filter,
    AttributeType,
    Mutability,
    Returned,
    Uniqueness,
)
from .messages import (
    ListQuery,
    ListResponse,
    PatchOp,
    PatchOperation,
    Resource,
    SearchRequest,
)
from .error import ScimHttpError

__all__ = [
    # Base
    "ScimModel",
    "BaseResource",
    "ExtensibleResource",
    "Meta",
    "MultiValuedAttribute",
    "Name",
    "Address",
    "SCIMSchemaUri",
    # User
    "User",
    "EnterpriseUser",
    "Manager",
    "UserGroup",
    # Group
    "Group",
    "GroupMember",
    # Meta
    "Schema",
    "Attributes",
    "SubAttributes",
    "ResourceType",
    "SchemaExtension",
    "ServiceProviderConfig",
    "AuthenticationScheme",
    "Supported",
    "Bulk",
    "Filter",
    "AttributeType",
    "Mutability",
    "Returned",
    "Uniqueness",
    # Messages
    "ListQuery",
    "ListResponse",
    "PatchOp",
    "PatchOperation",
    "Resource",
    "SearchRequest",
    # Error
    "ScimHttpError",
]
