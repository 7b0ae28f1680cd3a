from typing import Iterable, List, Optional
from ..config import settings
from ..exceptions import ResourceTypeNotFound
from ..schemas.base import Meta, SCIMSchemaUri
from ..schemas.meta import ResourceType, SchemaExtension
from ..utils.logging import logger


# Requested alongside "user" to mark the enterprise extension as required.
ENTERPRISE_USER_MODIFIER = "enterprise_user"


def _resource_type_meta(name: str) -> Meta:
    return Meta(
        location=f"{settings.base_url}/ResourceTypes/{name}",
        resource_type="ResourceType",
    )


def user_resource_type(with_enterprise_extension: bool = False) -> ResourceType:
    schema_extensions: Optional[List[SchemaExtension]] = None
    if with_enterprise_extension:
        schema_extensions = [
            SchemaExtension(schema_uri=SCIMSchemaUri.ENTERPRISE_USER.value, required=True),
        ]
    return ResourceType(
        id="User",
        name="User",
        endpoint="/Users",
        description="User Account",
        schema_uri=SCIMSchemaUri.USER.value,
        schema_extensions=schema_extensions,
        meta=_resource_type_meta("User"),
    )


def group_resource_type() -> ResourceType:
    return ResourceType(
        id="Group",
        name="Group",
        endpoint="/Groups",
        description="Group",
        schema_uri=SCIMSchemaUri.GROUP.value,
        meta=_resource_type_meta("Group"),
    )


def get_resource_types(resource_type_names: Iterable[str]) -> List[ResourceType]:
    """Build the ResourceType descriptors for ``resource_type_names``.

    Options are ``user`` and ``group``. ``enterprise_user`` is not a resource
    type of its own: when present, the ``user`` descriptor lists the
    enterprise extension as required. Output follows the request order; an
    unknown name raises ``ResourceTypeNotFound`` and nothing is returned.
    """
    names = list(resource_type_names)
    has_enterprise_user = ENTERPRISE_USER_MODIFIER in names
    names = [name for name in names if name != ENTERPRISE_USER_MODIFIER]

    resource_types = []
    for name in names:
        if name == "user":
            resource_types.append(user_resource_type(has_enterprise_user))
        elif name == "group":
            resource_types.append(group_resource_type())
        else:
            logger.debug(f"Unknown resource type requested: {name}")
            raise ResourceTypeNotFound(name)
    return resource_types
