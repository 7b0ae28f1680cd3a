from .schemas import SCHEMA_DOCUMENTS, get_schemas
from .resource_types import (
    ENTERPRISE_USER_MODIFIER,
    get_resource_types,
    group_resource_type,
    user_resource_type,
)
from .service_provider_config import get_service_provider_config

__all__ = [
    "SCHEMA_DOCUMENTS",
    "get_schemas",
    "ENTERPRISE_USER_MODIFIER",
    "get_resource_types",
    "group_resource_type",
    "user_resource_type",
    "get_service_provider_config",
]
