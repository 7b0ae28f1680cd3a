from importlib import resources
from typing import Dict, Iterable, List
from ..exceptions import SchemaNotFound
from ..schemas.meta import Schema
from ..utils.logging import logger


def _load_document(filename: str) -> str:
    return (resources.files(__package__) / "data" / filename).read_text(encoding="utf-8")


# Canonical schema documents, read once when the package is imported.
SCHEMA_DOCUMENTS: Dict[str, str] = {
    "user": _load_document("user.json"),
    "enterprise_user": _load_document("enterprise_user.json"),
    "group": _load_document("group.json"),
}


def get_schemas(schema_names: Iterable[str]) -> List[Schema]:
    """Return the canonical schemas for ``schema_names``, in the order given.

    Known names are ``user``, ``enterprise_user`` and ``group``. An unknown
    name raises ``SchemaNotFound`` and nothing is returned.
    """
    schemas = []
    for schema_name in schema_names:
        document = SCHEMA_DOCUMENTS.get(schema_name)
        if document is None:
            logger.debug(f"Unknown schema requested: {schema_name}")
            raise SchemaNotFound(schema_name)
        schemas.append(Schema.deserialize(document))
    return schemas
