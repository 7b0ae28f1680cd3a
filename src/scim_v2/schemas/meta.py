from typing import ClassVar, List, Optional, Tuple
from pydantic import Field
from enum import Enum
from ..exceptions import MissingRequiredField
from .base import Meta, SCIMSchemaUri, ScimModel


class AttributeType(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    DECIMAL = "decimal"
    INTEGER = "integer"
    DATETIME = "dateTime"
    REFERENCE = "reference"
    COMPLEX = "complex"
    BINARY = "binary"


class Mutability(str, Enum):
    READ_ONLY = "readOnly"
    READ_WRITE = "readWrite"
    IMMUTABLE = "immutable"
    WRITE_ONLY = "writeOnly"


class Returned(str, Enum):
    ALWAYS = "always"
    NEVER = "never"
    DEFAULT = "default"
    REQUEST = "request"


class Uniqueness(str, Enum):
    NONE = "none"
    SERVER = "server"
    GLOBAL = "global"


class SubAttributes(ScimModel):
    name: str
    type: AttributeType
    multi_valued: bool = Field(..., alias="multiValued")
    description: Optional[str] = None
    required: Optional[bool] = None
    canonical_values: Optional[List[str]] = Field(None, alias="canonicalValues")
    case_exact: Optional[bool] = Field(None, alias="caseExact")
    mutability: Optional[Mutability] = None
    returned: Optional[Returned] = None
    uniqueness: Optional[Uniqueness] = None
    reference_types: Optional[List[str]] = Field(None, alias="referenceTypes")


class Attributes(ScimModel):
    name: str
    type: AttributeType
    multi_valued: bool = Field(..., alias="multiValued")
    description: Optional[str] = None
    required: Optional[bool] = None
    canonical_values: Optional[List[str]] = Field(None, alias="canonicalValues")
    case_exact: Optional[bool] = Field(None, alias="caseExact")
    mutability: Optional[Mutability] = None
    returned: Optional[Returned] = None
    uniqueness: Optional[Uniqueness] = None
    # A single level of nesting: sub-attributes carry no sub-attributes.
    sub_attributes: Optional[List[SubAttributes]] = Field(None, alias="subAttributes")
    reference_types: Optional[List[str]] = Field(None, alias="referenceTypes")


class Schema(ScimModel):
    id: str
    name: str
    description: str
    attributes: List[Attributes]
    meta: Meta


class SchemaExtension(ScimModel):
    wire_required: ClassVar[Tuple[str, ...]] = ("schema", "required")

    schema_uri: str = Field("", alias="schema")
    required: bool = False


class ResourceType(ScimModel):
    wire_required: ClassVar[Tuple[str, ...]] = ("name", "endpoint", "schema")

    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.RESOURCE_TYPE.value])
    id: Optional[str] = None
    name: str = ""
    description: Optional[str] = None
    endpoint: str = ""
    schema_uri: str = Field("", alias="schema")
    schema_extensions: Optional[List[SchemaExtension]] = Field(None, alias="schemaExtensions")
    meta: Optional[Meta] = None

    def validate(self) -> None:
        if not self.name:
            raise MissingRequiredField("name")
        if not self.endpoint:
            raise MissingRequiredField("endpoint")
        if not self.schema_uri:
            raise MissingRequiredField("schema")


class Supported(ScimModel):
    wire_required: ClassVar[Tuple[str, ...]] = ("supported",)

    supported: bool = False


class Bulk(ScimModel):
    wire_required: ClassVar[Tuple[str, ...]] = ("supported", "maxOperations", "maxPayloadSize")

    supported: bool = False
    max_operations: int = Field(1000, alias="maxOperations")
    max_payload_size: int = Field(1048576, alias="maxPayloadSize")


class Filter(ScimModel):
    wire_required: ClassVar[Tuple[str, ...]] = ("supported", "maxResults")

    supported: bool = False
    max_results: int = Field(100, alias="maxResults")


class AuthenticationScheme(ScimModel):
    type: str
    name: str
    description: str
    spec_uri: str = Field(..., alias="specUri")
    documentation_uri: Optional[str] = Field(None, alias="documentationUri")
    primary: Optional[bool] = None


class ServiceProviderConfig(ScimModel):
    wire_required: ClassVar[Tuple[str, ...]] = (
        "patch",
        "bulk",
        "filter",
        "changePassword",
        "sort",
        "etag",
        "authenticationSchemes",
    )

    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.SERVICE_PROVIDER_CONFIG.value])
    documentation_uri: Optional[str] = Field(None, alias="documentationUri")
    patch: Supported = Field(default_factory=Supported)
    bulk: Bulk = Field(default_factory=Bulk)
    filter: Filter = Field(default_factory=Filter)
    change_password: Supported = Field(default_factory=Supported, alias="changePassword")
    sort: Supported = Field(default_factory=Supported)
    etag: Supported = Field(default_factory=Supported)
    authentication_schemes: List[AuthenticationScheme] = Field(default_factory=list, alias="authenticationSchemes")
    meta: Optional[Meta] = None

    def validate(self) -> None:
        """Require support for every optional protocol feature.

        A provider that legitimately disables one of them fails here; such
        configurations should skip validation.
        """
        features = (
            ("patch", self.patch.supported),
            ("bulk", self.bulk.supported),
            ("filter", self.filter.supported),
            ("change_password", self.change_password.supported),
            ("sort", self.sort.supported),
            ("etag", self.etag.supported),
        )
        for field, supported in features:
            if not supported:
                raise MissingRequiredField(field)
