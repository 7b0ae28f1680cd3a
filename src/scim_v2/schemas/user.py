from typing import ClassVar, Dict, List, Optional, Tuple
from pydantic import Field, field_validator
from ..exceptions import MissingRequiredField
from .base import (
    ExtensibleResource,
    MultiValuedAttribute,
    Name,
    Address,
    SCIMSchemaUri,
    ScimModel,
)


class Manager(ScimModel):
    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    display_name: Optional[str] = Field(None, alias="displayName")


class EnterpriseUser(ScimModel):
    """Attributes of the enterprise User extension (RFC 7643 section 4.3)."""

    employee_number: Optional[str] = Field(None, alias="employeeNumber")
    cost_center: Optional[str] = Field(None, alias="costCenter")
    organization: Optional[str] = None
    division: Optional[str] = None
    department: Optional[str] = None
    manager: Optional[Manager] = None

    @field_validator("manager", mode="before")
    def normalize_manager(cls, v):
        """Normalize manager field to always be a Manager object.

        This handles non-compliant SCIM implementations (like Entra ID) that
        send manager as a plain string instead of the complex object.
        """
        if isinstance(v, str):
            return Manager(value=v)
        return v

    def validate(self) -> None:
        """Require every extension attribute.

        This is stricter than the extension schema, where all of them are
        optional. Callers that accept partial records should not call it.
        """
        required = (
            ("employee_number", self.employee_number),
            ("cost_center", self.cost_center),
            ("organization", self.organization),
            ("division", self.division),
            ("department", self.department),
            ("manager", self.manager),
        )
        for field, value in required:
            if value is None:
                raise MissingRequiredField(field)


class UserGroup(ScimModel):
    """Represents a group membership for a user (read-only)"""

    value: Optional[str] = None
    ref: Optional[str] = Field(None, alias="$ref")
    display: Optional[str] = None
    type: Optional[str] = None


class User(ExtensibleResource):
    wire_required: ClassVar[Tuple[str, ...]] = ("schemas", "userName")
    known_extensions: ClassVar[Tuple[str, ...]] = (SCIMSchemaUri.ENTERPRISE_USER.value,)
    # OneLogin sends the enterprise extension under a pre-RFC key.
    extension_key_aliases: ClassVar[Dict[str, str]] = {
        "urn:scim:schemas:extension:enterprise:2.0": SCIMSchemaUri.ENTERPRISE_USER.value,
    }

    schemas: List[str] = Field(default_factory=lambda: [SCIMSchemaUri.USER.value])
    user_name: str = Field(..., alias="userName")
    name: Optional[Name] = None
    display_name: Optional[str] = Field(None, alias="displayName")
    nick_name: Optional[str] = Field(None, alias="nickName")
    profile_url: Optional[str] = Field(None, alias="profileUrl")
    title: Optional[str] = None
    user_type: Optional[str] = Field(None, alias="userType")
    preferred_language: Optional[str] = Field(None, alias="preferredLanguage")
    locale: Optional[str] = None
    timezone: Optional[str] = None
    active: Optional[bool] = None
    password: Optional[str] = None

    emails: Optional[List[MultiValuedAttribute]] = None
    addresses: Optional[List[Address]] = None
    phone_numbers: Optional[List[MultiValuedAttribute]] = Field(None, alias="phoneNumbers")
    ims: Optional[List[MultiValuedAttribute]] = None
    photos: Optional[List[MultiValuedAttribute]] = None
    groups: Optional[List[UserGroup]] = None
    entitlements: Optional[List[MultiValuedAttribute]] = None
    roles: Optional[List[MultiValuedAttribute]] = None
    x509_certificates: Optional[List[MultiValuedAttribute]] = Field(None, alias="x509Certificates")

    # Extension schema
    enterprise_user: Optional[EnterpriseUser] = Field(
        None,
        alias=SCIMSchemaUri.ENTERPRISE_USER.value,
    )

    def validate(self) -> None:
        # Only schemas and userName are required by the core schema.
        # Attribute formats (emails included) are not checked.
        if not self.schemas:
            raise MissingRequiredField("schemas")
        if not self.user_name:
            raise MissingRequiredField("user_name")
