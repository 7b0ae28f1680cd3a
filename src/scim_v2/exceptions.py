from typing import Optional


class SCIMError(Exception):
    """Base for every failure raised by this package.

    ``status`` and ``scim_type`` are the protocol-level equivalents a host can
    use when it chooses to translate the error into a SCIM error response.
    """

    status: str = "500"
    scim_type: Optional[str] = None

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConflictError(SCIMError):
    status = "409"
    scim_type = "uniqueness"

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(f"Conflict error: {msg}")


class DeserializationError(SCIMError):
    status = "400"
    scim_type = "invalidSyntax"

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Deserialization error: {cause}")


class InvalidFieldValue(SCIMError):
    status = "400"
    scim_type = "invalidValue"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Invalid field value: {field}")


class InvalidJsonFormat(SCIMError):
    status = "400"
    scim_type = "invalidSyntax"

    def __init__(self):
        super().__init__("Invalid JSON format")


class MissingRequiredField(SCIMError):
    status = "400"
    scim_type = "invalidValue"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class NotFoundError(SCIMError):
    status = "404"

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Not found error: {key}")


class OtherError(SCIMError):
    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(f"Other Error: {msg}")


class RequestError(SCIMError):
    status = "400"

    def __init__(self, msg: str):
        self.msg = msg
        super().__init__(f"Request error: {msg}")


class ResourceTypeNotFound(SCIMError):
    status = "404"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Resource type not found: {name}")


class SchemaNotFound(SCIMError):
    status = "404"

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Schema not found: {name}")


class SerializationError(SCIMError):
    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Serialization error: {cause}")
