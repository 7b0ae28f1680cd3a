from ..config import settings
from ..schemas.base import Meta
from ..schemas.meta import (
    AuthenticationScheme,
    Bulk,
    Filter,
    ServiceProviderConfig,
    Supported,
)


def get_service_provider_config() -> ServiceProviderConfig:
    """A configuration advertising every optional feature, so it passes ``validate()``."""
    return ServiceProviderConfig(
        documentation_uri=settings.documentation_uri,
        patch=Supported(supported=True),
        bulk=Bulk(
            supported=True,
            max_operations=1000,
            max_payload_size=1048576,
        ),
        filter=Filter(
            supported=True,
            max_results=settings.max_page_size,
        ),
        change_password=Supported(supported=True),
        sort=Supported(supported=True),
        etag=Supported(supported=True),
        authentication_schemes=[
            AuthenticationScheme(
                type="oauthbearertoken",
                name="OAuth Bearer Token",
                description="Authentication scheme using the OAuth Bearer Token Standard",
                spec_uri="http://www.rfc-editor.org/info/rfc6750",
                documentation_uri=f"{settings.documentation_uri}/auth",
                primary=True,
            )
        ],
        meta=Meta(
            location=f"{settings.base_url}/ServiceProviderConfig",
            resource_type="ServiceProviderConfig",
        ),
    )
