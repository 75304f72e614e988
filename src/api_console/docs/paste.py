"""Built-in documentation for the paste / URL-shortening service."""

from api_console.config import Settings
from api_console.docs.base import ApiDoc, ApiEndpoint, HttpMethod, Param, ParameterLocation, Section

TITLE = "Paste.thek4n.ru API"
DESCRIPTION = "This API provides access to all the awesome features of our service."


def build_api_doc(base_url: str, settings: Settings) -> ApiDoc:
    """Build the paste service documentation for the given base URL."""
    base_url = base_url.rstrip("/")
    sections = [_main_section(base_url, settings)]
    if settings.healthcheck_enabled:
        sections.append(_healthcheck_section(settings.version))

    return ApiDoc(
        title=TITLE,
        description=DESCRIPTION,
        base_url=base_url,
        version=settings.version,
        sections=sections,
    )


def _main_section(base_url: str, settings: Settings) -> Section:
    return Section(
        name="Main",
        description="Main operations",
        endpoints=[
            ApiEndpoint(
                id="create-record",
                method=HttpMethod.POST,
                path="/",
                summary="Save body",
                response_example=f"{base_url}/eoVbybwLnlc49q/",
                parameters=_create_record_parameters(settings),
            ),
            ApiEndpoint(
                id="get-record",
                method=HttpMethod.GET,
                path="/{key}",
                summary="Get previously saved body with key. If key was saved as url - you will be redirected.",
                response_example="body",
                parameters=_key_path_parameter(),
            ),
            ApiEndpoint(
                id="get-record-clicks",
                method=HttpMethod.GET,
                path="/{key}/clicks",
                summary="Get clicks count for key.",
                response_example="1",
                parameters=_key_path_parameter(),
            ),
        ],
    )


def _healthcheck_section(version: str) -> Section:
    return Section(
        name="Healthcheck",
        description="Healthcheck operations",
        endpoints=[
            ApiEndpoint(
                id="healthcheck",
                method=HttpMethod.GET,
                path="/health",
                summary="Healthcheck service",
                response_example=(
                    "{\n"
                    f'\t"version": "{version}",\n'
                    '\t"availability": true,\n'
                    '\t"msg": "ok"\n'
                    "}"
                ),
            ),
        ],
    )


def _create_record_parameters(settings: Settings) -> list[Param]:
    query = ParameterLocation.QUERY
    return [
        Param(
            name="ttl",
            param_type="time",
            location=query,
            description=(
                "TTL - time to live of created key. Examples 3h, 30m, 60s. "
                "Authorized apikeys can set persist key by providing ttl parameter as 0"
            ),
            default=settings.default_ttl,
        ),
        Param(
            name="disposable",
            param_type="int",
            location=query,
            description="After number of this getting of this key, key will be removed",
            default="0",
        ),
        Param(
            name="len",
            param_type="int",
            location=query,
            description=(
                f"Length of key to generate. max={settings.max_key_length}, "
                f"unprivileged min={settings.unprivileged_min_key_length}, "
                f"privileged min={settings.privileged_min_key_length}"
            ),
            default=str(settings.default_key_length),
        ),
        Param(
            name="url",
            param_type="bool",
            location=query,
            description="Is body url. If true after getting this key you will be redirected.",
            default="false",
        ),
        Param(name="key", location=query, description="You can request custom key"),
        Param(name="apikey", location=query, description="Apikey to use privileged features"),
        Param(
            name="body",
            location=ParameterLocation.BODY,
            required=True,
            description="Body to cache.",
        ),
    ]


def _key_path_parameter() -> list[Param]:
    return [
        Param(name="key", location=ParameterLocation.PATH, required=True, description="Key to request."),
    ]
