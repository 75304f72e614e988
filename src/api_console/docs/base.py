"""Data models for interactive API documentation.

All loaders (OpenAPI, native YAML, built-in paste docs) produce these
models; the console reads endpoint metadata and parameter labels from them.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class ParameterLocation(str, Enum):
    QUERY = "query"
    PATH = "path"
    BODY = "body"
    HEADER = "header"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"


class EndpointSpec(BaseModel):
    """Where and how one documented operation is called."""

    model_config = ConfigDict(frozen=True)

    base_url: str
    method: HttpMethod
    path_template: str  # /{key}/clicks


class Param(BaseModel):
    """A single documented parameter (query, path, body, or header)."""

    name: str
    location: ParameterLocation
    param_type: str = "string"  # string / int / bool / time
    required: bool = False
    description: str = ""
    default: str = ""

    @property
    def label(self) -> str:
        """Label shown next to the parameter input, e.g. ``ttl (query)``."""
        return f"{self.name} ({self.location.value})"


class ApiEndpoint(BaseModel):
    """A single API endpoint with all its metadata."""

    id: str
    method: HttpMethod
    path: str
    summary: str = ""
    parameters: list[Param] = []
    request_example: str = ""
    response_example: str = ""

    def spec(self, base_url: str) -> EndpointSpec:
        return EndpointSpec(base_url=base_url, method=self.method, path_template=self.path)


class Section(BaseModel):
    name: str
    description: str = ""
    endpoints: list[ApiEndpoint] = []


class ApiDoc(BaseModel):
    """A whole documentation page: a titled list of endpoint sections."""

    title: str
    description: str = ""
    base_url: str
    version: str = ""
    sections: list[Section] = []

    def endpoints(self) -> list[ApiEndpoint]:
        return [ep for section in self.sections for ep in section.endpoints]

    def find_endpoint(self, endpoint_id: str) -> ApiEndpoint:
        """Return the endpoint with the given id.

        Raises KeyError if no section documents it.
        """
        for ep in self.endpoints():
            if ep.id == endpoint_id:
                return ep
        raise KeyError(endpoint_id)
