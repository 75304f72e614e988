"""OpenAPI / Swagger document loader.

Loads OpenAPI 3.x and Swagger 2.0 documents into an ApiDoc, one section
per tag.
"""

import json
import logging
import re
from pathlib import Path

import yaml

from .base import ApiDoc, ApiEndpoint, HttpMethod, Param, ParameterLocation, Section

logger = logging.getLogger(__name__)

SUPPORTED_LOCATIONS = {loc.value for loc in ParameterLocation}


def parse_openapi(file_path: Path, base_url: str | None = None) -> ApiDoc:
    """Parse an OpenAPI/Swagger file into an ApiDoc."""
    text = file_path.read_text(encoding="utf-8")
    doc = yaml.safe_load(text)

    info = doc.get("info", {})
    sections: dict[str, Section] = {}

    for path, methods in doc.get("paths", {}).items():
        shared = methods.get("parameters", [])
        for method, operation in methods.items():
            if method.upper() not in HttpMethod.__members__:
                continue

            params = _parse_parameters(_merge_parameters(doc, shared, operation.get("parameters", [])))
            body = _parse_request_body(operation.get("requestBody"))
            if body is not None:
                params.append(body)

            tag = (operation.get("tags") or ["default"])[0]
            section = sections.setdefault(tag, Section(name=tag))
            section.endpoints.append(
                ApiEndpoint(
                    id=operation.get("operationId") or _endpoint_id(method, path),
                    method=HttpMethod(method.upper()),
                    path=path,
                    summary=operation.get("summary", ""),
                    parameters=params,
                )
            )

    return ApiDoc(
        title=info.get("title", ""),
        description=info.get("description", ""),
        base_url=(base_url or _detect_base_url(doc)).rstrip("/"),
        version=str(info.get("version", "")),
        sections=list(sections.values()),
    )


def _endpoint_id(method: str, path: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", path.lower()).strip("-")
    return f"{method.lower()}-{slug}" if slug else method.lower()


def _merge_parameters(doc: dict, shared: list[dict], own: list[dict]) -> list[dict]:
    """Combine path-item and operation parameters; the operation wins on (name, in)."""
    merged: dict[tuple, dict] = {}
    for p in shared + own:
        if "$ref" in p:
            p = _resolve_ref(doc, p["$ref"])
            if p is None:
                continue
        if "name" not in p:
            logger.debug("Skipping parameter without a name: %s", p)
            continue
        merged[(p["name"], p.get("in", "query"))] = p
    return list(merged.values())


def _resolve_ref(doc: dict, ref: str, seen: frozenset = frozenset()) -> dict | None:
    """Follow a local JSON pointer such as ``#/components/parameters/Id``."""
    if ref in seen or not ref.startswith("#/"):
        logger.debug("Skipping external or circular reference %s", ref)
        return None

    node = doc
    for part in ref[2:].split("/"):
        part = part.replace("~1", "/").replace("~0", "~")
        if not isinstance(node, dict) or part not in node:
            logger.debug("Skipping unresolvable reference %s", ref)
            return None
        node = node[part]

    if isinstance(node, dict) and "$ref" in node:
        return _resolve_ref(doc, node["$ref"], seen | {ref})
    return node if isinstance(node, dict) else None


def _parse_parameters(params: list[dict]) -> list[Param]:
    result = []
    for p in params:
        location = p.get("in", "query")
        if location not in SUPPORTED_LOCATIONS:
            logger.debug("Skipping parameter %s in %s", p.get("name"), location)
            continue

        # Swagger 2.0 keeps the schema inline on non-body parameters
        schema = p.get("schema", p)
        default = schema.get("default", "")
        result.append(
            Param(
                name=p["name"],
                location=ParameterLocation(location),
                required=p.get("required", False),
                param_type=schema.get("type", "string"),
                description=p.get("description", ""),
                default=_as_text(default),
            )
        )
    return result


def _parse_request_body(body: dict | None) -> Param | None:
    if not body:
        return None
    content = body.get("content", {})
    media = content.get("application/json")
    if media is None:
        # Fallback: first available media type
        media = next(iter(content.values()), {})

    example = media.get("example", media.get("schema", {}).get("example", ""))
    return Param(
        name="body",
        location=ParameterLocation.BODY,
        required=body.get("required", False),
        param_type=media.get("schema", {}).get("type", "object"),
        description=body.get("description", ""),
        default=_as_text(example),
    )


def _detect_base_url(doc: dict) -> str:
    servers = doc.get("servers")
    if servers:
        return servers[0].get("url", "")
    if "host" in doc:
        scheme = (doc.get("schemes") or ["https"])[0]
        return f"{scheme}://{doc['host']}{doc.get('basePath', '')}"
    return ""


def _as_text(value) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)
