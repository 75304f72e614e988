"""Request assembler — turns an endpoint spec and descriptors into a request."""

import json
import logging
import re
from collections.abc import Sequence
from urllib.parse import quote, urlsplit, urlunsplit

from api_console.console.models import AssembledRequest, ParameterDescriptor
from api_console.docs.base import EndpointSpec, ParameterLocation
from api_console.errors import EmptyPathParameter, InvalidHeader, UnresolvedPlaceholder, UnusedPathParameter

logger = logging.getLogger(__name__)

BODY_METHODS = ("POST", "PUT", "PATCH")
CONTENT_TYPE = "Content-Type"
JSON_CONTENT_TYPE = "application/json"
TEXT_CONTENT_TYPE = "text/plain"

_PLACEHOLDER_RE = re.compile(r"\{([^{}]+)\}")


def assemble(spec: EndpointSpec, params: Sequence[ParameterDescriptor]) -> AssembledRequest:
    """Build a ready-to-send request.

    Raises an AssemblyError subclass when the path cannot be resolved or a
    header cannot be sent.
    """
    for p in params:
        if p.location is ParameterLocation.PATH and not p.raw_value:
            raise EmptyPathParameter(p.name)

    groups = _partition(params)
    method = spec.method.value

    url = spec.base_url + _resolve_path(spec.path_template, groups[ParameterLocation.PATH])
    url = _append_query(url, groups[ParameterLocation.QUERY])

    headers = {CONTENT_TYPE: JSON_CONTENT_TYPE}
    for name, value in groups[ParameterLocation.HEADER].items():
        if not (name.isascii() and value.isascii()):
            raise InvalidHeader(name)
        headers[name] = value

    body = None
    bodies = [p for p in params if p.location is ParameterLocation.BODY]
    if bodies and method not in BODY_METHODS:
        logger.debug("Ignoring body parameter for %s request", method)
    elif bodies:
        if len(bodies) > 1:
            logger.warning("Got %d body parameters, using %r", len(bodies), bodies[0].name)
        body, is_json = _encode_body(bodies[0].raw_value)
        if not is_json and CONTENT_TYPE not in groups[ParameterLocation.HEADER]:
            headers[CONTENT_TYPE] = TEXT_CONTENT_TYPE

    return AssembledRequest(url=url, method=method, headers=headers, body=body)


def _partition(params: Sequence[ParameterDescriptor]) -> dict[ParameterLocation, dict[str, str]]:
    """Group descriptor values by location, keyed by name (last one wins)."""
    groups: dict[ParameterLocation, dict[str, str]] = {loc: {} for loc in ParameterLocation}
    for p in params:
        group = groups[p.location]
        if p.name in group:
            logger.warning("Duplicate %s parameter %r, using the last value", p.location.value, p.name)
        group[p.name] = p.raw_value
    return groups


def _resolve_path(template: str, path_params: dict[str, str]) -> str:
    placeholders = _PLACEHOLDER_RE.findall(template)
    for name in placeholders:
        if name not in path_params:
            raise UnresolvedPlaceholder(name)
    for name in path_params:
        if name not in placeholders:
            raise UnusedPathParameter(name)

    return _PLACEHOLDER_RE.sub(lambda m: quote(path_params[m.group(1)], safe=""), template)


def _append_query(url: str, query_params: dict[str, str]) -> str:
    if not query_params:
        return url
    query = "&".join(f"{quote(k, safe='')}={quote(v, safe='')}" for k, v in query_params.items())
    parts = urlsplit(url)
    if parts.query and not parts.query.endswith("&"):
        query = f"{parts.query}&{query}"
    else:
        query = parts.query + query
    return urlunsplit(parts._replace(query=query))


def _encode_body(raw: str) -> tuple[bytes, bool]:
    """Encode a body value; returns the bytes and whether it was JSON."""
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Body is not valid JSON, sending it as plain text")
        return raw.encode("utf-8"), False
    return json.dumps(value, ensure_ascii=False, separators=(",", ":")).encode("utf-8"), True
