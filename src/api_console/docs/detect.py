"""Auto-detect documentation format and load it."""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from .base import ApiDoc
from .swagger import parse_openapi


def detect_format(file_path: Path) -> str:
    """Detect the format of an API documentation file.

    Returns: 'openapi', 'native', or 'unknown'.
    """
    text = file_path.read_text(encoding="utf-8")

    # YAML is a superset of JSON, so this covers both
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        return "unknown"

    if isinstance(data, dict):
        if "openapi" in data or "swagger" in data:
            return "openapi"
        if "sections" in data and "base_url" in data:
            return "native"
    return "unknown"


def load_doc(file_path: Path, base_url: str | None = None) -> ApiDoc:
    """Load an ApiDoc from an OpenAPI document or a native YAML/JSON dump.

    Raises ValueError if the file is in neither format.
    """
    fmt = detect_format(file_path)
    if fmt == "openapi":
        return parse_openapi(file_path, base_url=base_url)
    if fmt == "native":
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        try:
            doc = ApiDoc(**data)
        except ValidationError as e:
            raise ValueError(f"{file_path}: invalid documentation: {e}") from e
        if base_url:
            doc.base_url = base_url.rstrip("/")
        return doc
    raise ValueError(f"{file_path}: not an OpenAPI document or api-console doc")


def dump_doc(doc: ApiDoc) -> str:
    """Serialize an ApiDoc to the native format understood by load_doc."""
    return yaml.safe_dump(json.loads(doc.model_dump_json()), sort_keys=False, allow_unicode=True)
