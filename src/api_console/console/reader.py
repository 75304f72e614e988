"""Read parameter descriptors from UI parameter entries.

Each entry carries a label of the form ``"<name> (<location>)"`` and the
current input value.
"""

import re
from collections.abc import Iterable, Mapping

from api_console.console.models import ParameterDescriptor, ParameterEntry
from api_console.docs.base import ApiEndpoint, ParameterLocation
from api_console.errors import UnknownLocation

_LOCATION_RE = re.compile(r"\((.*?)\)")


def parse_label(label: str) -> tuple[str, ParameterLocation]:
    """Split a label like ``"key (path)"`` into name and location.

    Raises UnknownLocation if the parenthesized part is missing or not a
    known location.
    """
    tokens = label.split()
    name = tokens[0] if tokens else ""

    match = _LOCATION_RE.search(label)
    if not match:
        raise UnknownLocation("")
    value = match.group(1).strip().lower()
    try:
        return name, ParameterLocation(value)
    except ValueError:
        raise UnknownLocation(value) from None


def read_descriptors(entries: Iterable[ParameterEntry]) -> list[ParameterDescriptor]:
    """Turn parameter entries into descriptors, skipping incomplete entries."""
    result = []
    for entry in entries:
        if entry.label is None or entry.value is None:
            continue
        name, location = parse_label(entry.label)
        result.append(ParameterDescriptor(name=name, location=location, raw_value=entry.value))
    return result


def entries_for(endpoint: ApiEndpoint, values: Mapping[str, str]) -> list[ParameterEntry]:
    """Build the entries a form for this endpoint would hold.

    Parameters without a supplied value keep their documented default.
    """
    return [
        ParameterEntry(label=p.label, value=values.get(p.name, p.default))
        for p in endpoint.parameters
    ]
