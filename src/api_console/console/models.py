"""Transient values passed between the console stages.

None of these outlive a single "try it" invocation.
"""

from typing import Literal, Union

from pydantic import BaseModel

from api_console.docs.base import ParameterLocation


class ParameterEntry(BaseModel):
    """One parameter input as the UI holds it: a label and the typed value."""

    label: str | None = None
    value: str | None = None


class ParameterDescriptor(BaseModel):
    name: str
    location: ParameterLocation
    raw_value: str


class AssembledRequest(BaseModel):
    url: str
    method: str
    headers: dict[str, str]
    body: bytes | None = None


class RawResponse(BaseModel):
    status_code: int
    headers: dict[str, str] = {}
    text: str = ""
    content_type: str = ""


class Idle(BaseModel):
    state: Literal["idle"] = "idle"


class Pending(BaseModel):
    state: Literal["pending"] = "pending"


class Success(BaseModel):
    state: Literal["success"] = "success"
    display_text: str
    status_code: int | None = None


class Failure(BaseModel):
    state: Literal["failure"] = "failure"
    message: str


OutcomeView = Union[Idle, Pending, Success, Failure]
