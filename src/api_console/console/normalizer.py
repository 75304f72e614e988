"""Turn responses and errors into displayable outcomes."""

import json

from api_console.console.models import Failure, RawResponse, Success

INDENT = 2


def is_json_content(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def normalize(response: RawResponse) -> Success:
    """Format a response body for display.

    JSON bodies are pretty-printed; anything else, including JSON that fails
    to parse, is shown as received.
    """
    text = response.text
    if is_json_content(response.content_type):
        try:
            text = json.dumps(json.loads(response.text), indent=INDENT, ensure_ascii=False)
        except json.JSONDecodeError:
            pass
    return Success(display_text=text, status_code=response.status_code)


def normalize_error(error: Exception) -> Failure:
    return Failure(message=str(error))
