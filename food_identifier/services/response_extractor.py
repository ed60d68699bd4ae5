import json
import re
from typing import Any

FENCED_JSON = re.compile(r"```json\n([\s\S]*?)\n```")
BRACE_SPAN = re.compile(r"\{[\s\S]*\}")


def extract_json_text(content: str) -> str:
    """Pick the JSON candidate out of a model reply.

    A ```json fenced block wins, then the greedy span from the first ``{`` to
    the last ``}``; otherwise the reply is returned unchanged.
    """
    fenced = FENCED_JSON.search(content)
    if fenced:
        return fenced.group(1)

    span = BRACE_SPAN.search(content)
    if span:
        return span.group(0)

    return content


def parse_model_json(content: str) -> Any:
    # json.JSONDecodeError is left to the caller.
    return json.loads(extract_json_text(content))
