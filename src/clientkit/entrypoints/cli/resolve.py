"""``clientkit resolve``: resolve a displayable message and status from an error payload.

The payload is read as JSON, from the argument or from stdin. Text that is
not valid JSON is resolved as a bare string message.

Examples
    $ clientkit resolve '{"response": {"status": 403, "data": {"detail": "nope"}}}'
    message: nope
    status: 403
    statusText: 500

    $ echo '"ValidationError: name is required"' | clientkit resolve --json
    {"message": "name is required", "status": 500, "statusText": 500}
"""

import json
import logging
from typing import Any

import click

from clientkit.resolver import (
    classify,
    resolve_error_message,
    resolve_status_code,
    resolve_status_text,
)

logger = logging.getLogger(__name__)


def _load_payload(raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError:
        logger.debug("Payload is not JSON; resolving it as a bare string")
        return raw.rstrip("\r\n")


@click.command()
@click.argument("payload", required=False, default="-")
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    default=False,
    help="Print the result as a single JSON object.",
)
def resolve(payload: str, as_json: bool) -> None:
    """Resolve message, status and status text from PAYLOAD.

    PAYLOAD is JSON text (or a bare string). Use '-' or omit it to read stdin.
    """
    raw = click.get_text_stream("stdin").read() if payload == "-" else payload
    value = _load_payload(raw)
    logger.debug("Resolving %s", type(classify(value)).__name__)

    result = {
        "message": resolve_error_message(value),
        "status": resolve_status_code(value),
        "statusText": resolve_status_text(value),
    }
    logger.info("Resolved status %s: %s", result["status"], result["message"])

    if as_json:
        click.echo(json.dumps(result))
        return
    for key, resolved in result.items():
        click.echo(f"{key}: {resolved}")
