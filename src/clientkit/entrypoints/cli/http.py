"""HTTP request helpers exposed on the CLI.

- ``clientkit auth-header TOKEN``: print the Bearer Authorization header as JSON.
- ``clientkit url [ENDPOINT] -p KEY=VALUE``: print an API URL with a querystring.
"""

import json
import logging

import click

from clientkit.auth import create_auth_header
from clientkit.config import API_URL_ENV_VAR, ApiBaseUrlNotSetError, get_api_base_url
from clientkit.urls import make_api_url

from .helpers import error, success, warn

logger = logging.getLogger(__name__)


def _parse_params(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: tuple[str, ...],
) -> dict[str, list[str]]:
    """Click callback turning repeated KEY=VALUE options into a key->values dict."""
    params: dict[str, list[str]] = {}
    for item in value:
        key, sep, val = item.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"Expected KEY=VALUE, got {item!r}")
        params.setdefault(key.strip(), []).append(val)
    return params


@click.command("auth-header")
@click.argument("token")
def auth_header(token: str) -> None:
    """Print a Bearer Authorization header for TOKEN (a JWT) as JSON."""
    headers = create_auth_header(token.strip())
    if not headers:
        warn("Token does not look like a JWT; no header was built.")
        raise click.exceptions.Exit(1)
    click.echo(json.dumps(headers))
    success("Built Bearer Authorization header.")


@click.command("url")
@click.argument("endpoint", required=False)
@click.option(
    "--base",
    help=f"API base URL. Defaults to ${API_URL_ENV_VAR}.",
)
@click.option(
    "--param",
    "-p",
    "params",
    multiple=True,
    callback=_parse_params,
    help="Query param as KEY=VALUE. Repeatable; repeated keys are kept.",
)
def url(endpoint: str | None, base: str | None, params: dict[str, list[str]]) -> None:
    """Print the API URL for ENDPOINT, with any query params appended."""
    if not base:
        try:
            base = get_api_base_url()
        except ApiBaseUrlNotSetError as e:
            error(f"No API base URL: pass --base or set {API_URL_ENV_VAR}.")
            raise click.exceptions.Exit(2) from e
    logger.debug("Building URL from base=%s endpoint=%s", base, endpoint)
    click.echo(make_api_url(base, endpoint, params))
