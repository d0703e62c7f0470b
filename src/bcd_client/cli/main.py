# Copyright 2025 DataStax Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may not
# use this file except in compliance with the License. You may obtain a copy of
# the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations under
# the License.

"""Main CLI entry point for the Better Call Dev client."""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from typing import Any

import click
from dotenv import load_dotenv

from ..api.errors import BcdApiError
from ..api.types import CANCELED
from ..client import BetterCallClient
from ..config import ClientSettings
from ..observability import LogConfig, setup_logging


def _run(ctx: click.Context, call: Callable[[BetterCallClient], Awaitable[Any]]) -> None:
    """Run one client call and print its payload as JSON."""

    async def _main() -> Any:
        async with BetterCallClient(settings=ctx.obj["settings"]) as client:
            return await call(client)

    try:
        result = asyncio.run(_main())
    except BcdApiError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)

    if result is CANCELED:
        click.echo("Request was canceled", err=True)
        sys.exit(1)
    if isinstance(result, str):
        click.echo(result)
    else:
        click.echo(json.dumps(result, indent=2))


@click.group()
@click.version_option(package_name="bcd-client")
@click.option(
    "--base-url",
    envvar="BCD_API_URL",
    default=None,
    help="Base URL of the Better Call Dev API",
)
@click.option("--timeout", envvar="BCD_TIMEOUT", type=float, default=None, help="Timeout in seconds")
@click.option(
    "--log-level",
    envvar="BCD_LOG_LEVEL",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level",
)
@click.pass_context
def main(ctx: click.Context, base_url: str | None, timeout: float | None, log_level: str):
    """Better Call Dev API client CLI."""
    # Load environment variables from .env file if it exists
    load_dotenv()

    config = LogConfig()
    config.log_level = getattr(logging, log_level.upper())
    setup_logging(config)

    settings = ClientSettings.from_env()
    if base_url:
        settings = settings.model_copy(update={"base_url": base_url})
    if timeout:
        settings = settings.model_copy(update={"timeout": timeout})

    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


@main.command()
@click.pass_context
def head(ctx: click.Context):
    """Show the head block of every network."""
    _run(ctx, lambda client: client.get_head())


@main.command()
@click.pass_context
def config(ctx: click.Context):
    """Show the server configuration."""
    _run(ctx, lambda client: client.get_config())


@main.command()
@click.argument("text")
@click.option("--network", "networks", multiple=True, help="Network to search in (repeatable)")
@click.option("--offset", default=0, help="Number of results to skip")
@click.pass_context
def search(ctx: click.Context, text: str, networks: tuple[str, ...], offset: int):
    """Search contracts, operations and big maps."""
    _run(ctx, lambda client: client.search(text, networks=list(networks), offset=offset))


@main.command()
@click.argument("network")
@click.argument("address")
@click.pass_context
def contract(ctx: click.Context, network: str, address: str):
    """Show a contract."""
    _run(ctx, lambda client: client.get_contract(network, address))


@main.command()
@click.argument("network")
@click.argument("address")
@click.pass_context
def account(ctx: click.Context, network: str, address: str):
    """Show an account."""
    _run(ctx, lambda client: client.get_account_info(network, address))


@main.command()
@click.argument("network")
@click.argument("address")
@click.pass_context
def metadata(ctx: click.Context, network: str, address: str):
    """Show the off-chain metadata of an account (null when none)."""
    _run(ctx, lambda client: client.get_account_metadata(network, address))


@main.command()
@click.argument("network")
@click.argument("address")
@click.pass_context
def resolve(ctx: click.Context, network: str, address: str):
    """Resolve an address to its domain."""
    _run(ctx, lambda client: client.resolve_domain(network, address))


@main.command()
@click.argument("network", required=False)
@click.pass_context
def stats(ctx: click.Context, network: str | None):
    """Show global or per-network statistics."""
    if network:
        _run(ctx, lambda client: client.get_network_stats(network))
    else:
        _run(ctx, lambda client: client.get_stats())


if __name__ == "__main__":
    main()
