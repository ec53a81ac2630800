"""Shared utilities for CLI commands."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
import typer
from rich.console import Console

from user_crud.core.services.user_list_controller import UserListController
from user_crud.runtime.config.config_data import ApiConfig
from user_crud.runtime.context import get_config

# Initialize Rich console for colored output
console = Console()


def build_http_client(api_config: ApiConfig) -> httpx.AsyncClient:
    """Create the HTTP client every controller exchange goes through."""
    return httpx.AsyncClient(
        timeout=api_config.timeout_seconds,
        headers={"Accept": "application/json"},
    )


@asynccontextmanager
async def open_controller() -> AsyncIterator[UserListController]:
    """Yield an activated controller bound to the configured users resource.

    The initial fetch has already run when the block starts; its failure,
    if any, is reported through ``controller.state.error``.
    """
    api_config = get_config().api
    async with build_http_client(api_config) as client:
        controller = UserListController(client, api_config.base_url)
        await controller.activate()
        yield controller


def exit_on_error(controller: UserListController) -> None:
    """Print the controller's error banner and stop with exit code 1."""
    if controller.state.error:
        console.print(f"[red]❌ {controller.state.error}[/red]")
        raise typer.Exit(code=1)
