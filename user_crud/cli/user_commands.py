"""One-shot user management commands."""

import asyncio

import typer
from rich.prompt import Confirm

from user_crud.cli.utils import console, exit_on_error, open_controller
from user_crud.core.entities.user import parse_user_id
from user_crud.runtime.context import get_config
from user_crud.ui.render import render_users


def _required_text(value: str) -> str:
    if not value.strip():
        raise typer.BadParameter("must not be empty")
    return value


def _optional_required_text(value: str | None) -> str | None:
    if value is not None:
        return _required_text(value)
    return value


def list_users() -> None:
    """List all users of the remote resource."""

    async def _run() -> None:
        async with open_controller() as controller:
            exit_on_error(controller)
            console.print(render_users(controller.state))
            host = get_config().api.host
            console.print(
                f"\n[green]Found {len(controller.state.users)} users at {host}[/green]"
            )

    asyncio.run(_run())


def add_user(
    name: str = typer.Option(..., "--name", "-n", help="Full name", callback=_required_text),
    email: str = typer.Option(..., "--email", "-e", help="Email address", callback=_required_text),
    phone: str = typer.Option("", "--phone", "-p", help="Phone number"),
    website: str = typer.Option("", "--website", "-w", help="Website"),
) -> None:
    """Create a new user."""

    async def _run() -> None:
        async with open_controller() as controller:
            for field_name, value in (
                ("name", name),
                ("email", email),
                ("phone", phone),
                ("website", website),
            ):
                controller.update_draft_field(field_name, value)

            await controller.submit()
            exit_on_error(controller)

            created = controller.state.users[-1]
            console.print(
                f"[green]✅ Created user '{created.name}' with id {created.id}[/green]"
            )

    asyncio.run(_run())


def edit_user(
    user_id: str = typer.Argument(..., help="Id of the user to edit"),
    name: str | None = typer.Option(None, "--name", "-n", help="New full name", callback=_optional_required_text),
    email: str | None = typer.Option(None, "--email", "-e", help="New email address", callback=_optional_required_text),
    phone: str | None = typer.Option(None, "--phone", "-p", help="New phone number"),
    website: str | None = typer.Option(None, "--website", "-w", help="New website"),
) -> None:
    """Edit an existing user; fields that are not given keep their value."""
    target = parse_user_id(user_id)

    async def _run() -> None:
        async with open_controller() as controller:
            exit_on_error(controller)

            user = controller.state.find_user(target)
            if user is None:
                console.print(f"[red]❌ User '{user_id}' not found[/red]")
                raise typer.Exit(code=1)

            controller.begin_edit(user)
            for field_name, value in (
                ("name", name),
                ("email", email),
                ("phone", phone),
                ("website", website),
            ):
                if value is not None:
                    controller.update_draft_field(field_name, value)

            await controller.submit()
            exit_on_error(controller)

            console.print(f"[green]✅ Updated user {user_id}[/green]")
            console.print(render_users(controller.state))

    asyncio.run(_run())


def delete_user(
    user_id: str = typer.Argument(..., help="Id of the user to delete"),
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation prompt"),
) -> None:
    """Delete a user."""
    target = parse_user_id(user_id)

    if not force and not Confirm.ask(f"Are you sure you want to delete user '{user_id}'?"):
        console.print("[yellow]Deletion cancelled[/yellow]")
        return

    async def _run() -> None:
        async with open_controller() as controller:
            await controller.delete(target)
            exit_on_error(controller)
            console.print(f"[green]✅ Deleted user {user_id}[/green]")

    asyncio.run(_run())
