"""Interactive session: the form and the list, redrawn after every action."""

import asyncio

from rich.console import Console
from rich.prompt import Confirm, Prompt

from user_crud.cli.utils import console, open_controller
from user_crud.core.entities.user import EDITABLE_FIELDS, parse_user_id
from user_crud.core.services.user_list_controller import UserListController
from user_crud.runtime.context import get_config
from user_crud.ui.render import FORM_LABELS, render_page

REQUIRED_FIELDS = ("name", "email")

CREATING_ACTIONS = {
    "a": "add",
    "e": "edit",
    "d": "delete",
    "r": "refresh",
    "q": "quit",
}
EDITING_ACTIONS = {
    "f": "change fields",
    "s": "save",
    "c": "cancel",
    "r": "refresh",
    "q": "quit",
}


def prompt_draft(controller: UserListController, out: Console) -> None:
    """Ask for every form field, offering the current draft value as default.

    Name and email must not be left blank.
    """
    draft = controller.state.draft
    for field_name in EDITABLE_FIELDS:
        label = FORM_LABELS[field_name]
        while True:
            value = Prompt.ask(label, default=getattr(draft, field_name), console=out)
            if value.strip() or field_name not in REQUIRED_FIELDS:
                break
            out.print(f"[red]{label} is required[/red]")
        controller.update_draft_field(field_name, value)


def _ask_user(controller: UserListController, out: Console):
    raw = Prompt.ask("User id", console=out)
    user = controller.state.find_user(parse_user_id(raw))
    if user is None:
        out.print(f"[red]No user with id '{raw}'[/red]")
    return user


async def run_session(controller: UserListController, out: Console, title: str) -> None:
    """Drive the controller from prompts until the user quits."""
    while True:
        out.print(render_page(controller.state, title))

        actions = EDITING_ACTIONS if controller.state.is_editing else CREATING_ACTIONS
        menu = "  ".join(f"[bold]{key}[/bold]={name}" for key, name in actions.items())
        out.print(menu)
        choice = Prompt.ask("Action", choices=list(actions), console=out)

        if choice == "q":
            return
        if choice == "r":
            await controller.fetch_all()
        elif choice == "a":
            prompt_draft(controller, out)
            await controller.submit()
        elif choice == "e":
            user = _ask_user(controller, out)
            if user is not None:
                controller.begin_edit(user)
                prompt_draft(controller, out)
                await controller.submit()
        elif choice == "d":
            user = _ask_user(controller, out)
            if user is not None and Confirm.ask(
                f"Delete user '{user.name}'?", default=False, console=out
            ):
                await controller.delete(user.id)
        elif choice == "f":
            prompt_draft(controller, out)
        elif choice == "s":
            await controller.submit()
        elif choice == "c":
            controller.cancel_edit()


def shell() -> None:
    """Open an interactive session on the users list."""

    async def _run() -> None:
        async with open_controller() as controller:
            await run_session(controller, console, get_config().app.title)

    asyncio.run(_run())
