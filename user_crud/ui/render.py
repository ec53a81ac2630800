"""Rich renderables for the users page.

Every function here only reads a ``UserListState``; nothing mutates it.
"""

from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from user_crud.core.services.user_list_controller import UserListState

FORM_LABELS = {
    "name": "Name",
    "email": "Email",
    "phone": "Phone",
    "website": "Website",
}


def form_title(state: UserListState) -> str:
    return "Edit User" if state.is_editing else "Add New User"


def submit_label(state: UserListState) -> str:
    if state.loading:
        return "Processing..."
    return "Update" if state.is_editing else "Create"


def render_error(state: UserListState) -> RenderableType | None:
    """Error banner, or None when there is nothing to report."""
    if not state.error:
        return None
    return Panel(Text(state.error, style="bold white"), style="red", expand=True)


def render_form(state: UserListState) -> Panel:
    fields = Table.grid(padding=(0, 2))
    fields.add_column(style="bold")
    fields.add_column()
    for field_name, label in FORM_LABELS.items():
        value = getattr(state.draft, field_name)
        fields.add_row(label, value or Text(label, style="dim italic"))

    actions = Text(f"[ {submit_label(state)} ]", style="bold green")
    if state.is_editing:
        actions.append("  [ Cancel ]", style="bold yellow")

    return Panel(Group(fields, Text(""), actions), title=form_title(state))


def render_users(state: UserListState) -> RenderableType:
    """The users list, or the loading/empty placeholder."""
    if state.loading and not state.users:
        return Text("Loading users...", style="italic")
    if not state.users:
        return Text("No users found", style="yellow")

    table = Table(title="Users List")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="green")
    table.add_column("Email", style="blue")
    table.add_column("Phone", style="magenta")
    table.add_column("Website", style="magenta")

    for user in state.users:
        marker = " *" if user.id == state.editing_id else ""
        table.add_row(
            f"{user.id}{marker}",
            user.name or "",
            user.email or "",
            user.phone or "",
            user.website or "",
        )
    return table


def render_page(state: UserListState, title: str = "User Directory") -> Group:
    """Whole page: heading, error banner, form and list."""
    parts: list[RenderableType] = [Text(title, style="bold underline")]
    banner = render_error(state)
    if banner is not None:
        parts.append(banner)
    parts.append(render_form(state))
    parts.append(render_users(state))
    return Group(*parts)
