"""User entity and the form draft used to create or edit one."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

UserId = int | str

EDITABLE_FIELDS: tuple[str, ...] = ("name", "email", "phone", "website")


def parse_user_id(raw: str) -> UserId:
    """Convert a user id typed on the command line into the id type the API uses.

    Numeric strings become ``int`` so they compare equal to server-assigned ids.
    """
    value = raw.strip()
    if value.lstrip("-").isdigit():
        return int(value)
    return value


class User(BaseModel):
    """A user as represented by the remote collaborator.

    Fields the API returns beyond the editable ones (address, company, ...)
    are kept as extra attributes so a round trip never drops them.
    """

    model_config = ConfigDict(extra="allow")

    id: UserId = Field(description="Server-assigned identifier")
    name: str | None = Field(default="", description="User's full name")
    email: str | None = Field(default="", description="User's email address")
    phone: str | None = Field(default="", description="User's phone number")
    website: str | None = Field(default="", description="User's website")


class FormDraft(BaseModel):
    """The form's current unsaved field values."""

    name: str = ""
    email: str = ""
    phone: str = ""
    website: str = ""

    @classmethod
    def from_user(cls, user: User) -> "FormDraft":
        """Copy a user's four editable fields into a new draft."""
        return cls(**{field: getattr(user, field) or "" for field in EDITABLE_FIELDS})

    def with_field(self, field_name: str, value: str) -> "FormDraft":
        """Return a copy of the draft with one named field replaced.

        Raises:
            ValueError: If ``field_name`` is not an editable field.
        """
        if field_name not in EDITABLE_FIELDS:
            raise ValueError(
                f"Unknown form field '{field_name}'; expected one of {', '.join(EDITABLE_FIELDS)}"
            )
        return self.model_copy(update={field_name: value})

    def is_empty(self) -> bool:
        return not any(getattr(self, field) for field in EDITABLE_FIELDS)

    def to_payload(self, **extra: Any) -> dict[str, Any]:
        """Request body for a create or update call."""
        return {**self.model_dump(), **extra}
