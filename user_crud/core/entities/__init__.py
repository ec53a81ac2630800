from user_crud.core.entities.user import (
    EDITABLE_FIELDS,
    FormDraft,
    User,
    UserId,
    parse_user_id,
)

__all__ = ["EDITABLE_FIELDS", "FormDraft", "User", "UserId", "parse_user_id"]
