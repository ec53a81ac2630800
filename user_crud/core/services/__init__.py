from user_crud.core.services.user_list_controller import (
    ErrorMessage,
    OperationKind,
    UserListController,
    UserListState,
)

__all__ = ["ErrorMessage", "OperationKind", "UserListController", "UserListState"]
