"""State container and operations for the users form-and-list page.

``UserListController`` is the only component that mutates ``UserListState``.
Each network operation performs a single HTTP exchange against the users
resource and reconciles the local collection with the server's answer.
Failures never propagate: they are logged and turned into a fixed message
on ``UserListState.error``.

Overlapping operations are tolerated. Every exchange carries a request
token; replace-style mutations (a fetch, an update) are applied only when
their token is still the latest one issued for the same key, so a slow,
older response can never overwrite a newer one.
"""

import asyncio
import itertools
import time
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

import httpx
from loguru import logger

from user_crud.core.entities.user import FormDraft, User, UserId


class OperationKind(str, Enum):
    """The four kinds of network exchange."""

    FETCH = "fetch"
    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class ErrorMessage(str, Enum):
    """Fixed, user-facing failure messages, one per operation kind."""

    FETCH_FAILED = "Failed to fetch users"
    CREATE_FAILED = "Failed to create user"
    UPDATE_FAILED = "Failed to update user"
    DELETE_FAILED = "Failed to delete user"
    TARGET_NOT_FOUND = "User not found"


_FAILURE_MESSAGES = {
    OperationKind.FETCH: ErrorMessage.FETCH_FAILED,
    OperationKind.CREATE: ErrorMessage.CREATE_FAILED,
    OperationKind.UPDATE: ErrorMessage.UPDATE_FAILED,
    OperationKind.DELETE: ErrorMessage.DELETE_FAILED,
}

RequestKey = tuple[OperationKind, UserId | None]


@dataclass
class UserListState:
    """Everything the page renders: the collection, the form and the request status."""

    users: list[User] = field(default_factory=list)
    draft: FormDraft = field(default_factory=FormDraft)
    editing_id: UserId | None = None
    error: str = ""
    in_flight: Counter = field(default_factory=Counter)

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    @property
    def loading(self) -> bool:
        """True while any network exchange is outstanding."""
        return any(count > 0 for count in self.in_flight.values())

    def is_loading(self, kind: OperationKind) -> bool:
        return self.in_flight[kind] > 0

    def find_user(self, user_id: UserId) -> User | None:
        return next((user for user in self.users if user.id == user_id), None)


def provisional_id() -> int:
    """Placeholder id sent with a create request; the server's id replaces it."""
    return int(time.time() * 1000)


class UserListController:
    """Owns a ``UserListState`` and performs the CRUD operations on it.

    The controller talks to an injected ``httpx.AsyncClient``; it never opens
    or closes the client itself.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        state: UserListState | None = None,
    ):
        """Initialize the controller.

        Args:
            client: HTTP client used for every exchange
            base_url: URL of the users collection resource
            state: Existing state container to drive, a fresh one by default
        """
        self.client = client
        self.base_url = base_url.rstrip("/")
        self.state = state if state is not None else UserListState()
        self._tokens = itertools.count(1)
        self._latest: dict[RequestKey, int] = {}
        self._activation: asyncio.Task[bool] | None = None

    # Request bookkeeping

    def _begin(self, kind: OperationKind, target_id: UserId | None = None) -> int:
        token = next(self._tokens)
        self._latest[(kind, target_id)] = token
        self.state.in_flight[kind] += 1
        self.state.error = ""
        logger.debug(f"{kind.value} started (token={token}, target={target_id})")
        return token

    def _finish(self, kind: OperationKind) -> None:
        self.state.in_flight[kind] = max(0, self.state.in_flight[kind] - 1)

    def _is_current(
        self, kind: OperationKind, token: int, target_id: UserId | None = None
    ) -> bool:
        return self._latest.get((kind, target_id)) == token

    def _fail(
        self,
        kind: OperationKind,
        token: int,
        exc: Exception,
        target_id: UserId | None = None,
    ) -> None:
        logger.error(f"Error during {kind.value} of users (target={target_id}): {exc!r}")
        if self._is_current(kind, token, target_id):
            self.state.error = _FAILURE_MESSAGES[kind].value
        else:
            logger.debug(f"Dropping error from superseded {kind.value} (token={token})")

    def _item_url(self, user_id: UserId) -> str:
        return f"{self.base_url}/{user_id}"

    @staticmethod
    def _parse_user(response: httpx.Response) -> User:
        return User.model_validate(response.json())

    # Lifecycle

    async def activate(self) -> bool:
        """Load the collection the first time the page is shown.

        Later calls do not hit the network and return the first outcome.
        """
        if self._activation is None:
            self._activation = asyncio.ensure_future(self.fetch_all())
        return await asyncio.shield(self._activation)

    # Network operations

    async def fetch_all(self) -> bool:
        """Replace the local collection with the server's."""
        kind = OperationKind.FETCH
        token = self._begin(kind)
        try:
            response = await self.client.get(self.base_url)
            response.raise_for_status()
            payload: Any = response.json()
            if not isinstance(payload, list):
                raise ValueError(f"expected a JSON array, got {type(payload).__name__}")
            users = [User.model_validate(item) for item in payload]
        except Exception as exc:
            self._fail(kind, token, exc)
            return False
        finally:
            self._finish(kind)

        if self._is_current(kind, token):
            self.state.users = users
            logger.info(f"Fetched {len(users)} users")
        else:
            logger.debug(f"Discarding superseded fetch response (token={token})")
        return True

    async def create(self, draft: FormDraft | None = None) -> bool:
        """Send a new user to the server and append what it returns."""
        kind = OperationKind.CREATE
        draft = draft if draft is not None else self.state.draft
        token = self._begin(kind)
        try:
            response = await self.client.post(
                self.base_url, json=draft.to_payload(id=provisional_id())
            )
            response.raise_for_status()
            created = self._parse_user(response)
        except Exception as exc:
            self._fail(kind, token, exc)
            return False
        finally:
            self._finish(kind)

        # The server already holds the new user, so it is appended even when
        # a later create was issued in the meantime.
        self.state.users = [*self.state.users, created]
        # A begin-edit issued meanwhile owns the draft now.
        if self._is_current(kind, token) and self.state.editing_id is None:
            self.state.draft = FormDraft()
        logger.info(f"Created user {created.id!r}")
        return True

    async def update(self, target_id: UserId, draft: FormDraft | None = None) -> bool:
        """Send the draft for ``target_id`` and replace the local entry with the reply."""
        kind = OperationKind.UPDATE
        draft = draft if draft is not None else self.state.draft

        if self.state.find_user(target_id) is None:
            self._target_missing(target_id)
            return False

        token = self._begin(kind, target_id)
        try:
            response = await self.client.put(
                self._item_url(target_id), json=draft.to_payload()
            )
            response.raise_for_status()
            updated = self._parse_user(response)
        except Exception as exc:
            self._fail(kind, token, exc, target_id)
            return False
        finally:
            self._finish(kind)

        if not self._is_current(kind, token, target_id):
            logger.debug(f"Discarding superseded update of {target_id!r} (token={token})")
            return True

        if self.state.find_user(target_id) is None:
            # Removed locally while the request was in flight.
            self._target_missing(target_id)
            return False

        self.state.users = [
            updated if user.id == target_id else user for user in self.state.users
        ]
        if self.state.editing_id == target_id:
            self.state.editing_id = None
            self.state.draft = FormDraft()
        logger.info(f"Updated user {target_id!r}")
        return True

    async def delete(self, target_id: UserId) -> bool:
        """Ask the server to delete ``target_id`` and drop it locally."""
        kind = OperationKind.DELETE
        token = self._begin(kind, target_id)
        try:
            response = await self.client.delete(self._item_url(target_id))
            response.raise_for_status()
        except Exception as exc:
            self._fail(kind, token, exc, target_id)
            return False
        finally:
            self._finish(kind)

        self.state.users = [user for user in self.state.users if user.id != target_id]
        logger.info(f"Deleted user {target_id!r}")
        return True

    async def submit(self) -> bool:
        """Form submit: create in Creating mode, update in Editing mode."""
        if self.state.editing_id is None:
            return await self.create()
        return await self.update(self.state.editing_id)

    def _target_missing(self, target_id: UserId) -> None:
        logger.warning(f"Update target {target_id!r} is no longer in the list")
        self.state.error = ErrorMessage.TARGET_NOT_FOUND.value
        if self.state.editing_id == target_id:
            self.state.editing_id = None

    # Local form transitions

    def begin_edit(self, user: User) -> None:
        self.state.editing_id = user.id
        self.state.draft = FormDraft.from_user(user)

    def cancel_edit(self) -> None:
        self.state.editing_id = None
        self.state.draft = FormDraft()

    def update_draft_field(self, field_name: str, value: str) -> None:
        """Set one field of the draft.

        Raises:
            ValueError: If ``field_name`` is not one of the editable fields.
        """
        self.state.draft = self.state.draft.with_field(field_name, value)
