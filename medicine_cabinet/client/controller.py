"""Dispatch client actions: API calls, client-side checks and session store updates."""

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from medicine_cabinet.client import actions
from medicine_cabinet.client.api import ApiClientError, CabinetApiClient
from medicine_cabinet.client.refresh import TokenRefresher
from medicine_cabinet.client.state import SessionSnapshot, SessionStore, View

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_REFRESH_INTERVAL_SEC = 600.0

PASSWORD_MISMATCH_MESSAGE = '"Password" & "Verify Password" fields must match'
ALREADY_IN_CABINET_MESSAGE = "This strain is already in your cabinet"
BLANK_COMMENT_MESSAGE = "Comment is blank. Please add some content"
ACCOUNT_CREATED_MESSAGE = "Account created successfully!"
STRAIN_CREATED_MESSAGE = "Strain created successfully!"
UNKNOWN_STRAIN_MESSAGE = "That strain is no longer listed"
UNKNOWN_COMMENT_MESSAGE = "That comment is no longer listed"


class CabinetController:
    """
    Applies actions to a SessionStore.

    Each API failure is written to the error banner; nothing is retried or
    rolled back. Client-side checks run before any request is sent.
    """

    def __init__(
        self,
        api: CabinetApiClient,
        store: SessionStore | None = None,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL_SEC,
    ) -> None:
        self.api = api
        self.store = store or SessionStore()
        self.refresher = TokenRefresher(
            lambda: self.dispatch(actions.RefreshToken()), refresh_interval
        )
        # Bumped on every login and logout; responses carry the value they were sent under.
        self._session = 0
        self._handlers: dict[type, Callable[[Any], Awaitable[None]]] = {
            actions.Login: self._login,
            actions.ShowRegister: self._show_register,
            actions.Register: self._register,
            actions.ShowLogin: self._show_login,
            actions.AddStrainToCabinet: self._add_strain_to_cabinet,
            actions.RemoveStrainFromCabinet: self._remove_strain_from_cabinet,
            actions.ShowStrainDetails: self._show_strain_details,
            actions.AddComment: self._add_comment,
            actions.RemoveComment: self._remove_comment,
            actions.ShowCabinet: self._show_cabinet,
            actions.ShowCreateStrain: self._show_create_strain,
            actions.CreateStrain: self._create_strain,
            actions.RefreshToken: self._refresh_token,
            actions.Logout: self._logout,
        }

    @property
    def snapshot(self) -> SessionSnapshot:
        return self.store.snapshot

    async def dispatch(self, action: actions.Action) -> SessionSnapshot:
        handler = self._handlers.get(type(action))
        if handler is None:
            raise TypeError(f"Unknown action: {action!r}")
        await handler(action)
        return self.store.snapshot

    def _show_error(self, message: str) -> None:
        self.store.update(error=message)

    def _superseded(self, session: int) -> bool:
        """True when the session that sent a request has since logged out or been replaced."""
        return self._session != session

    def _pick(self, items: Sequence[T] | None, index: int, missing: str) -> T | None:
        # Indexes come from rendered data-index attributes; anything else is stale.
        items = items or ()
        if not 0 <= index < len(items):
            self._show_error(missing)
            return None
        return items[index]

    async def _load_catalog(self) -> None:
        session = self._session
        try:
            strains = await self.api.list_strains()
        except ApiClientError as e:
            if self._superseded(session):
                return
            self._show_error(e.message)
            return
        if self._superseded(session):
            return
        self.store.update(strains=strains)

    async def _load_user_strains(self) -> None:
        token = self.snapshot.token
        if token is None:
            return
        session = self._session
        try:
            strains = await self.api.list_user_strains(token)
        except ApiClientError as e:
            if self._superseded(session):
                return
            self._show_error(e.message)
            return
        if self._superseded(session):
            return
        self.store.update(user_strains=strains)

    async def _reload_current_strain(self) -> None:
        """Refetch the cabinet and swap in the fresh copy of the strain being viewed."""
        current = self.snapshot.current_strain
        session = self._session
        await self._load_user_strains()
        if current is None or self._superseded(session):
            return
        fresh = next((s for s in self.snapshot.user_strains or () if s.id == current.id), None)
        self.store.update(current_strain=fresh)

    async def _login(self, action: actions.Login) -> None:
        try:
            token = await self.api.login(action.user_name, action.password)
        except ApiClientError as e:
            self._show_error(e.message)
            return
        self._session += 1
        self.store.update(
            token=token,
            current_user=action.user_name,
            view=View.CABINET,
            error=None,
            success=None,
        )
        self.refresher.start()
        logger.info("Logged in as %s", action.user_name)
        await asyncio.gather(self._load_catalog(), self._load_user_strains())

    async def _show_register(self, action: actions.ShowRegister) -> None:
        self.store.update(view=View.REGISTER, error=None)

    async def _register(self, action: actions.Register) -> None:
        if action.password != action.password_check:
            self._show_error(PASSWORD_MISMATCH_MESSAGE)
            return
        try:
            await self.api.create_user(
                action.user_name, action.password, action.first_name, action.last_name
            )
        except ApiClientError as e:
            message = f"{e.message} ({e.location})" if e.location else e.message
            self._show_error(message)
            return
        self.store.update(success=ACCOUNT_CREATED_MESSAGE, error=None)
        await self._login(actions.Login(action.user_name, action.password))

    async def _show_login(self, action: actions.ShowLogin) -> None:
        self.store.update(view=View.LOGIN, error=None)

    async def _add_strain_to_cabinet(self, action: actions.AddStrainToCabinet) -> None:
        strain = self._pick(self.snapshot.strains, action.index, UNKNOWN_STRAIN_MESSAGE)
        if strain is None:
            return
        if self.snapshot.has_in_cabinet(strain.id):
            self._show_error(ALREADY_IN_CABINET_MESSAGE)
            return
        try:
            await self.api.add_strain_to_cabinet(self.snapshot.token, strain.id)
        except ApiClientError as e:
            self._show_error(e.message)
            return
        self.store.update(error=None)
        await self._load_user_strains()

    async def _remove_strain_from_cabinet(self, action: actions.RemoveStrainFromCabinet) -> None:
        strain = self._pick(self.snapshot.user_strains, action.index, UNKNOWN_STRAIN_MESSAGE)
        if strain is None:
            return
        try:
            await self.api.remove_strain_from_cabinet(self.snapshot.token, strain.id)
        except ApiClientError as e:
            self._show_error(e.message)
            return
        self.store.update(error=None)
        await self._load_user_strains()

    async def _show_strain_details(self, action: actions.ShowStrainDetails) -> None:
        strain = self._pick(self.snapshot.user_strains, action.index, UNKNOWN_STRAIN_MESSAGE)
        if strain is None:
            return
        self.store.update(current_strain=strain, view=View.STRAIN_DETAIL, error=None)

    async def _add_comment(self, action: actions.AddComment) -> None:
        current = self.snapshot.current_strain
        if current is None:
            return
        if not action.content.strip():
            self._show_error(BLANK_COMMENT_MESSAGE)
            return
        try:
            await self.api.add_comment(
                self.snapshot.token, current.id, action.content, self.snapshot.current_user
            )
        except ApiClientError as e:
            self._show_error(e.message)
            return
        self.store.update(error=None)
        await self._reload_current_strain()

    async def _remove_comment(self, action: actions.RemoveComment) -> None:
        current = self.snapshot.current_strain
        if current is None:
            return
        comment = self._pick(current.comments, action.index, UNKNOWN_COMMENT_MESSAGE)
        if comment is None:
            return
        try:
            await self.api.remove_comment(self.snapshot.token, current.id, comment.id)
        except ApiClientError as e:
            self._show_error(e.message)
            return
        self.store.update(error=None)
        await self._reload_current_strain()

    async def _show_cabinet(self, action: actions.ShowCabinet) -> None:
        self.store.update(view=View.CABINET, error=None, success=None)
        await asyncio.gather(self._load_catalog(), self._load_user_strains())

    async def _show_create_strain(self, action: actions.ShowCreateStrain) -> None:
        self.store.update(view=View.CREATE_STRAIN, error=None)

    async def _create_strain(self, action: actions.CreateStrain) -> None:
        try:
            await self.api.create_strain(
                self.snapshot.token,
                action.name,
                action.type,
                action.flavor,
                action.description,
            )
        except ApiClientError as e:
            self._show_error(e.message)
            return
        self.store.update(success=STRAIN_CREATED_MESSAGE, error=None)

    async def _refresh_token(self, action: actions.RefreshToken) -> None:
        # A failed refresh is reported but does not end the session. Results that
        # arrive after logout or a new login are dropped.
        token = self.snapshot.token
        if token is None:
            return
        session = self._session
        try:
            new_token = await self.api.refresh(token)
        except ApiClientError as e:
            if self._superseded(session):
                return
            self._show_error(e.message)
            return
        if self._superseded(session):
            logger.info("Dropping token refresh for an ended session")
            return
        self.store.update(token=new_token)

    async def _logout(self, action: actions.Logout) -> None:
        self.refresher.stop()
        self._session += 1
        self.store.reset()
        logger.info("Logged out")
