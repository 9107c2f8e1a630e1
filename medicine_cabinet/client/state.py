"""Client session store. Every change produces a new immutable snapshot."""

from collections.abc import Callable
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from medicine_cabinet.schemas.strain import StrainResponse


class View(str, Enum):
    """Mutually exclusive screens of the client."""

    LOGIN = "login"
    REGISTER = "register"
    CABINET = "cabinet"
    STRAIN_DETAIL = "strain-detail"
    CREATE_STRAIN = "create-strain"


@dataclass(frozen=True)
class SessionSnapshot:
    """
    Everything the render layer needs for one render.

    strains is the full catalog, user_strains the cabinet; None means not
    fetched yet. error and success are the two banners.
    """

    token: str | None = None
    current_user: str | None = None
    strains: tuple[StrainResponse, ...] | None = None
    user_strains: tuple[StrainResponse, ...] | None = None
    current_strain: StrainResponse | None = None
    view: View = View.LOGIN
    error: str | None = None
    success: str | None = None

    @property
    def authenticated(self) -> bool:
        return self.token is not None

    def has_in_cabinet(self, strain_id: int) -> bool:
        return any(s.id == strain_id for s in self.user_strains or ())


Listener = Callable[[SessionSnapshot], None]


class SessionStore:
    """Holds the current SessionSnapshot and notifies listeners on every change."""

    def __init__(self, snapshot: SessionSnapshot | None = None) -> None:
        self._snapshot = snapshot or SessionSnapshot()
        self._listeners: list[Listener] = []

    @property
    def snapshot(self) -> SessionSnapshot:
        return self._snapshot

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def update(self, **changes: Any) -> SessionSnapshot:
        if "strains" in changes and changes["strains"] is not None:
            changes["strains"] = tuple(changes["strains"])
        if "user_strains" in changes and changes["user_strains"] is not None:
            changes["user_strains"] = tuple(changes["user_strains"])
        self._snapshot = replace(self._snapshot, **changes)
        for listener in list(self._listeners):
            listener(self._snapshot)
        return self._snapshot

    def reset(self) -> SessionSnapshot:
        """Back to the anonymous session: no token, user, collections or banners."""
        return self.update(
            token=None,
            current_user=None,
            strains=None,
            user_strains=None,
            current_strain=None,
            view=View.LOGIN,
            error=None,
            success=None,
        )
