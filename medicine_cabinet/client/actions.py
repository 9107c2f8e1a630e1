"""Typed actions dispatched by the client view against the session store."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Login:
    user_name: str
    password: str


@dataclass(frozen=True)
class ShowRegister:
    pass


@dataclass(frozen=True)
class Register:
    user_name: str
    password: str
    password_check: str
    first_name: str = ""
    last_name: str = ""


@dataclass(frozen=True)
class ShowLogin:
    pass


@dataclass(frozen=True)
class AddStrainToCabinet:
    """index is the position in the catalog dropdown."""

    index: int


@dataclass(frozen=True)
class RemoveStrainFromCabinet:
    """index is the position in the cabinet."""

    index: int


@dataclass(frozen=True)
class ShowStrainDetails:
    index: int


@dataclass(frozen=True)
class AddComment:
    content: str


@dataclass(frozen=True)
class RemoveComment:
    """index is the position in the current strain's comments."""

    index: int


@dataclass(frozen=True)
class ShowCabinet:
    pass


@dataclass(frozen=True)
class ShowCreateStrain:
    pass


@dataclass(frozen=True)
class CreateStrain:
    name: str
    type: str = ""
    flavor: str = ""
    description: str = ""


@dataclass(frozen=True)
class RefreshToken:
    pass


@dataclass(frozen=True)
class Logout:
    pass


Action = (
    Login
    | ShowRegister
    | Register
    | ShowLogin
    | AddStrainToCabinet
    | RemoveStrainFromCabinet
    | ShowStrainDetails
    | AddComment
    | RemoveComment
    | ShowCabinet
    | ShowCreateStrain
    | CreateStrain
    | RefreshToken
    | Logout
)
