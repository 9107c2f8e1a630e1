"""User registration: ordered field validation, uniqueness check and persistence."""

import logging
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from medicine_cabinet.core.errors import ValidationError
from medicine_cabinet.core.security import (
    PASSWORD_MAX_LEN,
    PASSWORD_MIN_LEN,
    USERNAME_MIN_LEN,
    hash_password,
)
from medicine_cabinet.models import User
from medicine_cabinet.schemas.user import RegistrationRequest

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("userName", "password")
STRING_FIELDS = ("userName", "password", "firstName", "lastName")
EXPLICITLY_TRIMMED_FIELDS = ("userName", "password")

# Field -> {"min": n, "max": n}; checked against the trimmed value.
SIZED_FIELDS: dict[str, dict[str, int]] = {
    "userName": {"min": USERNAME_MIN_LEN},
    "password": {"min": PASSWORD_MIN_LEN, "max": PASSWORD_MAX_LEN},
}

USERNAME_TAKEN_MESSAGE = "userName already taken"


def validate_registration(payload: Any) -> RegistrationRequest:
    """
    Validate a raw registration body and return the accepted fields.

    Checks run in a fixed order and the first failure wins: missing field,
    non-string field, surrounding whitespace, too short, too long.
    Raises ValidationError located at the offending field.
    """
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object", location="body")

    missing = next((f for f in REQUIRED_FIELDS if f not in payload), None)
    if missing:
        raise ValidationError("Missing Field", location=missing)

    non_string = next(
        (f for f in STRING_FIELDS if f in payload and not isinstance(payload[f], str)),
        None,
    )
    if non_string:
        raise ValidationError(
            "Incorrect field type: expected string", location=non_string
        )

    non_trimmed = next(
        (f for f in EXPLICITLY_TRIMMED_FIELDS if payload[f].strip() != payload[f]),
        None,
    )
    if non_trimmed:
        raise ValidationError(
            "Cannot start or end with whitespace", location=non_trimmed
        )

    too_small = next(
        (
            f
            for f, bounds in SIZED_FIELDS.items()
            if "min" in bounds and len(payload[f].strip()) < bounds["min"]
        ),
        None,
    )
    if too_small:
        raise ValidationError(
            f"Must be at least {SIZED_FIELDS[too_small]['min']} characters long",
            location=too_small,
        )
    too_large = next(
        (
            f
            for f, bounds in SIZED_FIELDS.items()
            if "max" in bounds and len(payload[f].strip()) > bounds["max"]
        ),
        None,
    )
    if too_large:
        raise ValidationError(
            f"Must be at most {SIZED_FIELDS[too_large]['max']} characters long",
            location=too_large,
        )

    return RegistrationRequest(
        user_name=payload["userName"],
        password=payload["password"],
        first_name=payload.get("firstName", "").strip(),
        last_name=payload.get("lastName", "").strip(),
    )


def register_user(db: Session, request: RegistrationRequest) -> User:
    """
    Persist a new user with a bcrypt password hash.

    The count pre-check gives the friendly error; the unique index on
    users.username catches concurrent duplicates that slip past it.
    """
    count = db.query(User).filter(User.username == request.user_name).count()
    if count > 0:
        raise ValidationError(USERNAME_TAKEN_MESSAGE, location="userName")

    user = User(
        username=request.user_name,
        password_hash=hash_password(request.password),
        first_name=request.first_name,
        last_name=request.last_name,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.info("Registration lost a uniqueness race", extra={"user_name": request.user_name})
        raise ValidationError(USERNAME_TAKEN_MESSAGE, location="userName") from e
    db.refresh(user)
    logger.info("User registered", extra={"user_id": user.id})
    return user
