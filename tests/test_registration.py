"""Tests for user registration: ordered field validation, uniqueness and the POST /users endpoint."""

import unittest
from unittest.mock import MagicMock

from sqlalchemy.exc import IntegrityError

from api_case import DEFAULT_PASSWORD, ApiTestCase
from medicine_cabinet.core.errors import ValidationError
from medicine_cabinet.schemas.user import RegistrationRequest
from medicine_cabinet.services.registration import register_user, validate_registration


class TestValidateRegistration(unittest.TestCase):
    """validate_registration reports the first failing check, located at its field."""

    def assert_rejected(self, payload: object, message: str, location: str) -> None:
        with self.assertRaises(ValidationError) as ctx:
            validate_registration(payload)
        self.assertEqual(ctx.exception.message, message)
        self.assertEqual(ctx.exception.location, location)
        self.assertEqual(ctx.exception.status_code, 422)

    def test_missing_username(self) -> None:
        self.assert_rejected({"password": DEFAULT_PASSWORD}, "Missing Field", "userName")

    def test_missing_password(self) -> None:
        self.assert_rejected({"userName": "alice"}, "Missing Field", "password")

    def test_non_string_field(self) -> None:
        self.assert_rejected(
            {"userName": "alice", "password": DEFAULT_PASSWORD, "firstName": 7},
            "Incorrect field type: expected string",
            "firstName",
        )

    def test_null_counts_as_non_string(self) -> None:
        self.assert_rejected(
            {"userName": None, "password": DEFAULT_PASSWORD},
            "Incorrect field type: expected string",
            "userName",
        )

    def test_username_surrounding_whitespace(self) -> None:
        self.assert_rejected(
            {"userName": " alice", "password": DEFAULT_PASSWORD},
            "Cannot start or end with whitespace",
            "userName",
        )

    def test_password_surrounding_whitespace(self) -> None:
        self.assert_rejected(
            {"userName": "alice", "password": DEFAULT_PASSWORD + " "},
            "Cannot start or end with whitespace",
            "password",
        )

    def test_empty_username(self) -> None:
        self.assert_rejected(
            {"userName": "", "password": DEFAULT_PASSWORD},
            "Must be at least 1 characters long",
            "userName",
        )

    def test_password_nine_chars(self) -> None:
        self.assert_rejected(
            {"userName": "alice", "password": "a" * 9},
            "Must be at least 10 characters long",
            "password",
        )

    def test_password_seventy_three_chars(self) -> None:
        self.assert_rejected(
            {"userName": "alice", "password": "a" * 73},
            "Must be at most 72 characters long",
            "password",
        )

    def test_password_bounds_accepted(self) -> None:
        for length in (10, 72):
            request = validate_registration({"userName": "alice", "password": "a" * length})
            self.assertEqual(len(request.password), length)

    def test_type_check_runs_before_whitespace_check(self) -> None:
        self.assert_rejected(
            {"userName": " alice", "password": 1234567890},
            "Incorrect field type: expected string",
            "password",
        )

    def test_names_trimmed_and_defaulted(self) -> None:
        request = validate_registration(
            {"userName": "alice", "password": DEFAULT_PASSWORD, "firstName": "  Alice "}
        )
        self.assertEqual(request.first_name, "Alice")
        self.assertEqual(request.last_name, "")

    def test_non_object_body(self) -> None:
        self.assert_rejected(["alice"], "Request body must be a JSON object", "body")


class TestRegisterUserUniqueness(unittest.TestCase):
    """register_user rejects taken names via the pre-check and via the unique index."""

    def _request(self) -> RegistrationRequest:
        return RegistrationRequest(user_name="alice", password=DEFAULT_PASSWORD)

    def test_precheck_rejects_existing_name(self) -> None:
        session = MagicMock()
        session.query.return_value.filter.return_value.count.return_value = 1
        with self.assertRaises(ValidationError) as ctx:
            register_user(session, self._request())
        self.assertEqual(ctx.exception.message, "userName already taken")
        session.add.assert_not_called()

    def test_unique_violation_on_commit_maps_to_taken(self) -> None:
        session = MagicMock()
        session.query.return_value.filter.return_value.count.return_value = 0
        session.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate"))
        with self.assertRaises(ValidationError) as ctx:
            register_user(session, self._request())
        self.assertEqual(ctx.exception.location, "userName")
        session.rollback.assert_called_once()


class TestRegistrationEndpoint(ApiTestCase):
    """POST /users end to end."""

    def test_created_without_password(self) -> None:
        resp = self.register("alice", firstName="Alice", lastName="Smith")
        self.assertEqual(resp.status_code, 201)
        body = resp.json()
        self.assertEqual(body["userName"], "alice")
        self.assertEqual(body["firstName"], "Alice")
        self.assertEqual(body["lastName"], "Smith")
        self.assertEqual(body["strains"], [])
        self.assertNotIn("password", body)
        self.assertNotIn("passwordHash", body)

    def test_duplicate_username(self) -> None:
        self.assertEqual(self.register("alice").status_code, 201)
        resp = self.register("alice")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(
            resp.json(),
            {
                "code": 422,
                "reason": "ValidationError",
                "message": "userName already taken",
                "location": "userName",
            },
        )

    def test_short_password(self) -> None:
        resp = self.register("alice", password="a" * 9)
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["location"], "password")
        self.assertIn("at least 10", resp.json()["message"])

    def test_long_password(self) -> None:
        resp = self.register("alice", password="a" * 73)
        self.assertEqual(resp.status_code, 422)
        self.assertIn("at most 72", resp.json()["message"])

    def test_empty_username(self) -> None:
        resp = self.register("")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["location"], "userName")

    def test_whitespace_username(self) -> None:
        resp = self.register("alice ")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["message"], "Cannot start or end with whitespace")

    def test_missing_body(self) -> None:
        resp = self.client.post("/users")
        self.assertEqual(resp.status_code, 422)
        self.assertEqual(resp.json()["reason"], "ValidationError")


if __name__ == "__main__":
    unittest.main()
