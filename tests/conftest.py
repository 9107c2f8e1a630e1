"""Test environment: in-memory SQLite and a fixed JWT secret, set before the app is imported."""

import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-not-for-production"
os.environ["APP_ENV"] = "dev"

import medicine_cabinet.core.security as security  # noqa: E402

# Cheap hashes keep the suite fast; production cost is unchanged.
security.BCRYPT_ROUNDS = 4
