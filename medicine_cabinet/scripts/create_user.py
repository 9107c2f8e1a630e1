"""
Create a user without going through the API. Run from project root:
  python -m medicine_cabinet.scripts.create_user USERNAME PASSWORD [--first-name F] [--last-name L]
"""
import argparse
import logging
import sys

from medicine_cabinet.core.database import SessionLocal
from medicine_cabinet.core.errors import ValidationError
from medicine_cabinet.services.registration import register_user, validate_registration

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Create a Medicine Cabinet user.")
    parser.add_argument("username", help="Username (no surrounding whitespace)")
    parser.add_argument("password", help="Password (10-72 chars)")
    parser.add_argument("--first-name", default="")
    parser.add_argument("--last-name", default="")
    args = parser.parse_args()

    payload = {
        "userName": args.username,
        "password": args.password,
        "firstName": args.first_name,
        "lastName": args.last_name,
    }
    db = SessionLocal()
    try:
        user = register_user(db, validate_registration(payload))
    except ValidationError as e:
        print(f"{e.message} ({e.location})", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' (id={user.id}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
