"""
Load catalog strains from a JSON file. Run from project root:
  python -m medicine_cabinet.scripts.seed_strains strains.json

The file holds an array of {"name", "type", "flavor", "description"} objects.
Strains whose name already exists in the catalog are skipped.
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from medicine_cabinet.core.database import SessionLocal
from medicine_cabinet.models import Strain
from medicine_cabinet.schemas.strain import StrainCreate
from medicine_cabinet.services.catalog import create_strain

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def load_strains(path: Path) -> list[StrainCreate]:
    """Parse and validate the seed file. Raises ValueError on a malformed file."""
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError("Seed file must contain a JSON array of strains.")
    strains: list[StrainCreate] = []
    for i, item in enumerate(data):
        try:
            strains.append(StrainCreate.model_validate(item))
        except ValidationError as e:
            raise ValueError(f"Strain at index {i} is invalid: {e}") from e
    return strains


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the strain catalog from a JSON file.")
    parser.add_argument("path", type=Path, help="Path to a JSON array of strains")
    args = parser.parse_args()

    try:
        strains = load_strains(args.path)
    except (OSError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 1

    db = SessionLocal()
    created = 0
    try:
        existing = {name for (name,) in db.query(Strain.name).all()}
        for body in strains:
            if body.name in existing:
                continue
            create_strain(db, body)
            existing.add(body.name)
            created += 1
    except Exception as e:
        logger.exception("Seeding failed: %s", e)
        return 1
    finally:
        db.close()
    logger.info("Seed completed: strains_created=%s, skipped=%s", created, len(strains) - created)
    return 0


if __name__ == "__main__":
    sys.exit(main())
