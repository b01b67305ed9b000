"""
Import a brand export (JSON array, e.g. the browser's brandHub_brands value)
as the stored brand snapshot.

    python import_brands.py brands.json
"""
import sys
from pathlib import Path

from brandhub.config import AppSettings
from brandhub.core.container import init_container, reset_container
from brandhub.core.domain.exceptions import PersistenceError


def import_brands(path: Path) -> int:
    container = init_container(AppSettings())
    repo = container.brand_repository()
    try:
        brands = repo.deserialize(path.read_text(encoding="utf-8"))
    except ValueError as e:
        print(f"[ERROR] {path} is not a valid brand export: {e}")
        reset_container()
        return 1

    for brand in brands:
        print(f"[ADD] {brand.id} ({len(brand.resources)} resources)")

    try:
        repo.save(brands)
        print(f"\nImport Finished! Brands: {len(brands)}")
        return 0
    except PersistenceError as e:
        print(f"Error writing snapshot: {e}")
        return 1
    finally:
        reset_container()


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python import_brands.py <brands.json>")
        sys.exit(2)
    sys.exit(import_brands(Path(sys.argv[1])))
