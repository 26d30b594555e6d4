"""Seed the Firestore content collection with the compiled settings defaults.

Writes one document per settings key (logo, social links, navigation labels,
button labels, Open Graph text) so that admins see every entry in the content
table from day one. Existing entries are left alone unless --force is given.

Usage:
    uv run python -m scripts.seed_default_content [--force] [--dry-run]

Requires: FIREBASE_SERVICE_ACCOUNT_KEY or FIREBASE_SERVICE_ACCOUNT_PATH.
"""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

from dotenv import load_dotenv

from cms.application.services.settings_aggregator import default_content_entries
from cms.domain.value_objects.content import content_value_from_raw
from cms.infrastructure.firebase import (
    close_firebase,
    get_firestore_client,
    init_firebase,
)
from cms.infrastructure.firebase.repositories import FirestoreContentStore


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees FIREBASE_* when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def seed(force: bool = False, dry_run: bool = False) -> tuple[int, int]:
    """Write missing defaults. Returns (written, skipped)."""
    if not init_firebase():
        raise SystemExit("Firestore is not configured; set FIREBASE_SERVICE_ACCOUNT_*")
    store = FirestoreContentStore(get_firestore_client())
    written = skipped = 0
    try:
        for content_id, raw in sorted(default_content_entries().items()):
            if not force and await store.get(content_id) is not None:
                print(f"  skip   {content_id}")
                skipped += 1
                continue
            value = content_value_from_raw(raw)
            if value is None:
                print(f"  bad    {content_id}: {raw!r}", file=sys.stderr)
                continue
            if not dry_run:
                await store.put(content_id, value)
            print(f"  write  {content_id}")
            written += 1
    finally:
        await close_firebase()
    return written, skipped


def main() -> None:
    _load_env()
    args = set(sys.argv[1:])
    force = "--force" in args
    dry_run = "--dry-run" in args
    written, skipped = asyncio.run(seed(force=force, dry_run=dry_run))
    suffix = " (dry run)" if dry_run else ""
    print(f"Seeded {written} entries, skipped {skipped}{suffix}.")


if __name__ == "__main__":
    main()
