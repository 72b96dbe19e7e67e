#!/usr/bin/env python3
"""
Print a summary of the JSON document: users, profiles and comment counts.

Uso:
  python scripts/inspect_db.py [--data-file db.json]
"""
from __future__ import annotations

import argparse

from api.core.config import get_settings
from api.repositories.json_storage import DocumentStore


def main() -> None:
    ap = argparse.ArgumentParser(description="Summarize the JSON document")
    ap.add_argument("--data-file", help="JSON document path (default: DATA_FILE env)")
    args = ap.parse_args()

    store = DocumentStore(args.data_file or get_settings().data_file)
    db = store.read_all()
    print(f"Document: {store.path}")
    print(f"  users: {len(db['users'])}")
    print(f"  sessions: {len(db['sessions'])}")
    print(f"  profiles: {len(db['profiles'])}")
    for profile in db["profiles"]:
        comments = profile.get("comments") or []
        print(f"    {profile.get('id')}  {profile.get('name')!r}  comments={len(comments)}")


if __name__ == "__main__":
    main()
