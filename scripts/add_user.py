#!/usr/bin/env python3
"""
Register a user directly in the JSON document (sem passar pela API).

Uso:
  python scripts/add_user.py --username alice --password s3cret [--data-file db.json]
"""
from __future__ import annotations

import argparse
import sys

from api.core.config import get_settings
from api.repositories.json_storage import DocumentStore
from api.services.auth_service import AuthService


def main() -> None:
    ap = argparse.ArgumentParser(description="Register a user in the JSON document")
    ap.add_argument("--username", required=True)
    ap.add_argument("--password", required=True)
    ap.add_argument("--data-file", help="JSON document path (default: DATA_FILE env)")
    args = ap.parse_args()

    settings = get_settings()
    store = DocumentStore(args.data_file or settings.data_file)
    result = AuthService(store=store, settings=settings).register(args.username.strip(), args.password)
    print("OK: user registered")
    print(f"  id: {result.id}")
    print(f"  username: {result.username}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - uso CLI
        sys.stderr.write(f"Erro: {exc}\n")
        raise SystemExit(1)
