#!/usr/bin/env python3
"""
Create the proverbs snapshot file so the server has something to load.

Usage:
  python scripts/init_data.py [--path data/proverbs.json] [--seed "Less is more"]... [--force]
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from proverbs.core.config import get_settings, load_env_file
from proverbs.domain.proverbs import Proverb
from proverbs.repositories import json_storage


def main() -> None:
    load_env_file()
    ap = argparse.ArgumentParser(description="Create the proverbs JSON snapshot")
    ap.add_argument("--path", help="Snapshot file (default: DATA_FILE or ./data/proverbs.json)")
    ap.add_argument("--seed", action="append", default=[], help="Proverb text to add (repeatable)")
    ap.add_argument("--force", action="store_true", help="Overwrite an existing file")
    args = ap.parse_args()

    data_file = Path(args.path or get_settings().data_file)
    if data_file.exists() and not args.force:
        raise SystemExit(f"'{data_file}' already exists (use --force to overwrite)")
    data_file.parent.mkdir(parents=True, exist_ok=True)

    proverbs = [Proverb(i, text) for i, text in enumerate(args.seed, start=1)]
    json_storage.save(data_file, proverbs)
    print(f"OK: {data_file} written with {len(proverbs)} proverb(s)")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
