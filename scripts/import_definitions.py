"""
Load English-English definitions into the reference table.

Input is a UTF-8 text file with one ``word<TAB>definition`` pair per line.
Blank lines and lines starting with '#' are skipped.

Usage:
    python scripts/import_definitions.py definitions.tsv
    python scripts/import_definitions.py definitions.tsv --replace
"""
import argparse
import asyncio
import sys
from pathlib import Path
from typing import Iterator, Tuple

from sqlalchemy import delete, insert

from kanna.config.settings import get_settings
from kanna.models import EnglishDefinition, create_engine, init_db

BATCH_SIZE = 1000


def read_definitions(path: Path) -> Iterator[Tuple[str, str]]:
    with open(path, encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.rstrip("\n")
            if not line.strip() or line.startswith("#"):
                continue
            word, sep, definition = line.partition("\t")
            if not sep or not word.strip() or not definition.strip():
                print(f"⚠️ Skipping line {line_no}: expected 'word<TAB>definition'")
                continue
            yield word.strip(), definition.strip()


async def import_definitions(path: Path, replace: bool) -> int:
    settings = get_settings()
    settings.ensure_directories()
    engine = create_engine(settings)
    await init_db(engine)

    count = 0
    try:
        async with engine.begin() as conn:
            if replace:
                await conn.execute(delete(EnglishDefinition))
                print("🗑️ Cleared existing definitions")

            batch = []
            for word, definition in read_definitions(path):
                batch.append({"word": word, "translation": definition})
                if len(batch) >= BATCH_SIZE:
                    await conn.execute(insert(EnglishDefinition), batch)
                    count += len(batch)
                    batch = []
            if batch:
                await conn.execute(insert(EnglishDefinition), batch)
                count += len(batch)
    finally:
        await engine.dispose()

    return count


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Import English-English definitions")
    parser.add_argument("file", type=Path, help="word<TAB>definition file")
    parser.add_argument("--replace", action="store_true", help="delete existing definitions first")
    args = parser.parse_args()

    if not args.file.is_file():
        print(f"❌ File not found: {args.file}")
        sys.exit(1)

    imported = asyncio.run(import_definitions(args.file, args.replace))
    print(f"✅ Imported {imported} definitions")
