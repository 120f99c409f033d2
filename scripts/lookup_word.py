"""Live dictionary lookup script.

Fetches words from the Academia Galega dictionary and prints the formatted
entry. Not run by pytest (manual use only).

Usage:
    PYTHONPATH=src python scripts/lookup_word.py casa [fogar ...] [--json]
"""

import argparse
import asyncio
import json
from dataclasses import asdict

from dotenv import load_dotenv

load_dotenv()

from adapter.external.academia_galega import AcademiaGalegaAdapter
from port.dictionary import DictionaryFetchError
from services.dictionary_service import lookup, render_outcome
from utils.logging import setup_structured_logging


async def main(words: list[str], as_json: bool) -> None:
    dictionary = AcademiaGalegaAdapter()
    for word in words:
        try:
            outcome = await lookup(dictionary, word)
        except DictionaryFetchError as e:
            print(f"[{word}] fetch failed: {e}")
            continue

        if as_json:
            print(json.dumps(asdict(outcome), ensure_ascii=False, indent=2, default=str))
        else:
            print(render_outcome(outcome))

        for diagnostic in outcome.diagnostics:
            print(f"  ! {diagnostic.kind.value}: {diagnostic.message}")
        print("-" * 60)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Look up words in the Academia Galega dictionary")
    parser.add_argument("words", nargs="+", help="Words to look up")
    parser.add_argument("--json", action="store_true", help="Print the structured entry as JSON")
    parser.add_argument("--log-level", default="WARNING")
    args = parser.parse_args()

    setup_structured_logging(args.log_level)
    asyncio.run(main(args.words, args.json))
