"""Command line interface for gloss cleaning and attachment proposals."""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Callable, Iterable

from dotenv import find_dotenv, load_dotenv

from .attachment import AttachmentProposer, propose_all
from .common.config import get_config_paths, get_limits
from .errors import SensegraftError
from .gloss.cleaner import clean_gloss
from .ingest.loader import LoadStats, load_entries
from .inventory.base import PartOfSpeech, SenseInventory
from .inventory.locked import LockedInventory
from .inventory.memory import InMemoryInventory
from .resolution.resolver import LemmaResolver
from .similarity.cache import GlossAnnotationCache
from .similarity.scoring import InverseFrequencyScorer, VectorCosineScorer

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
logger = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _validate_input_file(path: Path, description: str) -> None:
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"{description} '{path}' does not exist or is not a file")


def _atomic_write(path: Path, write_fn: Callable[[NamedTemporaryFile], None]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(mode="w", delete=False, dir=str(path.parent), encoding="utf-8") as tmp:
        write_fn(tmp)
        tmp.flush()
        os.fsync(tmp.fileno())
    os.replace(tmp.name, path)


def _read_lines(args: argparse.Namespace) -> Iterable[str]:
    if args.glosses:
        return list(args.glosses)
    if args.input is None or args.input == "-":
        return [line.rstrip("\n") for line in sys.stdin]
    path = Path(args.input)
    _validate_input_file(path, "Gloss file")
    return path.read_text(encoding="utf-8").splitlines()


def _run_clean(args: argparse.Namespace) -> None:
    for line in _read_lines(args):
        print(clean_gloss(line, remove_links=not args.keep_links))


def _open_inventory(args: argparse.Namespace) -> SenseInventory:
    if args.inventory_json:
        path = Path(args.inventory_json)
        _validate_input_file(path, "Inventory JSON")
        return LockedInventory(InMemoryInventory.from_json(path))

    # nltk is only needed when reading the installed WordNet.
    from .inventory.wordnet import WordNetInventory

    return LockedInventory(WordNetInventory())


def _inventory_glosses(inventory: SenseInventory) -> Iterable[str]:
    for pos in (PartOfSpeech.NOUN, PartOfSpeech.VERB):
        for synset in inventory.all_synsets(pos):
            yield synset.gloss


def _build_scorer(args: argparse.Namespace, inventory: SenseInventory, entries, resolver):
    if args.scorer == "first":
        return None

    if args.scorer == "vectors":
        from .similarity.embeddings import get_keyed_vectors

        cache = GlossAnnotationCache(get_keyed_vectors(args.vectors), resolver)
        return VectorCosineScorer(cache)

    cache = GlossAnnotationCache(resolver=resolver)
    entry_glosses = [entry.annotations.gloss for entry in entries]
    return InverseFrequencyScorer(cache).fit(
        [*entry_glosses, *_inventory_glosses(inventory)]
    )


def _run_propose(args: argparse.Namespace) -> None:
    paths = get_config_paths()
    records_path = Path(args.records or paths["records"])
    output_path = Path(args.output or paths["output"])
    _validate_input_file(records_path, "Records file")

    stats = LoadStats()
    entries = load_entries(records_path, stats)
    inventory = _open_inventory(args)
    resolver = LemmaResolver(inventory)
    scorer = _build_scorer(args, inventory, entries, resolver)

    proposer = AttachmentProposer(inventory, scorer, resolver=resolver)
    results = propose_all(proposer, entries, max_workers=args.max_workers)
    proposals = [result for result in results if result is not None]

    def writer(tmp) -> None:
        for proposal in proposals:
            tmp.write(json.dumps(proposal.to_dict(), ensure_ascii=False))
            tmp.write("\n")

    _atomic_write(output_path, writer)

    logger.info(
        "Wrote attachment proposals",
        extra={"output": str(output_path), "proposals": len(proposals)},
    )
    print(
        "Loaded {} records ({} duplicates) → {} proposals written to {}".format(
            stats.records, stats.duplicates, len(proposals), output_path
        )
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sensegraft",
        description="Attach harvested dictionary senses to a sense inventory",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", required=True)

    clean = subparsers.add_parser("clean", help="Strip wiki markup from raw glosses")
    clean.add_argument("glosses", nargs="*", help="Raw glosses; read from --input if omitted")
    clean.add_argument("--input", default=None, help="File of raw glosses, one per line ('-' for stdin)")
    clean.add_argument("--keep-links", action="store_true", help="Leave [[links]] in place")
    clean.set_defaults(handler=_run_clean)

    propose = subparsers.add_parser("propose", help="Propose hypernym attachments")
    propose.add_argument("--records", default=None, help="JSON-lines sense records")
    propose.add_argument("--output", default=None, help="JSON-lines proposals output path")
    propose.add_argument(
        "--inventory-json",
        default=None,
        help="Inventory fixture JSON; the installed WordNet is used if omitted",
    )
    propose.add_argument(
        "--scorer",
        choices=("first", "overlap", "vectors"),
        default="overlap",
        help="How to pick among a candidate's senses",
    )
    propose.add_argument("--vectors", default=None, help="Word vectors for --scorer vectors")
    propose.add_argument(
        "--max-workers", type=int, default=get_limits().max_workers, help="Worker threads"
    )
    propose.set_defaults(handler=_run_propose)

    return parser


def main(argv: list[str] | None = None) -> int:
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path)

    parser = _build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:  # pragma: no cover - delegated to argparse
        return exc.code

    _configure_logging(args.verbose)

    try:
        args.handler(args)
    except (FileNotFoundError, OSError, ValueError, SensegraftError) as error:
        logger.error("Command failed", exc_info=False, extra={"error": str(error)})
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
