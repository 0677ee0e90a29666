"""Command-line interface for the Finnish Anki deck generator."""

import argparse
import logging
import random
import sys
from collections.abc import Callable
from pathlib import Path

from sqlalchemy import func, select

from finnish_anki.conjugation import IMPERATIVE_PERSONS, PERSONS, conjugate, conjugate_all
from finnish_anki.db import (
    DEFAULT_DB_PATH,
    get_connection,
    get_engine,
    get_lemma,
    init_db,
    lemmas,
    noun_forms,
    random_lemma,
    row_to_entry,
    verb_forms,
)
from finnish_anki.declension import decline, decline_all
from finnish_anki.download import DEFAULT_LEXICON_PATH, download_lexicon
from finnish_anki.enums import POS, DeclensionType, NounCase, Tense, VerbType
from finnish_anki.importers import (
    generate_noun_forms,
    generate_verb_forms,
    import_lexicon,
    import_seed,
)
from finnish_anki.quiz import (
    Question,
    check_answer,
    make_conjugation_question,
    make_declension_question,
    make_vocabulary_question,
)
from finnish_anki.verify import verify_database

QUIZ_KINDS = ("conjugation", "declension", "vocabulary")


def _print_progress(current: int, total: int, desc: str = "Processing") -> None:
    """Print progress in-place using carriage return."""
    if total == 0:
        return
    pct = current * 100 // total
    print(f"\r  {desc}... {pct}% ({current:,} / {total:,})", end="", flush=True)
    if current >= total:
        print()  # newline when done


def _make_progress_callback(desc: str = "Processing") -> Callable[[int, int], None]:
    """Create a progress callback for import functions."""

    def callback(current: int, total: int) -> None:
        _print_progress(current, total, desc)

    return callback


def _require_database(db_path: Path) -> bool:
    if not db_path.exists():
        print(f"Error: Database not found: {db_path}", file=sys.stderr)
        print("Run 'import-seed' or 'import-all' first to create the database.", file=sys.stderr)
        return False
    return True


def _print_import_stats(stats: dict[str, int], indent: str = "") -> None:
    print(f"{indent}Lemmas added:    {stats['lemmas']:,}")
    print(f"{indent}Already present: {stats['skipped']:,}")
    if "invalid" in stats:
        print(f"{indent}Invalid rows:    {stats['invalid']:,}")
    if stats.get("filtered"):
        print(f"{indent}Filtered (POS):  {stats['filtered']:,}")


def _print_generation_stats(stats: dict[str, int], indent: str = "") -> None:
    print(f"{indent}Lemmas inflected: {stats['lemmas']:,}")
    print(f"{indent}Forms stored:     {stats['forms']:,}")
    print(f"{indent}Forms replaced:   {stats['cleared']:,}")
    if stats["invalid_class"]:
        print(f"{indent}Unknown class:    {stats['invalid_class']:,}")


# =============================================================================
# Import commands
# =============================================================================


def cmd_import_seed(args: argparse.Namespace) -> int:
    """Seed the database with the starter lexicon."""
    db_path = Path(args.database)

    print(f"Initializing database: {db_path}")
    init_db(get_engine(db_path))

    with get_connection(db_path) as conn:
        stats = import_seed(conn, pos_filter=args.pos)

    print()
    _print_import_stats(stats)
    print()
    print("Import complete!")
    return 0


def cmd_import_lexicon(args: argparse.Namespace) -> int:
    """Import a lexicon CSV, optionally downloading it first."""
    csv_path = Path(args.input)
    db_path = Path(args.database)

    if args.url:
        stats = download_lexicon(args.url, csv_path, force=args.force)
        if stats["downloaded"] > 0:
            print("Download complete!")
            print()

    if not csv_path.exists():
        print(f"Error: Input file not found: {csv_path}", file=sys.stderr)
        return 1

    print(f"Initializing database: {db_path}")
    init_db(get_engine(db_path))

    print(f"Importing from: {csv_path}")
    print()

    with get_connection(db_path) as conn:
        stats = import_lexicon(
            conn,
            csv_path,
            pos_filter=args.pos,
            progress_callback=_make_progress_callback("Importing"),
        )

    print()
    _print_import_stats(stats)
    print()
    print("Import complete!")
    return 0


def cmd_generate_forms(args: argparse.Namespace) -> int:
    """Rebuild the verb and noun form tables from the lemmas."""
    db_path = Path(args.database)
    if not _require_database(db_path):
        return 1

    with get_connection(db_path) as conn:
        print("Conjugating verbs...")
        verb_stats = generate_verb_forms(conn, progress_callback=_make_progress_callback())
        _print_generation_stats(verb_stats, indent="    ")
        print()

        print("Declining nouns...")
        noun_stats = generate_noun_forms(conn, progress_callback=_make_progress_callback())
        _print_generation_stats(noun_stats, indent="    ")

    print()
    print("Generation complete!")
    return 0


def cmd_import_all(args: argparse.Namespace) -> int:
    """Seed, import the lexicon CSV if present, and generate all forms."""
    db_path = Path(args.database)
    csv_path = Path(args.input)
    indent = "    "

    print(f"Initializing database: {db_path}")
    init_db(get_engine(db_path))
    print()

    with get_connection(db_path) as conn:
        print("[1/3] Importing starter lexicon...")
        _print_import_stats(import_seed(conn), indent=indent)
        print()

        if csv_path.exists():
            print(f"[2/3] Importing lexicon from {csv_path}...")
            stats = import_lexicon(
                conn, csv_path, progress_callback=_make_progress_callback("Importing")
            )
            _print_import_stats(stats, indent=indent)
        else:
            print(f"[2/3] Skipping lexicon import (not found: {csv_path})")
        print()

        print("[3/3] Generating forms...")
        _print_generation_stats(generate_verb_forms(conn), indent=indent)
        _print_generation_stats(generate_noun_forms(conn), indent=indent)

    print()
    print("Import complete!")
    return 0


# =============================================================================
# Inflection commands
# =============================================================================


def _resolve_class(
    word: str, pos: POS, tag: str | None, db_path: Path
) -> VerbType | DeclensionType | None:
    """Parse an explicit class tag, or look the word up in the database."""
    parse = VerbType.parse if pos == POS.VERB else DeclensionType.parse

    if tag is not None:
        word_class = parse(tag)
        if word_class is None:
            print(f"Error: Invalid type: {tag!r} (expected I-VI or 1-6)", file=sys.stderr)
        return word_class

    if not _require_database(db_path):
        return None
    with get_connection(db_path) as conn:
        row = get_lemma(conn, word, pos)
    if row is None:
        print(f"Error: Unknown {pos}: {word} (pass --type to inflect it anyway)", file=sys.stderr)
        return None
    word_class = parse(row.word_class)
    if word_class is None:
        print(f"Error: {word} has an invalid type: {row.word_class!r}", file=sys.stderr)
    return word_class


def cmd_conjugate(args: argparse.Namespace) -> int:
    """Print the conjugation of a verb."""
    verb_type = _resolve_class(args.word, POS.VERB, args.type, Path(args.database))
    if verb_type is None:
        return 1
    tense = Tense(args.tense)

    if args.person is not None:
        print(conjugate(args.word, VerbType(verb_type), tense, args.person, args.plural))
        return 0

    pronouns = IMPERATIVE_PERSONS if tense.is_imperative else PERSONS
    print(f"{args.word} (type {verb_type}), {tense.label}:")
    for pronoun, form in zip(
        pronouns, conjugate_all(args.word, VerbType(verb_type), tense), strict=True
    ):
        print(f"  {pronoun:<5} {form}")
    return 0


def cmd_decline(args: argparse.Namespace) -> int:
    """Print the declension of a noun."""
    declension_type = _resolve_class(args.word, POS.NOUN, args.type, Path(args.database))
    if declension_type is None:
        return 1

    if args.case is not None:
        print(decline(args.word, DeclensionType(declension_type), NounCase(args.case)))
        return 0

    print(f"{args.word} (type {declension_type}):")
    for case, form in decline_all(args.word, DeclensionType(declension_type)).items():
        print(f"  {case:<11} {form}")
    return 0


# =============================================================================
# Practice and reporting commands
# =============================================================================


def _ask(question: Question) -> None:
    print(question.prompt)
    for index, option in enumerate(question.options, 1):
        print(f"  {index}. {option}")

    try:
        reply = input("Your answer: ").strip()
    except EOFError:
        print()
        print(f"Answer: {question.answer}")
        return

    answer: str | int = int(reply) - 1 if reply.isdigit() else reply
    if check_answer(question, answer):
        print("Correct!")
    else:
        print(f"Wrong. The answer is: {question.answer}")


def cmd_quiz(args: argparse.Namespace) -> int:
    """Ask one multiple-choice question drawn from the database."""
    db_path = Path(args.database)
    if not _require_database(db_path):
        return 1

    rng = random.Random(args.seed)
    pos = POS.VERB if args.kind == "conjugation" else POS.NOUN
    if args.kind == "vocabulary":
        pos = rng.choice(list(POS))

    with get_connection(db_path) as conn:
        row = random_lemma(conn, pos, rng)
        pool = [row_to_entry(r) for r in conn.execute(select(lemmas)).fetchall()]

    entry = row_to_entry(row) if row is not None else None
    if entry is None:
        print(f"Error: No usable {pos.plural} in the database", file=sys.stderr)
        return 1

    if args.kind == "conjugation":
        question = make_conjugation_question(entry, rng)
    elif args.kind == "declension":
        question = make_declension_question(entry, rng)
    else:
        question = make_vocabulary_question(entry, [e for e in pool if e is not None], rng)

    _ask(question)
    return 0


def cmd_stats(args: argparse.Namespace) -> int:
    """Print database statistics."""
    db_path = Path(args.database)
    if not _require_database(db_path):
        return 1

    with get_connection(db_path) as conn:
        total_lemmas = conn.execute(select(func.count()).select_from(lemmas)).scalar() or 0
        n_verbs = (
            conn.execute(
                select(func.count()).select_from(lemmas).where(lemmas.c.pos == POS.VERB.value)
            ).scalar()
            or 0
        )
        n_nouns = (
            conn.execute(
                select(func.count()).select_from(lemmas).where(lemmas.c.pos == POS.NOUN.value)
            ).scalar()
            or 0
        )
        n_verb_forms = conn.execute(select(func.count()).select_from(verb_forms)).scalar() or 0
        n_noun_forms = conn.execute(select(func.count()).select_from(noun_forms)).scalar() or 0
        by_level = conn.execute(
            select(lemmas.c.cefr_level, func.count())
            .group_by(lemmas.c.cefr_level)
            .order_by(lemmas.c.cefr_level)
        ).fetchall()

    print(f"Database: {db_path}")
    print()
    print("Lemmas:")
    print(f"  Total: {total_lemmas:,}")
    print(f"  Verbs: {n_verbs:,}")
    print(f"  Nouns: {n_nouns:,}")
    print()
    print("Forms:")
    print(f"  Total:       {n_verb_forms + n_noun_forms:,}")
    print(f"  Verb forms:  {n_verb_forms:,}")
    print(f"  Noun forms:  {n_noun_forms:,}")
    print()
    print("Levels:")
    for level, count in by_level:
        print(f"  {level or '-':<3} {count:,}")

    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    """Verify the generated tables and print a report."""
    db_path = Path(args.database)
    if not _require_database(db_path):
        return 1

    with get_connection(db_path) as conn:
        report = verify_database(conn, verbose=args.details)

    print(report.summary(verbose=args.details))
    return 0 if report.all_passed else 1


# =============================================================================
# Argument parsing
# =============================================================================


def _add_database_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-d",
        "--database",
        type=str,
        default=str(DEFAULT_DB_PATH),
        help=f"Path to SQLite database (default: {DEFAULT_DB_PATH})",
    )


def _add_pos_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--pos",
        type=str,
        default=None,
        choices=[p.value for p in POS],
        help="Only import this part of speech (default: both)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="finnish-anki",
        description="Generate Finnish inflection tables and practice questions",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # import-seed subcommand
    seed_parser = subparsers.add_parser(
        "import-seed",
        help="Add the built-in starter verbs and nouns",
    )
    _add_database_argument(seed_parser)
    _add_pos_argument(seed_parser)
    seed_parser.set_defaults(func=cmd_import_seed)

    # import-lexicon subcommand
    lexicon_parser = subparsers.add_parser(
        "import-lexicon",
        help="Import verbs and nouns from a lexicon CSV",
    )
    lexicon_parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=str(DEFAULT_LEXICON_PATH),
        help=f"Path to lexicon CSV (default: {DEFAULT_LEXICON_PATH})",
    )
    lexicon_parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Download the CSV from this URL to the input path first",
    )
    lexicon_parser.add_argument(
        "--force",
        action="store_true",
        help="Re-download even if file already exists",
    )
    _add_database_argument(lexicon_parser)
    _add_pos_argument(lexicon_parser)
    lexicon_parser.set_defaults(func=cmd_import_lexicon)

    # generate-forms subcommand
    generate_parser = subparsers.add_parser(
        "generate-forms",
        help="Conjugate and decline every lemma into the form tables",
    )
    _add_database_argument(generate_parser)
    generate_parser.set_defaults(func=cmd_generate_forms)

    # import-all subcommand
    import_all_parser = subparsers.add_parser(
        "import-all",
        help="Seed, import the lexicon CSV (if present) and generate forms",
    )
    import_all_parser.add_argument(
        "-i",
        "--input",
        type=str,
        default=str(DEFAULT_LEXICON_PATH),
        help=f"Path to lexicon CSV (default: {DEFAULT_LEXICON_PATH})",
    )
    _add_database_argument(import_all_parser)
    import_all_parser.set_defaults(func=cmd_import_all)

    # conjugate subcommand
    conjugate_parser = subparsers.add_parser(
        "conjugate",
        help="Conjugate a verb",
    )
    conjugate_parser.add_argument("word", help="Infinitive (e.g., puhua)")
    conjugate_parser.add_argument(
        "--type",
        type=str,
        default=None,
        help="Verb type I-VI (default: look up in the database)",
    )
    conjugate_parser.add_argument(
        "--tense",
        type=str,
        default=Tense.PRESENT.value,
        choices=[t.value for t in Tense],
        help="Tense (default: present)",
    )
    conjugate_parser.add_argument(
        "--person",
        type=int,
        default=None,
        choices=[1, 2, 3],
        help="Print a single form for this person",
    )
    conjugate_parser.add_argument(
        "--plural",
        action="store_true",
        help="With --person, use the plural",
    )
    _add_database_argument(conjugate_parser)
    conjugate_parser.set_defaults(func=cmd_conjugate)

    # decline subcommand
    decline_parser = subparsers.add_parser(
        "decline",
        help="Decline a noun",
    )
    decline_parser.add_argument("word", help="Nominative (e.g., talo)")
    decline_parser.add_argument(
        "--type",
        type=str,
        default=None,
        help="Declension type I-VI (default: look up in the database)",
    )
    decline_parser.add_argument(
        "--case",
        type=str,
        default=None,
        choices=[c.value for c in NounCase],
        help="Print a single case (default: full table)",
    )
    _add_database_argument(decline_parser)
    decline_parser.set_defaults(func=cmd_decline)

    # quiz subcommand
    quiz_parser = subparsers.add_parser(
        "quiz",
        help="Answer a multiple-choice practice question",
    )
    quiz_parser.add_argument(
        "--kind",
        type=str,
        default="conjugation",
        choices=QUIZ_KINDS,
        help="Question kind (default: conjugation)",
    )
    quiz_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible question",
    )
    _add_database_argument(quiz_parser)
    quiz_parser.set_defaults(func=cmd_quiz)

    # stats subcommand
    stats_parser = subparsers.add_parser(
        "stats",
        help="Show database statistics",
    )
    _add_database_argument(stats_parser)
    stats_parser.set_defaults(func=cmd_stats)

    # verify subcommand
    verify_parser = subparsers.add_parser(
        "verify",
        help="Check the generated tables for consistency",
    )
    verify_parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        dest="details",
        help="Show failure details and metrics",
    )
    _add_database_argument(verify_parser)
    verify_parser.set_defaults(func=cmd_verify)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
