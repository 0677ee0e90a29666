"""Database verification for the generated inflection tables.

Checks that the stored paradigms are structurally sound and still agree with
the engine, after importing a lexicon and running generate-forms.

Usage:
    from finnish_anki.verify import verify_database
    from finnish_anki.db import get_connection

    with get_connection(db_path) as conn:
        report = verify_database(conn, verbose=True)
        if not report.all_passed:
            sys.exit(1)
"""

from dataclasses import dataclass, field
from typing import Any

from sqlalchemy import Connection, select, text

from finnish_anki.db.schema import lemmas
from finnish_anki.enums import POS, DeclensionType, NounCase, Tense, VerbType
from finnish_anki.stems import stem


@dataclass
class CheckResult:
    """Result of a single verification check."""

    name: str
    passed: bool
    message: str
    details: list[str] | None = None


@dataclass
class VerificationReport:
    """Complete verification report with all check results and metrics."""

    integrity_checks: list[CheckResult] = field(default_factory=lambda: list[CheckResult]())
    consistency_checks: list[CheckResult] = field(default_factory=lambda: list[CheckResult]())
    coverage_checks: list[CheckResult] = field(default_factory=lambda: list[CheckResult]())
    spot_checks: list[CheckResult] = field(default_factory=lambda: list[CheckResult]())
    metrics: dict[str, Any] = field(default_factory=lambda: dict[str, Any]())

    def _all_checks(self) -> list[CheckResult]:
        return (
            self.integrity_checks
            + self.consistency_checks
            + self.coverage_checks
            + self.spot_checks
        )

    @property
    def all_passed(self) -> bool:
        """Return True if all checks passed."""
        return all(check.passed for check in self._all_checks())

    @property
    def failed_count(self) -> int:
        return sum(1 for check in self._all_checks() if not check.passed)

    @property
    def total_count(self) -> int:
        return len(self._all_checks())

    def summary(self, *, verbose: bool = False) -> str:
        """Generate a human-readable summary of the verification results."""
        lines: list[str] = []

        def format_checks(title: str, checks: list[CheckResult]) -> None:
            if not checks:
                return
            lines.append(f"\n{title}:")
            for check in checks:
                status = "\033[32m[PASS]\033[0m" if check.passed else "\033[31m[FAIL]\033[0m"
                lines.append(f"  {status} {check.message}")
                if verbose and check.details:
                    lines.extend(f"    - {d}" for d in check.details[:10])
                    if len(check.details) > 10:
                        lines.append(f"    ... and {len(check.details) - 10} more")

        format_checks("Integrity Checks", self.integrity_checks)
        format_checks("Consistency Checks", self.consistency_checks)
        format_checks("Coverage", self.coverage_checks)
        format_checks("Spot Checks", self.spot_checks)

        if self.metrics and verbose:
            lines.append("\nMetrics:")
            for key, value in self.metrics.items():
                if isinstance(value, float):
                    lines.append(f"  {key}: {value:.1f}")
                else:
                    lines.append(f"  {key}: {value:,}")

        lines.append("")
        if self.all_passed:
            lines.append(f"Result: All {self.total_count} checks passed")
        else:
            lines.append(f"Result: FAILED ({self.failed_count} check(s) failed)")

        return "\n".join(lines)


def _result(name: str, ok_message: str, fail_message: str, issues: list[str]) -> CheckResult:
    if not issues:
        return CheckResult(name=name, passed=True, message=ok_message)
    return CheckResult(
        name=name,
        passed=False,
        message=f"{fail_message}: {len(issues)} issue(s)",
        details=issues,
    )


# =============================================================================
# Integrity Checks
# =============================================================================


def check_orphaned_forms(conn: Connection) -> CheckResult:
    """Check that every verb and noun form references an existing lemma."""
    issues: list[str] = []

    for table in ("verb_forms", "noun_forms"):
        query = text(f"""
            SELECT f.id, f.lemma_id
            FROM {table} f
            LEFT JOIN lemmas l ON f.lemma_id = l.id
            WHERE l.id IS NULL
        """)
        result = conn.execute(query).fetchall()
        issues.extend(f"{table}.id={row[0]} lemma_id={row[1]}" for row in result)

    return _result("orphaned_forms", "No orphaned forms", "Orphaned forms", issues)


def check_class_tags(conn: Connection) -> CheckResult:
    """Check that every lemma carries a valid verb or declension type."""
    issues: list[str] = []
    rows = conn.execute(select(lemmas.c.written, lemmas.c.pos, lemmas.c.word_class)).fetchall()
    for row in rows:
        if row.pos == POS.VERB:
            valid = VerbType.parse(row.word_class) is not None
        elif row.pos == POS.NOUN:
            valid = DeclensionType.parse(row.word_class) is not None
        else:
            valid = False
        if not valid:
            issues.append(f"{row.written} ({row.pos}): class {row.word_class!r}")

    return _result("class_tags", "All class tags valid", "Invalid class tags", issues)


# =============================================================================
# Consistency Checks
# =============================================================================


def check_paradigm_cardinality(conn: Connection) -> CheckResult:
    """Check each stored verb tense has 6 forms (5 for the imperatives)."""
    query = text("""
        SELECT l.written, vf.tense, COUNT(*) AS cnt
        FROM verb_forms vf
        JOIN lemmas l ON vf.lemma_id = l.id
        GROUP BY vf.lemma_id, vf.tense
    """)
    issues: list[str] = []
    for written, tense, count in conn.execute(query).fetchall():
        try:
            expected = 5 if Tense(tense).is_imperative else 6
        except ValueError:
            issues.append(f"{written}: unknown tense {tense!r}")
            continue
        if count != expected:
            issues.append(f"{written} {tense}: {count} forms (expected {expected})")

    return _result(
        "paradigm_cardinality",
        "Verb paradigm sizes",
        "Verb paradigm sizes",
        issues,
    )


def check_case_coverage(conn: Connection) -> CheckResult:
    """Check that every noun with stored forms has one row per case."""
    query = text("""
        SELECT l.written, COUNT(*) AS cnt
        FROM noun_forms nf
        JOIN lemmas l ON nf.lemma_id = l.id
        GROUP BY nf.lemma_id
        HAVING cnt <> :expected
    """)
    expected = len(NounCase)
    result = conn.execute(query, {"expected": expected}).fetchall()
    issues = [f"{row[0]}: {row[1]} cases (expected {expected})" for row in result]
    return _result("case_coverage", "Noun case coverage", "Noun case coverage", issues)


def check_citation_forms(conn: Connection) -> CheckResult:
    """Check that the stored nominative of every noun equals its lemma."""
    query = text("""
        SELECT l.written, nf.written
        FROM noun_forms nf
        JOIN lemmas l ON nf.lemma_id = l.id
        WHERE nf.noun_case = 'nominative' AND nf.written <> l.written
    """)
    result = conn.execute(query).fetchall()
    issues = [f"{row[0]}: nominative stored as {row[1]!r}" for row in result]
    return _result("citation_forms", "Nominatives match lemmas", "Nominative mismatches", issues)


def check_stems(conn: Connection) -> CheckResult:
    """Check stored stems against the stem extractor."""
    issues: list[str] = []
    rows = conn.execute(
        select(lemmas.c.written, lemmas.c.pos, lemmas.c.word_class, lemmas.c.stem)
    ).fetchall()
    for row in rows:
        word_class: VerbType | DeclensionType | None
        if row.pos == POS.VERB:
            word_class = VerbType.parse(row.word_class)
        else:
            word_class = DeclensionType.parse(row.word_class)
        if word_class is None:
            continue  # reported by check_class_tags
        expected = stem(row.written, word_class)
        if row.stem != expected:
            issues.append(f"{row.written}: stem {row.stem!r} (expected {expected!r})")

    return _result("stems", "Stored stems match", "Stem mismatches", issues)


# =============================================================================
# Coverage Checks
# =============================================================================


def check_form_coverage(conn: Connection) -> list[CheckResult]:
    """Check that every lemma has generated forms."""
    results: list[CheckResult] = []

    for pos, table in ((POS.VERB, "verb_forms"), (POS.NOUN, "noun_forms")):
        query = text(f"""
            SELECT l.written
            FROM lemmas l
            LEFT JOIN {table} f ON f.lemma_id = l.id
            WHERE l.pos = :pos AND f.id IS NULL
        """)
        missing = [row[0] for row in conn.execute(query, {"pos": pos.value}).fetchall()]
        if missing:
            results.append(
                CheckResult(
                    name=f"{pos.value}_coverage",
                    passed=False,
                    message=f"{pos.plural.capitalize()} without forms: {len(missing)}",
                    details=missing,
                )
            )
        else:
            results.append(
                CheckResult(
                    name=f"{pos.value}_coverage",
                    passed=True,
                    message=f"All {pos.plural} have forms",
                )
            )

    return results


# =============================================================================
# Spot Checks
# =============================================================================

# Known verb forms: infinitive -> [(tense, paradigm position, expected form)]
VERB_SPOT_CHECKS: dict[str, list[tuple[Tense, int, str]]] = {
    "puhua": [
        (Tense.PRESENT, 0, "puhun"),
        (Tense.PRESENT, 2, "puhuu"),
        (Tense.PRESENT, 5, "puhuvat"),
        (Tense.NEGATIVE_PRESENT, 0, "en puhu"),
        (Tense.PERFECT, 3, "olemme puhuneet"),
    ],
    "tulla": [
        (Tense.PRESENT, 0, "tulen"),
        (Tense.IMPERFECT, 2, "tuli"),
    ],
}

# Known noun forms: nominative -> [(case, expected form)]
NOUN_SPOT_CHECKS: dict[str, list[tuple[NounCase, str]]] = {
    "talo": [
        (NounCase.GENITIVE, "talon"),
        (NounCase.PARTITIVE, "taloa"),
        (NounCase.INESSIVE, "talossa"),
    ],
    "käsi": [
        (NounCase.ILLATIVE, "käteen"),
        (NounCase.PARTITIVE, "kättä"),
    ],
    "nainen": [
        (NounCase.GENITIVE, "naisen"),
    ],
}


def _lemma_id(conn: Connection, written: str, pos: POS) -> int | None:
    query = text("SELECT id FROM lemmas WHERE written = :written AND pos = :pos")
    row = conn.execute(query, {"written": written, "pos": pos.value}).fetchone()
    return row[0] if row else None


def _spot_result(written: str, pos: POS, issues: list[str]) -> CheckResult:
    if issues:
        return CheckResult(
            name=f"spot_{written}",
            passed=False,
            message=f"{written} ({pos}): {len(issues)} issue(s)",
            details=issues,
        )
    return CheckResult(name=f"spot_{written}", passed=True, message=f"{written} ({pos}): verified")


def run_spot_checks(conn: Connection) -> list[CheckResult]:
    """Compare stored forms of well-known words against their known values."""
    results: list[CheckResult] = []

    for written, verb_checks in VERB_SPOT_CHECKS.items():
        lemma_id = _lemma_id(conn, written, POS.VERB)
        if lemma_id is None:
            results.append(_spot_result(written, POS.VERB, ["lemma not found"]))
            continue

        issues: list[str] = []
        for tense, position, expected in verb_checks:
            query = text("""
                SELECT written FROM verb_forms
                WHERE lemma_id = :id AND tense = :tense AND position = :position
            """)
            actual = conn.execute(
                query, {"id": lemma_id, "tense": tense.value, "position": position}
            ).scalar()
            if actual != expected:
                issues.append(f"{tense.label}[{position}]: {actual!r} != {expected!r}")
        results.append(_spot_result(written, POS.VERB, issues))

    for written, noun_checks in NOUN_SPOT_CHECKS.items():
        lemma_id = _lemma_id(conn, written, POS.NOUN)
        if lemma_id is None:
            results.append(_spot_result(written, POS.NOUN, ["lemma not found"]))
            continue

        issues = []
        for case, expected in noun_checks:
            query = text("""
                SELECT written FROM noun_forms WHERE lemma_id = :id AND noun_case = :case
            """)
            actual = conn.execute(query, {"id": lemma_id, "case": case.value}).scalar()
            if actual != expected:
                issues.append(f"{case}: {actual!r} != {expected!r}")
        results.append(_spot_result(written, POS.NOUN, issues))

    return results


# =============================================================================
# Metrics Collection
# =============================================================================


def collect_metrics(conn: Connection) -> dict[str, Any]:
    """Collect informational metrics about the database."""
    metrics: dict[str, Any] = {}

    for pos in POS:
        query = text("SELECT COUNT(*) FROM lemmas WHERE pos = :pos")
        metrics[f"{pos.plural}"] = conn.execute(query, {"pos": pos.value}).scalar() or 0

    metrics["verb_forms"] = conn.execute(text("SELECT COUNT(*) FROM verb_forms")).scalar() or 0
    metrics["noun_forms"] = conn.execute(text("SELECT COUNT(*) FROM noun_forms")).scalar() or 0

    avg_verb_query = text("""
        SELECT AVG(cnt) FROM (
            SELECT COUNT(*) as cnt FROM verb_forms GROUP BY lemma_id
        )
    """)
    metrics["avg_verb_forms"] = round(float(conn.execute(avg_verb_query).scalar() or 0), 1)

    query = text("""
        SELECT cefr_level, COUNT(*) FROM lemmas
        WHERE cefr_level IS NOT NULL
        GROUP BY cefr_level ORDER BY cefr_level
    """)
    for level, count in conn.execute(query).fetchall():
        metrics[f"level_{level}"] = count

    return metrics


# =============================================================================
# Main Entry Point
# =============================================================================


def verify_database(conn: Connection, *, verbose: bool = False) -> VerificationReport:
    """Run all verification checks and return a complete report.

    Args:
        conn: SQLAlchemy database connection
        verbose: If True, collect additional metrics

    Returns:
        VerificationReport with all check results and optional metrics
    """
    report = VerificationReport()

    report.integrity_checks = [
        check_orphaned_forms(conn),
        check_class_tags(conn),
    ]

    report.consistency_checks = [
        check_paradigm_cardinality(conn),
        check_case_coverage(conn),
        check_citation_forms(conn),
        check_stems(conn),
    ]

    report.coverage_checks = check_form_coverage(conn)

    report.spot_checks = run_spot_checks(conn)

    if verbose:
        report.metrics = collect_metrics(conn)

    return report
