"""SQLite access for the Finnish lexicon and its generated paradigms.

One engine is kept per database file. Every connection turns on SQLite
foreign keys so that verb_forms and noun_forms rows cannot outlive their
lemma.
"""

import logging
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

from sqlalchemy import Connection, Engine, create_engine, event
from sqlalchemy.pool import ConnectionPoolEntry

logger = logging.getLogger(__name__)

DEFAULT_DB_PATH = Path("finnish.db")

_engines: dict[Path, Engine] = {}


def _enable_foreign_keys(dbapi_connection: Any, _connection_record: ConnectionPoolEntry) -> None:
    # SQLite leaves FK enforcement off per connection; the form tables rely on it
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_engine(db_path: Path | str = DEFAULT_DB_PATH) -> Engine:
    """Return the engine for a lexicon database, creating it on first use.

    The import-all command opens the same file for the seed, lexicon and
    paradigm steps; all of them share this engine.
    """
    db_path = Path(db_path)

    engine = _engines.get(db_path)
    if engine is None:
        logger.debug("Opening lexicon database %s", db_path)
        engine = create_engine(f"sqlite:///{db_path}", echo=False)
        event.listen(engine, "connect", _enable_foreign_keys)
        _engines[db_path] = engine

    return engine


@contextmanager
def get_connection(
    db_path: Path | str = DEFAULT_DB_PATH,
) -> Generator[Connection, None, None]:
    """Yield a connection that commits on exit and rolls back on error.

    A failed paradigm rebuild therefore leaves the previous forms in place.

    Example:
        with get_connection("finnish.db") as conn:
            entry = get_lemma(conn, "puhua", POS.VERB)
            forms = conjugate_all(entry.written, VerbType(entry.word_class), Tense.PRESENT)
    """
    with get_engine(db_path).connect() as conn:
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
