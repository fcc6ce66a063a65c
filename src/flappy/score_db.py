"""
score_db.py: Persistence for the single best-score integer.
"""

import sqlite3

from .constants import DB_FILE
from .logger import get_logger

log = get_logger(__name__)


class ScoreStore:
    """Keeps the best score in a one-row SQLite table."""

    def __init__(self, db_file: str = DB_FILE):
        self.conn = sqlite3.connect(db_file)
        self.cur = self.conn.cursor()
        self.setup()
        log.info("Score store opened at %s", db_file)

    def setup(self):
        """Creates the table and its single row if they don't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS BestScore (
                id INTEGER PRIMARY KEY CHECK (id = 1),
                best INTEGER NOT NULL DEFAULT 0 CHECK (best >= 0)
            )
        """)
        self.cur.execute("INSERT OR IGNORE INTO BestScore (id, best) VALUES (1, 0)")
        self.conn.commit()

    def load(self) -> int:
        self.cur.execute("SELECT best FROM BestScore WHERE id = 1")
        return self.cur.fetchone()[0]

    def save(self, best: int):
        """Writes through immediately. A lower value never replaces a higher one."""
        self.cur.execute("UPDATE BestScore SET best = MAX(best, ?) WHERE id = 1", (best,))
        self.conn.commit()

    def close(self):
        self.conn.close()
