import sqlite3
from pathlib import Path
from typing import Optional

from ..errors import StoreUnavailableError


class BookmarkDatabase:
    """String key-value store; each write replaces one key atomically."""

    def __init__(self, db_name: str = "bookmarks.db"):
        self.db_name = db_name
        if not Path(db_name).resolve().parent.is_dir():
            raise StoreUnavailableError(f"Storage directory does not exist for {db_name}")
        self.init_db()

    def init_db(self):
        with sqlite3.connect(self.db_name) as conn:
            c = conn.cursor()
            c.execute('''CREATE TABLE IF NOT EXISTS storage
                         (key TEXT PRIMARY KEY,
                          value TEXT NOT NULL)''')
            conn.commit()

    def set_item(self, key: str, value: str):
        with sqlite3.connect(self.db_name) as conn:
            c = conn.cursor()
            c.execute("INSERT OR REPLACE INTO storage (key, value) VALUES (?, ?)", (key, value))
            conn.commit()

    def get_item(self, key: str) -> Optional[str]:
        with sqlite3.connect(self.db_name) as conn:
            c = conn.cursor()
            c.execute("SELECT value FROM storage WHERE key = ?", (key,))
            result = c.fetchone()
            return result[0] if result else None

    def remove_item(self, key: str):
        with sqlite3.connect(self.db_name) as conn:
            c = conn.cursor()
            c.execute("DELETE FROM storage WHERE key = ?", (key,))
            conn.commit()
