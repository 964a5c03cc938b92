"""
score_db.py: Database layer for user authentication and score history,
plus the fire-and-forget logger the game hands finished scores to.
"""

import logging
import sqlite3
import threading
from datetime import datetime, timezone
from typing import List, Optional, Tuple

DB_FILE = "neon_flap.db"

logger = logging.getLogger(__name__)


class ScoreDatabase:
    """Handles all interaction with the SQLite database."""
    def __init__(self, db_file: str = DB_FILE):
        # Writes come from the logger's worker threads
        self.conn = sqlite3.connect(db_file, check_same_thread=False)
        self.lock = threading.Lock()
        self.setup()

    def setup(self):
        """Creates tables if they don't exist."""
        with self.lock:
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS Users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    username TEXT UNIQUE,
                    password TEXT
                )
            """)
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS Scores (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    user_id INTEGER,
                    score INTEGER NOT NULL,
                    timestamp TEXT NOT NULL,
                    FOREIGN KEY(user_id) REFERENCES Users(id)
                )
            """)
            self.conn.commit()

    def get_user(self, username: str) -> Optional[Tuple]:
        """Fetches user ID, username, and password."""
        with self.lock:
            cur = self.conn.execute(
                "SELECT id, username, password FROM Users WHERE username=?", (username,))
            return cur.fetchone()

    def add_user(self, username: str, password: str) -> Optional[int]:
        """Creates a new user and returns the new user_id."""
        try:
            with self.lock:
                cur = self.conn.execute(
                    "INSERT INTO Users (username, password) VALUES (?, ?)", (username, password))
                self.conn.commit()
                return cur.lastrowid
        except sqlite3.IntegrityError:
            return None

    def authenticate(self, username: str, password: str) -> Optional[int]:
        """Logs a user in, registering unknown usernames. Returns the user_id."""
        user_data = self.get_user(username)
        if user_data is None:
            user_id = self.add_user(username, password)
            if user_id is not None:
                logger.info("New user registered: %s", username)
            return user_id

        user_id, _, stored_password = user_data
        if stored_password != password:
            logger.warning("Incorrect password for %s", username)
            return None
        return user_id

    def add_score(self, user_id: int, score: int):
        """Appends one finished session to the user's history."""
        timestamp = datetime.now(timezone.utc).isoformat()
        with self.lock:
            self.conn.execute(
                "INSERT INTO Scores (user_id, score, timestamp) VALUES (?, ?, ?)",
                (user_id, score, timestamp))
            self.conn.commit()

    def best_score(self, user_id: int) -> int:
        with self.lock:
            cur = self.conn.execute(
                "SELECT MAX(score) FROM Scores WHERE user_id=?", (user_id,))
            row = cur.fetchone()
        return row[0] if row and row[0] is not None else 0

    def get_leaderboard(self, limit: int = 10) -> List[Tuple[str, int]]:
        """Fetches the top scores (username, best_score)."""
        with self.lock:
            cur = self.conn.execute("""
                SELECT U.username, MAX(S.score) AS best
                FROM Scores S
                JOIN Users U ON S.user_id = U.id
                GROUP BY U.id
                ORDER BY best DESC
                LIMIT ?
            """, (limit,))
            return cur.fetchall()

    def close(self):
        with self.lock:
            self.conn.close()


class ScoreLogger:
    """
    Best-effort score persistence. Failures are logged and dropped;
    nothing here ever reaches the game loop.
    """
    def __init__(self, db: Optional[ScoreDatabase], user_id: Optional[int]):
        self.db = db
        self.user_id = user_id
        self._threads: List[threading.Thread] = []

    def save_score(self, score: int):
        if self.db is None or self.user_id is None:
            return
        try:
            self.db.add_score(self.user_id, score)
            logger.info("Score saved: %d", score)
        except Exception:
            logger.exception("Error saving score %d", score)

    def submit(self, score: int):
        """Saves the score on a background thread so the frame never waits."""
        self._threads = [t for t in self._threads if t.is_alive()]
        try:
            thread = threading.Thread(target=self.save_score, args=(score,), daemon=True)
            thread.start()
        except Exception:
            logger.exception("Could not start save for score %d", score)
            return
        self._threads.append(thread)

    def join(self, timeout: Optional[float] = None):
        """Waits for pending saves."""
        for thread in self._threads:
            thread.join(timeout)
        self._threads = [t for t in self._threads if t.is_alive()]
