import os
import sqlite3
from pathlib import Path
from typing import List

from pipeline.errors import DatabaseUnavailable, NoEligibleRecordings
from sources.recording import Recording, pick_title


class MemoLibrary:
    def __init__(
        self,
        db_path: str | Path,
        clip_seconds: float = 30.0,
    ):
        self.db_path = Path(db_path)
        self.clip_seconds = float(clip_seconds)

    # ---------- CONNECTION ----------
    def _connect(self) -> sqlite3.Connection:
        """
        Opens the library with SQLite's read-only URI mode so the engine
        itself rejects any write.
        """
        if not self.db_path.is_file():
            raise DatabaseUnavailable(f"Voice Memos database not found at {self.db_path}")
        if not os.access(self.db_path, os.R_OK):
            raise DatabaseUnavailable(f"No read permission for {self.db_path}")

        uri = f"{self.db_path.resolve().as_uri()}?mode=ro"
        try:
            return sqlite3.connect(uri, uri=True)
        except sqlite3.Error as exc:
            raise DatabaseUnavailable(f"Cannot open database {self.db_path}: {exc}") from exc

    # ---------- READ HELPERS ----------
    def load_recordings(self) -> List[Recording]:
        conn = self._connect()
        try:
            cur = conn.cursor()
            cur.execute(
                """
                SELECT ZENCRYPTEDTITLE, ZCUSTOMLABEL, ZDATE, ZDURATION, ZPATH
                FROM ZCLOUDRECORDING
                WHERE ZDURATION > ?
                  AND ZPATH IS NOT NULL
                  AND ZDATE IS NOT NULL
                ORDER BY ZDATE
                """,
                (self.clip_seconds,),
            )
            rows = cur.fetchall()
        except sqlite3.Error as exc:
            raise DatabaseUnavailable(f"Cannot read recordings from {self.db_path}: {exc}") from exc
        finally:
            conn.close()

        recordings = [
            Recording(
                title=pick_title(r[0], r[1]),
                date_raw=float(r[2]),
                duration_seconds=float(r[3]),
                path=str(r[4]),
            )
            for r in rows
        ]
        recordings = [r for r in recordings if r.duration_seconds > self.clip_seconds]

        if not recordings:
            raise NoEligibleRecordings(
                f"No voice memos found (longer than {self.clip_seconds:g} seconds)."
            )

        return recordings
