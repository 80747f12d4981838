import sqlite3
import tempfile
import unittest
from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from pipeline.errors import DatabaseUnavailable, NoEligibleRecordings
from storage.memo_library import MemoLibrary


def make_library_db(db_path: str, rows: list[tuple]) -> None:
    conn = sqlite3.connect(db_path)
    cur = conn.cursor()
    cur.execute("""
        CREATE TABLE ZCLOUDRECORDING (
            Z_PK INTEGER PRIMARY KEY,
            ZENCRYPTEDTITLE,
            ZCUSTOMLABEL TEXT,
            ZDATE REAL,
            ZDURATION REAL,
            ZPATH TEXT
        )
    """)
    cur.executemany(
        "INSERT INTO ZCLOUDRECORDING (ZENCRYPTEDTITLE, ZCUSTOMLABEL, ZDATE, ZDURATION, ZPATH) "
        "VALUES (?, ?, ?, ?, ?)",
        rows,
    )
    conn.commit()
    conn.close()


class TestMemoLibrary(unittest.TestCase):
    def test_only_recordings_longer_than_clip(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = f"{tmp}/CloudRecordings.db"
            make_library_db(db_path, [
                ("Short", None, 10.0, 12.0, "short.m4a"),
                ("Exact", None, 20.0, 30.0, "exact.m4a"),
                ("Long", None, 30.0, 30.5, "long.m4a"),
                ("Longer", None, 40.0, 245.3, "longer.m4a"),
            ])

            recordings = MemoLibrary(db_path=db_path).load_recordings()

            self.assertEqual([r.path for r in recordings], ["long.m4a", "longer.m4a"])
            self.assertEqual(recordings[1].duration_seconds, 245.3)
            self.assertEqual(recordings[1].date_raw, 40.0)

    def test_title_fallbacks(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = f"{tmp}/CloudRecordings.db"
            make_library_db(db_path, [
                ("Band practice", "Label A", 1.0, 60.0, "a.m4a"),
                (b"\xff\xfe\x00\x81", "Label B", 2.0, 60.0, "b.m4a"),
                (None, None, 3.0, 60.0, "c.m4a"),
            ])

            titles = [r.title for r in MemoLibrary(db_path=db_path).load_recordings()]

            self.assertEqual(titles, ["Band practice", "Label B", "Untitled"])

    def test_rows_without_path_or_date_are_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = f"{tmp}/CloudRecordings.db"
            make_library_db(db_path, [
                ("No path", None, 1.0, 60.0, None),
                ("No date", None, None, 60.0, "d.m4a"),
                ("Ok", None, 2.0, 60.0, "ok.m4a"),
            ])

            recordings = MemoLibrary(db_path=db_path).load_recordings()

            self.assertEqual([r.title for r in recordings], ["Ok"])

    def test_empty_library_raises(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = f"{tmp}/CloudRecordings.db"
            make_library_db(db_path, [("Short", None, 1.0, 29.9, "s.m4a")])

            with self.assertRaises(NoEligibleRecordings):
                MemoLibrary(db_path=db_path).load_recordings()

    def test_missing_database(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(DatabaseUnavailable):
                MemoLibrary(db_path=f"{tmp}/missing.db").load_recordings()

            self.assertFalse(Path(f"{tmp}/missing.db").exists())

    def test_corrupt_database(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = Path(tmp) / "CloudRecordings.db"
            db_path.write_bytes(b"definitely not sqlite " * 200)

            with self.assertRaises(DatabaseUnavailable):
                MemoLibrary(db_path=db_path).load_recordings()

    def test_missing_table(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = f"{tmp}/CloudRecordings.db"
            sqlite3.connect(db_path).close()

            with self.assertRaises(DatabaseUnavailable):
                MemoLibrary(db_path=db_path).load_recordings()

    def test_connection_is_read_only(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            db_path = f"{tmp}/CloudRecordings.db"
            make_library_db(db_path, [("Long", None, 1.0, 60.0, "long.m4a")])
            before = Path(db_path).read_bytes()

            conn = MemoLibrary(db_path=db_path)._connect()
            try:
                with self.assertRaises(sqlite3.OperationalError):
                    conn.execute("DELETE FROM ZCLOUDRECORDING")
            finally:
                conn.close()

            self.assertEqual(Path(db_path).read_bytes(), before)

    def test_path_with_spaces(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            folder = Path(tmp) / "Application Support"
            folder.mkdir()
            db_path = folder / "CloudRecordings.db"
            make_library_db(str(db_path), [("Long", None, 1.0, 60.0, "long.m4a")])

            recordings = MemoLibrary(db_path=db_path).load_recordings()

            self.assertEqual(len(recordings), 1)


if __name__ == "__main__":
    unittest.main()
