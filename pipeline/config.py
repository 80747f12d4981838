from dataclasses import dataclass
from pathlib import Path
import os
import shlex

CLIP_SECONDS = 30.0

VOICE_MEMOS_DIR = Path.home() / "Library" / "Application Support" / "com.apple.voicememos"
DB_PATH = str(VOICE_MEMOS_DIR / "CloudRecordings.db")
RECORDINGS_DIR = str(VOICE_MEMOS_DIR / "Recordings")

FFMPEG_BIN = "ffmpeg"


@dataclass(frozen=True)
class AppConfig:
    db_path: str = DB_PATH
    recordings_dir: str = RECORDINGS_DIR
    clip_seconds: float = CLIP_SECONDS
    ffmpeg_bin: str = FFMPEG_BIN
    temp_dir: str | None = None
    open_command: tuple[str, ...] | None = None

    @classmethod
    def from_env(cls) -> "AppConfig":
        open_command = os.getenv("MEMOCLIP_OPEN_COMMAND", "").strip()
        return cls(
            db_path=os.getenv("MEMOCLIP_DB_PATH", "").strip() or DB_PATH,
            recordings_dir=os.getenv("MEMOCLIP_RECORDINGS_DIR", "").strip() or RECORDINGS_DIR,
            ffmpeg_bin=os.getenv("MEMOCLIP_FFMPEG", "").strip() or FFMPEG_BIN,
            temp_dir=os.getenv("MEMOCLIP_TEMP_DIR", "").strip() or None,
            open_command=tuple(shlex.split(open_command)) if open_command else None,
        )
