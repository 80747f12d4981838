from pathlib import Path
import sys

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from dotenv import load_dotenv

from pipeline.clip_session import ClipSession
from pipeline.config import AppConfig
from pipeline.errors import LaunchFailed, MemoClipError
from selection.clip_selector import ClipSelector
from services.launcher import SystemLauncher
from sources.clip_extractor import FfmpegClipExtractor
from storage.memo_library import MemoLibrary


def build_session(config: AppConfig) -> ClipSession:
    return ClipSession(
        library=MemoLibrary(db_path=config.db_path, clip_seconds=config.clip_seconds),
        selector=ClipSelector(clip_seconds=config.clip_seconds),
        extractor=FfmpegClipExtractor(ffmpeg_bin=config.ffmpeg_bin, temp_dir=config.temp_dir),
        launcher=SystemLauncher(command=config.open_command),
        recordings_dir=config.recordings_dir,
    )


def main() -> int:
    load_dotenv(ROOT_DIR / ".env")
    config = AppConfig.from_env()

    try:
        build_session(config).run()
    except LaunchFailed as exc:
        print(f"Error (launch): {exc}", file=sys.stderr)
        print(f"Clip: {exc.path}", file=sys.stderr)
        return 1
    except MemoClipError as exc:
        print(f"Error ({exc.stage}): {exc}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
