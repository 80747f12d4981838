from abc import ABC, abstractmethod
from pathlib import Path
import os
import subprocess
import tempfile
import uuid

from pipeline.errors import ExtractionFailed, SourceAudioUnreadable


class MediaExtractor(ABC):
    @abstractmethod
    def extract(
        self,
        source: Path,
        start_seconds: float,
        length_seconds: float,
        comment: str,
    ) -> Path:
        """Cut [start, start + length) out of source and return the new file."""
        pass


class FfmpegClipExtractor(MediaExtractor):
    def __init__(self, ffmpeg_bin: str = "ffmpeg", temp_dir: str | None = None):
        self.ffmpeg_bin = ffmpeg_bin
        self.temp_dir = Path(temp_dir or tempfile.gettempdir()).absolute()

    def output_path(self) -> Path:
        return self.temp_dir / f"voice_memo_clip_{os.getpid()}_{uuid.uuid4().hex[:8]}.m4a"

    def build_command(
        self,
        source: Path,
        start_seconds: float,
        length_seconds: float,
        comment: str,
        output_path: Path,
    ) -> list[str]:
        return [
            self.ffmpeg_bin,
            "-loglevel",
            "error",
            "-ss",
            f"{start_seconds:.3f}",
            "-i",
            str(source),
            "-t",
            f"{length_seconds:.1f}",
            "-c",
            "copy",
            "-metadata",
            f"comment={comment}",
            "-n",
            str(output_path),
        ]

    def extract(
        self,
        source: Path,
        start_seconds: float,
        length_seconds: float,
        comment: str,
    ) -> Path:
        src = Path(source)
        if not src.is_file() or not os.access(src, os.R_OK):
            raise SourceAudioUnreadable(str(src))

        self.temp_dir.mkdir(parents=True, exist_ok=True)
        output_path = self.output_path()
        cmd = self.build_command(src, start_seconds, length_seconds, comment, output_path)

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as exc:
            raise ExtractionFailed(f"Could not run {self.ffmpeg_bin}: {exc}") from exc

        if result.returncode != 0:
            self._discard(output_path)
            message = result.stderr.strip() or "ffmpeg failed"
            raise ExtractionFailed(
                f"ffmpeg exited with status {result.returncode}: {message}",
                returncode=result.returncode,
                stderr=result.stderr,
            )

        if not output_path.exists() or output_path.stat().st_size == 0:
            self._discard(output_path)
            raise ExtractionFailed(
                "Extracted clip is missing or empty",
                returncode=result.returncode,
                stderr=result.stderr,
            )

        return output_path

    def _discard(self, path: Path) -> None:
        if path.exists():
            path.unlink()
