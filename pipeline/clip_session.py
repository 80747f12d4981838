from dataclasses import dataclass
from pathlib import Path

from selection.clip_selector import ClipSelector
from selection.models import Selection
from services.launcher import Launcher
from sources.clip_extractor import MediaExtractor
from storage.memo_library import MemoLibrary

RULE = "═" * 51


@dataclass
class ClipResult:
    selection: Selection
    source_path: Path
    clip_path: Path


class ClipSession:
    def __init__(
        self,
        library: MemoLibrary,
        selector: ClipSelector,
        extractor: MediaExtractor,
        launcher: Launcher,
        recordings_dir: str | Path,
    ):
        self.library = library
        self.selector = selector
        self.extractor = extractor
        self.launcher = launcher
        self.recordings_dir = Path(recordings_dir)

    def run(self) -> ClipResult:
        """
        Load → select → extract → launch, once. Any stage error propagates
        and nothing after it runs.
        """
        print("Loading Voice Memos library...\n")
        recordings = self.library.load_recordings()
        print(
            f"Found {len(recordings)} voice memos longer than "
            f"{self.selector.clip_seconds:g} seconds.\n"
        )

        selection = self.selector.choose(recordings)
        self.print_summary(selection)

        source_path = selection.recording.resolve(self.recordings_dir)
        print("Extracting clip...\n")
        clip_path = self.extractor.extract(
            source=source_path,
            start_seconds=selection.start_seconds,
            length_seconds=selection.length_seconds,
            comment=f"Original recording: {selection.recording.display_date}",
        )

        print(f"Clip saved to: {clip_path}")
        print("(The temporary file is kept so you can replay it later.)\n")

        self.launcher.open(clip_path)
        print("Opened clip in the default player.")

        return ClipResult(selection=selection, source_path=source_path, clip_path=clip_path)

    @staticmethod
    def print_summary(selection: Selection) -> None:
        memo = selection.recording
        print(RULE)
        print("  Random Voice Memo Clip")
        print(RULE)
        print(f"Title:    {memo.title}")
        print(f"Date:     {memo.display_date}")
        print(f"Duration: {memo.duration_seconds:.1f} seconds")
        print(
            f"Clip:     {selection.start_seconds:.1f}s - {selection.end_seconds:.1f}s "
            f"({selection.length_seconds:.1f}s)"
        )
        print(RULE + "\n")
