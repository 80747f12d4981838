class MemoClipError(Exception):
    stage = "run"


class DatabaseUnavailable(MemoClipError):
    stage = "load"


class NoEligibleRecordings(MemoClipError):
    stage = "load"


class ExtractionFailed(MemoClipError):
    stage = "extract"

    def __init__(self, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class SourceAudioUnreadable(ExtractionFailed):
    def __init__(self, path: str):
        super().__init__(
            f"Recording file not found or unreadable at {path}. "
            "The recording may be in iCloud and not downloaded locally."
        )
        self.path = path


class LaunchFailed(MemoClipError):
    stage = "launch"

    def __init__(self, path: str, message: str, returncode: int | None = None, stderr: str = ""):
        super().__init__(f"{message}. The clip was kept at {path}; open it manually.")
        self.path = path
        self.returncode = returncode
        self.stderr = stderr
