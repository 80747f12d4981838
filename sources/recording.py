# sources/recording.py
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path

# Core Data reference date (2001-01-01T00:00:00Z) in Unix time
APPLE_EPOCH_OFFSET = 978307200
APPLE_EPOCH = datetime(2001, 1, 1, tzinfo=timezone.utc)

DATE_FORMAT = "%B %d, %Y at %I:%M:%S %p UTC"
DEFAULT_TITLE = "Untitled"


def core_data_to_datetime(raw: float) -> datetime:
    return APPLE_EPOCH + timedelta(seconds=float(raw))


def format_recording_date(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime(DATE_FORMAT)


def decode_title(value: str | bytes | None) -> str | None:
    """
    Best-effort conversion of a title column to text.
    Returns None when the value is missing, blank, or not valid UTF-8.
    """
    if value is None:
        return None

    if isinstance(value, (bytes, bytearray, memoryview)):
        try:
            value = bytes(value).decode("utf-8")
        except UnicodeDecodeError:
            return None

    text = str(value).strip()
    return text or None


def pick_title(encrypted_title: str | bytes | None, custom_label: str | bytes | None) -> str:
    return decode_title(encrypted_title) or decode_title(custom_label) or DEFAULT_TITLE


@dataclass
class Recording:
    title: str               # display title
    date_raw: float          # seconds since 2001-01-01 UTC
    duration_seconds: float  # length of the recording
    path: str                # relative to the recordings directory

    @property
    def recorded_at(self) -> datetime:
        return core_data_to_datetime(self.date_raw)

    @property
    def display_date(self) -> str:
        return format_recording_date(self.recorded_at)

    def resolve(self, recordings_dir: str | Path) -> Path:
        return (Path(recordings_dir) / self.path).resolve()
