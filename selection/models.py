from dataclasses import dataclass

from sources.recording import Recording


@dataclass(frozen=True)
class Selection:
    recording: Recording
    start_seconds: float
    length_seconds: float = 30.0

    @property
    def end_seconds(self) -> float:
        return self.start_seconds + self.length_seconds
