from typing import Sequence

import numpy as np

from pipeline.errors import NoEligibleRecordings
from selection.models import Selection
from sources.recording import Recording


class ClipSelector:
    def __init__(
        self,
        clip_seconds: float = 30.0,
        rng: np.random.Generator | None = None,
    ):
        self.clip_seconds = float(clip_seconds)
        # default_rng() with no seed pulls fresh entropy from the OS
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose(self, recordings: Sequence[Recording]) -> Selection:
        """
        Uniformly picks one recording, then a uniform start offset so the
        whole clip fits before the end of that recording.
        """
        if len(recordings) == 0:
            raise NoEligibleRecordings("No eligible recordings to choose from")

        recording = recordings[int(self.rng.integers(len(recordings)))]

        max_start = recording.duration_seconds - self.clip_seconds
        if max_start <= 0:
            raise ValueError(
                f"Recording {recording.path!r} is {recording.duration_seconds:.1f}s, "
                f"not longer than the {self.clip_seconds:g}s clip"
            )

        start = float(self.rng.uniform(0.0, max_start))
        start = min(max(start, 0.0), max_start)

        return Selection(
            recording=recording,
            start_seconds=start,
            length_seconds=self.clip_seconds,
        )
