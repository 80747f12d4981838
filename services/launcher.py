from abc import ABC, abstractmethod
from pathlib import Path
import subprocess
import sys
from typing import Optional, Sequence

from pipeline.errors import LaunchFailed


class Launcher(ABC):
    @abstractmethod
    def open(self, path: Path) -> None:
        """Hand path to an external application."""
        pass


class SystemLauncher(Launcher):
    """
    Opens a file with the platform's default handler: `open` on macOS,
    `start` on Windows, `xdg-open` everywhere else.
    """

    def __init__(
        self,
        command: Optional[Sequence[str]] = None,
        platform: str = sys.platform,
    ):
        self.command = list(command) if command else self.default_command(platform)

    @staticmethod
    def default_command(platform: str) -> list[str]:
        if platform == "darwin":
            return ["open"]
        if platform.startswith("win"):
            return ["cmd", "/c", "start", ""]
        return ["xdg-open"]

    def open(self, path: Path) -> None:
        cmd = [*self.command, str(path)]

        try:
            result = subprocess.run(cmd, capture_output=True, text=True)
        except OSError as exc:
            raise LaunchFailed(str(path), f"Could not run {self.command[0]}: {exc}") from exc

        if result.returncode != 0:
            message = result.stderr.strip() or f"{self.command[0]} failed"
            raise LaunchFailed(
                str(path),
                f"{self.command[0]} exited with status {result.returncode}: {message}",
                returncode=result.returncode,
                stderr=result.stderr,
            )
