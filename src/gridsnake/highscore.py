# highscore.py
import os


class HighScoreError(RuntimeError):
    """Raised when a new high score cannot be written to disk."""


class HighScoreFile:
    """Plain-text file holding the best score as a decimal integer."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> int:
        """Return the stored high score, or 0 if the file is missing or unreadable."""
        if not os.path.exists(self.path):
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return max(0, int(f.read().strip()))
        except ValueError:
            print(f"[HIGHSCORE] Ignoring corrupt file {self.path}, starting from 0")
            return 0
        except OSError as exc:
            print(f"[HIGHSCORE] Could not read {self.path} ({exc}), starting from 0")
            return 0

    def save(self, value: int) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(str(int(value)))
        except OSError as exc:
            raise HighScoreError(f"Could not save high score {value} to {self.path}") from exc
        print(f"[HIGHSCORE] Saved new high score {value} -> {self.path}")
