"""The running score and the saved high-score list."""

from __future__ import annotations

import re
from pathlib import Path

SCORE_LINE = re.compile(r"([a-zA-Z]{1,5}) ([0-9]+)")


class ScoreTimer:
    """Adds a point every second while running and keeps the score file."""

    max_timer = 1.0

    def __init__(self, scores_dir: str | Path = "Resources/Scores"):
        self.scores_dir = Path(scores_dir)
        self.score = 0
        self.counting = False
        self.timer = self.max_timer
        self.scores: list[tuple[str, int]] = []

    @property
    def scores_file(self) -> Path:
        return self.scores_dir / "Scores.txt"

    def start(self) -> None:
        self.counting = True

    def stop(self) -> None:
        self.counting = False

    def save_to_file(self, name: str, score: int) -> bool:
        """Add a score and rewrite the file, best first.

        The file is opened for writing before the name is checked, so an
        invalid name leaves it empty and returns False.
        """
        self.scores_dir.mkdir(parents=True, exist_ok=True)
        with self.scores_file.open("w") as out:
            if SCORE_LINE.fullmatch(f"{name} {score}") is None:
                return False
            self.scores.append((name, score))
            self.scores.sort(key=lambda entry: entry[1], reverse=True)
            out.writelines(f"{entry_name} {entry_score}\n" for entry_name, entry_score in self.scores)
        return True

    def load_from_file(self) -> bool:
        """Read saved scores; a malformed file is deleted and False returned."""
        self.scores_dir.mkdir(parents=True, exist_ok=True)
        try:
            content = self.scores_file.read_text()
        except OSError:
            return False

        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        for line in lines:
            match = SCORE_LINE.fullmatch(line)
            if match is None:
                self.scores_file.unlink()
                return False
            self.scores.append((match.group(1), int(match.group(2))))
        return True

    def update(self, delta_time: float) -> None:
        if not self.counting:
            return
        if self.timer <= 0.0:
            self.score += 1
            self.timer = self.max_timer
        else:
            self.timer -= delta_time