"""Window and rendering settings stored in a small text file."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


def _unsigned(token: str) -> int:
    value = int(token)
    if value < 0:
        raise ValueError(token)
    return value


def _flag(token: str) -> bool:
    if token not in ("0", "1"):
        raise ValueError(token)
    return token == "1"


_FIELDS = (
    ("width", _unsigned),
    ("height", _unsigned),
    ("fullscreen", _flag),
    ("frame_rate_limit", _unsigned),
    ("vsync", _flag),
    ("antialiasing_level", _unsigned),
)


@dataclass
class GraphicsSettings:
    """Title, resolution and display options for the game window."""

    title: str = "Endless Runner"
    resolution: tuple[int, int] = (1920, 1080)
    fullscreen: bool = True
    frame_rate_limit: int = 0
    vsync: bool = False
    antialiasing_level: int = 0
    video_modes: list[tuple[int, int]] = field(default_factory=list)

    def save_to_file(self, path: str | Path) -> None:
        width, height = self.resolution
        lines = [
            self.title,
            f"{width} {height}",
            str(int(self.fullscreen)),
            str(self.frame_rate_limit),
            str(int(self.vsync)),
            str(self.antialiasing_level),
        ]
        Path(path).write_text("\n".join(lines) + "\n")

    def load_from_file(self, path: str | Path) -> None:
        """Read settings; a missing file leaves them unchanged.

        Values are read in order and reading stops at the first malformed one.
        """
        try:
            content = Path(path).read_text()
        except OSError:
            return

        title, _, rest = content.partition("\n")
        self.title = title.rstrip("\r")

        parsed: dict[str, int | bool] = {}
        tokens = iter(rest.split())
        for name, parse in _FIELDS:
            token = next(tokens, None)
            if token is None:
                break
            try:
                parsed[name] = parse(token)
            except ValueError:
                break

        width, height = self.resolution
        self.resolution = (parsed.get("width", width), parsed.get("height", height))
        self.fullscreen = parsed.get("fullscreen", self.fullscreen)
        self.frame_rate_limit = parsed.get("frame_rate_limit", self.frame_rate_limit)
        self.vsync = parsed.get("vsync", self.vsync)
        self.antialiasing_level = parsed.get("antialiasing_level", self.antialiasing_level)