"""The screen listing the best saved scores."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import pygame

from dashrunner.button import TEXT_COLOR, Button
from dashrunner.gui import calculate_text_size, percent_to_pixels_x, percent_to_pixels_y
from dashrunner.score_timer import SCORE_LINE
from dashrunner.state import FONT_PATH, State, StateData, _load_image, _require_file

SCORES_FILE = "Resources/Scores/Scores.txt"
BACKGROUND_PATH = "Resources/GFX/MainMenu/BG.png"
_TITLE_COLOR = (217, 62, 38, 255)
_PLACES_SHOWN = 10


def read_scores(path: str | Path) -> list[tuple[str, int]]:
    """Read ``name score`` lines; a malformed file is deleted and nothing returned.

    The file's directory is created when missing.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        content = path.read_text()
    except OSError:
        return []

    lines = content.split("\n")
    if lines[-1] == "":
        lines.pop()
    scores = []
    for line in lines:
        match = SCORE_LINE.fullmatch(line)
        if match is None:
            path.unlink()
            return []
        scores.append((match.group(1), int(match.group(2))))
    return scores


@dataclass(frozen=True)
class _Place:
    text: str
    position: tuple[float, float]
    size: int


class LeaderBoardState(State):
    """Shows the top ten entries of the score file and a button to leave."""

    title = "Top 10 Scores"
    scores_file = SCORES_FILE

    def __init__(self, state_data: StateData):
        super().__init__(state_data)
        resolution = self.resolution
        size = self.window.get_size() if self.window is not None else resolution
        self._background_image = _load_image(BACKGROUND_PATH)
        self.background = pygame.transform.scale(self._background_image, size)
        self.font = _require_file(FONT_PATH)

        self.title_position = (percent_to_pixels_x(37.8125, resolution), percent_to_pixels_y(5.0, resolution))
        self.title_size = calculate_text_size(36, resolution)
        self.buttons = {
            "ExitStateButton": Button(
                percent_to_pixels_x(44.8, resolution),
                percent_to_pixels_y(90.0, resolution),
                percent_to_pixels_x(10.4, resolution),
                percent_to_pixels_y(6.94, resolution),
                "Quit",
                self.font,
                calculate_text_size(100, resolution),
            )
        }
        self.scores: list[tuple[str, int]] = []
        self.places: list[_Place] = []
        self.load_from_file()

    def _init_places(self) -> None:
        resolution = self.resolution
        self.places = [
            _Place(
                f"{i + 1}. {name}: {score}",
                (
                    percent_to_pixels_x(39.0, resolution),
                    100.0 + percent_to_pixels_y(30.0 * (i + 1) / 5.0, resolution),
                ),
                calculate_text_size(70 + i * 2, resolution),
            )
            for i, (name, score) in enumerate(self.scores[:_PLACES_SHOWN])
        ]

    def load_from_file(self) -> None:
        """Reload the scores and the lines shown for them."""
        self.scores = read_scores(self.scores_file)
        self._init_places()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Keep the background filling the window when it is resized."""
        if event.type == pygame.VIDEORESIZE:
            self.background = pygame.transform.scale(self._background_image, event.size)

    def update(self, delta_time: float) -> None:
        self.update_input(delta_time)
        self.update_buttons()

    def render(self, surface: pygame.Surface | None = None) -> None:
        target = self._target(surface)
        target.blit(self.background, (0, 0))
        self._draw_text(target, self.title, self.title_size, _TITLE_COLOR, self.title_position)
        for button in self.buttons.values():
            button.render(target)
        for place in self.places:
            self._draw_text(target, place.text, place.size, TEXT_COLOR, place.position)

    def update_input(self, delta_time: float) -> None:
        """Track the pointer; the leaderboard has no keyboard controls."""
        self.update_mouse_positions()

    def update_buttons(self) -> None:
        for button in self.buttons.values():
            button.update(self.mouse_position_window, self.state_data.mouse_left)
        if self.buttons["ExitStateButton"].is_pressed():
            self.end_state()