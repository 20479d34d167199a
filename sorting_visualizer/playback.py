"""
Cursor over a finished trace.

The trace is fully built before playback starts, so every move here is plain
index arithmetic: forward, backward, jump to either end or to any frame.
Timing belongs to whoever drives the cursor (the web page refreshes itself
every `speed` seconds while autoplay is on).
"""

from __future__ import annotations

from enum import Enum


class PlaybackState(str, Enum):
    PLAYING = "playing"
    PAUSED = "paused"
    STOPPED = "stopped"


DIRECTIONS = ("next", "prev", "first", "last", "toggle_auto")


class Playback:
    def __init__(self, steps, autoplay=False, speed=0.25):
        self.steps = steps
        self.index = 0
        self.autoplay = autoplay
        self.speed = speed  # seconds per step

    def __len__(self):
        return len(self.steps)

    @property
    def current(self):
        if not self.steps:
            return None
        return self.steps[self.index]

    @property
    def finished(self) -> bool:
        return self.index >= len(self.steps) - 1

    @property
    def progress(self) -> float:
        if len(self.steps) <= 1:
            return 100.0 if self.steps else 0.0
        return self.index / (len(self.steps) - 1) * 100

    @property
    def state(self) -> PlaybackState:
        if self.finished:
            return PlaybackState.STOPPED
        return PlaybackState.PLAYING if self.autoplay else PlaybackState.PAUSED

    def goto(self, index):
        self.index = max(0, min(index, len(self.steps) - 1))
        return self.current

    def next(self):
        return self.goto(self.index + 1)

    def prev(self):
        return self.goto(self.index - 1)

    def first(self):
        return self.goto(0)

    def last(self):
        return self.goto(len(self.steps) - 1)

    def toggle_autoplay(self):
        self.autoplay = not self.autoplay
        return self.autoplay

    def apply(self, direction):
        """Apply one of the web player's direction commands."""
        if direction == "toggle_auto":
            self.toggle_autoplay()
        elif direction in DIRECTIONS:
            getattr(self, direction)()
        else:
            raise ValueError(f"Unknown playback direction: {direction!r}")
        return self.current
