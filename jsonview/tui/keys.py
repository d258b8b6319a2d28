"""
Key chord handling for the viewer.

The viewer has a single state, listening, and one terminal transition, stop:

    ctrl+c      -> stop
    q           -> stop
    j           -> scroll the viewport down one line
    k           -> scroll the viewport up one line
    anything    -> ignored

``KEYMAP`` is the match table. ``InputLoop`` applies it one chord at a time
and refuses to act once it has stopped.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Protocol

logger = logging.getLogger(__name__)

# Modifier names as they appear in Textual key strings ("ctrl+c")
MODIFIERS = ("ctrl", "alt", "shift", "meta", "super", "hyper")


@dataclass(frozen=True)
class Chord:
    """A single key event: one key plus a set of modifiers.

    Attributes:
        char: The key, e.g. "j" or "c".
        modifiers: Modifier names held down with the key.
    """

    char: str
    modifiers: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def parse(cls, key: str) -> Chord:
        """Build a chord from a Textual key string.

        Examples:
            >>> Chord.parse("ctrl+c")
            Chord(char='c', modifiers=frozenset({'ctrl'}))
            >>> Chord.parse("j")
            Chord(char='j', modifiers=frozenset())
        """
        *mods, char = key.split("+")
        if not char:
            raise ValueError(f"Missing key in {key!r}")
        unknown = [m for m in mods if m not in MODIFIERS]
        if unknown:
            raise ValueError(f"Unknown modifier(s) in key {key!r}: {', '.join(unknown)}")
        return cls(char, frozenset(mods))

    @property
    def key(self) -> str:
        """The chord as a Textual key string."""
        mods = [m for m in MODIFIERS if m in self.modifiers]
        return "+".join([*mods, self.char])


class Action(Enum):
    """What a chord does to the viewer."""

    IGNORE = "ignore"
    SCROLL_DOWN = "scroll_down"
    SCROLL_UP = "scroll_up"
    STOP = "stop"


class LoopState(Enum):
    """State of an ``InputLoop``."""

    LISTENING = "listening"
    STOPPED = "stopped"


KEYMAP: dict[Chord, Action] = {
    Chord("c", frozenset({"ctrl"})): Action.STOP,
    Chord("q"): Action.STOP,
    Chord("j"): Action.SCROLL_DOWN,
    Chord("k"): Action.SCROLL_UP,
}

# Lines moved per scroll action
SCROLL_STEP = 1


def resolve(chord: Chord, keymap: dict[Chord, Action] = KEYMAP) -> Action:
    """Look a chord up in the keymap, ignoring anything not listed."""
    return keymap.get(chord, Action.IGNORE)


class Viewport(Protocol):
    """Something that can be scrolled vertically by whole lines."""

    def scroll_lines(self, delta: int) -> None:
        """Scroll by ``delta`` lines; positive moves towards the end."""
        ...


class InputLoop:
    """Key chord state machine driving a viewport.

    Usage:
        loop = InputLoop(viewport)
        for chord in chords:
            if not loop.feed(chord):
                break

    Attributes:
        state: LISTENING until a stop chord is seen, then STOPPED for good.
    """

    def __init__(self, viewport: Viewport, keymap: dict[Chord, Action] = KEYMAP) -> None:
        self.viewport = viewport
        self.keymap = keymap
        self.state = LoopState.LISTENING

    @property
    def listening(self) -> bool:
        return self.state is LoopState.LISTENING

    def feed(self, chord: Chord) -> bool:
        """Apply one chord.

        Args:
            chord: The key event to handle.

        Returns:
            True while the loop is still listening, False once it has stopped.
        """
        if not self.listening:
            return False

        action = resolve(chord, self.keymap)
        logger.debug("Chord %s -> %s", chord.key, action.value)

        if action is Action.STOP:
            self.state = LoopState.STOPPED
        elif action is Action.SCROLL_DOWN:
            self.viewport.scroll_lines(SCROLL_STEP)
        elif action is Action.SCROLL_UP:
            self.viewport.scroll_lines(-SCROLL_STEP)
        return self.listening

    def run(self, events: Iterable[Chord]) -> None:
        """Consume chords until a stop chord arrives or the events run out.

        Each ``next()`` on the iterator blocks for as long as the event source
        does. Errors raised by the source propagate to the caller.
        """
        for chord in events:
            if not self.feed(chord):
                return
