"""Tests for key chord handling in jsonview/tui/keys.py."""

from __future__ import annotations

import pytest

from jsonview.tui.keys import KEYMAP, Action, Chord, InputLoop, LoopState, resolve

J = Chord.parse("j")
K = Chord.parse("k")
Q = Chord.parse("q")
CTRL_C = Chord.parse("ctrl+c")


class RecordingViewport:
    """Viewport that records every scroll request."""

    def __init__(self) -> None:
        self.deltas: list[int] = []

    def scroll_lines(self, delta: int) -> None:
        self.deltas.append(delta)


@pytest.fixture
def viewport() -> RecordingViewport:
    return RecordingViewport()


class TestChord:
    """Tests for Chord parsing."""

    def test_parse_plain_key(self):
        assert Chord.parse("j") == Chord("j")
        assert Chord.parse("j").modifiers == frozenset()

    def test_parse_control_chord(self):
        assert Chord.parse("ctrl+c") == Chord("c", frozenset({"ctrl"}))

    def test_key_round_trip(self):
        assert Chord.parse("ctrl+c").key == "ctrl+c"
        assert Chord("x", frozenset({"shift", "ctrl"})).key == "ctrl+shift+x"

    def test_unknown_modifier(self):
        with pytest.raises(ValueError, match="Unknown modifier"):
            Chord.parse("hyperdrive+c")

    def test_missing_key(self):
        with pytest.raises(ValueError):
            Chord.parse("ctrl+")


class TestResolve:
    """Tests for the keymap lookup."""

    @pytest.mark.parametrize(
        "key, action",
        [
            ("ctrl+c", Action.STOP),
            ("q", Action.STOP),
            ("j", Action.SCROLL_DOWN),
            ("k", Action.SCROLL_UP),
        ],
    )
    def test_mapped_chords(self, key, action):
        assert resolve(Chord.parse(key)) is action

    @pytest.mark.parametrize("key", ["c", "ctrl+q", "ctrl+j", "J", "Q", "x", "down", "escape"])
    def test_other_chords_are_ignored(self, key):
        """Only the exact chord matches; modifiers and case matter."""
        assert resolve(Chord.parse(key)) is Action.IGNORE

    def test_keymap_has_four_chords(self):
        assert len(KEYMAP) == 4


class TestInputLoopFeed:
    """Tests for InputLoop.feed()."""

    def test_starts_listening(self, viewport):
        loop = InputLoop(viewport)
        assert loop.state is LoopState.LISTENING
        assert loop.listening

    def test_scroll_sequence_then_quit(self, viewport):
        """j, j, k, q: two downs, one up, then stop."""
        loop = InputLoop(viewport)
        results = [loop.feed(chord) for chord in (J, J, K, Q)]
        assert results == [True, True, True, False]
        assert viewport.deltas == [1, 1, -1]
        assert loop.state is LoopState.STOPPED

    def test_no_action_after_stop(self, viewport):
        loop = InputLoop(viewport)
        loop.feed(Q)
        assert loop.feed(J) is False
        assert loop.feed(K) is False
        assert viewport.deltas == []

    def test_ctrl_c_stops(self, viewport):
        loop = InputLoop(viewport)
        loop.feed(J)
        assert loop.feed(CTRL_C) is False
        assert viewport.deltas == [1]

    def test_ignored_chords_keep_listening(self, viewport):
        loop = InputLoop(viewport)
        assert loop.feed(Chord.parse("x")) is True
        assert loop.feed(Chord.parse("ctrl+j")) is True
        assert viewport.deltas == []
        assert loop.listening

    def test_custom_keymap(self, viewport):
        keymap = {Chord.parse("down"): Action.SCROLL_DOWN, Chord.parse("escape"): Action.STOP}
        loop = InputLoop(viewport, keymap)
        loop.feed(Chord.parse("down"))
        loop.feed(J)
        assert viewport.deltas == [1]
        assert loop.feed(Chord.parse("escape")) is False


class TestInputLoopRun:
    """Tests for InputLoop.run() over an event source."""

    def test_run_stops_at_quit(self, viewport):
        loop = InputLoop(viewport)
        loop.run([J, J, K, Q])
        assert viewport.deltas == [1, 1, -1]
        assert loop.state is LoopState.STOPPED

    def test_ctrl_c_stops_before_queued_chords(self, viewport):
        """Chords after ctrl+c are never read."""
        events = iter([J, CTRL_C, J, J])
        loop = InputLoop(viewport)
        loop.run(events)
        assert viewport.deltas == [1]
        assert list(events) == [J, J]

    def test_run_ends_when_events_run_out(self, viewport):
        loop = InputLoop(viewport)
        loop.run([J])
        assert loop.listening

    def test_event_source_error_propagates(self, viewport):
        def events():
            yield J
            raise OSError("terminal read failed")

        loop = InputLoop(viewport)
        with pytest.raises(OSError, match="terminal read failed"):
            loop.run(events())
        assert viewport.deltas == [1]
