import os

import pytest

from src.termsnake.config import UP, DOWN, LEFT, RIGHT
from src.termsnake.controls import DirectionController
from src.termsnake.terminal import cbreak_mode, handle_key, parse_key, parse_keys, poll_key, split_keys


class TestParseKey:
    @pytest.mark.parametrize(
        "raw,key",
        [
            ("\x1b[A", "up"),
            ("\x1b[B", "down"),
            ("\x1b[C", "right"),
            ("\x1b[D", "left"),
            ("\x1bOA", "up"),
            ("q", "quit"),
            ("Q", "quit"),
            ("\x03", "quit"),
            ("\x04", "quit"),
        ],
    )
    def test_known_keys(self, raw, key):
        assert parse_key(raw) == key

    @pytest.mark.parametrize("raw", [None, "", "x", "\x1b", "w"])
    def test_other_input_ignored(self, raw):
        assert parse_key(raw) is None

    def test_quit_in_burst(self):
        assert parse_key("aq") == "quit"

    def test_two_arrows_in_one_read(self):
        """The first of several arrows read together is the key for this tick."""
        assert parse_key("\x1b[A\x1b[C") == "up"
        ctrl = DirectionController(RIGHT)
        handle_key(parse_key("\x1b[A\x1b[C"), ctrl)
        assert ctrl.direction == UP

    def test_held_arrow(self):
        assert parse_key("\x1b[A\x1b[A\x1b[A") == "up"


class TestParseKeys:
    def test_keeps_press_order(self):
        assert parse_keys("\x1b[A\x1b[C") == ["up", "right"]

    def test_repeats_kept(self):
        assert parse_keys("\x1b[D\x1b[D") == ["left", "left"]

    def test_quit_wins_over_arrows(self):
        assert parse_keys("\x1b[A\x1b[Cq") == ["quit"]

    def test_mixed_noise(self):
        assert parse_keys("x\x1bOBz\x1b") == ["down"]

    def test_split_keys(self):
        assert split_keys("\x1b[Aq\x1b") == ["\x1b[A", "q", "\x1b"]
        assert split_keys(None) == []


class TestHandleKey:
    def test_arrow_sets_direction(self):
        ctrl = DirectionController(RIGHT)
        assert handle_key("up", ctrl) is True
        assert ctrl.direction == UP

    def test_reversal_ignored(self):
        ctrl = DirectionController(RIGHT)
        assert handle_key("left", ctrl) is True
        assert ctrl.direction == RIGHT

    def test_quit_stops_loop(self):
        ctrl = DirectionController(RIGHT)
        assert handle_key("quit", ctrl) is False
        assert ctrl.direction == RIGHT

    def test_no_key_keeps_direction(self):
        ctrl = DirectionController(DOWN)
        assert handle_key(None, ctrl) is True
        assert ctrl.direction == DOWN


class TestPollKey:
    def test_times_out_without_input(self):
        r, w = os.pipe()
        with os.fdopen(r) as stream:
            assert poll_key(0.01, stream) is None
        os.close(w)

    def test_reads_pending_input(self):
        r, w = os.pipe()
        os.write(w, b"\x1b[D")
        with os.fdopen(r) as stream:
            assert poll_key(0.01, stream) == "\x1b[D"
        os.close(w)


def test_cbreak_mode_is_noop_without_tty():
    r, w = os.pipe()
    with os.fdopen(r) as stream:
        with cbreak_mode(stream):
            pass
    os.close(w)
