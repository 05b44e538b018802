import io
import os
import sys

import pytest
from rich.console import Console
from rich.text import Text

from justdoit.model.timespan import Timespan
from justdoit.terminal.screen import ESCAPE, QUIT_KEYS, FrameWriter, KeyReader
from justdoit.terminal.session import ANIMATION_INTERVAL, run_session
from justdoit.time import naive_datetime
from justdoit.view.frame import Frame
from justdoit.view.themes.default import DefaultTheme
from justdoit.view.themes.hourglass import HourglassTheme
from justdoit.view.themes.retro import ACCOMPLISHED_MESSAGE, RetroTheme


class FakeKeyReader(KeyReader):
    """Replays scripted key presses instead of reading the terminal."""

    def __init__(self, keys=(), interrupt_after=None):
        super().__init__()
        self.keys = list(keys)
        self.interrupt_after = interrupt_after
        self.timeouts = []
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.exited = True

    def wait(self, timeout):
        self.timeouts.append(timeout)
        if self.interrupt_after is not None and len(self.timeouts) >= self.interrupt_after:
            raise KeyboardInterrupt
        return self.keys.pop(0) if self.keys else None


def _console():
    return Console(file=io.StringIO(), width=60, force_terminal=False, color_system=None)


def _clock():
    ticks = iter(range(1000))
    return lambda: float(next(ticks))


def _times(*instants):
    remaining = list(instants)
    return lambda: remaining.pop(0) if len(remaining) > 1 else remaining[0]


@pytest.fixture
def minute_window():
    return Timespan(naive_datetime(2024, 1, 1, 9, 0, 0), naive_datetime(2024, 1, 1, 9, 1, 0))


class TestRunSession:
    def test_runs_until_complete(self, minute_window):
        console = _console()
        keys = FakeKeyReader()
        now = _times(
            naive_datetime(2024, 1, 1, 9, 0, 0),
            naive_datetime(2024, 1, 1, 9, 0, 30),
            naive_datetime(2024, 1, 1, 9, 1, 0),
        )

        progress = run_session(
            minute_window, RetroTheme(), None, 5, console=console, key_reader=keys, clock=_clock(), now=now
        )

        assert progress is not None
        assert progress.is_complete()
        assert keys.entered and keys.exited
        assert len(keys.timeouts) == 2
        assert ACCOMPLISHED_MESSAGE in console.file.getvalue()

    def test_quit_key_stops(self, minute_window):
        console = _console()
        keys = FakeKeyReader(keys=["q"])

        progress = run_session(
            minute_window,
            DefaultTheme(),
            "Focus",
            5,
            console=console,
            key_reader=keys,
            clock=_clock(),
            now=lambda: naive_datetime(2024, 1, 1, 9, 0, 15),
        )

        assert progress is not None
        assert not progress.is_complete()
        assert progress.percent == 25
        assert keys.timeouts == [5.0]
        assert "Focus" in console.file.getvalue()

    def test_other_keys_ignored(self, minute_window):
        keys = FakeKeyReader(keys=["x", " ", "Q"])

        run_session(
            minute_window,
            DefaultTheme(),
            None,
            5,
            console=_console(),
            key_reader=keys,
            clock=_clock(),
            now=lambda: naive_datetime(2024, 1, 1, 9, 0, 15),
        )

        assert len(keys.timeouts) == 3

    def test_ctrl_c_stops(self, minute_window):
        console = _console()
        keys = FakeKeyReader(interrupt_after=1)

        progress = run_session(
            minute_window,
            DefaultTheme(),
            None,
            5,
            console=console,
            key_reader=keys,
            clock=_clock(),
            now=lambda: naive_datetime(2024, 1, 1, 9, 0, 30),
        )

        assert progress is not None
        assert progress.percent == 50
        assert keys.exited
        assert "remaining" in console.file.getvalue()

    def test_animated_theme_redraws_faster(self, minute_window):
        keys = FakeKeyReader(keys=[None, "q"])

        run_session(
            minute_window,
            HourglassTheme(),
            None,
            5,
            console=_console(),
            key_reader=keys,
            clock=_clock(),
            now=lambda: naive_datetime(2024, 1, 1, 9, 0, 0),
        )

        assert keys.timeouts == [ANIMATION_INTERVAL, ANIMATION_INTERVAL]

    def test_wait_stops_at_window_end(self, minute_window):
        keys = FakeKeyReader(keys=["q"])

        run_session(
            minute_window,
            DefaultTheme(),
            None,
            30,
            console=_console(),
            key_reader=keys,
            clock=_clock(),
            now=lambda: naive_datetime(2024, 1, 1, 9, 0, 50),
        )

        assert keys.timeouts == [10.0]

    def test_already_complete(self, minute_window):
        keys = FakeKeyReader()

        progress = run_session(
            minute_window,
            DefaultTheme(),
            None,
            5,
            console=_console(),
            key_reader=keys,
            clock=_clock(),
            now=lambda: naive_datetime(2024, 1, 2),
        )

        assert progress.is_complete()
        assert keys.timeouts == []


class TestQuitKeys:
    @pytest.mark.parametrize("key", ["q", "Q", "\x1b"])
    def test_quit(self, key):
        assert key in QUIT_KEYS

    @pytest.mark.parametrize("key", ["x", " ", "\n", "\x03"])
    def test_not_quit(self, key):
        assert key not in QUIT_KEYS


class TestKeyReader:
    def test_non_terminal_stream_only_sleeps(self):
        with KeyReader(io.StringIO("q")) as keys:
            assert not keys.is_interactive()
            assert keys.wait(0) is None


class TestFrameWriter:
    def test_draws_every_line(self):
        console = _console()
        writer = FrameWriter(console)

        writer.draw(Frame([Text("first"), Text("second")]))

        output = console.file.getvalue()
        assert "first" in output
        assert "second" in output

    def test_print_final(self):
        console = _console()
        FrameWriter(console).print_final(Frame([Text("done")]))
        assert console.file.getvalue() == "done\n"


@pytest.mark.skipif(sys.platform == "win32", reason="needs a POSIX terminal")
class TestKeyReaderOnTerminal:
    """Drives the cbreak reader through a pseudo-terminal."""

    @pytest.fixture
    def terminal(self):
        import pty

        master, slave = pty.openpty()
        stream = os.fdopen(slave, "r")
        yield master, stream
        stream.close()
        os.close(master)

    def test_reads_single_key(self, terminal):
        master, stream = terminal
        with KeyReader(stream) as keys:
            assert keys.is_interactive()
            os.write(master, b"q")
            assert keys.wait(1.0) == "q"

    def test_times_out_without_input(self, terminal):
        _, stream = terminal
        with KeyReader(stream) as keys:
            assert keys.wait(0.01) is None

    def test_lone_escape_quits(self, terminal):
        master, stream = terminal
        with KeyReader(stream) as keys:
            os.write(master, b"\x1b")
            key = keys.wait(1.0)
        assert key == ESCAPE
        assert key in QUIT_KEYS

    @pytest.mark.parametrize(
        "sequence",
        [b"\x1b[A", b"\x1b[1;5C", b"\x1bOP", b"\x1b[15~", b"\x1b[<0;12;5M"],
    )
    def test_escape_sequences_are_discarded(self, terminal, sequence):
        master, stream = terminal
        with KeyReader(stream) as keys:
            os.write(master, sequence)
            assert keys.wait(1.0) is None
            # Nothing of the sequence is left behind
            assert keys.wait(0.01) is None
            os.write(master, b"x")
            assert keys.wait(1.0) == "x"

    def test_terminal_mode_restored(self, terminal):
        import termios

        _, stream = terminal
        before = termios.tcgetattr(stream.fileno())
        with KeyReader(stream):
            assert termios.tcgetattr(stream.fileno()) != before
        assert termios.tcgetattr(stream.fileno()) == before
