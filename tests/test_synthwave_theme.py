from rich.cells import cell_len

from justdoit.time import naive_datetime
from justdoit.view.themes.base import FILLED_GLYPH
from justdoit.view.themes.synthwave import BACKGROUND, SynthwaveTheme


class TestSynthwaveTheme:
    def test_rows_fill_width(self, hour_window):
        frame = SynthwaveTheme().render(
            hour_window.progress(naive_datetime(2024, 1, 1, 9, 30)), "Focus", 80
        )
        assert len(frame.lines) == 7
        for line in frame.lines:
            assert cell_len(line.plain) == 80

    def test_rows_fill_width_when_complete(self, hour_window):
        frame = SynthwaveTheme().render(hour_window.progress(hour_window.end), None, 72)
        for line in frame.lines:
            assert cell_len(line.plain) == 72

    def test_bar_row(self, hour_window):
        frame = SynthwaveTheme().render(
            hour_window.progress(naive_datetime(2024, 1, 1, 9, 30)), None, 80
        )
        bar_row = frame.plain()[1]
        assert bar_row.startswith("║ 09:00  ")
        assert bar_row.endswith("  10:00 ║")
        # 80 - len("09:00") - len("10:00") - 8 cells of bar, half filled
        assert bar_row.count(FILLED_GLYPH) == 31

    def test_info_row_aligned_under_bar(self, hour_window):
        frame = SynthwaveTheme().render(
            hour_window.progress(naive_datetime(2024, 1, 1, 9, 30)), None, 80
        )
        lines = frame.plain()
        info_row = lines[2]
        assert info_row.index("50%") == lines[1].index(FILLED_GLYPH)
        assert "30 m elapsed | 30 m remaining" in info_row

    def test_messages(self, hour_window):
        active = SynthwaveTheme().render(hour_window.progress(hour_window.start), None, 80)
        complete = SynthwaveTheme().render(hour_window.progress(hour_window.end), None, 80)
        assert "KEEP THE ENERGY FLOWING" in active.plain()[4]
        assert "COMPLETED" in complete.plain()[4]

    def test_title_is_upper_case(self, hour_window):
        frame = SynthwaveTheme().render(hour_window.progress(hour_window.start), "Focus", 80)
        assert frame.plain()[0].startswith("═ FOCUS ═")

    def test_background(self, hour_window):
        frame = SynthwaveTheme().render(hour_window.progress(hour_window.start), None, 80)
        assert frame.background == BACKGROUND
