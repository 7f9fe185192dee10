"""
Dicer - Console Front-end Tests
"""

import io

import pytest
from dicer.cli import parse_line, render_snapshot, run_console
from dicer.engine.base import TurnPhase
from dicer.engine.dice import DiceSet
from dicer.engine.events import GameAction


class TestParseLine:
    """Tests for parse_line."""

    def test_roll_key(self):
        event = parse_line("r", TurnPhase.TURN_START)
        assert event.action == GameAction.ROLL

    def test_empty_line_is_enter(self):
        assert parse_line("", TurnPhase.ROLL).action == GameAction.CONFIRM
        assert parse_line("\n", TurnPhase.GAME_OVER).action == GameAction.RESTART_GAME

    def test_expression_line(self):
        event = parse_line("( 4 + 2 ) / 6\n", TurnPhase.EXPRESSION)
        assert event.action == GameAction.SUBMIT_EXPRESSION
        assert event.text == "( 4 + 2 ) / 6"

    def test_quit_during_expression(self):
        assert parse_line("q", TurnPhase.EXPRESSION).action == GameAction.QUIT

    def test_unbound_key(self):
        assert parse_line("z", TurnPhase.RESULTS) is None

    def test_no_phase_only_quits(self):
        assert parse_line("r", None) is None
        assert parse_line("q", None).action == GameAction.QUIT


class TestRenderSnapshot:
    """Tests for render_snapshot."""

    def test_turn_start(self, controller):
        text = render_snapshot(controller.snapshot())
        assert "Lives: 3  Turn: 1  Ailments: 1 2 3 4 5 6 7 8 9" in text
        assert "Time to roll!" in text
        assert "[ r ]" in text

    def test_roll_phase_marks_cursor_and_selection(self, controller):
        controller.roll()
        controller.turn.dice = DiceSet.from_values((4, 2, 6))
        controller.move_right()
        controller.toggle_selection()
        text = render_snapshot(controller.snapshot())
        assert "[ 4 ] >*[ 2 ]* [ 6 ]" in text

    def test_debug_line(self, controller, at_expression):
        at_expression(controller, (5, 1, 2))
        controller.submit("5+1+2")
        text = render_snapshot(controller.snapshot())
        assert "! Every character must be separated by a space" in text


class TestRunConsole:
    """Tests for run_console."""

    def test_plays_a_round_then_quits(self, controller):
        lines = iter(["r", "", "q"])
        out = io.StringIO()
        snap = run_console(controller, lambda: next(lines), out)
        assert snap.quit_requested is True
        assert snap.phase is TurnPhase.EXPRESSION
        assert "Thanks for playing!" in out.getvalue()

    def test_end_of_input_quits(self, controller):
        def read_line():
            raise EOFError

        snap = run_console(controller, read_line, io.StringIO())
        assert snap.quit_requested is True

    @pytest.mark.parametrize("line", ["x", "left", "space"])
    def test_unbound_lines_do_nothing(self, controller, line):
        lines = iter([line, "q"])
        snap = run_console(controller, lambda: next(lines), io.StringIO())
        assert snap.phase is TurnPhase.TURN_START
