"""
Dicer - Turn State Machine

A Turn owns its dice and a phase stack loaded in reverse execution order.
The TurnController owns the Player and the current Turn, accepts one action
at a time, and routes it through a (phase, action) dispatch table.

Round flow:
    TURN_START --roll--> ROLL --confirm--> EXPRESSION --submit--> RESULTS
    RESULTS --continue--> next Turn's TURN_START, or GAME_OVER
    GAME_OVER --restart--> round 1 with a fresh Player
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable

from dicer.config.settings import Settings, get_settings
from dicer.engine.base import ExpressionError, PhaseStackError, TurnPhase
from dicer.engine.dice import DiceSet
from dicer.engine.events import ActionEvent, GameAction
from dicer.engine.expression import evaluate_expression
from dicer.engine.player import Player
from dicer.engine.stack import PhaseStack
from dicer.engine.validators import ValidationResult, validate_expression

logger = logging.getLogger(__name__)

# Pushed bottom-first so TURN_START ends up on top
_TURN_PHASE_ORDER = (
    TurnPhase.RESULTS,
    TurnPhase.EXPRESSION,
    TurnPhase.ROLL,
    TurnPhase.TURN_START,
)


@dataclass
class Turn:
    """
    State of a single round.

    Attributes:
        round: 1-based round number
        dice: The dice rolled this round
        stack: Remaining phases, current phase on top
        expression: Last submitted expression text
        result: Value of the last accepted expression
        removed_ailment: The result cleared an ailment
        lost_life: The result missed and cost a life
        attempts: Number of submissions this round, accepted or not
    """
    round: int
    dice: DiceSet
    stack: PhaseStack
    expression: str = ""
    result: int | None = None
    removed_ailment: bool = False
    lost_life: bool = False
    attempts: int = 0

    @classmethod
    def create(
        cls,
        round_number: int,
        num_dice: int,
        stack_capacity: int,
        rng: random.Random | None = None,
    ) -> Turn:
        stack = PhaseStack(capacity=stack_capacity)
        for phase in _TURN_PHASE_ORDER:
            stack.push(phase)
        return cls(round=round_number, dice=DiceSet(num_dice, rng=rng), stack=stack)

    def apply_result(self, player: Player) -> None:
        """Clear the matching ailment, or take a life if there is none."""
        if self.result is not None and player.ailments.is_active(self.result):
            player.ailments.remove(self.result)
            self.removed_ailment = True
        else:
            player.remove_life()
            self.lost_life = True


@dataclass(frozen=True)
class GameSnapshot:
    """Read-only view of the game for renderers."""
    phase: TurnPhase | None
    round_number: int
    lives: int
    max_lives: int
    dice: tuple[int, ...]
    selected: frozenset[int]
    cursor: int
    ailments: tuple[tuple[int, bool], ...]
    expression: str
    result: int | None
    removed_ailment: bool
    lost_life: bool
    attempts: int
    message: str
    instructions: str
    debug: str
    is_game_over: bool
    quit_requested: bool = False
    active_ailments: tuple[int, ...] = field(default_factory=tuple)


class TurnController:
    """
    Single owner of all mutable game state.

    Front-ends call ``dispatch`` (or one of the named shortcuts) once per
    user action and render ``snapshot()`` afterwards. Actions that do not
    apply to the current phase are ignored.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._rng = rng
        self.width = 80
        self.height = 24
        self.quit_requested = False
        self._new_game()

    # -- state ----------------------------------------------------------

    def _new_game(self) -> None:
        self.player = Player(self.settings.max_lives, self.settings.num_ailments)
        self._start_turn(1)
        logger.info(
            "New game: %d lives, %d ailments, %d dice",
            self.settings.max_lives,
            self.settings.num_ailments,
            self.settings.num_dice,
        )

    def _start_turn(self, round_number: int) -> None:
        self.turn = Turn.create(
            round_number,
            self.settings.num_dice,
            self.settings.phase_stack_capacity,
            rng=self._rng,
        )
        self.selected: set[int] = set()
        self.cursor = 0
        self.debug = ""
        self._refresh_prompt()

    @property
    def phase(self) -> TurnPhase:
        """Current phase. Raises StackEmptyError if the stack is exhausted."""
        return self.turn.stack.top()

    @property
    def is_game_over(self) -> bool:
        return not self.player.ailments.has_any() or not self.player.has_lives()

    @property
    def has_won(self) -> bool:
        return not self.player.ailments.has_any() and self.player.has_lives()

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    # -- dispatch -------------------------------------------------------

    def dispatch(self, event: ActionEvent | GameAction) -> GameSnapshot:
        """Process one action to completion and return the new snapshot."""
        if isinstance(event, GameAction):
            event = ActionEvent(event)

        if event.action is GameAction.QUIT:
            self.quit_requested = True
            return self.snapshot()

        try:
            phase = self.phase
            handler = _ACTION_HANDLERS.get(phase, {}).get(event.action)
            if handler is None:
                logger.debug("Ignoring %s during %s", event.action.name, phase.name)
                return self.snapshot()
            handler(self, event)
            self._refresh_prompt()
        except PhaseStackError:
            logger.exception("Phase stack misuse in round %d; quitting", self.turn.round)
            self.quit_requested = True

        return self.snapshot()

    def roll(self) -> GameSnapshot:
        return self.dispatch(GameAction.ROLL)

    def move_left(self) -> GameSnapshot:
        return self.dispatch(GameAction.MOVE_LEFT)

    def move_right(self) -> GameSnapshot:
        return self.dispatch(GameAction.MOVE_RIGHT)

    def toggle_selection(self) -> GameSnapshot:
        return self.dispatch(GameAction.TOGGLE_SELECTION)

    def confirm(self) -> GameSnapshot:
        return self.dispatch(GameAction.CONFIRM)

    def submit(self, text: str) -> GameSnapshot:
        return self.dispatch(ActionEvent(GameAction.SUBMIT_EXPRESSION, text))

    def continue_round(self) -> GameSnapshot:
        return self.dispatch(GameAction.CONTINUE_ROUND)

    def restart_game(self) -> GameSnapshot:
        return self.dispatch(GameAction.RESTART_GAME)

    def quit(self) -> GameSnapshot:
        return self.dispatch(GameAction.QUIT)

    # -- transitions ----------------------------------------------------

    def _roll_dice(self, event: ActionEvent) -> None:
        self.turn.stack.pop()
        values = self.turn.dice.roll_all()
        logger.debug("Round %d rolled %s", self.turn.round, values)

    def _move_cursor(self, event: ActionEvent) -> None:
        step = -1 if event.action is GameAction.MOVE_LEFT else 1
        self.cursor = min(max(self.cursor + step, 0), len(self.turn.dice) - 1)

    def _toggle_selection(self, event: ActionEvent) -> None:
        if self.cursor in self.selected:
            self.selected.discard(self.cursor)
        else:
            self.selected.add(self.cursor)

    def _confirm_rerolls(self, event: ActionEvent) -> None:
        values = self.turn.dice.reroll_selected(self.selected)
        logger.debug("Round %d rerolled %s -> %s", self.turn.round, sorted(self.selected), values)
        self.turn.stack.pop()

    def _submit_expression(self, event: ActionEvent) -> None:
        turn = self.turn
        turn.expression = event.text
        turn.attempts += 1

        value = None
        check = validate_expression(event.text, turn.dice.values)
        if check:
            try:
                value = evaluate_expression(event.text)
            except ExpressionError as exc:
                check = ValidationResult(False, str(exc))

        if not check:
            # Stay in EXPRESSION so the player can try again
            self.debug = check.reason
            logger.info("Rejected expression %r: %s", event.text, check.reason)
            return

        self.debug = ""
        turn.result = value
        turn.apply_result(self.player)
        logger.info(
            "Round %d: %r = %d (%s)",
            turn.round,
            event.text,
            value,
            "hit" if turn.removed_ailment else "miss",
        )
        turn.stack.pop()

    def _end_turn(self, event: ActionEvent) -> None:
        if self.is_game_over:
            logger.info(
                "Game over after round %d: %s",
                self.turn.round,
                "win" if self.has_won else "loss",
            )
            self.turn.stack.push(TurnPhase.GAME_OVER)
            return
        self._start_turn(self.turn.round + 1)

    def _restart(self, event: ActionEvent) -> None:
        self._new_game()

    # -- presentation ---------------------------------------------------

    def _refresh_prompt(self) -> None:
        phase = self.turn.stack.top() if not self.turn.stack.is_empty() else None
        prompt = _PROMPTS.get(phase)
        if prompt is None:
            self.message, self.instructions = "", ""
            return
        self.message, self.instructions = prompt(self)

    def snapshot(self) -> GameSnapshot:
        stack = self.turn.stack
        phase = None if stack.is_empty() else stack.top()
        return GameSnapshot(
            phase=phase,
            round_number=self.turn.round,
            lives=self.player.lives,
            max_lives=self.player.max_lives,
            dice=self.turn.dice.values,
            selected=frozenset(self.selected),
            cursor=self.cursor,
            ailments=self.player.ailments.status(),
            active_ailments=self.player.ailments.active_numbers(),
            expression=self.turn.expression,
            result=self.turn.result,
            removed_ailment=self.turn.removed_ailment,
            lost_life=self.turn.lost_life,
            attempts=self.turn.attempts,
            message=self.message,
            instructions=self.instructions,
            debug=self.debug,
            is_game_over=phase is TurnPhase.GAME_OVER,
            quit_requested=self.quit_requested,
        )


# =============================================================================
# DISPATCH TABLES
# =============================================================================

_Handler = Callable[[TurnController, ActionEvent], None]

_ACTION_HANDLERS: dict[TurnPhase, dict[GameAction, _Handler]] = {
    TurnPhase.TURN_START: {
        GameAction.ROLL: TurnController._roll_dice,
    },
    TurnPhase.ROLL: {
        GameAction.MOVE_LEFT: TurnController._move_cursor,
        GameAction.MOVE_RIGHT: TurnController._move_cursor,
        GameAction.TOGGLE_SELECTION: TurnController._toggle_selection,
        GameAction.CONFIRM: TurnController._confirm_rerolls,
    },
    TurnPhase.EXPRESSION: {
        GameAction.SUBMIT_EXPRESSION: TurnController._submit_expression,
    },
    TurnPhase.RESULTS: {
        GameAction.CONTINUE_ROUND: TurnController._end_turn,
    },
    TurnPhase.GAME_OVER: {
        GameAction.RESTART_GAME: TurnController._restart,
    },
}


def _turn_start_prompt(controller: TurnController) -> tuple[str, str]:
    return "Time to roll!", "Press [ r ] to roll the dice"


def _roll_prompt(controller: TurnController) -> tuple[str, str]:
    return (
        "Select which dice to re-roll.",
        "[ left ] [ right ] to navigate [ space ] to toggle [ enter ] to submit",
    )


def _expression_prompt(controller: TurnController) -> tuple[str, str]:
    return (
        "Type your expression! Ensure there is a space between each character. "
        "Valid operators include ( ) * / + -",
        "[ enter ] to submit",
    )


def _results_prompt(controller: TurnController) -> tuple[str, str]:
    turn = controller.turn
    lines = [f"You entered {turn.expression} which evaluates to {turn.result}."]
    if turn.lost_life:
        lines.append(f"You lost a life! {controller.player.lives} lives remaining.")
    elif turn.removed_ailment:
        lines.append(f"Hit! You removed {turn.result}.")
    return "\n".join(lines), "[ space ] to continue"


def _game_over_prompt(controller: TurnController) -> tuple[str, str]:
    message = "You win! How good." if controller.has_won else "You lose! Bummer."
    return message, "[ enter ] to restart the game"


_PROMPTS: dict[TurnPhase | None, Callable[[TurnController], tuple[str, str]]] = {
    TurnPhase.TURN_START: _turn_start_prompt,
    TurnPhase.ROLL: _roll_prompt,
    TurnPhase.EXPRESSION: _expression_prompt,
    TurnPhase.RESULTS: _results_prompt,
    TurnPhase.GAME_OVER: _game_over_prompt,
}
