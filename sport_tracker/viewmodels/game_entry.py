"""
Sport Tracker - Game Entry View Model

Interactive controller that turns pin taps into validated rolls on a Game.

The host renders the pin grid from ``disabled_pins`` and ``selected_pins``,
enables its buttons from the four readiness flags, and sends taps and button
presses back in. Every accepted mutation publishes an EventPayload carrying a
fresh EntrySnapshot; every rejection publishes VALIDATION_FAILED with a toast
and leaves the game untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from sport_tracker.database.series import TransportError
from sport_tracker.engine.base import ALL_PINS, PinSet
from sport_tracker.engine.errors import (
    BowlingError,
    FrameClosed,
    GameComplete,
    InvalidPinSelection,
)
from sport_tracker.engine.game import Game
from sport_tracker.engine.validators import validate_pin_numbers
from sport_tracker.viewmodels.events import EntryEvent, EventPayload, Observable, Toast

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntrySnapshot:
    """
    Point-in-time view of the entry controller.

    Attributes:
        selected_pins: Pins picked for the pending roll
        disabled_pins: Pins not standing, cannot be picked
        selecting_fallen_pins: True if picks mean "fell", False if "left standing"
        add_roll_is_enabled: Add Roll button state
        strike_is_enabled: Strike button state
        spare_is_enabled: Spare button state
        save_game_is_enabled: Save Game button state
        current_frame: Index of the frame being entered, None when complete
        running_totals: Cumulative score per frame, None where unresolved
        marks: Score-sheet symbols per frame
    """
    selected_pins: frozenset[int]
    disabled_pins: frozenset[int]
    selecting_fallen_pins: bool
    add_roll_is_enabled: bool
    strike_is_enabled: bool
    spare_is_enabled: bool
    save_game_is_enabled: bool
    current_frame: int | None
    running_totals: tuple[int | None, ...]
    marks: tuple[tuple[str, ...], ...]


class GameEntryViewModel(Observable):
    """Game entry state machine.

    Args:
        game: Game to continue, a fresh one when omitted
        on_save: Called with the finished game when the user saves it;
            raises TransportError when the game could not be stored
        strict: Re-raise FrameClosed/GameComplete instead of only reporting
            them; these mean the host ignored a readiness flag
    """

    def __init__(
        self,
        game: Game | None = None,
        *,
        on_save: Callable[[Game], None] | None = None,
        strict: bool = False,
    ) -> None:
        super().__init__()
        self._game = game if game is not None else Game()
        self._on_save = on_save
        self._strict = strict
        self._standing = self._resume_rack(self._game)
        self._selected: frozenset[int] = frozenset()
        self.selecting_fallen_pins = True
        self.toast: Toast | None = None

    # -- State -----------------------------------------------------------

    @property
    def game(self) -> Game:
        return self._game

    @property
    def selected_pins(self) -> frozenset[int]:
        return self._selected

    @property
    def standing_pins(self) -> PinSet:
        """Pins standing for the pending roll."""
        return self._standing

    @property
    def disabled_pins(self) -> frozenset[int]:
        return ALL_PINS - self._standing.pins

    # -- Readiness flags -------------------------------------------------

    @property
    def add_roll_is_enabled(self) -> bool:
        """An open frame and a pin decision (an empty pick is a gutter when picking fallen pins)."""
        if self._game.current_frame is None:
            return False
        return self.selecting_fallen_pins or bool(self._selected)

    @property
    def strike_is_enabled(self) -> bool:
        frame = self._game.current_frame
        return frame is not None and frame.can_strike

    @property
    def spare_is_enabled(self) -> bool:
        frame = self._game.current_frame
        return frame is not None and frame.can_spare

    @property
    def save_game_is_enabled(self) -> bool:
        return self._game.is_complete

    def snapshot(self) -> EntrySnapshot:
        frame = self._game.current_frame
        return EntrySnapshot(
            selected_pins=self._selected,
            disabled_pins=self.disabled_pins,
            selecting_fallen_pins=self.selecting_fallen_pins,
            add_roll_is_enabled=self.add_roll_is_enabled,
            strike_is_enabled=self.strike_is_enabled,
            spare_is_enabled=self.spare_is_enabled,
            save_game_is_enabled=self.save_game_is_enabled,
            current_frame=frame.index if frame else None,
            running_totals=tuple(self._game.score()),
            marks=tuple(tuple(f.marks()) for f in self._game.frames),
        )

    # -- Selection -------------------------------------------------------

    def toggle_pin(self, pin: int) -> bool:
        """Select or deselect a pin. Disabled pins are rejected."""
        try:
            validate_pin_numbers((pin,))
            if pin not in self._standing:
                raise InvalidPinSelection(frozenset({pin}))
        except ValueError as exc:
            return self._reject(exc)

        self._selected = self._selected ^ {pin}
        self._publish(EntryEvent.SELECTION_CHANGED)
        return True

    def set_selecting_fallen_pins(self, value: bool) -> None:
        """Switch between picking pins that fell and pins left standing."""
        if value == self.selecting_fallen_pins:
            return
        self.selecting_fallen_pins = value
        self._publish(EntryEvent.SELECTION_CHANGED)

    def clear_selection(self) -> None:
        self._selected = frozenset()
        self._publish(EntryEvent.SELECTION_CHANGED)

    # -- Commands --------------------------------------------------------

    def add_roll(self) -> bool:
        """Commit the current selection as the next roll."""
        if self._game.current_frame is not None and not self.add_roll_is_enabled:
            return self._refuse("Pick the pins left standing before adding the roll.")
        if self.selecting_fallen_pins:
            knocked_down = self._selected
        else:
            knocked_down = self._standing.pins - self._selected
        return self._commit(knocked_down)

    def add_strike(self) -> bool:
        """Knock down the full rack."""
        if not self.strike_is_enabled:
            return self._refuse("A strike is not possible on this roll.")
        return self._commit(self._standing.pins)

    def add_spare(self) -> bool:
        """Knock down every pin left standing after the first roll at this rack."""
        if not self.spare_is_enabled:
            return self._refuse("A spare is not possible on this roll.")
        return self._commit(self._standing.pins)

    def save_game(self) -> bool:
        """Hand the finished game to the save callback."""
        if not self.save_game_is_enabled:
            return self._refuse("Finish all ten frames before saving.")

        if self._on_save is not None:
            try:
                self._on_save(self._game)
            except TransportError as exc:
                logger.error("Saving game failed: %s", exc)
                self.toast = Toast.error(str(exc))
                self._publish(EntryEvent.REQUEST_FAILED)
                return False
        logger.info("Saved game with total %d", self._game.total_score)
        self.toast = Toast.success("Game saved")
        self._publish(EntryEvent.GAME_SAVED)
        return True

    def new_game(self) -> None:
        """Discard the current entry state and start an empty game."""
        self._game = Game()
        self._standing = PinSet.full()
        self._selected = frozenset()
        self.toast = None
        self._publish(EntryEvent.GAME_RESET)

    # -- Internals -------------------------------------------------------

    @staticmethod
    def _resume_rack(game: Game) -> PinSet:
        """Rack for a game picked up mid-frame.

        Records keep pin counts only, so the pins left standing are taken to
        be the highest-numbered ones.
        """
        frame = game.current_frame
        if frame is None or frame.rack_rolls == 0:
            return PinSet.full()
        return PinSet.from_iterable(sorted(ALL_PINS)[-frame.pins_standing:])

    def _commit(self, knocked_down: frozenset[int]) -> bool:
        """Validate and append a roll; nothing changes unless both steps pass."""
        frame = self._game.current_frame
        rack_rolls = frame.rack_rolls if frame else 0
        standing_count = len(self._standing)

        try:
            roll = self._standing.knock_down(knocked_down)
            self._game.append_roll(roll)
        except (FrameClosed, GameComplete) as exc:
            logger.error("Roll rejected on a finished frame or game: %s", exc)
            if self._strict:
                raise
            return self._reject(exc)
        except BowlingError as exc:
            return self._reject(exc)

        if frame.is_closed or frame.rack_rolls == 0:
            self._standing = PinSet.full()
        else:
            self._standing = self._standing.without(knocked_down)
        self._selected = frozenset()
        self.toast = None

        logger.debug("Frame %d: %d pins down", frame.index, roll.knocked_down_pins)

        if rack_rolls == 0 and roll.is_strike:
            event = EntryEvent.STRIKE
        elif rack_rolls == 1 and roll.knocked_down_pins == standing_count:
            event = EntryEvent.SPARE
        else:
            event = EntryEvent.ROLL_ADDED
        self._publish(event, frame=frame.index, pins=roll.knocked_down_pins)

        if frame.is_closed:
            self._publish(EntryEvent.FRAME_CLOSED, frame=frame.index)
        if self._game.is_complete:
            logger.info("Game complete with total %d", self._game.total_score)
            self._publish(EntryEvent.GAME_COMPLETED, total=self._game.total_score)
        return True

    def _reject(self, exc: ValueError) -> bool:
        logger.warning("Rejected input: %s", exc)
        self.toast = Toast.error(str(exc))
        self._publish(EntryEvent.VALIDATION_FAILED, error=type(exc).__name__)
        return False

    def _refuse(self, message: str) -> bool:
        self.toast = Toast.warning(message)
        self._publish(EntryEvent.VALIDATION_FAILED)
        return False

    def _publish(self, event: EntryEvent, **data) -> None:
        self._notify(EventPayload(
            event=event,
            snapshot=self.snapshot(),
            toast=self.toast,
            data=data,
        ))
