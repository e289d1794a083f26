"""
Sport Tracker - Series List View Model

Loads, saves and deletes series through the SeriesManager.

Each command submits one request to a background executor and returns its
Future. The submitted task performs the call and, once it settles, applies
the outcome to the published state and notifies observers, so a host that
waits on the Future always sees the applied state afterwards.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from enum import Enum

from sport_tracker.database.models import SeriesRecord
from sport_tracker.database.series import SeriesManager, TransportError
from sport_tracker.engine.base import SeriesTag
from sport_tracker.engine.game import Game
from sport_tracker.engine.series import Series
from sport_tracker.viewmodels.events import EntryEvent, EventPayload, Observable, Toast

logger = logging.getLogger(__name__)


class SeriesContentState(Enum):
    """What the series list currently shows."""

    LOADING = "loading"
    EMPTY = "empty"
    CONTENT = "content"


class SeriesListViewModel(Observable):
    """Coordinates series persistence with the list shown to the user."""

    def __init__(self, manager: SeriesManager, executor: Executor | None = None) -> None:
        super().__init__()
        self._manager = manager
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="series-sync"
        )
        self._lock = threading.Lock()
        self.state = SeriesContentState.LOADING
        self.series: list[Series] = []
        self.toast: Toast | None = None

    # -- Commands --------------------------------------------------------

    def load(self) -> Future:
        """Fetch every series from the backend."""
        with self._lock:
            self.state = SeriesContentState.LOADING
        return self._executor.submit(self._load)

    def save(self, series: Series) -> Future:
        """Store a series, then reload the list."""
        return self._executor.submit(self._save, series)

    def add_series(self, name: str, tag: SeriesTag = SeriesTag.PRACTICE) -> Future:
        """Create and store an empty series."""
        return self._executor.submit(self._add_series, name, tag)

    def add_game(self, series: Series, game: Game) -> Future:
        """Append a finished game to a series and store it.

        The game is taken back out of the series if the save fails.
        """
        return self._executor.submit(self._add_game, series, game)

    def delete_series(self, series: Series) -> Future | None:
        """Delete a stored series. Series never saved have nothing to delete."""
        if series.id is None:
            return None
        return self._executor.submit(self._delete, series.id)

    def shutdown(self) -> None:
        """Wait for pending requests and stop the worker we created."""
        if self._owns_executor:
            self._executor.shutdown(wait=True)

    # -- Tasks -----------------------------------------------------------

    def _load(self) -> bool:
        try:
            records = self._manager.fetch_all()
        except TransportError as exc:
            return self._fail(exc)

        loaded: list[Series] = []
        for record in records:
            try:
                loaded.append(record.to_series())
            except ValueError:
                logger.exception("Skipping unreadable series %s", record.id)

        with self._lock:
            self.series = loaded
            self.state = SeriesContentState.CONTENT if loaded else SeriesContentState.EMPTY
        logger.info("Loaded %d series", len(loaded))
        self._notify(EventPayload(event=EntryEvent.SERIES_LOADED, data={"count": len(loaded)}))
        return True

    def _save(self, series: Series) -> bool:
        if not self._store(series):
            return False
        return self._load()

    def _store(self, series: Series) -> bool:
        try:
            stored = self._manager.save(SeriesRecord.from_series(series))
        except TransportError as exc:
            return self._fail(exc)

        series.id = str(stored.id)
        with self._lock:
            self.toast = Toast.success("Series saved")
        self._notify(EventPayload(
            event=EntryEvent.SERIES_SAVED,
            toast=self.toast,
            data={"id": series.id},
        ))
        return True

    def _add_game(self, series: Series, game: Game) -> bool:
        series.add_game(game)
        if not self._store(series):
            series.remove_game(game)
            return False
        self._load()
        return True

    def _add_series(self, name: str, tag: SeriesTag) -> bool:
        try:
            series = Series(name=name, tag=tag)
        except ValueError as exc:
            with self._lock:
                self.toast = Toast.error(str(exc))
            self._notify(EventPayload(event=EntryEvent.VALIDATION_FAILED, toast=self.toast))
            return False
        return self._save(series)

    def _delete(self, series_id: str) -> bool:
        try:
            self._manager.delete(series_id)
        except TransportError as exc:
            return self._fail(exc)

        self._notify(EventPayload(event=EntryEvent.SERIES_DELETED, data={"id": series_id}))
        return self._load()

    def _fail(self, exc: TransportError) -> bool:
        with self._lock:
            self.toast = Toast.error(str(exc))
            if self.state is SeriesContentState.LOADING:
                self.state = (
                    SeriesContentState.CONTENT if self.series else SeriesContentState.EMPTY
                )
        self._notify(EventPayload(event=EntryEvent.REQUEST_FAILED, toast=self.toast))
        return False
