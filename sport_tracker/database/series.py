"""
Sport Tracker - Series Manager

CRUD operations for the `series` table.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable
from uuid import UUID

import httpx
from postgrest.exceptions import APIError
from supabase import Client

from sport_tracker.database.models import SeriesRecord

logger = logging.getLogger(__name__)


class TransportError(Exception):
    """A request to the backend failed or returned nothing usable."""


class SeriesManager:
    """Manages series records in Supabase."""

    def __init__(
        self,
        client: Client,
        table: str = "series",
        *,
        retries: int = 2,
        retry_delay: float = 0.3,
    ) -> None:
        self.client = client
        self.table = client.table(table)
        self.retries = retries
        self.retry_delay = retry_delay

    def _execute(self, action: str, build: Callable[[], Any]) -> Any:
        """Run a query with simple retry on transient connection errors."""
        for attempt in range(self.retries + 1):
            try:
                return build().execute()
            except (httpx.TransportError, ConnectionError, OSError) as exc:
                if attempt == self.retries:
                    logger.error("%s failed after %d attempts: %s", action, attempt + 1, exc)
                    raise TransportError(f"{action} failed: {exc}") from exc
                logger.warning("%s attempt %d failed, retrying: %s", action, attempt + 1, exc)
                time.sleep(self.retry_delay)
            except (APIError, httpx.HTTPError) as exc:
                logger.error("%s rejected: %s", action, exc)
                raise TransportError(f"{action} failed: {exc}") from exc

    def fetch_all(self) -> list[SeriesRecord]:
        """Get every series, oldest first."""
        data = self._execute(
            "Fetch series",
            lambda: self.table.select("*").order("created_at"),
        )
        return [SeriesRecord.model_validate(row) for row in data.data]

    def get(self, series_id: str | UUID) -> SeriesRecord | None:
        """Get a single series by ID."""
        data = self._execute(
            "Fetch series",
            lambda: self.table.select("*").eq("id", str(series_id)),
        )
        if data.data:
            return SeriesRecord.model_validate(data.data[0])
        return None

    def save(self, record: SeriesRecord) -> SeriesRecord:
        """Insert a new series or update an existing one.

        Returns:
            The stored record, carrying the id assigned on insert
        """
        row = record.to_row()
        if record.id is None:
            data = self._execute("Save series", lambda: self.table.insert(row))
        else:
            data = self._execute(
                "Save series",
                lambda: self.table.update(row).eq("id", str(record.id)),
            )
        if not data.data:
            raise TransportError(f"Save series returned no row for {record.name!r}")
        return SeriesRecord.model_validate(data.data[0])

    def delete(self, series_id: str | UUID) -> None:
        """Delete a series."""
        self._execute(
            "Delete series",
            lambda: self.table.delete().eq("id", str(series_id)),
        )
