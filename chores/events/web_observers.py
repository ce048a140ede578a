"""Web-facing observers for household change events.

An EventLog subscribes to one event bus for every household event and keeps a
small in-memory ring buffer of recent changes that the web layer (FastAPI
endpoint) exposes so clients can refresh without reloading everything.
Each app keeps its own EventLog on its own bus.

Design:
  * Each event is stored with an auto-increment integer id (cursor) so clients
    can request only newer events (since=<last_id_seen>).
  * A Lock guards the buffer; uvicorn may serve requests from several threads.
  * max_events caps memory use.
"""
from __future__ import annotations
from typing import List, Dict, Any, Optional
from threading import Lock
from datetime import datetime
import logging

from .Event_Bus import EventBus, HOUSEHOLD_EVENTS

logger = logging.getLogger(__name__)

MAX_EVENTS = 300


class EventLog:
    def __init__(self, max_events: int = MAX_EVENTS):
        self.max_events = max_events
        self._lock = Lock()
        self._events: List[Dict[str, Any]] = []
        self._next_id = 1
        self._bus: Optional[EventBus] = None

    def record(self, event_name: str, payload: Any):  # signature expected by EventBus
        evt = {
            'type': event_name,
            'ts': datetime.now().isoformat(timespec='seconds'),
        }
        if isinstance(payload, dict):
            for key in ('chore', 'member', 'template'):
                rec = payload.get(key)
                if rec is not None and hasattr(rec, 'id'):
                    evt[f'{key}_id'] = rec.id
                    evt['name'] = getattr(rec, 'title', None) or getattr(rec, 'name', '')
            for k in ('scope', 'removed', 'removed_chores', 'created', 'week_number'):
                if k in payload:
                    evt[k] = payload[k]
        with self._lock:
            evt['id'] = self._next_id
            self._next_id += 1
            self._events.append(evt)
            if len(self._events) > self.max_events:
                del self._events[: len(self._events) - self.max_events]

    def attach(self, bus: EventBus) -> "EventLog":
        """Subscribe to bus (idempotent); a log listens to one bus at a time."""
        if self._bus is bus:
            return self
        self.detach()
        bus.subscribe_many(HOUSEHOLD_EVENTS, self.record)
        self._bus = bus
        logger.debug("Event log subscribed to %d household events", len(HOUSEHOLD_EVENTS))
        return self

    def detach(self):
        if self._bus is None:
            return
        for name in HOUSEHOLD_EVENTS:
            self._bus.unsubscribe(name, self.record)
        self._bus = None

    def clear(self):
        """Drop buffered events (the cursor keeps counting)."""
        with self._lock:
            self._events.clear()

    def get_events(self, since: Optional[int] = None) -> Dict[str, Any]:
        """Return events newer than 'since' (exclusive).

        If since is None, returns the whole buffer.
        Response includes next_cursor (largest id) so client can poll with since=next_cursor.
        """
        with self._lock:
            if since is None:
                data = list(self._events)
            else:
                data = [e for e in self._events if e['id'] > since]
            next_cursor = self._events[-1]['id'] if self._events else since or 0
        return {'events': data, 'next_cursor': next_cursor}


__all__ = ['EventLog', 'MAX_EVENTS']
