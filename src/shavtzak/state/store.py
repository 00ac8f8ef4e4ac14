"""Authoritative roster store.

This is the only component allowed to change the roster. Each mutation
builds a new immutable :class:`AppData`, swaps it in, writes it to the
blob store and then tells subscribers.
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections import deque
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pydantic import ValidationError

from shavtzak._constants import STORAGE_KEY
from shavtzak._redact import mask_id, redact_for_log
from shavtzak.config import RosterConfig
from shavtzak.models import AppData, Assignment, ConvoyInfo, Person, Vehicle
from shavtzak.state.events import RosterSection, changed_sections
from shavtzak.storage import BlobStore, FileBlobStore
from shavtzak.transfer import parse_import

_logger = logging.getLogger(__name__)

Listener = Callable[[AppData], None]


@dataclass(slots=True)
class _Subscription:
    listener: Listener
    sections: frozenset[RosterSection] | None = None

    def wants(self, changed: frozenset[RosterSection]) -> bool:
        if self.sections is None:
            return True
        return not self.sections.isdisjoint(changed)


class RosterStore:
    """Holds people, vehicles, assignments and convoy info.

    Referential integrity is weak on purpose: additions never check
    that referenced ids exist. Removals cascade to assignments, and the
    report skips whatever still dangles.

    Usage::

        store = RosterStore(FileBlobStore(path))
        unsubscribe = store.subscribe(lambda data: print(generate(data)))
        store.add_vehicle(Vehicle(vehicle_id="12345", designation="Jeep"))
    """

    def __init__(self, blob_store: BlobStore, *, storage_key: str = STORAGE_KEY) -> None:
        self._blob_store = blob_store
        self._storage_key = storage_key
        self._lock = threading.RLock()
        self._subscriptions: list[_Subscription] = []
        self._pending: deque[tuple[AppData, frozenset[RosterSection]]] = deque()
        self._notifying = False
        self._snapshot = self._load()

    @classmethod
    def from_config(cls, config: RosterConfig, *, blob_store: BlobStore | None = None) -> RosterStore:
        """Build a store persisting into ``config.data_dir`` unless *blob_store* is given."""
        store = blob_store if blob_store is not None else FileBlobStore(config.data_dir)
        return cls(store, storage_key=config.storage_key)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def _load(self) -> AppData:
        try:
            blob = self._blob_store.load(self._storage_key)
        except Exception as exc:
            _logger.warning("Could not read roster blob %r, starting empty: %s", self._storage_key, exc)
            return AppData()
        if blob is None:
            _logger.debug("No roster blob under %r, starting empty", self._storage_key)
            return AppData()
        try:
            data = AppData.from_json(blob)
        except ValidationError as exc:
            # include_input=False keeps personal numbers out of the log
            details = exc.errors(include_url=False, include_input=False)
            _logger.warning(
                "Discarding unreadable roster blob %r (%d bytes): %s",
                self._storage_key,
                len(blob),
                details,
            )
            return AppData()
        _logger.debug(
            "Loaded roster: %d people, %d vehicles, %d assignments",
            len(data.people),
            len(data.vehicles),
            len(data.assignments),
        )
        return data

    def _persist(self) -> None:
        payload = self._snapshot.to_json().encode("utf-8")
        try:
            self._blob_store.save(self._storage_key, payload)
        except Exception:
            _logger.exception("Failed to persist roster under %r; in-memory state kept", self._storage_key)
            return
        _logger.debug("Persisted roster (%d bytes)", len(payload))

    # ------------------------------------------------------------------
    # Commit / notify
    # ------------------------------------------------------------------

    def _commit(self, updated: AppData) -> None:
        with self._lock:
            changed = changed_sections(self._snapshot, updated)
            self._snapshot = updated
            self._persist()
            if not changed:
                return
            self._pending.append((updated, changed))
            if self._notifying:
                # commit made from inside a listener; the outer loop delivers it
                return
            self._notifying = True
            try:
                while self._pending:
                    self._notify(*self._pending.popleft())
            finally:
                self._notifying = False

    def _notify(self, snapshot: AppData, changed: frozenset[RosterSection]) -> None:
        for subscription in list(self._subscriptions):
            if subscription.wants(changed):
                self._deliver(subscription, snapshot)

    @staticmethod
    def _deliver(subscription: _Subscription, snapshot: AppData) -> None:
        try:
            subscription.listener(snapshot)
        except Exception:
            _logger.exception("Roster listener %r failed", subscription.listener)

    def subscribe(
        self,
        listener: Listener,
        *,
        sections: Iterable[RosterSection] | None = None,
    ) -> Callable[[], None]:
        """Register *listener* and call it right away with the current snapshot.

        Afterwards it is called with every committed snapshot; when
        *sections* is given, only for commits that changed one of them.
        Returns a callable that removes the subscription.
        """
        subscription = _Subscription(listener, frozenset(sections) if sections is not None else None)
        with self._lock:
            self._subscriptions.append(subscription)
            self._deliver(subscription, self._snapshot)

        def unsubscribe() -> None:
            with self._lock, contextlib.suppress(ValueError):
                self._subscriptions.remove(subscription)

        return unsubscribe

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def snapshot(self) -> AppData:
        return self._snapshot

    @property
    def people(self) -> tuple[Person, ...]:
        return self._snapshot.people

    @property
    def vehicles(self) -> tuple[Vehicle, ...]:
        return self._snapshot.vehicles

    @property
    def assignments(self) -> tuple[Assignment, ...]:
        return self._snapshot.assignments

    @property
    def convoy_info(self) -> ConvoyInfo | None:
        return self._snapshot.convoy_info

    def find_person(self, id_number: str) -> Person | None:
        return next((p for p in self._snapshot.people if p.id_number == id_number), None)

    def find_vehicle(self, vehicle_id: str) -> Vehicle | None:
        return next((v for v in self._snapshot.vehicles if v.vehicle_id == vehicle_id), None)

    def assignments_for_vehicle(self, vehicle_id: str) -> tuple[Assignment, ...]:
        return tuple(a for a in self._snapshot.assignments if a.vehicle_id == vehicle_id)

    # ------------------------------------------------------------------
    # People / vehicles
    # ------------------------------------------------------------------

    def add_person(self, person: Person) -> None:
        """Append *person*. Duplicate ids are the caller's problem."""
        with self._lock:
            _logger.debug("Adding person %s", redact_for_log(person.to_wire()))
            self._commit(self._snapshot.model_copy(update={"people": (*self._snapshot.people, person)}))

    def remove_person(self, id_number: str) -> None:
        """Remove the person and every assignment pointing at them."""
        with self._lock:
            current = self._snapshot
            _logger.debug("Removing person %s", mask_id(id_number))
            self._commit(
                current.model_copy(
                    update={
                        "people": tuple(p for p in current.people if p.id_number != id_number),
                        "assignments": tuple(a for a in current.assignments if a.person_id != id_number),
                    }
                )
            )

    def add_vehicle(self, vehicle: Vehicle) -> None:
        """Append *vehicle*. Duplicate ids are the caller's problem."""
        with self._lock:
            _logger.debug("Adding vehicle %s", vehicle.vehicle_id)
            self._commit(self._snapshot.model_copy(update={"vehicles": (*self._snapshot.vehicles, vehicle)}))

    def remove_vehicle(self, vehicle_id: str) -> None:
        """Remove the vehicle and every assignment pointing at it."""
        with self._lock:
            current = self._snapshot
            _logger.debug("Removing vehicle %s", vehicle_id)
            self._commit(
                current.model_copy(
                    update={
                        "vehicles": tuple(v for v in current.vehicles if v.vehicle_id != vehicle_id),
                        "assignments": tuple(a for a in current.assignments if a.vehicle_id != vehicle_id),
                    }
                )
            )

    # ------------------------------------------------------------------
    # Assignments
    # ------------------------------------------------------------------

    def add_assignment(self, assignment: Assignment) -> None:
        """Append *assignment*, or update ``stay`` of the existing pair in place."""
        with self._lock:
            assignments = list(self._snapshot.assignments)
            for index, existing in enumerate(assignments):
                if existing.key == assignment.key:
                    assignments[index] = existing.model_copy(update={"stay": assignment.stay})
                    break
            else:
                assignments.append(assignment)
            _logger.debug("Assigning %s", redact_for_log(assignment.to_wire()))
            self._commit(self._snapshot.model_copy(update={"assignments": tuple(assignments)}))

    def remove_assignment(self, vehicle_id: str, person_id: str) -> None:
        with self._lock:
            key = (vehicle_id, person_id)
            assignments = tuple(a for a in self._snapshot.assignments if a.key != key)
            self._commit(self._snapshot.model_copy(update={"assignments": assignments}))

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------

    def clear_all(self) -> None:
        """Empty all three collections. Convoy info survives."""
        with self._lock:
            _logger.debug("Clearing roster")
            self._commit(AppData(convoy_info=self._snapshot.convoy_info))

    def clear_assignments(self) -> None:
        """Empty assignments and drop convoy info in one step."""
        with self._lock:
            _logger.debug("Clearing assignments and convoy info")
            self._commit(self._snapshot.model_copy(update={"assignments": (), "convoy_info": None}))

    def set_convoy_info(self, info: ConvoyInfo) -> None:
        with self._lock:
            self._commit(self._snapshot.model_copy(update={"convoy_info": info}))

    def export_snapshot(self) -> AppData:
        """Current state. The value is immutable, so handing it out is safe."""
        return self._snapshot

    def import_snapshot(self, data: AppData) -> None:
        """Replace the whole roster with *data*.

        Referential integrity is not checked; dangling assignments stay
        until a later removal cleans them up.
        """
        with self._lock:
            _logger.debug(
                "Importing roster: %d people, %d vehicles, %d assignments",
                len(data.people),
                len(data.vehicles),
                len(data.assignments),
            )
            self._commit(data)

    def import_json(self, text: str | bytes) -> None:
        """Parse *text* and import it.

        Raises :class:`~shavtzak.exceptions.RosterImportError` before
        touching any state when the payload cannot be parsed.
        """
        self.import_snapshot(parse_import(text))
