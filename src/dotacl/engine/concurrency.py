"""Thread-safe wrapper for sharing one PolicyEngine between threads.

:class:`PolicyEngine` has no internal locking.  :class:`SynchronizedPolicyEngine`
puts every call behind a reader/writer lock: lookups share the read side,
mutations take the write side.
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Iterator
from contextlib import contextmanager

from dotacl.engine.policy import PolicyEngine


class ReadWriteLock:
    """Many concurrent readers or one writer; waiting writers block new readers."""

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if not self._readers:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class SynchronizedPolicyEngine:
    """Same API as :class:`PolicyEngine`, safe to call from several threads."""

    def __init__(self, engine: PolicyEngine | None = None) -> None:
        self._engine = engine or PolicyEngine()
        self._lock = ReadWriteLock()

    @property
    def engine(self) -> PolicyEngine:
        return self._engine

    def set_default_action(self, allowed: bool) -> None:
        with self._lock.write():
            self._engine.set_default_action(allowed)

    def get_default_action(self) -> bool:
        with self._lock.read():
            return self._engine.get_default_action()

    def add_role(self, role: str, parents: str | Iterable[str] | None = None) -> None:
        if parents is not None and not isinstance(parents, str):
            parents = list(parents)
        with self._lock.write():
            self._engine.add_role(role, parents)

    def add_inherit(self, role: str, parent: str) -> None:
        with self._lock.write():
            self._engine.add_inherit(role, parent)

    def get_roles(self) -> list[str]:
        with self._lock.read():
            return self._engine.get_roles()

    def allow(self, role: str, action_spec: str) -> None:
        with self._lock.write():
            self._engine.allow(role, action_spec)

    def deny(self, role: str, action_spec: str) -> None:
        with self._lock.write():
            self._engine.deny(role, action_spec)

    def is_allowed(self, role: str, action: str) -> bool:
        with self._lock.read():
            return self._engine.is_allowed(role, action)

    def get_allowed_roles(self, action: str) -> list[str]:
        with self._lock.read():
            return self._engine.get_allowed_roles(action)
