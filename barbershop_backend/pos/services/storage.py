"""
PATH: pos/services/storage.py

DURABLE LOCAL STORE BACKENDS

Purpose:
- Key -> JSON document persistence for the Held-Sale Store.
- Local to the terminal host; independent of the remote sales database.

Contract:
- read_all(key) -> decoded JSON or None when nothing was written yet
- write_all(key, data) replaces the whole document
- lock(key) -> context manager serializing read-modify-write cycles on key
  across every store (thread, worker or process) sharing the backend

Backends:
- InMemoryStorage: tests / ephemeral terminals (process-local lock)
- JsonFileStorage: one <key>.json file per key, replaced atomically,
  guarded by flock on <key>.lock
- CacheStorage: Django cache framework, guarded by an add()-based lock key

read_all raises StorageCorrupted for undecodable payloads; the caller decides
how to recover. lock raises StorageUnavailable when it cannot be acquired.
"""

from __future__ import annotations

import copy
import fcntl
import json
import os
import re
import tempfile
import threading
import time
import uuid
from contextlib import contextmanager
from pathlib import Path

from django.conf import settings
from django.core.cache import caches
from django.core.exceptions import ImproperlyConfigured

from pos.exceptions import StorageCorrupted, StorageUnavailable

_UNSAFE_KEY_CHARS = re.compile(r"[^A-Za-z0-9._-]")


class InMemoryStorage:
    def __init__(self, initial: dict | None = None):
        self._data = dict(initial or {})
        self._lock = threading.RLock()

    def read_all(self, key: str):
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    def write_all(self, key: str, data) -> None:
        self._data[key] = copy.deepcopy(data)

    @contextmanager
    def lock(self, key: str):
        with self._lock:
            yield


class JsonFileStorage:
    def __init__(self, directory):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.json"

    def lock_path_for(self, key: str) -> Path:
        return self.directory / f"{_UNSAFE_KEY_CHARS.sub('_', key)}.lock"

    def read_all(self, key: str):
        path = self.path_for(key)
        if not path.exists():
            return None

        try:
            with path.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except (OSError, ValueError) as exc:
            raise StorageCorrupted(f"Unreadable storage file {path}: {exc}") from exc

    def write_all(self, key: str, data) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.path_for(key)

        fd, tmp_name = tempfile.mkstemp(dir=str(self.directory), prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh, ensure_ascii=False)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    @contextmanager
    def lock(self, key: str):
        # flock is held per open file, so separate workers on one host block each other.
        self.directory.mkdir(parents=True, exist_ok=True)
        with self.lock_path_for(key).open("a") as fh:
            fcntl.flock(fh.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(fh.fileno(), fcntl.LOCK_UN)


class CacheStorage:
    def __init__(self, alias: str = "default", *, timeout=None, lock_timeout: float = 5.0, lock_ttl: int = 30):
        self.alias = alias
        self.timeout = timeout
        self.lock_timeout = lock_timeout
        self.lock_ttl = lock_ttl

    @property
    def cache(self):
        return caches[self.alias]

    def read_all(self, key: str):
        raw = self.cache.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError) as exc:
            raise StorageCorrupted(f"Unreadable cache entry {key}: {exc}") from exc

    def write_all(self, key: str, data) -> None:
        self.cache.set(key, json.dumps(data, ensure_ascii=False), timeout=self.timeout)

    @contextmanager
    def lock(self, key: str):
        lock_key = f"{key}.lock"
        token = uuid.uuid4().hex
        deadline = time.monotonic() + self.lock_timeout

        # add() only succeeds when the key is absent; lock_ttl bounds a crashed holder.
        while not self.cache.add(lock_key, token, timeout=self.lock_ttl):
            if time.monotonic() >= deadline:
                raise StorageUnavailable(f"Held sales for {key} are locked by another terminal")
            time.sleep(0.05)

        try:
            yield
        finally:
            if self.cache.get(lock_key) == token:
                self.cache.delete(lock_key)


def build_storage():
    """
    Resolve the configured backend (settings.POS_HELD_SALES_BACKEND).
    """
    backend = (getattr(settings, "POS_HELD_SALES_BACKEND", "file") or "file").strip().lower()

    if backend == "file":
        directory = getattr(settings, "POS_HELD_SALES_DIR", None)
        if not directory:
            raise ImproperlyConfigured("POS_HELD_SALES_DIR is required for the file backend.")
        return JsonFileStorage(directory)

    if backend == "cache":
        return CacheStorage(getattr(settings, "POS_HELD_SALES_CACHE_ALIAS", "default"))

    if backend == "memory":
        return InMemoryStorage()

    raise ImproperlyConfigured(f"Unknown POS_HELD_SALES_BACKEND: {backend!r}")
