"""Allow-list matching with trailing ``.*`` wildcard support.

An allow entry ``"warehouse.*"`` grants ``"warehouse"`` itself and every slug
nested below it (``"warehouse.products.read"``). No other wildcard forms are
recognised; a ``*`` anywhere else, or on the required side, is plain text.

Compiled allow-lists are memoized in an ``AllowListCache`` keyed by the exact
allow-list contents. The cache is owned by a ``PermissionMatcher`` instance; the
module-level default matcher is shared across the process and can be reset with
``clear_permission_cache()``.
"""

from __future__ import annotations

import threading
from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass

from sidebar_nav.core.config import settings
from sidebar_nav.schemas.permissions import PermissionSnapshot


WILDCARD_SUFFIX = ".*"


@dataclass(frozen=True)
class CompiledAllowList:
    exact: frozenset[str]
    # Each entry is a wildcard prefix followed by ".", ready for str.startswith.
    nested_prefixes: tuple[str, ...]
    prefixes: frozenset[str]

    def satisfies(self, required: str) -> bool:
        if required in self.exact:
            return True
        if not self.nested_prefixes:
            return False
        return required in self.prefixes or required.startswith(self.nested_prefixes)


def compile_allow_list(allow: Iterable[str]) -> CompiledAllowList:
    entries = frozenset(allow)
    prefixes = sorted(
        entry[: -len(WILDCARD_SUFFIX)] for entry in entries if entry.endswith(WILDCARD_SUFFIX)
    )
    return CompiledAllowList(
        exact=entries,
        nested_prefixes=tuple(f"{prefix}." for prefix in prefixes),
        prefixes=frozenset(prefixes),
    )


class AllowListCache:
    """Thread-safe LRU of compiled allow-lists. ``max_entries=0`` means unbounded."""

    def __init__(self, max_entries: int = 512) -> None:
        if max_entries < 0:
            raise ValueError(f"max_entries must be >= 0, got {max_entries}")
        self.max_entries = max_entries
        self._entries: OrderedDict[frozenset[str], CompiledAllowList] = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, allow: Iterable[str]) -> bool:
        key = frozenset(allow)
        with self._lock:
            return key in self._entries

    def get_or_compile(self, allow: Iterable[str]) -> CompiledAllowList:
        key = allow if isinstance(allow, frozenset) else frozenset(allow)
        with self._lock:
            compiled = self._entries.get(key)
            if compiled is not None:
                self._entries.move_to_end(key)
                return compiled

        compiled = compile_allow_list(key)
        with self._lock:
            self._entries[key] = compiled
            self._entries.move_to_end(key)
            if self.max_entries and len(self._entries) > self.max_entries:
                self._entries.popitem(last=False)
        return compiled

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()


class PermissionMatcher:
    def __init__(self, cache: AllowListCache | None = None) -> None:
        self.cache = cache if cache is not None else AllowListCache()

    def compile(self, allow: Iterable[str]) -> CompiledAllowList:
        return self.cache.get_or_compile(allow)

    def satisfies(self, allow: Iterable[str], required: str) -> bool:
        return self.compile(allow).satisfies(required)

    def check(self, snapshot: PermissionSnapshot, required: str) -> bool:
        return self.satisfies(snapshot.allow, required)


_default_matcher = PermissionMatcher(
    AllowListCache(max_entries=settings.SIDEBAR_PERMISSION_CACHE_MAX_ENTRIES)
)


def get_default_matcher() -> PermissionMatcher:
    return _default_matcher


def satisfies(allow: Iterable[str], required: str) -> bool:
    return _default_matcher.satisfies(allow, required)


def check_permission(snapshot: PermissionSnapshot, required: str) -> bool:
    return _default_matcher.check(snapshot, required)


def clear_permission_cache() -> None:
    _default_matcher.cache.clear()


__all__ = [
    "AllowListCache",
    "CompiledAllowList",
    "PermissionMatcher",
    "check_permission",
    "clear_permission_cache",
    "compile_allow_list",
    "get_default_matcher",
    "satisfies",
]
