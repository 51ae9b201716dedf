"""Mapping that answers missing keys with a default instead of raising."""

from collections.abc import Callable, Hashable, Iterator, MutableMapping
from typing import Any, Generic, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_MISSING = object()


class DefaultValueMap(MutableMapping, Generic[K, V]):
    """
    Ordered mapping whose lookups never fail.

    Unlike ``collections.defaultdict`` a missing key is not inserted on
    lookup; the default is simply returned. Header and parameter names are
    case-insensitive, so the map can normalize string keys with
    ``str.casefold`` while remembering the first spelling it saw.

    Args:
        data: Optional initial items (mapping or iterable of pairs)
        default: Value returned for missing keys
        default_factory: Callable producing the value for missing keys;
            takes precedence over ``default``
        case_insensitive: Compare string keys case-insensitively

    Examples:
        >>> params = DefaultValueMap(default="", case_insensitive=True)
        >>> params["Charset"] = "utf-8"
        >>> params["charset"]
        'utf-8'
        >>> params["boundary"]
        ''
    """

    def __init__(
        self,
        data: Any = None,
        *,
        default: Optional[V] = None,
        default_factory: Optional[Callable[[], V]] = None,
        case_insensitive: bool = False,
    ):
        self._items: dict[Any, tuple[K, V]] = {}
        self._default = default
        self._default_factory = default_factory
        self._case_insensitive = case_insensitive

        if data is not None:
            self.update(data)

    def _normalize(self, key: K) -> Any:
        if self._case_insensitive and isinstance(key, str):
            return key.casefold()
        return key

    def default_value(self) -> V:
        """Return the value handed out for missing keys."""
        if self._default_factory is not None:
            return self._default_factory()
        return self._default

    def __getitem__(self, key: K) -> V:
        entry = self._items.get(self._normalize(key))
        if entry is None:
            return self.default_value()
        return entry[1]

    def __setitem__(self, key: K, value: V) -> None:
        normalized = self._normalize(key)
        existing = self._items.get(normalized)
        # Keep the first spelling of the key, overwrite the value
        original_key = existing[0] if existing is not None else key
        self._items[normalized] = (original_key, value)

    def __delitem__(self, key: K) -> None:
        del self._items[self._normalize(key)]

    def __contains__(self, key: object) -> bool:
        return self._normalize(key) in self._items

    def __iter__(self) -> Iterator[K]:
        return (original_key for original_key, _ in self._items.values())

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, DefaultValueMap):
            return {k: v for k, (_, v) in self._items.items()} == {
                k: v for k, (_, v) in other._items.items()
            }
        if isinstance(other, dict):
            return dict(self.items()) == other
        return NotImplemented

    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"

    def get(self, key: K, default: Any = _MISSING) -> V:
        """
        Look up a key, falling back to a default.

        Args:
            key: Key to look up
            default: Value to return when the key is absent; the map's own
                default is used when omitted

        Returns:
            Stored value, or the applicable default
        """
        entry = self._items.get(self._normalize(key))
        if entry is not None:
            return entry[1]
        if default is _MISSING:
            return self.default_value()
        return default

    def set(self, key: K, value: V) -> None:
        """Insert or overwrite a value."""
        self[key] = value

    def pop(self, key: K, default: Any = _MISSING) -> V:
        entry = self._items.pop(self._normalize(key), None)
        if entry is not None:
            return entry[1]
        if default is _MISSING:
            raise KeyError(key)
        return default

    def setdefault(self, key: K, default: Optional[V] = None) -> V:
        if key not in self:
            self[key] = default
        return self[key]
