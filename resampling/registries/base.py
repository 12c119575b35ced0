from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Generic, Iterator, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


@dataclass
class Registry(Generic[K, V]):
    """Name -> factory lookup shared by strategies and metrics.

        SPLITTERS = Registry[str, SplitterFactory](_name="splitters")

        @SPLITTERS.register("kfold")
        def _kfold(cfg, seed):
            ...

    Registering a name twice is an error unless ``replace=True``, so a
    custom entry cannot silently shadow a built-in one.
    """

    _items: Dict[K, V] = field(default_factory=dict)
    _name: str = "registry"

    def register(self, key: K, *, replace: bool = False) -> Callable[[V], V]:
        if key in self._items and not replace:
            raise KeyError(f"{self._name}: {key!r} is already registered")

        def deco(value: V) -> V:
            self._items[key] = value
            return value

        return deco

    def try_get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        return self._items.get(key, default)

    def names(self) -> list[K]:
        return sorted(self._items)

    def __contains__(self, key: K) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[K]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
