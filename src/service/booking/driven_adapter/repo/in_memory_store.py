from typing import Callable, Generic, Iterable, Optional, Protocol, TypeVar

import attrs


class _HasId(Protocol):
    id: Optional[int]


_E = TypeVar('_E', bound=_HasId)


class InMemoryStore(Generic[_E]):
    """
    Id-keyed entity map shared by the in-memory repositories.

    Entities are copied on the way in and out so callers never hold a
    reference into the store. Every method is synchronous, so a call is never
    interleaved with another coroutine on the same loop.
    """

    def __init__(self, seed: Iterable[_E] = ()) -> None:
        self._items: dict[int, _E] = {}
        self._next_id = 1
        for entity in seed:
            if entity.id is None:
                raise ValueError('Seed entities must carry an id')
            self._items[entity.id] = attrs.evolve(entity)  # type: ignore[misc]
            self._next_id = max(self._next_id, entity.id + 1)

    def get(self, entity_id: int) -> Optional[_E]:
        entity = self._items.get(entity_id)
        return attrs.evolve(entity) if entity is not None else None  # type: ignore[misc]

    def values(self, predicate: Optional[Callable[[_E], bool]] = None) -> list[_E]:
        return [
            attrs.evolve(entity)  # type: ignore[misc]
            for entity in self._items.values()
            if predicate is None or predicate(entity)
        ]

    def insert(self, entity: _E) -> int:
        entity_id = self._next_id
        self._next_id += 1
        self._items[entity_id] = attrs.evolve(entity, id=entity_id)  # type: ignore[misc]
        return entity_id

    def replace(self, entity: _E) -> None:
        if entity.id is not None and entity.id in self._items:
            self._items[entity.id] = attrs.evolve(entity)  # type: ignore[misc]

    def remove(self, entity_id: int) -> None:
        self._items.pop(entity_id, None)
