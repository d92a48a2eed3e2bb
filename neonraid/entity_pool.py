"""Entity base class and the owning pool that removes flagged entities."""

from typing import Generic, Iterable, Iterator, List, TypeVar

import pygame


class Entity:
    """Base class for per-tick game objects that can be flagged for removal."""

    def __init__(self) -> None:
        self.marked_for_deletion = False

    def update(self) -> None:
        """Advance the entity by one tick."""

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the entity onto the given surface."""


EntityT = TypeVar("EntityT", bound=Entity)


class EntityPool(Generic[EntityT]):
    """Ordered collection that owns its entities.

    Updates and collision checks only flag entities; removal happens in
    compact(), so the list is never mutated while it is being iterated.
    """

    def __init__(self, entities: Iterable[EntityT] = ()) -> None:
        self._entities: List[EntityT] = list(entities)

    def __iter__(self) -> Iterator[EntityT]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __getitem__(self, index: int) -> EntityT:
        return self._entities[index]

    def add(self, entity: EntityT) -> None:
        """Append an entity to the end of the pool."""
        self._entities.append(entity)

    def extend(self, entities: Iterable[EntityT]) -> None:
        """Append several entities in order."""
        self._entities.extend(entities)

    def snapshot(self) -> List[EntityT]:
        """Return a copy of the current entity list."""
        return list(self._entities)

    def update(self) -> None:
        """Call update() on every entity."""
        for entity in self._entities:
            entity.update()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every entity, including ones flagged this tick."""
        for entity in self._entities:
            entity.draw(surface)

    def compact(self) -> int:
        """Remove flagged entities.

        Returns:
            Number of entities removed
        """
        before = len(self._entities)
        self._entities = [e for e in self._entities if not e.marked_for_deletion]
        return before - len(self._entities)

    def clear(self) -> None:
        """Remove every entity at once."""
        self._entities = []
