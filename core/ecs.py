from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from typing import Type, TypeVar, Any

T = TypeVar("T")


class Entity:
    """A container for components with a unique ID and optional children."""

    def __init__(self, uid: str | None = None):
        self.uid = uid or str(uuid.uuid4())
        self.components: dict[Type, Any] = {}
        self.children: list[Entity] = []
        self.parent: Entity | None = None
        self.active = True

    def add_component(self, component: Any) -> None:
        """Add a component instance to the entity."""
        self.components[type(component)] = component

    def get_component(self, component_type: Type[T]) -> T | None:
        """Get a component instance by type."""
        return self.components.get(component_type)

    def has_component(self, component_type: Type) -> bool:
        """Check if entity has a component of the given type."""
        return component_type in self.components

    def remove_component(self, component_type: Type) -> None:
        """Remove a component by type."""
        if component_type in self.components:
            del self.components[component_type]

    def __repr__(self) -> str:
        return f"Entity({self.uid[:8]})"


class System(ABC):
    """Base class for systems that operate on entities with specific components."""

    def __init__(self):
        self.world: World | None = None

    @abstractmethod
    def update(self, dt: float):
        """Update the system logic for a given time step."""
        pass


class World:
    """Manages entities, resources and systems."""

    def __init__(self):
        self.entities: list[Entity] = []
        self.systems: list[System] = []
        self.resources: dict[Type, Any] = {}
        self._entity_map: dict[str, Entity] = {}

    def add_entity(self, entity: Entity) -> None:
        if entity.uid not in self._entity_map:
            self.entities.append(entity)
            self._entity_map[entity.uid] = entity

    def spawn(self, *components: Any) -> Entity:
        """Create an entity from components and add it to the world."""
        entity = Entity()
        for component in components:
            entity.add_component(component)
        self.add_entity(entity)
        return entity

    def remove_entity(self, entity: Entity) -> None:
        if entity.uid in self._entity_map:
            self.entities.remove(entity)
            del self._entity_map[entity.uid]
            entity.active = False

    def add_child(self, parent: Entity, child: Entity) -> None:
        """Attach child to parent, adding it to the world if needed."""
        if child.parent is not None and child in child.parent.children:
            child.parent.children.remove(child)
        child.parent = parent
        parent.children.append(child)
        self.add_entity(child)

    def despawn_recursive(self, entity: Entity) -> None:
        """Remove an entity and all of its descendants."""
        for child in list(entity.children):
            self.despawn_recursive(child)
        entity.children.clear()
        if entity.parent is not None:
            if entity in entity.parent.children:
                entity.parent.children.remove(entity)
            entity.parent = None
        self.remove_entity(entity)

    def contains(self, entity: Entity) -> bool:
        return entity.uid in self._entity_map

    def add_system(self, system: System) -> None:
        system.world = self
        self.systems.append(system)

    def get_entities_with(self, *component_types: Type) -> list[Entity]:
        """Return all entities that have ALL of the specified component types."""
        result = []
        for entity in self.entities:
            if all(entity.has_component(ct) for ct in component_types):
                result.append(entity)
        return result

    def single(self, component_type: Type[T]) -> tuple[Entity, T]:
        """Return the only entity carrying component_type and that component.

        Raises RuntimeError when there is no such entity or more than one.
        """
        matches = self.get_entities_with(component_type)
        if len(matches) != 1:
            raise RuntimeError(
                f"Expected exactly one entity with {component_type.__name__}, found {len(matches)}"
            )
        entity = matches[0]
        return entity, entity.components[component_type]

    def insert_resource(self, resource: Any) -> None:
        self.resources[type(resource)] = resource

    def get_resource(self, resource_type: Type[T]) -> T | None:
        return self.resources.get(resource_type)

    def resource(self, resource_type: Type[T]) -> T:
        """Return a resource by type, raising RuntimeError when it was never inserted."""
        res = self.resources.get(resource_type)
        if res is None:
            raise RuntimeError(f"World missing resource {resource_type.__name__}")
        return res

    def update(self, dt: float) -> None:
        """Update all systems."""
        for system in self.systems:
            system.update(dt)
