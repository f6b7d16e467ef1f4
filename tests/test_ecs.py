from __future__ import annotations

import pytest

from core.app import App
from core.ecs import Entity, System, World


class _CountingSystem(System):
    def __init__(self):
        super().__init__()
        self.dts: list[float] = []

    def update(self, dt: float) -> None:
        self.dts.append(dt)


def test_spawn_and_query_by_components() -> None:
    world = World()
    a = world.spawn(1, "label")
    b = world.spawn(2.5)

    assert world.get_entities_with(int) == [a]
    assert world.get_entities_with(float) == [b]
    assert world.get_entities_with(int, str) == [a]


def test_despawn_recursive_removes_all_descendants() -> None:
    world = World()
    root = world.spawn("root")
    child = Entity()
    grandchild = Entity()
    world.add_child(root, child)
    world.add_child(child, grandchild)
    bystander = world.spawn("other")

    world.despawn_recursive(root)

    assert world.entities == [bystander]
    assert not root.active and not child.active and not grandchild.active
    assert root.children == []


def test_despawn_child_detaches_from_parent() -> None:
    world = World()
    root = world.spawn("root")
    child = Entity()
    world.add_child(root, child)

    world.despawn_recursive(child)

    assert root.children == []
    assert world.contains(root)


def test_single_requires_exactly_one_match() -> None:
    world = World()
    with pytest.raises(RuntimeError, match="found 0"):
        world.single(int)

    entity = world.spawn(7)
    assert world.single(int) == (entity, 7)

    world.spawn(8)
    with pytest.raises(RuntimeError, match="found 2"):
        world.single(int)


def test_resources_are_keyed_by_type() -> None:
    world = World()
    assert world.get_resource(dict) is None
    with pytest.raises(RuntimeError, match="dict"):
        world.resource(dict)

    world.insert_resource({"a": 1})
    assert world.resource(dict) == {"a": 1}


def test_app_runs_startup_once_then_systems() -> None:
    app = App()
    calls: list[str] = []
    system = _CountingSystem()
    app.add_startup_system(lambda world: calls.append("startup"))
    app.add_system(system)

    app.update(0.1)
    app.update(0.2)

    assert calls == ["startup"]
    assert system.dts == [0.1, 0.2]
    with pytest.raises(RuntimeError, match="already ran"):
        app.startup()
