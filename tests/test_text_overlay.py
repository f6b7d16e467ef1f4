from __future__ import annotations

from core.assets import AssetServer
from core.diags_text import DiagsTextSpawner
from core.ecs import World
from ui.text_overlay import TextOverlay


class _FakeSurface:
    def __init__(self, text: str, color):
        self.text = text
        self.color = color

    def get_width(self) -> int:
        return 10 * len(self.text)


class _FakeFont:
    def render(self, text, _antialias, color):
        return _FakeSurface(text, color)


class _FakeScreen:
    def __init__(self):
        self.blits: list[tuple[str, tuple, tuple[int, int]]] = []

    def blit(self, surface, pos) -> None:
        self.blits.append((surface.text, surface.color, pos))


class _StubOverlay(TextOverlay):
    def __init__(self, screen):
        super().__init__(screen)
        self.requested: list[tuple[str | None, float]] = []

    def resolve_font(self, handle, size):
        self.requested.append((handle.path if handle else None, size))
        return _FakeFont()


def test_draws_label_then_value_with_shadow() -> None:
    world = World()
    spawner = DiagsTextSpawner(world, AssetServer())
    spawner.spawn("58")
    screen = _FakeScreen()
    overlay = _StubOverlay(screen)

    overlay.draw(world)

    assert screen.blits == [
        ("FPS: ", (0, 0, 0), (11, 11)),
        ("FPS: ", (255, 0, 0), (10, 10)),
        ("58", (0, 0, 0), (61, 11)),
        ("58", (255, 0, 0), (60, 10)),
    ]
    assert {size for _, size in overlay.requested} == {32.0}


def test_hidden_overlay_draws_nothing() -> None:
    world = World()
    spawner = DiagsTextSpawner(world, AssetServer())
    entity = spawner.spawn(None)
    spawner.despawn(entity)
    screen = _FakeScreen()

    _StubOverlay(screen).draw(world)

    assert screen.blits == []
