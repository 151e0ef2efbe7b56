from hoardsurvivor.collision import CollisionCircle
from hoardsurvivor.objects import Controls, GameObject
from hoardsurvivor.world import World


class _Probe(GameObject):
    def __init__(self, tag="Probe", position=(0, 0), discard=False, radius=None,
                 on_update=None, on_discard=None):
        super().__init__(tag, position)
        self.discard = discard
        self.updates = 0
        self.drawn_on = []
        self.on_update = on_update
        self.on_discard = on_discard
        if radius is not None:
            self.collision = CollisionCircle(self.position, radius)

    def update(self):
        self.updates += 1
        if self.on_update is not None:
            self.on_update(self)
            self.on_update = None

    def draw(self, surface):
        self.drawn_on.append(surface)

    def is_discard(self):
        if self.on_discard is not None:
            self.on_discard(self)
            self.on_discard = None
        return self.discard


def test_accept_attaches_and_keeps_order():
    world = World()
    a, b = _Probe("A"), _Probe("B")
    world.accept(a)
    world.accept(b)
    assert a.world is world and b.world is world
    assert world.objects == (a, b)
    assert len(world) == 2
    assert list(world) == [a, b]


def test_find_by_tag_returns_first_match():
    world = World()
    first, second = _Probe("Enemy"), _Probe("Enemy")
    world.accept(_Probe("Player"))
    world.accept(first)
    world.accept(second)
    assert world.find_by_tag("Enemy") is first
    assert world.find_by_tag("Missing") is None


def test_clean_up_removes_discarded_objects():
    world = World()
    keep1, drop, keep2 = _Probe("k1"), _Probe("d", discard=True), _Probe("k2")
    for obj in (keep1, drop, keep2):
        world.accept(obj)
    world.clean_up()
    assert world.objects == (keep1, keep2)


def test_clean_up_checks_objects_added_while_cleaning():
    world = World()
    survivor = _Probe("spawned")
    doomed = _Probe("doomed", discard=True)

    def spawn(_):
        world.accept(survivor)
        world.accept(doomed)

    world.accept(_Probe("dying", discard=True, on_discard=spawn))
    world.clean_up()
    assert world.objects == (survivor,)
    assert survivor.world is world


def test_update_reaches_objects_added_during_update():
    world = World()
    late = _Probe("late")
    early = _Probe("early", on_update=lambda _: world.accept(late))
    world.accept(early)
    world.update()
    assert early.updates == 1
    assert late.updates == 1


def test_draw_passes_surface_to_every_object():
    world = World()
    probes = [_Probe(str(n)) for n in range(3)]
    for probe in probes:
        world.accept(probe)
    surface = object()
    world.draw(surface)
    assert all(probe.drawn_on == [surface] for probe in probes)


def test_overlapping_enemy_finds_first_overlapping_enemy():
    world = World()
    far = _Probe("Enemy", (500, 500), radius=32)
    item = _Probe("Item", (0, 0), radius=32)
    near = _Probe("Enemy", (10, 0), radius=32)
    for obj in (far, item, near):
        world.accept(obj)
    hit = CollisionCircle((0, 0), 32)
    assert world.overlapping_enemy(hit) is near


def test_overlapping_enemy_none_when_nothing_touches():
    world = World()
    world.accept(_Probe("Enemy", (500, 500), radius=32))
    assert world.overlapping_enemy(CollisionCircle((0, 0), 32)) is None


def test_overlapping_item_ignores_enemies():
    world = World()
    enemy = _Probe("Enemy", (0, 0), radius=32)
    item = _Probe("Item", (5, 5), radius=32)
    world.accept(enemy)
    world.accept(item)
    assert world.overlapping_item(CollisionCircle((0, 0), 32)) is item
    assert world.overlapping_item(CollisionCircle((900, 0), 32)) is None


def test_objects_without_shape_are_skipped():
    world = World()
    world.accept(_Probe("Item", (0, 0)))
    assert world.overlapping_item(CollisionCircle((0, 0), 32)) is None


def test_world_starts_with_no_input():
    assert World().controls == Controls()