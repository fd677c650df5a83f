import pytest

from e2d.events import MouseMoveEvent
from e2d.scenes import SceneManager


class FakeScene:
    def __init__(self, name):
        self.name = name
        self.log = []
        self.events = []

    def on_enter(self):
        self.log.append("enter")

    def on_exit(self):
        self.log.append("exit")

    def update(self):
        self.log.append("update")

    def render(self):
        self.log.append("render")

    def dispatch(self, event):
        self.events.append(event)


class FakeTransition:
    def __init__(self, frames):
        self.frames = frames
        self.updates = 0
        self.rendered = 0
        self.stopped = False
        self.scenes = None

    def init(self, previous, following):
        self.scenes = (previous, following)

    def update(self):
        self.updates += 1

    def render(self):
        self.rendered += 1

    def is_done(self):
        return self.updates >= self.frames

    def stop(self):
        self.stopped = True


def started(scene):
    manager = SceneManager()
    manager.enter(scene)
    manager.start()
    return manager


def test_start_enters_first_scene():
    a = FakeScene("a")
    manager = started(a)
    assert manager.current_scene() is a
    assert a.log == ["enter", "update"]


def test_enter_saves_current_scene():
    a, b = FakeScene("a"), FakeScene("b")
    manager = started(a)
    manager.enter(b)
    manager.update()
    assert manager.current_scene() is b
    assert manager.scene_stack() == [a]
    assert a.log[-1] == "exit"
    assert b.log == ["enter"]


def test_enter_without_saving():
    a, b = FakeScene("a"), FakeScene("b")
    manager = started(a)
    manager.enter(b, save_current=False)
    manager.update()
    assert manager.scene_stack() == []


def test_enter_none_is_ignored():
    a = FakeScene("a")
    manager = started(a)
    manager.enter(None)
    manager.update()
    assert manager.current_scene() is a


def test_back_returns_to_saved_scene():
    a, b = FakeScene("a"), FakeScene("b")
    manager = started(a)
    manager.enter(b)
    manager.update()
    manager.back()
    manager.update()
    assert manager.current_scene() is a
    assert manager.scene_stack() == []


def test_back_on_empty_stack_raises():
    manager = started(FakeScene("a"))
    with pytest.raises(LookupError):
        manager.back()


def test_dispatch_reaches_current_scene():
    a = FakeScene("a")
    manager = started(a)
    event = MouseMoveEvent(1, 2)
    manager.dispatch(event)
    assert a.events == [event]


def test_transition_delays_switch():
    a, b = FakeScene("a"), FakeScene("b")
    manager = started(a)
    transition = FakeTransition(frames=3)
    manager.enter(b, transition)
    assert transition.scenes == (a, b)
    assert manager.is_transitioning()
    manager.update()
    assert manager.current_scene() is a
    manager.render()
    assert transition.rendered == 1
    manager.update()
    assert not manager.is_transitioning()
    assert manager.current_scene() is b


def test_new_transition_stops_previous():
    a, b, c = FakeScene("a"), FakeScene("b"), FakeScene("c")
    manager = started(a)
    first = FakeTransition(frames=10)
    manager.enter(b, first)
    manager.enter(c, FakeTransition(frames=10))
    assert first.stopped


def test_render_draws_current_scene_without_transition():
    a = FakeScene("a")
    manager = started(a)
    manager.render()
    assert a.log[-1] == "render"


def test_clear_and_shutdown():
    a, b = FakeScene("a"), FakeScene("b")
    manager = started(a)
    manager.enter(b)
    manager.update()
    manager.clear()
    assert manager.scene_stack() == []
    manager.shutdown()
    assert manager.current_scene() is None
    assert not manager.is_transitioning()