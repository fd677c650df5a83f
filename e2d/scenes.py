"""Switches between scenes, optionally through a transition, with a back stack."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol

from e2d.events import Event


class SceneLike(Protocol):
    def on_enter(self) -> None: ...

    def on_exit(self) -> None: ...

    def update(self) -> None: ...

    def render(self) -> None: ...

    def dispatch(self, event: Event) -> None: ...


class TransitionLike(Protocol):
    def init(self, previous: Any, following: Any) -> None: ...

    def update(self) -> None: ...

    def render(self) -> None: ...

    def is_done(self) -> bool: ...

    def stop(self) -> None: ...


class SceneManager:
    """Holds the current scene, the one to switch to next, and saved scenes."""

    def __init__(self) -> None:
        self._save_current = True
        self._current: Optional[SceneLike] = None
        self._next: Optional[SceneLike] = None
        self._transition: Optional[TransitionLike] = None
        self._stack: List[SceneLike] = []

    def _begin_transition(self, transition: TransitionLike) -> None:
        self._transition = transition
        transition.init(self._current, self._next)
        transition.update()

    def enter(
        self,
        scene: Optional[SceneLike],
        transition: Optional[TransitionLike] = None,
        save_current: bool = True,
    ) -> None:
        """Switch to ``scene`` on the next update; ``None`` is ignored."""
        if scene is None:
            return
        self._next = scene
        if transition is not None:
            if self._transition is not None:
                self._transition.stop()
            self._begin_transition(transition)
        if self._current is not None:
            self._save_current = save_current

    def back(self, transition: Optional[TransitionLike] = None) -> None:
        """Return to the most recently saved scene; raises LookupError if none."""
        if not self._stack:
            raise LookupError("scene stack is empty")
        self._next = self._stack.pop()
        if self._current is not None:
            self._save_current = False
        if transition is not None:
            self._begin_transition(transition)

    def clear(self) -> None:
        """Drop every saved scene."""
        self._stack.clear()

    def current_scene(self) -> Optional[SceneLike]:
        return self._current

    def scene_stack(self) -> List[SceneLike]:
        """The saved scenes, oldest first."""
        return list(self._stack)

    def is_transitioning(self) -> bool:
        return self._transition is not None

    def dispatch(self, event: Event) -> None:
        if self._current is not None:
            self._current.dispatch(event)

    def update(self) -> None:
        """Update the current scene or transition, then perform a pending switch."""
        if self._transition is None:
            if self._current is not None:
                self._current.update()
        else:
            self._transition.update()
            if not self._transition.is_done():
                return
            self._transition = None

        if self._next is None:
            return
        if self._current is not None:
            self._current.on_exit()
            if self._save_current:
                self._stack.append(self._current)
        self._next.on_enter()
        self._current = self._next
        self._next = None

    def render(self) -> None:
        if self._transition is not None:
            self._transition.render()
        elif self._current is not None:
            self._current.render()

    def start(self) -> None:
        """Enter the scene chosen before the game started, then run one update."""
        if self._next is not None:
            self._current = self._next
            self._current.on_enter()
            self._next = None
        self.update()

    def shutdown(self) -> None:
        """Forget every scene and any transition."""
        self._current = None
        self._next = None
        self._transition = None
        self.clear()