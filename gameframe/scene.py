"""Scenes and the manager that switches between them."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Dict, Mapping, Optional


class BaseScene:
    """A scene; subclasses override the hooks they need.

    The default hooks keep a simple record of the scene's lifecycle.
    """

    def __init__(self) -> None:
        self.scene_manager: Optional["SceneManager"] = None
        self.initialized = False
        self.frame_count = 0
        self.draw_count = 0
        self.debug_count = 0

    def initialize(self) -> None:
        """Set the scene up."""
        self.initialized = True
        self.frame_count = 0
        self.draw_count = 0
        self.debug_count = 0

    def finalize(self) -> None:
        """Release what the scene holds."""
        self.initialized = False

    def update(self) -> None:
        """Advance the scene by one frame."""
        self.frame_count += 1

    def draw(self) -> None:
        """Draw the scene."""
        self.draw_count += 1

    def imgui(self) -> None:
        """Show the scene's debug interface."""
        self.debug_count += 1


class SceneType(IntEnum):
    """Kinds of scene the manager can create."""

    TITLE = 0
    GAME = 1
    PARTICLE_EDITOR = 2


SceneFactory = Callable[[], BaseScene]


class SceneManager:
    """Holds the current scene and forwards the frame hooks to it.

    Scenes are made by factories registered per :class:`SceneType`. The
    title scene has no scene of its own unless one is registered; it then
    falls back to the game scene's factory.
    """

    def __init__(self, factories: Optional[Mapping[SceneType, SceneFactory]] = None) -> None:
        self._factories: Dict[SceneType, SceneFactory] = {
            SceneType(kind): factory for kind, factory in (factories or {}).items()
        }
        self.current_scene: Optional[BaseScene] = None

    def register(self, scene_type: SceneType, factory: SceneFactory) -> None:
        """Use ``factory`` to create scenes of ``scene_type``."""
        self._factories[SceneType(scene_type)] = factory

    def initialize(self) -> None:
        """Initialise the current scene, if any."""
        if self.current_scene is not None:
            self.current_scene.initialize()

    def update(self) -> None:
        """Update the current scene, if any."""
        if self.current_scene is not None:
            self.current_scene.update()

    def draw(self) -> None:
        """Draw the current scene, if any."""
        if self.current_scene is not None:
            self.current_scene.draw()

    def imgui(self) -> None:
        """Show the current scene's debug interface, if any."""
        if self.current_scene is not None:
            self.current_scene.imgui()

    def change_scene(self, scene_type: SceneType) -> None:
        """Replace the current scene with a new one and initialise it."""
        self.current_scene = self.create_scene(scene_type)
        if self.current_scene is not None:
            self.current_scene.scene_manager = self
        self.initialize()

    def create_scene(self, scene_type: SceneType) -> Optional[BaseScene]:
        """A new scene of ``scene_type``, or None when nothing makes one."""
        scene_type = SceneType(scene_type)
        factory = self._factories.get(scene_type)
        if factory is None and scene_type is SceneType.TITLE:
            factory = self._factories.get(SceneType.GAME)
        return factory() if factory is not None else None