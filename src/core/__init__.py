from .backend import BackendError, PygameBackend
from .drawable import Drawable
from .scene import Scene
from .renderer import SceneRenderer
from .dispatcher import InputDispatcher
from .engine import Engine

__all__ = [
    "BackendError",
    "PygameBackend",
    "Drawable",
    "Scene",
    "SceneRenderer",
    "InputDispatcher",
    "Engine",
]
