"""Scene container holding the objects to render.

The scene is an ordered list of objects. Order carries no priority during
intersection (every object is tested and the nearest hit wins) except as
the tie-break between hits at exactly equal distance, where the earlier
object is kept.

Example:
    >>> from src.minitrace.core.vector import Vector3
    >>> from src.minitrace.geometry.sphere import Sphere
    >>> from src.minitrace.scene.scene import Scene
    >>> scene = Scene()
    >>> scene.add(Sphere(Vector3(0.0, 0.0, -20.0), 4.0, Vector3(1.0, 0.32, 0.36)))
    0
    >>> len(scene)
    1
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from src.minitrace.geometry.base import Object


class Scene:
    """An ordered collection of objects owned for the duration of a render.

    The tracer only reads a scene. Objects should be added before rendering
    starts and the scene left untouched until the render completes.
    """

    def __init__(self, objects: Iterable[Object] | None = None) -> None:
        self._objects: list[Object] = list(objects) if objects is not None else []

    @property
    def objects(self) -> tuple[Object, ...]:
        """The objects in insertion order."""
        return tuple(self._objects)

    def add(self, obj: Object) -> int:
        """Append an object to the scene.

        Args:
            obj: The object to add.

        Returns:
            The index of the added object.
        """
        self._objects.append(obj)
        return len(self._objects) - 1

    def clear(self) -> None:
        """Remove every object from the scene."""
        self._objects.clear()

    def __iter__(self) -> Iterator[Object]:
        return iter(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __repr__(self) -> str:
        return f"Scene(objects={len(self._objects)})"
