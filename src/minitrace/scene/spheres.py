"""Demo scene: five colored spheres lit by one emissive sphere.

The scene consists of:
- A very large dark gray sphere acting as the ground
- A red sphere in the center, 20 units in front of the camera
- A small gold sphere in front on the right
- A blue sphere behind on the right
- A white sphere on the left
- A black emissive sphere above the others acting as the light

Every surface is a mirror in this tracer, so the spheres show reflections of
each other with the flat ambient term brightening all of them.

Example:
    >>> from src.minitrace.scene.spheres import create_spheres_scene
    >>> scene, camera = create_spheres_scene()
    >>> len(scene)
    6
    >>> camera.fov
    30.0
"""

from dataclasses import dataclass

from src.minitrace.camera.pinhole import DEFAULT_FOV, PinholeCamera
from src.minitrace.core.vector import Vector3
from src.minitrace.geometry.sphere import Sphere
from src.minitrace.scene.scene import Scene

# =============================================================================
# Scene Parameters
# =============================================================================


@dataclass
class SpheresSceneParams:
    """Parameters for configuring the demo scene.

    Attributes:
        light_intensity: Emission of the light sphere on every channel.
        ground_color: RGB albedo of the ground sphere.
        fov: Camera field of view in degrees.

    Example:
        >>> params = SpheresSceneParams(light_intensity=5.0)
        >>> params.ground_color
        (0.2, 0.2, 0.2)
    """

    light_intensity: float = 3.0
    ground_color: tuple[float, float, float] = (0.20, 0.20, 0.20)
    fov: float = DEFAULT_FOV


# =============================================================================
# Scene Constants
# =============================================================================

GROUND_CENTER = (0.0, -10004.0, -20.0)
GROUND_RADIUS = 10000.0

# (center, radius, surface color) of the colored spheres
SPHERES = (
    ((0.0, 0.0, -20.0), 4.0, (1.00, 0.32, 0.36)),
    ((5.0, -1.0, -15.0), 2.0, (0.90, 0.76, 0.46)),
    ((5.0, 0.0, -25.0), 3.0, (0.65, 0.77, 0.97)),
    ((-5.5, 0.0, -15.0), 3.0, (0.90, 0.90, 0.90)),
)

LIGHT_CENTER = (0.0, 20.0, -30.0)
LIGHT_RADIUS = 3.0


def create_spheres_scene(
    params: SpheresSceneParams | None = None,
) -> tuple[Scene, PinholeCamera]:
    """Create the demo scene and the camera that views it.

    Objects are added in a fixed order: ground, the four colored spheres,
    then the light.

    Args:
        params: Optional SpheresSceneParams. If None, uses the defaults.

    Returns:
        A tuple of (Scene, PinholeCamera). The camera sits at the origin
        looking down -Z.
    """
    if params is None:
        params = SpheresSceneParams()

    scene = Scene()
    scene.add(Sphere(Vector3(*GROUND_CENTER), GROUND_RADIUS, Vector3(*params.ground_color)))

    for center, radius, color in SPHERES:
        scene.add(Sphere(Vector3(*center), radius, Vector3(*color)))

    scene.add(
        Sphere(
            Vector3(*LIGHT_CENTER),
            LIGHT_RADIUS,
            Vector3(0.0, 0.0, 0.0),
            Vector3.splat(params.light_intensity),
        )
    )

    camera = PinholeCamera(fov=params.fov)
    return scene, camera
