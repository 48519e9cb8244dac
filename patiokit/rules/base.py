"""Abstract base class for all part rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each generates one assembly group of parts
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from patiokit.models.context import BuildContext, DeckBuildContext
from patiokit.models.geometry import Point3D, Euler, Size3D
from patiokit.models.parts import Part, PartKind, GeometryKind


# Galvanised brackets, plates and caps
HARDWARE_SURFACE: dict[str, Any] = {"color": "#555555", "metalness": 0.6, "roughness": 0.4}

# Patio rules receive a BuildContext, deck rules a DeckBuildContext
RuleContext = Union[BuildContext, DeckBuildContext]


class PartRule(ABC):
    """
    Base class for all part rules.

    Subclasses implement `applies()` and `generate()`.
    The generator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `generate()` in order. Priorities
    follow the physical assembly order of the structure.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'frame.columns')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Columns & Post Caps')."""
        ...

    @abstractmethod
    def applies(self, context: RuleContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def generate(self, context: RuleContext) -> list[Part]:
        """
        Generate parts for the given context.

        Must be a pure function of the context's config and layout:
        every number comes from a closed-form formula.
        """
        ...


def build_part(
    kind: PartKind,
    position: tuple[float, float, float],
    dimensions: tuple[float, float, float],
    *,
    color: str,
    metalness: float,
    roughness: float,
    rotation: tuple[float, float, float] = (0.0, 0.0, 0.0),
    geometry: GeometryKind = GeometryKind.BOX,
    geometry_args: Optional[list[float]] = None,
    metadata: Optional[dict[str, Any]] = None,
) -> Part:
    """Shorthand for a Part from plain tuples."""
    x, y, z = position
    w, h, d = dimensions
    rx, ry, rz = rotation
    return Part(
        kind=kind,
        position=Point3D(x=x, y=y, z=z),
        rotation=Euler(x=rx, y=ry, z=rz),
        dimensions=Size3D(width=w, height=h, depth=d),
        color=color,
        metalness=metalness,
        roughness=roughness,
        geometry=geometry,
        geometry_args=geometry_args,
        metadata=metadata or {},
    )
