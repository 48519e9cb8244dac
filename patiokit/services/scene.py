"""Scene export — turns a parts list into a renderer-ready scene.

This is the rendering collaborator's side of the boundary. Surface
materials are shared between nodes through a MaterialCache keyed by a
canonical description of the material. The cache only saves
allocations: bypassing it with NullMaterialCache yields an equal scene.
"""

from __future__ import annotations
import hashlib
import logging
import threading
from typing import Optional

from pydantic import BaseModel, ConfigDict

from patiokit.models import Part, PartKind, FrameFinish, SITE_KINDS

logger = logging.getLogger(__name__)


class SurfaceMaterial(BaseModel):
    """Physically based surface description."""
    model_config = ConfigDict(frozen=True)

    color: str
    metalness: float
    roughness: float
    env_map_intensity: float = 1.2
    clearcoat: float = 0.0
    clearcoat_roughness: float = 0.1
    ior: float = 1.5
    specular_intensity: float = 1.0
    transparent: bool = False
    opacity: float = 1.0

    @property
    def key(self) -> str:
        digest = hashlib.sha1(self.model_dump_json().encode("utf-8")).hexdigest()
        return f"mat-{digest[:12]}"


class FinishPreset(BaseModel):
    roughness: float
    clearcoat_roughness: float
    env_map_intensity: float


FINISH_PRESETS: dict[FrameFinish, FinishPreset] = {
    FrameFinish.MATTE: FinishPreset(roughness=0.45, clearcoat_roughness=0.20, env_map_intensity=1.4),
    FrameFinish.SATIN: FinishPreset(roughness=0.28, clearcoat_roughness=0.12, env_map_intensity=1.8),
    FrameFinish.GLOSS: FinishPreset(roughness=0.18, clearcoat_roughness=0.06, env_map_intensity=2.2),
    FrameFinish.MIRROR: FinishPreset(roughness=0.06, clearcoat_roughness=0.03, env_map_intensity=2.8),
}

MAX_ENV_INTENSITY = 3.2

# Powder-coated aluminium members that take the frame finish
FRAME_KINDS = frozenset({
    PartKind.COLUMN, PartKind.BEAM, PartKind.PURLIN, PartKind.GUTTER,
    PartKind.DOWNPIPE, PartKind.DESIGNER_BEAM, PartKind.DECORATIVE_COLUMN,
    PartKind.GABLE_RIDGE, PartKind.GABLE_INFILL, PartKind.GABLE_TRIM,
})


def frame_material(
    color: str,
    finish: FrameFinish = FrameFinish.GLOSS,
    reflection_strength: Optional[float] = None,
) -> SurfaceMaterial:
    """Clear-coated paint over metal, tuned by the finish preset."""
    preset = FINISH_PRESETS[finish]
    env = preset.env_map_intensity if reflection_strength is None else reflection_strength
    return SurfaceMaterial(
        color=color,
        metalness=0.1,
        roughness=preset.roughness,
        clearcoat=1.0,
        clearcoat_roughness=preset.clearcoat_roughness,
        ior=1.45,
        env_map_intensity=min(env, MAX_ENV_INTENSITY),
    )


def part_material(part: Part, finish: FrameFinish = FrameFinish.GLOSS) -> SurfaceMaterial:
    if part.kind in FRAME_KINDS:
        return frame_material(part.color, finish)
    return SurfaceMaterial(
        color=part.color,
        metalness=part.metalness,
        roughness=part.roughness,
        transparent=bool(part.metadata.get("transparent", False)),
        opacity=float(part.metadata.get("opacity", 1.0)),
    )


class MaterialCache:
    """Keyed store of shared surface materials. Safe to clear at any time."""

    def __init__(self) -> None:
        self._materials: dict[str, SurfaceMaterial] = {}
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    def get_or_create(self, material: SurfaceMaterial) -> tuple[str, SurfaceMaterial]:
        key = material.key
        with self._lock:
            cached = self._materials.get(key)
            if cached is not None:
                self.hits += 1
                return key, cached
            self._materials[key] = material
            self.misses += 1
            return key, material

    def clear(self) -> None:
        with self._lock:
            self._materials.clear()

    def __len__(self) -> int:
        return len(self._materials)


class NullMaterialCache(MaterialCache):
    """Bypasses memoisation; every lookup returns the material it was given."""

    def get_or_create(self, material: SurfaceMaterial) -> tuple[str, SurfaceMaterial]:
        self.misses += 1
        return material.key, material


class SceneNode(BaseModel):
    id: str
    kind: PartKind
    geometry: str
    geometry_args: Optional[list[float]] = None
    position: tuple[float, float, float]
    rotation: tuple[float, float, float]
    size: tuple[float, float, float]
    material: str


class SceneLight(BaseModel):
    source: str
    position: tuple[float, float, float]
    color: str
    intensity: float
    distance: float = 3.0


class Scene(BaseModel):
    nodes: list[SceneNode]
    materials: dict[str, SurfaceMaterial]
    lights: list[SceneLight]


class DebugAnnotation(BaseModel):
    """Labelled bounding box for the QA skeleton overlay."""
    id: str
    label: str
    position: tuple[float, float, float]
    rotation: tuple[float, float, float]
    size: tuple[float, float, float]
    along_x: bool


class SceneBuilder:
    """Builds scenes from parts, sharing materials through the given cache."""

    def __init__(self, cache: MaterialCache | None = None) -> None:
        self.cache = cache if cache is not None else MaterialCache()

    def build(
        self,
        parts: list[Part],
        finish: FrameFinish = FrameFinish.GLOSS,
        include_site: bool = True,
    ) -> Scene:
        nodes: list[SceneNode] = []
        materials: dict[str, SurfaceMaterial] = {}
        lights: list[SceneLight] = []

        for part in parts:
            if not include_site and part.kind in SITE_KINDS:
                continue
            key, material = self.cache.get_or_create(part_material(part, finish))
            materials.setdefault(key, material)
            nodes.append(SceneNode(
                id=part.id,
                kind=part.kind,
                geometry=part.geometry.value,
                geometry_args=part.geometry_args,
                position=part.position.as_tuple(),
                rotation=part.rotation.as_tuple(),
                size=part.dimensions.as_tuple(),
                material=key,
            ))
            if part.metadata.get("emit_light"):
                x, y, z = part.position.as_tuple()
                lights.append(SceneLight(
                    source=part.id,
                    position=(x, y - 0.05, z),
                    color=part.metadata.get("light_color", "#ffffff"),
                    intensity=part.metadata.get("light_intensity", 0.25),
                ))

        logger.debug("Scene: %d nodes, %d materials, %d lights", len(nodes), len(materials), len(lights))
        return Scene(nodes=nodes, materials=materials, lights=lights)


def debug_annotations(parts: list[Part]) -> list[DebugAnnotation]:
    """Labels and boxes for every structural part (site context skipped)."""
    annotations = []
    for part in parts:
        if part.kind in SITE_KINDS:
            continue
        size = part.dimensions
        annotations.append(DebugAnnotation(
            id=part.id,
            label=part.label,
            position=part.position.as_tuple(),
            rotation=part.rotation.as_tuple(),
            size=size.as_tuple(),
            along_x=size.width >= size.depth,
        ))
    return annotations
