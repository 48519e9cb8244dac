"""Tests for scene export and the material cache."""

from __future__ import annotations

import pytest

from patiokit.services.scene import (
    SceneBuilder, MaterialCache, NullMaterialCache, frame_material, debug_annotations,
)
from patiokit.models import PatioConfig, Accessories, FrameFinish, PartKind


@pytest.fixture
def parts(pipeline):
    config = PatioConfig(accessories=Accessories(lighting=True))
    return pipeline.build(config).parts


class TestMaterialCache:
    def test_nodes_share_materials(self, parts) -> None:
        scene = SceneBuilder().build(parts)

        assert len(scene.materials) < len(scene.nodes)
        assert {n.material for n in scene.nodes} == set(scene.materials)

    def test_cache_is_only_an_optimisation(self, parts) -> None:
        cached = SceneBuilder(MaterialCache()).build(parts)
        uncached = SceneBuilder(NullMaterialCache()).build(parts)

        assert cached == uncached

    def test_second_build_hits_cache(self, parts) -> None:
        cache = MaterialCache()
        builder = SceneBuilder(cache)
        builder.build(parts)
        misses, size = cache.misses, len(cache)

        builder.build(parts)

        assert cache.misses == misses
        assert len(cache) == size
        assert cache.hits >= len(parts)

    def test_clear(self, parts) -> None:
        cache = MaterialCache()
        SceneBuilder(cache).build(parts)

        cache.clear()

        assert len(cache) == 0


class TestSceneBuilder:
    def test_lights_hang_below_fittings(self, parts) -> None:
        scene = SceneBuilder().build(parts)
        fittings = {p.id: p for p in parts if p.kind == PartKind.LIGHT}

        assert len(scene.lights) == len(fittings) == 4
        for light in scene.lights:
            assert light.position[1] == pytest.approx(fittings[light.source].position.y - 0.05)
            assert light.color == "#ffd699"

    def test_site_can_be_left_out(self, parts) -> None:
        scene = SceneBuilder().build(parts, include_site=False)
        kinds = {n.kind for n in scene.nodes}

        assert PartKind.GROUND not in kinds
        assert PartKind.WALL not in kinds
        assert PartKind.COLUMN in kinds

    def test_finish_changes_frame_material_only(self, parts) -> None:
        gloss = SceneBuilder().build(parts, finish=FrameFinish.GLOSS)
        matte = SceneBuilder().build(parts, finish=FrameFinish.MATTE)

        gloss_by_id = {n.id: n.material for n in gloss.nodes}
        matte_by_id = {n.id: n.material for n in matte.nodes}
        assert gloss_by_id["column-0"] != matte_by_id["column-0"]
        assert gloss_by_id["base-plate-0"] == matte_by_id["base-plate-0"]

    def test_frame_material_presets(self) -> None:
        assert frame_material("#2d2c2b", FrameFinish.MATTE).roughness == 0.45
        assert frame_material("#2d2c2b", FrameFinish.MIRROR).roughness < 0.1
        assert frame_material("#2d2c2b", reflection_strength=10).env_map_intensity == 3.2


class TestDebugAnnotations:
    def test_site_parts_skipped(self, parts) -> None:
        annotations = debug_annotations(parts)
        structural = [p for p in parts if p.kind not in (PartKind.GROUND, PartKind.WALL)]

        assert [a.id for a in annotations] == [p.id for p in structural]

    def test_beam_labels_and_orientation(self, parts) -> None:
        annotations = {a.id: a for a in debug_annotations(parts)}

        assert annotations["beam-0"].label == "Back Beam"
        assert annotations["beam-0"].along_x is True
        assert annotations["beam-1"].along_x is False
