"""Record sources: where per-instance mesh records come from."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Optional, Protocol, Union

from pydantic import BaseModel, Field, ValidationError

from poly_stats.models import InstanceRecord

logger = logging.getLogger(__name__)


class SourceUnavailableError(RuntimeError):
    """No scene/snapshot is available to read records from."""


class RecordSource(Protocol):
    def records(self) -> Iterator[InstanceRecord]:
        ...


# =========================================================================
# Scene snapshot schema
# =========================================================================

class LODData(BaseModel):
    """Render data for one LOD level."""
    vertices: int = Field(..., ge=0)
    triangles: int = Field(..., ge=0)


class MeshAsset(BaseModel):
    """A shared mesh asset."""
    path: str = ""
    min_lod: int = 0
    lods: list[LODData] = Field(default_factory=list)


class Actor(BaseModel):
    """A scene object; each component references a mesh by name (or nothing)."""
    name: str
    components: list[Optional[str]] = Field(default_factory=list)


class Scene(BaseModel):
    """Snapshot of a scene's mesh usage."""
    name: Optional[str] = None
    meshes: dict[str, MeshAsset] = Field(default_factory=dict)
    actors: list[Actor] = Field(default_factory=list)


def load_scene(path: Union[str, Path]) -> Scene:
    """Read and validate a scene snapshot file."""
    path = Path(path)
    if not path.exists():
        raise SourceUnavailableError(f"Scene snapshot not found: {path}")

    try:
        scene = Scene.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        raise SourceUnavailableError(f"Failed to load scene snapshot {path}: {e}") from e

    logger.debug("Loaded scene %s from %s", scene.name or "<unnamed>", path)
    return scene


# =========================================================================
# Sources
# =========================================================================

class StaticRecordSource:
    """Serves a fixed list of records."""

    def __init__(self, records: Optional[list[InstanceRecord]]) -> None:
        self._records = records

    def records(self) -> Iterator[InstanceRecord]:
        if self._records is None:
            raise SourceUnavailableError("No records loaded")
        return iter(self._records)


class SceneRecordSource:
    """Flattens a scene snapshot into one record per mesh component.

    Components with no mesh, an unknown mesh or a mesh without LOD data are
    skipped. The LOD used is the mesh's min LOD clamped to its LOD range.

    Example:
        source = SceneRecordSource.from_file("level01.json")
        for record in source.records():
            ...
    """

    def __init__(
        self,
        scene: Optional[Scene] = None,
        path: Optional[Union[str, Path]] = None,
    ) -> None:
        self.scene = scene
        self.path = Path(path) if path else None

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> SceneRecordSource:
        """Source backed by a JSON snapshot, loaded when records are requested."""
        return cls(path=path)

    def load(self) -> Scene:
        """Return the scene, reading the snapshot file on first use."""
        if self.scene is None and self.path is not None:
            self.scene = load_scene(self.path)
        if self.scene is None:
            raise SourceUnavailableError("No active scene")
        return self.scene

    def records(self) -> Iterator[InstanceRecord]:
        return self._iter_records(self.load())

    @staticmethod
    def _iter_records(scene: Scene) -> Iterator[InstanceRecord]:
        for actor in scene.actors:
            for mesh_name in actor.components:
                if not mesh_name:
                    continue

                mesh = scene.meshes.get(mesh_name)
                if mesh is None or not mesh.lods:
                    logger.debug("Skipping %s on %s: no render data", mesh_name, actor.name)
                    continue

                lod = min(max(mesh.min_lod, 0), len(mesh.lods) - 1)
                lod_data = mesh.lods[lod]

                yield InstanceRecord(
                    name=mesh_name,
                    min_lod=lod,
                    vertex_count=lod_data.vertices,
                    triangle_count=lod_data.triangles,
                    path=mesh.path,
                )
