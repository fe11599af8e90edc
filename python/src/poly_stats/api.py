"""REST API for poly-stats."""

from __future__ import annotations

import logging
from typing import Optional

try:
    from fastapi import FastAPI, HTTPException
    from pydantic import BaseModel, Field
    HAS_API = True
except ImportError:
    HAS_API = False

if HAS_API:
    from poly_stats import (
        ReportSettings,
        SceneRecordSource,
        SortKey,
        dump_mesh_stats,
        is_editor_build,
    )
    from poly_stats.source import Scene

    logger = logging.getLogger(__name__)

    # =========================================================================
    # Models
    # =========================================================================

    class SettingsModel(BaseModel):
        """Report settings accepted by the API."""
        sort_by: SortKey = Field(SortKey.TOTAL_VERT, description="Column to sort by")
        sort_descending: bool = True
        max_min_lod_to_dump: int = Field(5, ge=-1, le=8, description="-1 = no limit")
        min_instance_count: int = Field(1, ge=1)
        min_vert_count: int = Field(1, ge=1)
        min_total_vert_count: int = Field(1, ge=1)
        max_entries_to_dump: int = Field(255, ge=1, le=255)
        key_folder: str = "Assets/MapBuildingAssets/"

    class ReportRequest(BaseModel):
        """Request to build a mesh stats report."""
        scene: Optional[Scene] = Field(None, description="Scene snapshot")
        settings: SettingsModel = Field(default_factory=SettingsModel)

    class EntryResponse(BaseModel):
        name: str
        min_lod: int
        vertex_count: int
        triangle_count: int
        count: int
        total_verts: int
        total_tris: int
        short_path: str

    class ReportResponse(BaseModel):
        """Rendered report plus the rows it contains."""
        lines: list[str]
        entries: list[EntryResponse]
        total_verts: int
        total_tris: int
        aggregated_count: int

    # =========================================================================
    # App
    # =========================================================================

    app = FastAPI(
        title="Poly Stats API",
        description="Per-asset mesh usage statistics",
        version="0.1.0",
    )

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "editor_build": is_editor_build(),
        }

    @app.post("/report", response_model=ReportResponse)
    def report(request: ReportRequest):
        """Aggregate, filter and sort the mesh usage of a scene snapshot."""
        if not is_editor_build():
            raise HTTPException(404, "Mesh stats are only available in editor builds")

        settings = ReportSettings.from_dict(request.settings.model_dump())
        result = dump_mesh_stats(SceneRecordSource(scene=request.scene), settings, log=logger)
        if result is None:
            raise HTTPException(503, "Scene not available")

        return ReportResponse(
            lines=result.lines(),
            entries=[
                EntryResponse(
                    name=e.name,
                    min_lod=e.min_lod,
                    vertex_count=e.vertex_count,
                    triangle_count=e.triangle_count,
                    count=e.count,
                    total_verts=e.total_verts,
                    total_tris=e.total_tris,
                    short_path=e.short_path,
                )
                for e in result.shown_entries
            ],
            total_verts=result.total_verts,
            total_tris=result.total_tris,
            aggregated_count=result.aggregated_count,
        )

    # =========================================================================
    # Run
    # =========================================================================

    def run_server(host: str = "127.0.0.1", port: int = 8000):
        """Run the API server."""
        import uvicorn
        uvicorn.run(app, host=host, port=port)

else:
    app = None

    def run_server(*args, **kwargs):
        print("API dependencies not installed. Run: pip install poly-stats[api]")
