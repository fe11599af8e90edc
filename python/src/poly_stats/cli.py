"""CLI for poly-stats."""

from __future__ import annotations

import logging
from pathlib import Path

try:
    import typer
    from rich.console import Console
    from rich.logging import RichHandler
    from rich.table import Table
    HAS_CLI = True
except ImportError:
    HAS_CLI = False

if HAS_CLI:
    from poly_stats import (
        ReportSettings,
        SceneRecordSource,
        SortKey,
        SourceUnavailableError,
        build_report,
        dump_mesh_stats,
        is_editor_build,
    )

    app = typer.Typer(
        name="polystats",
        help="Per-asset mesh usage statistics",
        add_completion=False,
    )
    console = Console()

    # Shared options, overridable through POLY_STATS_* environment variables
    SortOpt = typer.Option(SortKey.TOTAL_VERT, "--sort-by", "-s", envvar="POLY_STATS_SORT_BY", help="Column to sort by")
    DescendingOpt = typer.Option(True, "--descending/--ascending", envvar="POLY_STATS_SORT_DESCENDING")
    MaxLodOpt = typer.Option(5, "--max-min-lod", envvar="POLY_STATS_MAX_MIN_LOD", help="Skip instances above this min LOD (-1 = no limit)")
    MinCountOpt = typer.Option(1, "--min-count", envvar="POLY_STATS_MIN_COUNT", help="Minimum instances per asset")
    MinVertsOpt = typer.Option(1, "--min-verts", envvar="POLY_STATS_MIN_VERTS", help="Minimum vertices per instance")
    MinTotalVertsOpt = typer.Option(1, "--min-total-verts", envvar="POLY_STATS_MIN_TOTAL_VERTS", help="Minimum total vertices per asset")
    MaxEntriesOpt = typer.Option(255, "--max-entries", "-n", envvar="POLY_STATS_MAX_ENTRIES", help="Maximum rows to print")
    KeyFolderOpt = typer.Option("Assets/MapBuildingAssets/", "--key-folder", envvar="POLY_STATS_KEY_FOLDER", help="Path prefix folder to strip")

    def _settings(
        sort_by: SortKey,
        descending: bool,
        max_min_lod: int,
        min_count: int,
        min_verts: int,
        min_total_verts: int,
        max_entries: int,
        key_folder: str,
    ) -> ReportSettings:
        settings = ReportSettings(
            sort_by=sort_by,
            sort_descending=descending,
            max_min_lod_to_dump=max_min_lod,
            min_instance_count=min_count,
            min_vert_count=min_verts,
            min_total_vert_count=min_total_verts,
            max_entries_to_dump=max_entries,
            key_folder=key_folder,
        )
        try:
            settings.validate()
        except ValueError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        return settings

    def _require_editor_build() -> None:
        if not is_editor_build():
            console.print("[red]Error:[/red] Mesh stats are only available in editor builds")
            raise typer.Exit(1)

    def _configure_logging(verbose: bool) -> logging.Logger:
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.INFO,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_time=False, show_path=False, markup=False)],
            force=True,
        )
        return logging.getLogger("poly_stats")

    @app.command()
    def report(
        snapshot: Path = typer.Argument(..., help="Scene snapshot (JSON)"),
        sort_by: SortKey = SortOpt,
        descending: bool = DescendingOpt,
        max_min_lod: int = MaxLodOpt,
        min_count: int = MinCountOpt,
        min_verts: int = MinVertsOpt,
        min_total_verts: int = MinTotalVertsOpt,
        max_entries: int = MaxEntriesOpt,
        key_folder: str = KeyFolderOpt,
        verbose: bool = typer.Option(False, "--verbose", "-v"),
    ) -> None:
        """Dump the fixed-width mesh stats table to the log."""
        _require_editor_build()
        settings = _settings(
            sort_by, descending, max_min_lod, min_count,
            min_verts, min_total_verts, max_entries, key_folder,
        )
        log = _configure_logging(verbose)

        result = dump_mesh_stats(SceneRecordSource.from_file(snapshot), settings, log=log)
        if result is None:
            raise typer.Exit(1)

    @app.command()
    def table(
        snapshot: Path = typer.Argument(..., help="Scene snapshot (JSON)"),
        sort_by: SortKey = SortOpt,
        descending: bool = DescendingOpt,
        max_min_lod: int = MaxLodOpt,
        min_count: int = MinCountOpt,
        min_verts: int = MinVertsOpt,
        min_total_verts: int = MinTotalVertsOpt,
        max_entries: int = MaxEntriesOpt,
        key_folder: str = KeyFolderOpt,
    ) -> None:
        """Show mesh stats as a rich table."""
        _require_editor_build()
        settings = _settings(
            sort_by, descending, max_min_lod, min_count,
            min_verts, min_total_verts, max_entries, key_folder,
        )

        try:
            records = SceneRecordSource.from_file(snapshot).records()
            result = build_report(records, settings)
        except SourceUnavailableError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)

        view = Table(title=f"Mesh Stats: {snapshot.name}")
        view.add_column("Name", style="cyan")
        view.add_column("MinLOD", justify="right")
        view.add_column("Verts", justify="right")
        view.add_column("Tris", justify="right")
        view.add_column("Count", justify="right")
        view.add_column("TotalVerts", justify="right")
        view.add_column("TotalTris", justify="right")
        view.add_column("Path")

        for entry in result.shown_entries:
            view.add_row(
                entry.name,
                str(entry.min_lod),
                f"{entry.vertex_count:,}",
                f"{entry.triangle_count:,}",
                str(entry.count),
                f"{entry.total_verts:,}",
                f"{entry.total_tris:,}",
                entry.short_path,
            )

        console.print(view)
        console.print(
            f"[bold]Total:[/bold] {result.total_verts:,} vertices, "
            f"{result.total_tris:,} triangles "
            f"({len(result.shown_entries)} of {result.aggregated_count} assets shown)"
        )

    @app.command("serve")
    def serve(
        host: str = typer.Option("127.0.0.1", "--host", "-h"),
        port: int = typer.Option(8000, "--port", "-p"),
    ) -> None:
        """Start the REST API server."""
        from poly_stats.api import HAS_API, run_server
        if not HAS_API:
            console.print("[red]API dependencies not installed. Run: pip install poly-stats[api][/red]")
            raise typer.Exit(1)

        console.print(f"[green]Starting API server at http://{host}:{port}[/green]")
        run_server(host=host, port=port)

else:
    def app():
        print("CLI dependencies not installed. Run: pip install poly-stats[cli]")


def main() -> None:
    if HAS_CLI:
        app()
    else:
        print("CLI dependencies not installed. Run: pip install poly-stats[cli]")


if __name__ == "__main__":
    main()
