"""Generate candidate grasps for a block and optionally visualize them.

Example usage:

    python scripts/generate_block_grasps.py config/block_grasps.yaml \
        --block-xyz-rpy 0.5 0.0 0.02 0 0 0 --pass y down --pass x up --visualize

"""

from __future__ import annotations

from pathlib import Path

import click
from rich.table import Table

from block_grasps.grasping import (
    GraspGenerationError,
    generate_grasps,
    load_grasp_configuration,
)
from block_grasps.grasping.axes import DEFAULT_SAMPLING_PASSES, parse_sampling_pass
from block_grasps.io import console
from block_grasps.io.yaml_utils import export_yaml_data
from block_grasps.spatial import Pose3D
from block_grasps.visualization import OPEN3D_PRESENT, ConsoleGraspPresenter, visualize_grasps


@click.command()
@click.argument("config_path", type=click.Path(exists=True, path_type=Path))
@click.option(
    "--block-xyz-rpy",
    type=float,
    nargs=6,
    default=(0.0, 0.0, 0.0, 0.0, 0.0, 0.0),
    help="Block pose (x, y, z, roll, pitch, yaw) w.r.t. the base frame",
)
@click.option(
    "--pass",
    "passes",
    type=(str, str),
    multiple=True,
    help="Sampling pass as an (axis, direction) pair, e.g. '--pass y down' (repeatable)",
)
@click.option("--config-key", type=str, default=None, help="Top-level key of the configuration")
@click.option("--output", type=click.Path(path_type=Path), default=None, help="Export to YAML")
@click.option("--visualize/--no-visualize", default=False, help="Present the generated grasps")
@click.option("--open3d", "use_open3d", is_flag=True, help="Visualize in an Open3D window")
def main(
    config_path: Path,
    block_xyz_rpy: tuple[float, float, float, float, float, float],
    passes: tuple[tuple[str, str], ...],
    config_key: str | None,
    output: Path | None,
    visualize: bool,
    use_open3d: bool,
) -> None:
    """Generate candidate grasps for a block using the configuration in CONFIG_PATH."""
    try:
        sampling_passes = [parse_sampling_pass(a, d) for a, d in passes] or DEFAULT_SAMPLING_PASSES
    except ValueError as err:
        raise click.BadParameter(str(err), param_hint="--pass") from err

    try:
        config = load_grasp_configuration(config_path, key=config_key)
        block_pose = Pose3D.from_sequence(block_xyz_rpy, ref_frame=config.base_frame)
        candidates = generate_grasps(block_pose, config, sampling_passes)
    except GraspGenerationError as err:
        console.print(f"[red]Grasp generation failed: {err}[/]")
        raise click.exceptions.Exit(1) from err

    table = Table(title=f"{len(candidates)} grasps for block at {block_pose}")
    table.add_column("Name")
    table.add_column("Position (m)")
    table.add_column("Quality", justify="right")
    for c in candidates:
        x, y, z = c.grasp_pose.position
        table.add_row(c.name, f"({x:.3f}, {y:.3f}, {z:.3f})", f"{c.quality:.3f}")
    console.print(table)

    if output is not None:
        export_yaml_data([c.to_yaml_data() for c in candidates], output)
        console.print(f"[green]Exported {len(candidates)} grasps to {output}[/]")

    if not visualize:
        return

    if use_open3d:
        if not OPEN3D_PRESENT:
            raise click.UsageError("Open3D visualization requires the 'open3d' package.")

        from block_grasps.visualization import Open3DGraspPresenter, Open3DVisualizer

        with Open3DVisualizer("Block Grasps") as vis:
            presenter = Open3DGraspPresenter(vis)
            visualize_grasps(candidates, block_pose, config, presenter, step_delay_s=0.05)
            click.pause("Press any key to close the visualization...")
    else:
        visualize_grasps(candidates, block_pose, config, ConsoleGraspPresenter(), animate=False)


if __name__ == "__main__":
    main()
