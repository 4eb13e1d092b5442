"""Unit tests for exporting grasp candidates to YAML and loading them back."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from block_grasps.grasping import (
    GraspCandidate,
    GraspConfiguration,
    generate_grasps,
    load_grasp_candidates,
)
from block_grasps.io.yaml_utils import export_yaml_data
from block_grasps.spatial import Pose3D


@pytest.fixture
def top_down_config() -> GraspConfiguration:
    """Create a configuration whose correction pitches the gripper straight down."""
    return GraspConfiguration(
        angle_resolution=100,
        grasp_depth_m=0.12,
        approach_retreat_desired_dist_m=0.1,
        approach_retreat_min_dist_m=0.05,
        ee_parent_frame="gripper_roll_link",
        grasp_pose_to_eef=Pose3D.from_xyz_rpy(0.0, 0.0, 0.0, 0.3, -np.pi / 2, 0.0),
        pre_grasp_posture={"gripper_finger_joint": 0.04},
        grasp_posture={"gripper_finger_joint": 0.0},
    )


def test_exported_candidates_load_back_unchanged(
    tmp_path: Path,
    top_down_config: GraspConfiguration,
) -> None:
    """Verify that candidates exported to a YAML file are loaded back with identical poses."""
    # Arrange - Generate grasps for a yawed block and export them to file
    block_pose = Pose3D.from_xyz_rpy(0.5, 0.0, 0.02, yaw_rad=0.7)
    candidates = generate_grasps(block_pose, top_down_config)
    yaml_path = tmp_path / "grasps.yaml"
    export_yaml_data([c.to_yaml_data() for c in candidates], yaml_path)

    # Act - Load the candidates back from file
    loaded = load_grasp_candidates(yaml_path)

    # Assert - Expect the same candidates, with grasp poses matching to numerical precision
    assert len(loaded) == len(candidates)
    for original, result in zip(candidates, loaded):
        assert result.id == original.id
        assert result.quality == original.quality
        assert result.approach == original.approach
        assert result.retreat == original.retreat
        assert result.pre_grasp_posture == original.pre_grasp_posture
        assert result.grasp_posture == original.grasp_posture
        assert result.grasp_pose.ref_frame == original.grasp_pose.ref_frame
        assert np.allclose(
            result.grasp_pose.to_homogeneous_matrix(),
            original.grasp_pose.to_homogeneous_matrix(),
            atol=1e-12,
        )


def test_candidate_yaml_data_stores_quaternion(top_down_config: GraspConfiguration) -> None:
    """Verify that an exported grasp pose holds a position and unit quaternion."""
    # Arrange - Generate a single candidate
    candidate = generate_grasps(Pose3D.identity(), top_down_config)[0]

    # Act - Convert the candidate into YAML data
    data = candidate.to_yaml_data()

    # Assert - Expect seven pose values, the last four forming a unit quaternion
    values = data["grasp_pose"]["xyz_xyzw"]
    assert data["name"] == "Grasp0"
    assert len(values) == 7
    assert np.linalg.norm(values[3:]) == pytest.approx(1.0)
    assert GraspCandidate.from_yaml_data(data).name == candidate.name


def test_loading_non_list_data_raises_error(tmp_path: Path) -> None:
    """Verify that a YAML file holding a mapping isn't mistaken for a list of candidates."""
    # Arrange - Write a mapping to file
    yaml_path = tmp_path / "not_grasps.yaml"
    export_yaml_data({"grasps": []}, yaml_path)

    # Act/Assert - Expect a TypeError
    with pytest.raises(TypeError, match="list of grasp candidates"):
        load_grasp_candidates(yaml_path)
