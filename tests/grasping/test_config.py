"""Unit tests for loading and validating grasp configurations."""

from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from block_grasps.grasping import (
    GraspConfiguration,
    InvalidConfigurationError,
    load_grasp_configuration,
)
from block_grasps.io.yaml_utils import export_yaml_data

VALID_CONFIG_DATA = {
    "angle_resolution": 16,
    "grasp_depth_m": 0.12,
    "approach_retreat_desired_dist_m": 0.1,
    "approach_retreat_min_dist_m": 0.05,
    "ee_parent_frame": "gripper_roll_link",
    "grasp_pose_to_eef": [0.0, 0.0, 0.02, 0.0, -np.pi / 2, 0.0],
    "pre_grasp_posture": {"finger_joint": 0.04},
    "grasp_posture": {"finger_joint": 0.0},
}


def write_config(tmp_path: Path, **overrides) -> Path:
    """Write a grasp configuration (with the given overrides) to a temporary YAML file."""
    data = {**VALID_CONFIG_DATA, **overrides}
    yaml_path = tmp_path / "grasp_config.yaml"
    export_yaml_data(data, yaml_path)
    return yaml_path


def test_load_valid_configuration(tmp_path: Path) -> None:
    """Verify that a valid YAML configuration is loaded with all of its fields."""
    # Arrange - Write a valid configuration to file
    yaml_path = write_config(tmp_path)

    # Act - Load the configuration
    config = load_grasp_configuration(yaml_path)

    # Assert - Expect the loaded values, including defaults and pass-through postures
    assert config.angle_resolution == 16
    assert config.grasp_depth_m == pytest.approx(0.12)
    assert config.base_frame == "base_link"
    assert config.ee_parent_frame == "gripper_roll_link"
    assert config.block_size_m == pytest.approx(0.04)
    assert config.pre_grasp_posture == {"finger_joint": 0.04}
    assert config.grasp_posture == {"finger_joint": 0.0}
    assert config.grasp_pose_to_eef.ref_frame == "gripper_roll_link"
    assert config.grasp_pose_to_eef.position.z == pytest.approx(0.02)


def test_load_configuration_nested_under_key(tmp_path: Path) -> None:
    """Verify that a configuration can be loaded from under a top-level key."""
    # Arrange - Nest the configuration under a robot name
    yaml_path = tmp_path / "robots.yaml"
    export_yaml_data({"baxter": VALID_CONFIG_DATA}, yaml_path)

    # Act - Load the nested configuration
    config = load_grasp_configuration(yaml_path, key="baxter")

    # Assert - Expect the nested values
    assert config.angle_resolution == 16


def test_load_configuration_with_matrix_correction(tmp_path: Path) -> None:
    """Verify that the end-effector correction can be given as a 4x4 rigid matrix."""
    # Arrange - Give the correction as a 90-degree yaw with a translation
    matrix = [[0.0, -1.0, 0.0, 0.1], [1.0, 0.0, 0.0, 0.0], [0.0, 0.0, 1.0, 0.0], [0, 0, 0, 1]]
    yaml_path = write_config(tmp_path, grasp_pose_to_eef={"matrix": matrix})

    # Act - Load the configuration
    config = load_grasp_configuration(yaml_path)

    # Assert - Expect the correction to reproduce the matrix
    assert np.allclose(config.grasp_pose_to_eef.to_homogeneous_matrix(), matrix, atol=1e-12)


def test_load_configuration_with_framed_correction(tmp_path: Path) -> None:
    """Verify that the end-effector correction can be given as a dictionary with a frame."""
    # Arrange - Give the correction with an explicit frame
    correction = {"xyz_rpy": [0.0, 0.0, 0.1, 0.0, 0.0, 0.0], "frame": "wrist"}
    yaml_path = write_config(tmp_path, grasp_pose_to_eef=correction)

    # Act - Load the configuration
    config = load_grasp_configuration(yaml_path)

    # Assert - Expect the given frame and offset
    assert config.grasp_pose_to_eef.ref_frame == "wrist"
    assert config.grasp_pose_to_eef.position.z == pytest.approx(0.1)


def test_nonorthonormal_matrix_correction_is_invalid(tmp_path: Path) -> None:
    """Verify that a correction matrix with a scaled rotation is rejected."""
    # Arrange - Scale the rotation block of the correction matrix
    matrix = [[2.0, 0.0, 0.0, 0.0], [0.0, 2.0, 0.0, 0.0], [0.0, 0.0, 2.0, 0.0], [0, 0, 0, 1]]
    yaml_path = write_config(tmp_path, grasp_pose_to_eef={"matrix": matrix})

    # Act/Assert - Expect an InvalidConfigurationError
    with pytest.raises(InvalidConfigurationError, match="rigid"):
        load_grasp_configuration(yaml_path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"angle_resolution": 0},
        {"grasp_depth_m": -0.1},
        {"approach_retreat_min_dist_m": 0.2},  # Exceeds the desired distance
        {"unknown_field": 1.0},
    ],
)
def test_invalid_yaml_configurations_are_rejected(tmp_path: Path, overrides: dict) -> None:
    """Verify that invalid YAML configurations are reported as configuration errors."""
    # Arrange - Write an invalid configuration to file
    yaml_path = write_config(tmp_path, **overrides)

    # Act/Assert - Expect an InvalidConfigurationError
    with pytest.raises(InvalidConfigurationError):
        load_grasp_configuration(yaml_path)


@pytest.mark.parametrize(
    "overrides",
    [
        {"angle_resolution": 0},
        {"angle_resolution": 2.5},
        {"grasp_depth_m": 0.0},
        {"grasp_depth_m": float("inf")},
        {"approach_retreat_desired_dist_m": -1.0},
        {"approach_retreat_min_dist_m": 0.5},
    ],
)
def test_invalid_configurations_are_rejected(overrides: dict) -> None:
    """Verify that constructing an invalid GraspConfiguration raises a configuration error."""
    # Arrange - Combine typical values with the invalid overrides
    kwargs = {
        "angle_resolution": 4,
        "grasp_depth_m": 0.12,
        "approach_retreat_desired_dist_m": 0.1,
        "approach_retreat_min_dist_m": 0.05,
        "ee_parent_frame": "gripper_roll_link",
        **overrides,
    }

    # Act/Assert - Expect an InvalidConfigurationError (which is also a ValueError)
    with pytest.raises(InvalidConfigurationError):
        GraspConfiguration(**kwargs)

    with pytest.raises(ValueError):
        GraspConfiguration(**kwargs)


def test_example_configuration_file_loads() -> None:
    """Verify that the example configuration shipped with the repository is valid."""
    # Arrange - Locate the example configuration
    yaml_path = Path(__file__).parents[2] / "config" / "block_grasps.yaml"

    # Act - Load the configuration
    config = load_grasp_configuration(yaml_path)

    # Assert - Expect the documented resolution and frames
    assert config.angle_resolution == 16
    assert config.ee_parent_frame == "gripper_roll_link"


def test_load_configuration_with_quaternion_correction(tmp_path: Path) -> None:
    """Verify that the end-effector correction can be given as a position and quaternion."""
    # Arrange - Give the correction as a quarter turn about y (w = x-component = sqrt(0.5))
    half = float(np.sqrt(0.5))
    correction = {"xyz_xyzw": [0.0, 0.0, 0.02, 0.0, -half, 0.0, half]}
    yaml_path = write_config(tmp_path, grasp_pose_to_eef=correction)

    # Act - Load the configuration
    config = load_grasp_configuration(yaml_path)

    # Assert - Expect the correction to map the gripper's x-axis onto +z in the parent frame
    rotation = config.grasp_pose_to_eef.orientation.to_rotation_matrix()
    assert config.grasp_pose_to_eef.ref_frame == "gripper_roll_link"
    assert np.allclose(rotation[:, 0], [0.0, 0.0, 1.0], atol=1e-12)


def test_zero_quaternion_correction_is_invalid(tmp_path: Path) -> None:
    """Verify that a correction with an all-zero quaternion is rejected."""
    # Arrange - Give the correction a zero quaternion
    yaml_path = write_config(tmp_path, grasp_pose_to_eef={"xyz_xyzw": [0.0] * 7})

    # Act/Assert - Expect an InvalidConfigurationError
    with pytest.raises(InvalidConfigurationError, match="nonzero"):
        load_grasp_configuration(yaml_path)
