"""Define data structures describing generated grasp candidates."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Tuple

from block_grasps.io.yaml_utils import load_yaml_data
from block_grasps.spatial import Pose3D

if TYPE_CHECKING:
    from pathlib import Path

Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class GripperTranslation:
    """A straight-line motion of the gripper before or after contact with an object."""

    direction: Vector3
    """Unit vector giving the direction of travel."""

    frame: str
    """Reference frame in which the direction is expressed."""

    desired_distance_m: float
    """Distance (meters) the gripper should ideally travel."""

    min_distance_m: float
    """Minimum distance (meters) the gripper must travel for the motion to succeed."""

    def reversed(self) -> GripperTranslation:
        """Return the same motion traveling in the opposite direction."""
        x, y, z = self.direction
        return GripperTranslation(
            direction=(-x, -y, -z),
            frame=self.frame,
            desired_distance_m=self.desired_distance_m,
            min_distance_m=self.min_distance_m,
        )

    def to_yaml_data(self) -> dict[str, Any]:
        """Convert the translation into a dictionary suitable for export to YAML."""
        return {
            "direction": [float(v) for v in self.direction],
            "frame": self.frame,
            "desired_distance_m": self.desired_distance_m,
            "min_distance_m": self.min_distance_m,
        }

    @classmethod
    def from_yaml_data(cls, data: dict[str, Any]) -> GripperTranslation:
        """Construct a gripper translation from YAML data written by `to_yaml_data`."""
        x, y, z = data["direction"]
        return cls(
            direction=(float(x), float(y), float(z)),
            frame=data["frame"],
            desired_distance_m=float(data["desired_distance_m"]),
            min_distance_m=float(data["min_distance_m"]),
        )


@dataclass(frozen=True)
class GraspCandidate:
    """A fully specified end-effector target for picking up an object, with its metadata."""

    id: int
    grasp_pose: Pose3D
    """End-effector pose for the grasp, expressed in the robot's base frame."""

    quality: float
    """Heuristic measure of how good the grasp is, in [0.1, 1.0]."""

    pre_grasp_posture: Any
    grasp_posture: Any
    approach: GripperTranslation
    retreat: GripperTranslation

    max_contact_force: float = 0.0
    """Maximum contact force used while grasping (<= 0 disables the limit)."""

    @property
    def name(self) -> str:
        """Retrieve a human-readable name for the grasp (e.g., "Grasp3")."""
        return f"Grasp{self.id}"

    def to_yaml_data(self) -> dict[str, Any]:
        """Convert the candidate into a dictionary suitable for export to YAML."""
        return {
            "id": self.id,
            "name": self.name,
            "grasp_pose": self.grasp_pose.to_yaml_data(),
            "quality": self.quality,
            "pre_grasp_posture": self.pre_grasp_posture,
            "grasp_posture": self.grasp_posture,
            "approach": self.approach.to_yaml_data(),
            "retreat": self.retreat.to_yaml_data(),
            "max_contact_force": self.max_contact_force,
        }

    @classmethod
    def from_yaml_data(cls, data: dict[str, Any]) -> GraspCandidate:
        """Construct a grasp candidate from YAML data written by `to_yaml_data`."""
        return cls(
            id=int(data["id"]),
            grasp_pose=Pose3D.from_yaml_data(data["grasp_pose"]),
            quality=float(data["quality"]),
            pre_grasp_posture=data.get("pre_grasp_posture"),
            grasp_posture=data.get("grasp_posture"),
            approach=GripperTranslation.from_yaml_data(data["approach"]),
            retreat=GripperTranslation.from_yaml_data(data["retreat"]),
            max_contact_force=float(data.get("max_contact_force", 0.0)),
        )


def load_grasp_candidates(yaml_path: Path) -> list[GraspCandidate]:
    """Load grasp candidates from a YAML file holding a list of exported candidates.

    :param yaml_path: Path to a YAML file written from `GraspCandidate.to_yaml_data` entries
    :return: Candidates in the order they appear in the file
    :raises TypeError: If the file doesn't hold a list
    """
    yaml_data = load_yaml_data(yaml_path)
    if not isinstance(yaml_data, list):
        raise TypeError(f"Expected a list of grasp candidates in {yaml_path}: {type(yaml_data)}")
    return [GraspCandidate.from_yaml_data(entry) for entry in yaml_data]
