"""Generate candidate grasps for picking up rectangular blocks."""
