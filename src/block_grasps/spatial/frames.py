"""Define names of commonly used reference frames."""

DEFAULT_FRAME = "base_link"
"""Default reference frame assumed for poses (the robot's base link)."""
