"""Define strategies for generating common representations for property-based testing."""

import hypothesis.strategies as st


@st.composite
def angles_rad(draw: st.DrawFn) -> float:
    """Generate random angles (in radians)."""
    return draw(st.floats(min_value=-10e4, max_value=10e4, allow_infinity=False, allow_nan=False))


@st.composite
def bounded_floats(draw: st.DrawFn, magnitude: float) -> float:
    """Generate random finite floats within [-magnitude, magnitude]."""
    return draw(
        st.floats(min_value=-magnitude, max_value=magnitude, allow_infinity=False, allow_nan=False),
    )
