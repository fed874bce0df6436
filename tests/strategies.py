"""Hypothesis strategies for property-based testing of tupperware types."""

from hypothesis import strategies as st

# Basic value strategies
integers = st.integers()
texts = st.text(min_size=0, max_size=100)
booleans = st.booleans()

# Anything an Option may hold
present_values = st.one_of(
    integers,
    texts,
    booleans,
    st.floats(allow_nan=False),
    st.lists(integers, max_size=5),
)

# Anything, including the absence of a value
nullable_values = st.one_of(st.none(), present_values)

# Exception strategies
exceptions = st.sampled_from([
    ValueError('test'),
    TypeError('test'),
    RuntimeError('test'),
])

error_messages = st.text(min_size=1, max_size=50)
