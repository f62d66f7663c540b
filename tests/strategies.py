"""Hypothesis strategies for property-based testing of klaw-outcome types."""

from hypothesis import strategies as st
from klaw_outcome import Failure, Success

integers = st.integers(min_value=-10_000, max_value=10_000)
texts = st.text(min_size=0, max_size=20)

successes = integers.map(Success)
failures = texts.map(Failure)
outcomes = st.one_of(successes, failures)

# Total functions on ints, used for functor and monad laws
int_functions = st.sampled_from([
    lambda x: x + 1,
    lambda x: x * 2,
    lambda x: -x,
    lambda x: x // 3,
])

# Outcome-returning functions on ints
kleisli_functions = st.sampled_from([
    lambda x: Success(x + 1),
    lambda x: Failure(f'odd {x}') if x % 2 else Success(x),
    lambda x: Failure('always'),
])
