"""Testing generators – property-based testing strategies."""
from mp_option.testing.generators.strategies import (
    nothing_strategy,
    option_strategy,
    some_strategy,
)

__all__ = ["nothing_strategy", "option_strategy", "some_strategy"]
