"""Testing support – Hypothesis strategies for ``Option`` values."""

from mp_option.testing.generators import nothing_strategy, option_strategy, some_strategy

__all__ = ["nothing_strategy", "option_strategy", "some_strategy"]
