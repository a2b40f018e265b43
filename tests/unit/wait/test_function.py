r"""Unit tests for FunctionWait."""

from __future__ import annotations

import pytest

from httptemplate.wait import BaseWaitStrategy, FunctionWait


def test_function_wait_delegates() -> None:
    """Test that the wait comes from the function."""
    wait = FunctionWait(lambda attempt: attempt * 0.5)
    assert wait.compute(0) == 0.0
    assert wait.compute(4) == 2.0


def test_function_wait_negative_result() -> None:
    """Test that a negative wait raises ValueError."""
    with pytest.raises(ValueError, match=r"negative delay: -1"):
        FunctionWait(lambda attempt: -1).compute(0)  # noqa: ARG005


def test_custom_wait_strategy() -> None:
    """Test that BaseWaitStrategy can be subclassed."""

    class SquareWait(BaseWaitStrategy):
        def compute(self, attempt: int) -> float:
            return float(attempt**2)

    assert SquareWait().compute(3) == 9.0


def test_base_wait_strategy_is_abstract() -> None:
    """Test that BaseWaitStrategy cannot be instantiated."""
    with pytest.raises(TypeError):
        BaseWaitStrategy()  # type: ignore[abstract]
