r"""Wait strategies computing the pause between two write attempts.

A strategy is a fixed interval or a function of the retry number.
"""

from __future__ import annotations

__all__ = ["BaseWaitStrategy", "ExponentialWait", "FixedWait", "FunctionWait", "LinearWait"]

from httptemplate.wait.base import BaseWaitStrategy
from httptemplate.wait.exponential import ExponentialWait
from httptemplate.wait.fixed import FixedWait
from httptemplate.wait.function import FunctionWait
from httptemplate.wait.linear import LinearWait
