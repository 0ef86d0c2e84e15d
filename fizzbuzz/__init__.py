"""FizzBuzz over a fixed range, printed in two passes."""

from .classifier import classify
from .runner import build_results, run

__all__ = ["build_results", "classify", "run"]
