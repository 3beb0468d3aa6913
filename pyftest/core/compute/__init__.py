"""
Low-level computational utilities.

timing: Section timer used by solvers to populate Result.timing
"""

from pyftest.core.compute.timing import Timer, timed

__all__ = ["Timer", "timed"]
