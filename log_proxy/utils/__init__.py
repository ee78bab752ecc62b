"""
Utility modules for the log proxy.
"""

from .json_parsing import loads_strict

__all__ = ["loads_strict"]
