"""
model/
------
Core data layer.  Public API:

    from model import ArrayModel
"""

from model.array import ArrayModel

__all__ = [
    "ArrayModel",
]
