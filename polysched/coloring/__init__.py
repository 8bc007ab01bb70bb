"""
Edge colouring of relationship layers.

 - fan: one Misra & Gries extension step, colouring a single pending edge
 - layer: colours a whole weight layer and balances the cyclic order of its colour classes
"""

from .fan import Fan, color_edge
from .layer import Layer

__all__ = [
    "Fan",
    "Layer",
    "color_edge",
]
