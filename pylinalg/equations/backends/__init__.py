"""Backends for linear systems."""

from pylinalg.equations.backends.cpu import CramerBackend, InverseBackend

__all__ = [
    "CramerBackend",
    "InverseBackend",
]
