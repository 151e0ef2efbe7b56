"""A top-down survival arcade game with chasing enemies, item drops and a weight-limited inventory."""

__version__ = "0.1.0"
__all__ = ["__version__"]