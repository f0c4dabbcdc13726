"""Header names and agent identifier parsing for a network proxy between a control plane and its agents."""

__version__ = "0.1.0"
__all__ = ["header"]