"""Find chunks of a brick world whose collider count exceeds the physics limit."""

from __future__ import annotations

__version__ = "0.1.0"
