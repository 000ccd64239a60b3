"""Infrastructure Layer: cross-cutting process concerns (logging)."""
