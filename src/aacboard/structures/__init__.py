"""Container types used by the board model."""
