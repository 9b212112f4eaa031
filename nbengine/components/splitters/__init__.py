"""Train/test splitting strategies (see .splitters and .types)."""
