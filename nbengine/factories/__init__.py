"""Build strategies from contracts."""
