"""Report output formats."""
