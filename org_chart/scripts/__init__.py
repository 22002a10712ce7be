"""Command line entry points for org chart generation."""
