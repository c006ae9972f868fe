"""Command line interface for depviz."""
