"""Command-line tools for running the flock without the viewer."""
