"""Command-line scripts for Route Sheet Viewer."""
