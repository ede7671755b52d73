"""Route Sheet Viewer core packages."""
