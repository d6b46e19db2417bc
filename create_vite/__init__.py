"""create-vite: scaffold a new Vite project from a bundled template."""

__version__ = "0.1.0"
