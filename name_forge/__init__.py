"""NameForge: corpus-driven fantasy name generation."""

__version__ = "0.1.0"
