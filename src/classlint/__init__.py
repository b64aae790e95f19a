"""classlint: duplicate, unknown and ordering checks for utility class lists."""

__version__ = "0.1.0"
