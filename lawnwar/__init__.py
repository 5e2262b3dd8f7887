"""A lane-defence game of plants and zombies on a lawn grid, with pygame display."""

__version__ = "1.0.0"