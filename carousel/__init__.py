"""Carousel generator service: topic in, illustrated slide carousel out."""

__version__ = "1.0.0"
