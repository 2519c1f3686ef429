"""Customizable hero section templates built as HTML element trees."""

__version__ = "0.0.3"
__all__ = ["markup", "hero1", "hero2", "hero3", "hero3_background"]