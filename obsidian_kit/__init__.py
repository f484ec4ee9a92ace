"""Headless editor UI logic: colors, shape meshes, picking, scrolling, focus, transitions, animation, text editing, sliders, splitters and viewports."""

__version__ = "0.1.0"