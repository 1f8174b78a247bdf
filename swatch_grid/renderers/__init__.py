"""Output renderers for swatch-grid.

Each module here defines a `renderer` and the canvas class it opens; see
swatch_grid.registry for how they are found.
"""
