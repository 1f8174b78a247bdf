"""swatch_grid.core — Foundation layer.

Contains the data types, the table builder, the grid assembler, the
pipeline that drives a canvas, source loading and configuration.
This module has NO dependencies on swatch_grid.renderers or swatch_grid.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
