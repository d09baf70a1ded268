"""iconbake: SVG icon geometry flattened into polylines for fixed-point rendering."""

__version__ = "0.1.0"
