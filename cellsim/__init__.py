"""Elements, compounds, hex grids and genetic codes for an artificial-life simulation."""

__version__ = "0.1.0"
__all__ = ["compound", "element", "fitness", "genetics", "hexgrids"]