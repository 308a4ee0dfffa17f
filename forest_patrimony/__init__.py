"""Forest land-patrimony hierarchy with bulk CSV/XLSX import."""

__version__ = "0.1.0"
