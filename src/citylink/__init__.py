"""CityLink: transitive closure and route finding over city adjacency tables."""

__version__ = "0.1.0"
