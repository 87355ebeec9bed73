"""Company travel-cost aggregation and hierarchy roll-up."""

__version__ = "1.0.0"
