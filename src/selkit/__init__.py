"""selkit — rectangle, JSON round-trip, and CSS selector builder toolkit."""

__version__ = "0.1.0"
