"""Write staramr AMR detection results into sample metadata."""

__version__ = "0.1.0"
