"""Zoo Simulator - animal health over simulated hours."""

__version__ = "0.1.0"
