"""Mini_Cini — personal movie watchlist API."""

__version__ = "0.1.0"
