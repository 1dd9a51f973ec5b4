"""Monte Carlo pricing of European options under Black-Scholes dynamics."""

__version__ = "0.1.0"