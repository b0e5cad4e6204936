"""Competitive-programming problem solutions as plain functions, with a command line."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "arrays", "cli", "games", "geometry", "strings"]