"""Solutions to classic competitive-programming problems, grouped by topic."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "sequences", "strings", "number_theory", "arrays", "text"]