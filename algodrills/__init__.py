"""Solutions to classic array, string and linked-list exercises, plus small conversions."""

__version__ = "0.1.0"
__all__ = ["arrays", "conversions", "linked_list", "strings"]