"""Solutions to classic array, hashing and stack programming puzzles."""

__version__ = "0.1.0"
__all__ = ["arrays", "stacks", "misc"]