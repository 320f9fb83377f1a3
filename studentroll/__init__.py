"""Student record keeping in plain-text files, with an interactive menu, statistics and rankings."""

__version__ = "0.1.0"
__all__ = ["__version__"]