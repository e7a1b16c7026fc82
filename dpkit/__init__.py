"""Dynamic-programming solutions to classic path, subset, subsequence and trading problems."""

__version__ = "0.1.0"
__all__ = ["paths", "subsets", "subsequences", "trading"]