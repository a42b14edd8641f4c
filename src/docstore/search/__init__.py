"""Search module for docstore."""
from docstore.search.matcher import MatchMode, match

__all__ = ["MatchMode", "match"]
