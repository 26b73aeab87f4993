"""Word frequency counting with sorted list, binary search tree and heap containers."""

__version__ = "0.1.0"
__all__ = ["bst", "dlist", "heap", "heap_demo", "interactive", "word_count", "words"]