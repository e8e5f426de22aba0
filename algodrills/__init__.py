"""Solutions to linked-list, binary-tree and USACO training problems."""

__version__ = "0.1.0"