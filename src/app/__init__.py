"""Core references: runnable, annotated demonstrations of containers,
ordering, and functional-style features.

This package contains the reference containers and functional helpers,
the sample entities, the two demonstration sections (collections and
features), and the runtime configuration they share.
"""

__version__ = "0.1.0"
