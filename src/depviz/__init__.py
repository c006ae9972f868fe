"""
depviz: manifest-driven dependency graphs.

Turns a dependency manifest and an audit manifest into project, file and
symbol graphs ready for rendering, plus an explorer tree for navigation.
"""

__version__ = "0.1.0"
