"""Classic algorithms: sorting, searching, array and string problems, number
utilities, patterns, graphs, trees, linked lists and checksums."""

__version__ = "0.1.0"