"""Sort comma-separated rows by a column with a library sort or a binary tree sort."""

__version__ = "0.1.0"