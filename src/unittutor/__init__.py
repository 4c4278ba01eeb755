"""UNITTUTOR

Lessons on unit testing in Python, together with the small example programs the
lessons test and a checker that keeps the lesson documents honest (internal links
resolve, Python snippets parse, every lesson is listed in the table of contents).
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
