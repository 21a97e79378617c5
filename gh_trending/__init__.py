"""
gh-trending - list GitHub's trending repositories from the command line.
"""

__version__ = "0.1.0"
