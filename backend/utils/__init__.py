"""
Utility functions and decorators.
"""
