"""
Helper utilities for passgen.
"""
