"""
Shared utilities.
"""
