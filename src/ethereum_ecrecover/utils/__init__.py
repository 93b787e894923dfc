"""
Utility functions used by the precompile.
"""
