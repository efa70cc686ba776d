"""
courseindex.utilities - Shared helpers
"""
