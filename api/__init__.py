"""
API package for Compares.
"""
