"""
Internal helpers for argguard: caller expression capture and logging setup.
"""
