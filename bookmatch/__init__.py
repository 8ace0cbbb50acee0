"""Bookmatch application package.

Matches readers who own the same books and lets them chat in real time.
"""
