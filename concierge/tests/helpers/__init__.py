"""
Test helpers for Concierge.
"""
