"""
Domain layer for Concierge.
"""
