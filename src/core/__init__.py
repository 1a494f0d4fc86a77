"""
Core entities and interfaces.
"""
