"""
Shared building blocks: DI helpers, errors, logging and validation.
"""
