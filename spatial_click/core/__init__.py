"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants (tolerance, provider URLs, map viewport)
- exceptions: Custom exception hierarchy
"""
