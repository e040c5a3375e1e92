"""
Routers module - API endpoint handlers organized by feature.

- operations: list and run the generation operations
"""
