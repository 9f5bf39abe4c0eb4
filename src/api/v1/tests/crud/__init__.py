"""
CRUD operations for tests.
"""
