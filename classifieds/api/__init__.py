"""
API layer for the Classifieds Board Backend.

Exposes HTTP endpoints under /api/v1 (auth, users, ads, comments).
"""
