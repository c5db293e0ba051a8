"""
Classifieds Board Backend - root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic (users, ads, comments) and infrastructure (MongoDB repositories,
local image storage).
"""
