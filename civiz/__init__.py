"""
Civiz Vision Backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
the vision lifecycle core (classification, point ledger, vision store),
and infrastructure adapters for image generation and street imagery.
"""
