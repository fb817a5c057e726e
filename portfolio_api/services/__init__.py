"""
Use cases for the portfolio API.

Routers call these services instead of touching the JSON files directly.
"""
