"""
Core utilities shared across the portfolio API.

Configuration lives here so that routers/services never read os.environ
directly.
"""
