"""Backend for the portfolio site: like counter and read-only catalog API."""
