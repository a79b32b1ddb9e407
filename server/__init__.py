"""Server-side applications."""
