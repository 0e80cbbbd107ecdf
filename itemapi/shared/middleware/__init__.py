"""HTTP middleware that is neither security nor error handling."""
