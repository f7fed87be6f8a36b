"""Small helpers shared across the facade."""
