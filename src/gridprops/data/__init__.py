"""Static keyword tables."""
