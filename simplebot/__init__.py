"""simplebot: reference-data chat assistant."""
