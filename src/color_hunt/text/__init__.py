"""Polish feedback text and grammatical gender inference."""
