"""Bundle text rendering."""
