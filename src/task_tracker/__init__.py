"""Personal task tracker backed by a JSON file."""
