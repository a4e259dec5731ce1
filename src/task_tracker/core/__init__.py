"""Composition-level types: ports (Protocols) and AppState."""
