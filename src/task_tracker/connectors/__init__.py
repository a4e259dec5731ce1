"""Interactive front-ends over the command registry."""
