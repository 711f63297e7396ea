"""Local persistence: paths, settings and the saved credential."""
