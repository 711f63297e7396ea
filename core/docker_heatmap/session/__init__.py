"""Client session: store, lifecycle controller and redirect contract."""
