"""External collaborators: network data providers and the state store."""
