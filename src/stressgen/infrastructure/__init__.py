"""Infrastructure adapters: class reflection and value generators."""
