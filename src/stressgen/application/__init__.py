"""Application layer: member resolution, setters, registry and discovery."""
