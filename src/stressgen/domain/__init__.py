"""Domain layer: naming rules, member references, ports and results."""
