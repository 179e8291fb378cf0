"""Domain layer: vision records, categories, point rules and gateway contracts."""
