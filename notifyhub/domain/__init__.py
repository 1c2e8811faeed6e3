"""Domain layer: entities, collaborator ports and domain errors."""
