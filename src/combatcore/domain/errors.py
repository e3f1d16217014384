"""Domain-layer exceptions."""


class InvalidEquipmentError(ValueError):
    """Raised when equipment is built with a missing or malformed slot."""
