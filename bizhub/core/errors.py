class BizhubError(Exception):
    """Base class for errors raised by the service layer."""


class NotFoundError(BizhubError):
    def __init__(self, entity_label: str, entity_id):
        self.entity_label = entity_label
        self.entity_id = entity_id
        super().__init__("{} with id {} not found".format(entity_label, entity_id))


class ConflictError(BizhubError):
    pass


class ValidationError(BizhubError):
    pass


__all__ = ["BizhubError", "ConflictError", "NotFoundError", "ValidationError"]
