from __future__ import annotations


class InvalidInputError(ValueError):
    pass


class StoreValidationError(InvalidInputError):
    pass
