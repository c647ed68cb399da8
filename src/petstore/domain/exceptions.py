"""Domain-level exceptions.

Every failure the inventory can report is a subclass of PetStoreError so
the CLI layer can catch them uniformly and display user-friendly messages.
"""


class PetStoreError(Exception):
    """Base class for all pet store errors."""


class ValidationError(PetStoreError):
    """A payload or pet type name is malformed."""


class NotFoundError(PetStoreError):
    """No record matches the requested pet type (and id)."""


class DuplicateRecordError(PetStoreError):
    """More than one record shares a (pet type, pet id) key.

    This is a data-integrity violation in the store and is never
    resolved automatically.
    """


class UnsupportedTypeError(PetStoreError):
    """The pet type is not one the store accepts (e.g. WILD, FARM)."""


class DataStoreError(PetStoreError):
    """The data file is missing, malformed, or unreadable."""


class FileWriteError(PetStoreError):
    """The data file could not be written."""
