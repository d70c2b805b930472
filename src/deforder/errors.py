"""Exceptions raised by the definition-order recorder."""


class DefinitionOrderTypeError(TypeError):
    """
    An explicit ``__definition_order__`` value is not a sequence of identifiers.

    Raised while the class is being created, before ``type.__new__`` runs,
    so no class object is produced.
    """


class ReadOnlyDefinitionOrderError(AttributeError):
    """Attempt to reassign or delete the record of a finished class."""
