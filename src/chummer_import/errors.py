"""
Exceptions raised by the import pipeline.

Data quality problems never raise: they degrade to defaults and are
reported as warnings. Only problems that make the whole run impossible are
raised to the caller.
"""


class ImportFailure(Exception):
    """Base class for errors that stop an import."""


class CatalogUnavailableError(ImportFailure):
    """A destination collection could not be resolved.

    Nothing can be persisted without it, so this aborts the batch.
    """


class MarkupError(ImportFailure):
    """A source document could not be parsed as XML."""
