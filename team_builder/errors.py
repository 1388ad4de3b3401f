"""
Error kinds raised by the pipeline stages.
Callers decide the user-visible response; nothing here is retried.
"""


class TeamBuilderError(Exception):
    """Base class for every error the pipeline raises on purpose."""


class MalformedInputError(TeamBuilderError):
    """Input bytes are not a readable workbook, or it has fewer than three sheets."""


class SchemaError(TeamBuilderError):
    """A required sheet lacks the name column."""


class RenderError(TeamBuilderError):
    """The PDF could not be produced."""


class UploadRejectedError(TeamBuilderError):
    """An input file failed the intake rules (missing, too large, wrong extension)."""


class StorageError(TeamBuilderError):
    """The rendered document could not be saved to the output directory."""
