class RenamerError(Exception):
    """Base error for the project."""

class InvalidPathError(RenamerError):
    pass

class DirectoryReadError(InvalidPathError):
    """The target directory could not be listed. Fatal to the run."""

class RenameError(RenamerError):
    """A single file could not be renamed. Isolated to that file."""

class RenameConflictError(RenameError):
    pass
