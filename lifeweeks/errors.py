class BuildError(Exception):
    """Base class for failures that abort a timeline build."""


class InvalidConfig(BuildError):
    """The configuration could not be parsed or violates a field constraint."""


class EmptyDecadeStyles(BuildError):
    """No decade styles are configured, so no week can be styled."""


class RenderError(BuildError):
    """The grid template could not be loaded or rendered."""
