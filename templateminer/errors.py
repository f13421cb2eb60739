"""
Exceptions raised by the template miner.
"""


class TemplateMinerError(Exception):
    """Base class for all template miner errors."""


class TemplateNotFoundError(TemplateMinerError, LookupError):
    """A mutation referenced a template id the store never issued."""

    def __init__(self, template_id: int):
        super().__init__(f"Template {template_id} does not exist")
        self.template_id = template_id


class TemplateAlignmentError(TemplateMinerError):
    """
    An accepted match could not be aligned with its template.

    The matcher and updater share the same alignment primitive, so this
    signals a logic defect rather than bad input.
    """

    def __init__(self, template_id: int, tokens):
        super().__init__(
            f"Tokens do not align with selected template {template_id} "
            f"during update: {list(tokens)!r}")
        self.template_id = template_id
        self.tokens = list(tokens)


class PersistenceNotSupportedError(TemplateMinerError, NotImplementedError):
    """Saving or restoring learned state has no storage format yet."""
