"""
Template updates applied after a matching decision.
"""

import logging
from typing import Optional, Sequence, Tuple

from .errors import TemplateAlignmentError
from .store import TemplateStore


logger = logging.getLogger(__name__)


class TemplateUpdater:
    """Grows the store with what a newly seen line taught us."""

    def __init__(self, store: TemplateStore):
        self.store = store

    def learn(self, tokens: Sequence[str], template_id: int) -> int:
        """
        Fold tokens into the template they matched.

        Leading tokens that come before the template's first aligned slot
        become new slots at the front of the template. Tokens that missed a
        slot further in are tolerated but not recorded as alternatives.

        Returns:
            Number of slots prepended.

        Raises:
            TemplateAlignmentError: if no token aligns with the template.
        """
        first_token, first_slot = self.first_alignment(tokens, template_id)
        if first_token is None:
            logger.error("Words not matching selected template %d during "
                         "template update: %r", template_id, list(tokens))
            raise TemplateAlignmentError(template_id, tokens)

        if first_token > first_slot:
            return self.store.extend_template_front(
                template_id, tokens[:first_token - first_slot])
        return 0

    def first_alignment(self, tokens: Sequence[str],
                        template_id: int) -> Tuple[Optional[int], Optional[int]]:
        """
        Find the first token that appears in the template.

        Returns:
            ``(token_index, slot_index)``, or ``(None, None)`` when no token
            appears in the template.
        """
        for token_index, token in enumerate(tokens):
            slot_index = self.store.find_slot(template_id, token, 0)
            if slot_index is not None:
                return token_index, slot_index
        return None, None

    def create(self, tokens: Sequence[str]) -> Optional[int]:
        """Start a new template with one slot per non-empty token."""
        return self.store.create_template([[token] for token in tokens if token])
