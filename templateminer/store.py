"""
Append-only template store.

Templates live in a list and are addressed by their integer id. The store
owns the word index and is the only code that mutates either of them, so
every token of every slot is always registered for its template.
"""

import logging
from typing import Iterator, List, Optional, Sequence

from .errors import TemplateNotFoundError
from .models import LogTemplate, Slot, WordIndexEntry
from .word_index import WordIndex


logger = logging.getLogger(__name__)


class TemplateStore:
    """Ordered collection of learned templates plus their word index."""

    def __init__(self):
        self._templates: List[LogTemplate] = []
        self._index = WordIndex()

    def __len__(self) -> int:
        return len(self._templates)

    def __contains__(self, template_id: int) -> bool:
        return self._get(template_id) is not None

    def __iter__(self) -> Iterator[LogTemplate]:
        """Iterate over copies of the templates in id order."""
        for template in self._templates:
            yield template.copy()

    def _get(self, template_id: int) -> Optional[LogTemplate]:
        if template_id is None or not 0 <= template_id < len(self._templates):
            return None
        return self._templates[template_id]

    def get(self, template_id: int) -> Optional[LogTemplate]:
        """Return a copy of a template, or None for an unknown id."""
        template = self._get(template_id)
        return template.copy() if template is not None else None

    def slot_count(self, template_id: int) -> int:
        """Number of slots of a template; 0 for an unknown id."""
        template = self._get(template_id)
        return len(template.slots) if template is not None else 0

    def lookup(self, token: str) -> List[int]:
        """Sorted ids of templates containing ``token``."""
        return self._index.lookup(token)

    def index_entries(self) -> Iterator[WordIndexEntry]:
        """Iterate over the word index entries."""
        for token, template_ids in self._index.items():
            yield WordIndexEntry(token=token, template_ids=template_ids)

    @property
    def vocabulary_size(self) -> int:
        return len(self._index)

    def find_slot(self, template_id: int, token: str,
                  start_slot: int = 0) -> Optional[int]:
        """
        Find the first slot at or after ``start_slot`` that accepts ``token``.

        This is the alignment primitive used by matching and updating: once a
        token matched slot k, later tokens are only searched from k + 1.

        Returns:
            The slot index, or None if the token is empty, the template is
            unknown, or no slot from ``start_slot`` onward contains it.
        """
        if not token:
            return None

        template = self._get(template_id)
        if template is None:
            return None

        slots = template.slots
        if start_slot < 0:
            start_slot = 0
        for slot_index in range(start_slot, len(slots)):
            if token in slots[slot_index]:
                return slot_index
        return None

    def contains_token(self, template_id: int, token: str) -> bool:
        """True if any slot of the template contains ``token``."""
        template = self._get(template_id)
        if template is None:
            return False
        return any(token in slot for slot in template.slots)

    def create_template(self, slots: Sequence[Sequence[str]]) -> Optional[int]:
        """
        Append a new template and register its tokens.

        Args:
            slots: Alternatives for each slot. Empty tokens are ignored and
                slots left without alternatives are skipped.

        Returns:
            The new template id, or None if nothing was left to store.
        """
        template_id = len(self._templates)
        template_slots = []
        for alternatives in slots:
            slot = Slot()
            for token in alternatives:
                if token and token not in slot:
                    slot.alternatives.append(token)
            if slot.alternatives:
                template_slots.append(slot)

        if not template_slots:
            return None

        for slot in template_slots:
            for token in slot.alternatives:
                self._index.register(token, template_id)
        self._templates.append(LogTemplate(template_id=template_id,
                                           slots=template_slots))

        logger.debug("Created template %d with %d slots",
                     template_id, len(template_slots))
        return template_id

    def extend_template_front(self, template_id: int,
                              tokens: Sequence[str]) -> int:
        """
        Prepend one single-token slot per token to an existing template.

        Existing slots shift right by the number of tokens prepended.

        Returns:
            Number of slots prepended.

        Raises:
            TemplateNotFoundError: if the template id was never issued.
        """
        template = self._get(template_id)
        if template is None:
            raise TemplateNotFoundError(template_id)

        front_slots = []
        for token in tokens:
            if not token:
                continue
            self._index.register(token, template_id)
            front_slots.append(Slot([token]))

        if front_slots:
            template.slots[0:0] = front_slots
            logger.debug("Prepended %d slots to template %d",
                         len(front_slots), template_id)
        return len(front_slots)
