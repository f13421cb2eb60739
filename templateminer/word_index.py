"""
Inverted index from tokens to the templates containing them.
"""

from typing import Dict, Iterator, List, Tuple


class WordIndex:
    """
    Maps every known token to the sorted ids of templates that contain it.

    Entries only grow: templates are never removed, so an id once registered
    for a token stays there.
    """

    def __init__(self):
        self._entries: Dict[str, List[int]] = {}

    def register(self, token: str, template_id: int) -> None:
        """Record that ``template_id`` contains ``token``. Idempotent."""
        template_ids = self._entries.get(token)
        if template_ids is None:
            self._entries[token] = [template_id]
        elif template_id not in template_ids:
            template_ids.append(template_id)
            template_ids.sort()

    def lookup(self, token: str) -> List[int]:
        """Return the sorted template ids containing ``token``, or ``[]``."""
        return list(self._entries.get(token, ()))

    def items(self) -> Iterator[Tuple[str, List[int]]]:
        """Iterate over ``(token, template_ids)`` pairs in first-seen order."""
        for token, template_ids in self._entries.items():
            yield token, list(template_ids)

    def __contains__(self, token: str) -> bool:
        return token in self._entries

    def __len__(self) -> int:
        return len(self._entries)
