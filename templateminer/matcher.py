"""
Fuzzy matcher deciding which learned template a token sequence belongs to.

Matching runs in two phases. The word index is used to shortlist templates
sharing enough tokens with the input, then every shortlisted template is
scored with an ordered alignment that tolerates a bounded number of tokens
missing from the template.
"""

from typing import List, Optional, Sequence

from .models import MinerConfig
from .store import TemplateStore


class TemplateMatcher:
    """
    Selects the best matching template for a sequence of tokens.

    Shortlisting is order-insensitive and cheap; ordering and tolerance are
    only enforced by ``score``.
    """

    def __init__(self, store: TemplateStore, config: Optional[MinerConfig] = None):
        self.store = store
        self.config = config or MinerConfig()

    def find_best_match(self, tokens: Sequence[str]) -> Optional[int]:
        """
        Find the template the tokens should be folded into.

        Returns:
            The id of the accepted template, or None if the line should start
            a new template.
        """
        if len(self.store) == 0 or not tokens:
            return None

        best_template_id = None
        best_score = 0
        for template_id in self.shortlist(tokens):
            score = self.score(tokens, template_id)
            # ties keep the lower id
            if score > best_score:
                best_score = score
                best_template_id = template_id

        min_matches = self.config.min_req_consequent_matches
        if len(tokens) > min_matches:
            if best_score >= min_matches:
                return best_template_id
        elif best_score == len(tokens):
            return best_template_id
        return None

    def candidate_ids(self, tokens: Sequence[str]) -> List[int]:
        """
        Collect the word index entries of every token into one sorted list.

        A template id appears once for every input token referencing it.
        """
        template_ids = []
        for token in tokens:
            template_ids.extend(self.store.lookup(token))
        template_ids.sort()
        return template_ids

    def required_hits(self, token_count: int) -> int:
        """Index hits a template needs before it is worth scoring."""
        config = self.config
        if token_count < config.min_req_consequent_matches:
            return token_count - config.max_allowed_new_alternatives
        return config.min_req_consequent_matches - config.max_allowed_new_alternatives

    def shortlist(self, tokens: Sequence[str]) -> List[int]:
        """
        Return ids of templates referenced by enough input tokens.

        Token order is ignored here; ``score`` checks it.
        """
        required = self.required_hits(len(tokens))
        shortlisted = []
        hits = 0
        previous_id = None
        for template_id in self.candidate_ids(tokens):
            if shortlisted and shortlisted[-1] == template_id:
                continue
            if template_id != previous_id:
                hits = 1
                previous_id = template_id
            else:
                hits += 1
            if hits >= required:
                shortlisted.append(template_id)
        return shortlisted

    def score(self, tokens: Sequence[str], template_id: int) -> int:
        """
        Count tokens aligned in order to increasing slots of a template.

        Tokens not found after the last aligned slot count as new
        alternatives. Inputs longer than the template get one extra allowance
        per surplus token. Exceeding the allowance disqualifies the template
        and scores 0.
        """
        slot_count = self.store.slot_count(template_id)
        if slot_count == 0 or not tokens:
            return 0

        allowed_misses = (self.config.max_allowed_new_alternatives
                          + max(0, len(tokens) - slot_count))
        last_matched_slot = -1
        matched = 0
        mismatched = 0
        for token in tokens:
            slot_index = self.store.find_slot(template_id, token,
                                              last_matched_slot + 1)
            if slot_index is not None:
                last_matched_slot = slot_index
                matched += 1
            else:
                mismatched += 1
                if mismatched > allowed_misses:
                    return 0
        return matched
