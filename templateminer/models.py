"""
Core data models for online log template learning.
"""

from dataclasses import dataclass, field
from typing import List, Set
from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class Slot:
    """One position of a template: the literal tokens seen there."""
    alternatives: List[str] = field(default_factory=list)

    def __contains__(self, token: str) -> bool:
        return token in self.alternatives

    def __str__(self) -> str:
        if len(self.alternatives) == 1:
            return self.alternatives[0]
        return "(" + "|".join(self.alternatives) + ")"


@dataclass_json
@dataclass
class LogTemplate:
    """A learned log line structure."""
    template_id: int  # index in the store at creation time
    slots: List[Slot] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.slots)

    def pattern(self) -> str:
        """Render the template as a single readable line."""
        return " ".join(str(slot) for slot in self.slots)

    def alternatives(self) -> List[List[str]]:
        """Return the slots as plain nested lists."""
        return [list(slot.alternatives) for slot in self.slots]

    def tokens(self) -> Set[str]:
        """All distinct tokens appearing anywhere in the template."""
        return {token for slot in self.slots for token in slot.alternatives}

    def copy(self) -> 'LogTemplate':
        """Create a detached copy of this template."""
        return LogTemplate(
            template_id=self.template_id,
            slots=[Slot(list(slot.alternatives)) for slot in self.slots]
        )


@dataclass_json
@dataclass
class WordIndexEntry:
    """A single word index entry as exposed to readers."""
    token: str
    template_ids: List[int]


@dataclass_json
@dataclass(frozen=True)
class MinerConfig:
    """Tuning knobs of the matcher, fixed for the lifetime of a miner."""
    # minimum aligned tokens required to accept a match
    min_req_consequent_matches: int = 3
    # input tokens allowed to miss every slot before a candidate is rejected
    max_allowed_new_alternatives: int = 1

    def __post_init__(self):
        if self.min_req_consequent_matches < 0:
            raise ValueError(
                f"min_req_consequent_matches must be >= 0, "
                f"got {self.min_req_consequent_matches}")
        if self.max_allowed_new_alternatives < 0:
            raise ValueError(
                f"max_allowed_new_alternatives must be >= 0, "
                f"got {self.max_allowed_new_alternatives}")


@dataclass_json
@dataclass
class LearnResult:
    """Outcome of learning a single log line."""
    template_id: int
    created: bool  # True when the line started a new template
    tokens: List[str]
    prepended_slots: int = 0

    def __str__(self) -> str:
        action = "created" if self.created else "matched"
        return (f"LearnResult(template_id={self.template_id}, {action}, "
                f"tokens={len(self.tokens)}, prepended={self.prepended_slots})")
