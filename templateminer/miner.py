"""
Online log template miner.

Each line is tokenized, matched against the templates learned so far and
then either folded into the best match or stored as a new template, in a
single pass and in arrival order.
"""

import logging
from typing import Callable, Iterable, Iterator, Optional

from tqdm import tqdm

from .errors import PersistenceNotSupportedError
from .matcher import TemplateMatcher
from .models import LearnResult, LogTemplate, MinerConfig, WordIndexEntry
from .store import TemplateStore
from .tokenizer import LineTokenizer
from .updater import TemplateUpdater


logger = logging.getLogger(__name__)


class TemplateMiner:
    """
    Learns log templates incrementally from a stream of lines.

    Learning is greedy and order-dependent: the same lines in another order
    can produce different templates.
    """

    def __init__(self,
                 config: Optional[MinerConfig] = None,
                 tokenizer: Optional[LineTokenizer] = None):
        """
        Initialize an empty miner.

        Args:
            config: Matching thresholds (defaults to ``MinerConfig()``)
            tokenizer: Tokenizer used for incoming lines
        """
        self.config = config or MinerConfig()
        self.tokenizer = tokenizer or LineTokenizer()
        self.store = TemplateStore()
        self.matcher = TemplateMatcher(self.store, self.config)
        self.updater = TemplateUpdater(self.store)

        self.lines_processed = 0
        self.lines_dropped = 0

    def __len__(self) -> int:
        return len(self.store)

    def learn_line(self, line: str) -> Optional[LearnResult]:
        """
        Learn from a single log line.

        Returns:
            What happened to the line, or None if it had no usable tokens.
        """
        self.lines_processed += 1
        tokens = self.tokenizer.tokenize(line)

        template_id = self.matcher.find_best_match(tokens)
        if template_id is not None:
            prepended = self.updater.learn(tokens, template_id)
            return LearnResult(template_id=template_id, created=False,
                               tokens=tokens, prepended_slots=prepended)

        template_id = self.updater.create(tokens)
        if template_id is None:
            self.lines_dropped += 1
            return None
        return LearnResult(template_id=template_id, created=True, tokens=tokens)

    def learn_lines(self,
                    lines: Iterable[str],
                    progress: bool = False,
                    on_line: Optional[Callable[[int], None]] = None) -> int:
        """
        Learn from every line of an iterable, in order.

        Args:
            lines: Any iterable of line strings; consumed lazily
            progress: Show a tqdm progress bar on stderr
            on_line: Called with the running line count after each line

        Returns:
            Number of lines consumed.
        """
        count = 0
        with tqdm(lines, desc="Learning templates", unit="lines",
                  disable=not progress) as stream:
            for line in stream:
                self.learn_line(line)
                count += 1
                if on_line is not None:
                    on_line(count)

        logger.info("Learned %d templates from %d lines (%d dropped)",
                    len(self.store), count, self.lines_dropped)
        return count

    def templates(self) -> Iterator[LogTemplate]:
        """Iterate over copies of the learned templates in id order."""
        return iter(self.store)

    def word_index(self) -> Iterator[WordIndexEntry]:
        """Iterate over the word index entries."""
        return self.store.index_entries()

    def save_state(self, path: str) -> None:
        """Persisting learned state is not supported yet."""
        raise PersistenceNotSupportedError(
            f"Saving miner state to {path!r} is not supported")

    def load_state(self, path: str) -> None:
        """Restoring learned state is not supported yet."""
        raise PersistenceNotSupportedError(
            f"Loading miner state from {path!r} is not supported")
