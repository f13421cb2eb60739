"""
Online Log Template Learning

A Python library that learns log line templates from a stream of free-text
log lines, clustering lines with a shared structure while tolerating
variable tokens.
"""

__version__ = "1.0.0"
__author__ = "Log Template Learning System"

from .errors import (
    TemplateMinerError, TemplateNotFoundError,
    TemplateAlignmentError, PersistenceNotSupportedError
)
from .models import Slot, LogTemplate, WordIndexEntry, MinerConfig, LearnResult
from .tokenizer import LineTokenizer, tokenize, is_numeric
from .word_index import WordIndex
from .store import TemplateStore
from .matcher import TemplateMatcher
from .updater import TemplateUpdater
from .miner import TemplateMiner

__all__ = [
    "TemplateMinerError",
    "TemplateNotFoundError",
    "TemplateAlignmentError",
    "PersistenceNotSupportedError",
    "Slot",
    "LogTemplate",
    "WordIndexEntry",
    "MinerConfig",
    "LearnResult",
    "LineTokenizer",
    "tokenize",
    "is_numeric",
    "WordIndex",
    "TemplateStore",
    "TemplateMatcher",
    "TemplateUpdater",
    "TemplateMiner",
]
