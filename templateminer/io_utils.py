"""
I/O utilities: reading log lines and dumping learned templates.
"""

import json
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import click

from .models import LogTemplate, WordIndexEntry


class LineReader:
    """
    Lazily yields lines from a log file or stdin.

    Line terminators are stripped and undecodable bytes are ignored.
    """

    def __init__(self, file_path: Optional[str] = None, encoding: str = 'utf-8'):
        self.file_path = Path(file_path) if file_path and file_path != '-' else None
        self.encoding = encoding

    def __iter__(self) -> Iterator[str]:
        if self.file_path is None:
            stdin = click.get_text_stream('stdin', encoding=self.encoding,
                                          errors='ignore')
            yield from self._strip(stdin)
            return

        with open(self.file_path, 'r', encoding=self.encoding, errors='ignore') as f:
            yield from self._strip(f)

    @staticmethod
    def _strip(handle: Iterable[str]) -> Iterator[str]:
        for line in handle:
            yield line.rstrip('\r\n')


class TemplateDumpWriter:
    """
    Writer for the JSONL template dump.

    Emits one ``{"type": "template", ...}`` record per template followed by
    one ``{"type": "word", ...}`` record per word index entry.
    """

    def __init__(self, file_path: str):
        self.file_path = Path(file_path)
        self.file_handle = None

    def __enter__(self):
        self.file_handle = open(self.file_path, 'w', encoding='utf-8')
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.file_handle:
            self.file_handle.close()

    def _write_record(self, record_type: str, record: dict) -> None:
        if not self.file_handle:
            raise ValueError("TemplateDumpWriter not opened")

        json.dump({'type': record_type, **record}, self.file_handle,
                  ensure_ascii=False)
        self.file_handle.write('\n')

    def write_template(self, template: LogTemplate) -> None:
        """Write a single template record."""
        self._write_record('template', template.to_dict())

    def write_templates(self, templates: Iterable[LogTemplate]) -> int:
        """Write multiple template records."""
        count = 0
        for template in templates:
            self.write_template(template)
            count += 1
        return count

    def write_index(self, entries: Iterable[WordIndexEntry]) -> int:
        """Write one record per word index entry."""
        count = 0
        for entry in entries:
            self._write_record('word', entry.to_dict())
            count += 1
        return count


def format_dump(templates: Iterable[LogTemplate],
                entries: Iterable[WordIndexEntry]) -> str:
    """
    Render learned state as plain text.

    Templates come first, one JSON array of slot alternatives per line,
    then a blank line and one ``token : [ids]`` line per index entry.
    """
    lines: List[str] = []

    template_lines = [json.dumps(t.alternatives(), ensure_ascii=False)
                      for t in templates]
    lines.extend(template_lines or ["No templates learned yet"])
    lines.append("")

    index_lines = [f"{entry.token} : {entry.template_ids}" for entry in entries]
    lines.extend(index_lines or ["No words with references to templates added yet"])

    return "\n".join(lines) + "\n"


def ensure_parent_directory(path: str) -> Path:
    """Ensure the directory holding ``path`` exists and return the Path."""
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path
