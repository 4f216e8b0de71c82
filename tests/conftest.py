"""Shared fixtures: a scripted prompter standing in for the terminal."""

from typing import List, Optional
import pytest
from fastjump.prompter import Prompter
from fastjump.utils.errors import InputError


class ScriptedPrompter(Prompter):
    """Prompter that replays canned answers and records everything shown."""

    def __init__(self, answers: Optional[List[str]] = None, confirms: Optional[List[bool]] = None):
        self.answers = list(answers or [])
        self.confirms = list(confirms or [])
        self.lines: List[str] = []
        self.labels: List[str] = []
        self.questions: List[str] = []

    def print_line(self, text: str) -> None:
        self.lines.append(text)

    def read_line(self, label: str) -> str:
        self.labels.append(label)
        if not self.answers:
            raise InputError("Failed to read input: no input")
        return self.answers.pop(0)

    def confirm(self, message: str) -> bool:
        self.questions.append(message)
        if not self.confirms:
            raise InputError("Failed to read input: no input")
        return self.confirms.pop(0)


@pytest.fixture
def scripted_prompter():
    """Factory for ScriptedPrompter instances."""
    def _make(answers=None, confirms=None):
        return ScriptedPrompter(answers, confirms)
    return _make
