"""
Shared fixtures: a store pre-populated with templates containing
alternatives, and sample log lines.
"""

from templateminer.store import TemplateStore


def simple_template(text: str):
    """One single-alternative slot per space separated word."""
    return [[word] for word in text.split(" ")]


def add_alternative(slots, index: int, word: str):
    """Add an extra alternative to an existing slot."""
    if index >= len(slots):
        raise IndexError(f"Failed to create test data! Extending {slots} at {index}")
    slots[index].append(word)
    return slots


def build_sample_store() -> TemplateStore:
    """
    Templates:
        0: aaa (qqq|bbb) (ccc|rrr) (sss|ddd)
        1: eee fff ggg hhh x y z
        2: iii jjj kkk lll
        3: mmm nnn ooo ppp
        4: qqq rrr sss (ttt|aaa)
        5: ttt aaa uuu bbb ccc ddd vvv
    """
    store = TemplateStore()

    complex_template = simple_template("aaa qqq ccc sss")
    add_alternative(complex_template, 1, "bbb")
    add_alternative(complex_template, 2, "rrr")
    add_alternative(complex_template, 3, "ddd")
    store.create_template(complex_template)

    store.create_template(simple_template("eee fff ggg hhh x y z"))
    store.create_template(simple_template("iii jjj kkk lll"))
    store.create_template(simple_template("mmm nnn ooo ppp"))
    store.create_template(add_alternative(simple_template("qqq rrr sss ttt"), 3, "aaa"))
    store.create_template(simple_template("ttt aaa uuu bbb ccc ddd vvv"))
    return store


SAMPLE_LOG_LINES = [
    "user alice logged in from server",
    "user bob logged in from server",
    "disk /dev/sda1 is full",
    "user carol dave logged in from server",
    "2024-01-01 12:00:00 connection 42 closed",
    "12345 678",
]
