"""
Text helpers shared by the name normalizer and the metadata adapter.

These functions only transform strings; they never touch the filesystem.
"""
import re

_WORD_REGEX = re.compile(r"\w+(?:'\w+)*")


def title_case(text: str) -> str:
    """
    Capitalise the first letter of every word and lowercase the rest.

    Apostrophes inside a word do not start a new word, so "bernie's" becomes
    "Bernie's" rather than "Bernie'S" as `str.title` would produce.
    """
    return _WORD_REGEX.sub(lambda m: m.group(0).capitalize(), text)


def strip_colons(name: str) -> str:
    """Remove colons, which Windows filesystems refuse in names."""
    return name.replace(":", "")


def sanitize_episode_title(name: str) -> str:
    """Make an episode title safe to embed in a filename."""
    name = strip_colons(name)
    return name.replace("/", "-").replace("\\", "-")
