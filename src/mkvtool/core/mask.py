"""Format mask rendering.

A mask mixes literal text with tokens of the form ``%[format]{field}``, where
"format" is a printf style sizing specification. Examples:

- ``%{title}``: title, capitalized
- ``%02.2{season}``: season as two digits, zero padded
- ``%-20{group}``: group, left justified in 20 characters
- ``%.10{title}``: title truncated to 10 characters

Anything that is not a token is copied literally. Rendering fails if any
token in the mask cannot be resolved (a typical example is asking for
episode numbers for movies).
"""

import re
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from mkvtool.models.metadata import FieldValue
from mkvtool.utils.logger import get_logger

logger = get_logger(__name__)

TOKEN_PATTERN = re.compile(r"%((?:-?\d+)?(?:\.\d+)?)\{([a-z]+)\}")
TOKEN_OPENER_PATTERN = re.compile(r"%(?:-?\d+)?(?:\.\d+)?\{")

# Numeric fields at or below this value were not extracted.
UNSET_NUMBER = 0

TITLE_FIELD = "title"
MINOR_WORDS = frozenset({"a", "an", "on", "the", "to"})
WORD_SEPARATOR = re.compile(r"(\s+|-)")


class RenderError(Exception):
    """Base class for mask rendering failures."""


class UnresolvedFieldsError(RenderError):
    """One or more tokens could not be resolved."""

    def __init__(self, tokens: list[str]):
        self.tokens = list(tokens)
        super().__init__(f"unable to parse data for {', '.join(self.tokens)}")


class MalformedMaskError(RenderError):
    """The mask contains a token that cannot be parsed."""

    def __init__(self, mask: str, position: int):
        self.mask = mask
        self.position = position
        super().__init__(f"malformed token at position {position} in mask {mask!r}")


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Token:
    text: str  # The token as written in the mask, e.g. "%02.2{season}"
    sizespec: str  # e.g. "02.2", may be empty
    field: str  # e.g. "season"


Segment = Union[Literal, Token]


def _check_literal(mask: str, text: str, offset: int) -> None:
    if match := TOKEN_OPENER_PATTERN.search(text):
        raise MalformedMaskError(mask, offset + match.start())


def tokenize(mask: str) -> list[Segment]:
    """Split a mask into literal and token segments.

    Args:
        mask: Format mask

    Returns:
        Segments in mask order

    Raises:
        MalformedMaskError: If a token is opened but cannot be parsed
    """
    segments: list[Segment] = []
    pos = 0

    for match in TOKEN_PATTERN.finditer(mask):
        if match.start() > pos:
            literal = mask[pos : match.start()]
            _check_literal(mask, literal, pos)
            segments.append(Literal(literal))
        segments.append(Token(match.group(0), match.group(1), match.group(2)))
        pos = match.end()

    if pos < len(mask):
        _check_literal(mask, mask[pos:], pos)
        segments.append(Literal(mask[pos:]))

    return segments


def title_case(text: str) -> str:
    """Capitalize every word, except minor words not starting the string.

    Hyphens separate words, so "spider-man" becomes "Spider-Man".
    """
    words = WORD_SEPARATOR.split(text.lower())
    first = True
    for i, word in enumerate(words):
        if not word or WORD_SEPARATOR.fullmatch(word):
            continue
        if first or word not in MINOR_WORDS:
            words[i] = word[:1].upper() + word[1:]
        first = False
    return "".join(words)


def resolve_token(token: Token, fields: Mapping[str, FieldValue]) -> Optional[str]:
    """Render a single token, or return None if its field is unset.

    Args:
        token: Token to resolve
        fields: Field mapping with lowercase keys

    Returns:
        Formatted value, or None if the field is absent, empty or not positive
    """
    value = fields.get(token.field.lower())

    if isinstance(value, str):
        if value == "":
            return None
        if token.field == TITLE_FIELD:
            value = title_case(value)
        return ("%" + token.sizespec + "s") % value

    if isinstance(value, int):
        if value <= UNSET_NUMBER:
            return None
        return ("%" + token.sizespec + "d") % value

    return None


def render_mask(fields: Mapping[str, FieldValue], mask: str) -> str:
    """Render a mask using the values in fields.

    Args:
        fields: Field name to value mapping (keys are case-insensitive)
        mask: Format mask

    Returns:
        The rendered string

    Raises:
        MalformedMaskError: If the mask cannot be tokenized, or a size
            specification is out of range
        UnresolvedFieldsError: If any token could not be resolved. All
            unresolved tokens are listed, in mask order.
    """
    segments = tokenize(mask)
    normalized = {key.lower(): value for key, value in fields.items()}

    parts = []
    unresolved = []
    pos = 0
    for segment in segments:
        start = pos
        pos += len(segment.text)
        if isinstance(segment, Literal):
            parts.append(segment.text)
            continue
        try:
            rendered = resolve_token(segment, normalized)
        except (ValueError, OverflowError):
            # e.g. "width too big"
            raise MalformedMaskError(mask, start) from None
        if rendered is None:
            unresolved.append(segment.text)
            continue
        parts.append(rendered)

    if unresolved:
        logger.debug("Unresolved mask tokens", mask=mask, tokens=unresolved)
        raise UnresolvedFieldsError(unresolved)

    return "".join(parts)
