"""
Verb Stamps

A verb stamp is the skeleton of a verb once harakat, hamza variants,
weak letters and a doubled final letter are normalized away. A stem can
only be a verb stem if its stamp belongs to a known verb.
"""

import logging
import re
from typing import Iterable

from .letters import ALEF_HAMZA_ABOVE, HAMZA, WEAK_LETTERS
from .normalize import strip_tashkeel

logger = logging.getLogger(__name__)

HAMZA_FORMS_PATTERN = re.compile('[أإءؤئآ]')
WEAK_LETTERS_PATTERN = re.compile('[%s]' % ''.join(WEAK_LETTERS))


def normalize_verb(verb: str) -> str:
    """
    Reduce a verb (or candidate stem) to its stamp.

    - strip harakat
    - drop the hamza of a four-letter أفعل form
    - unify hamza forms to ء
    - remove weak letters (ا و ي ى)
    - collapse a doubled final letter (مدّ → مد)
    """
    verb = strip_tashkeel(verb)
    if not verb:
        return ''

    if len(verb) == 4 and verb.startswith(ALEF_HAMZA_ABOVE):
        verb = verb[1:]

    verb = HAMZA_FORMS_PATTERN.sub(HAMZA, verb)
    verb = WEAK_LETTERS_PATTERN.sub('', verb)

    if len(verb) > 1 and verb[-1] == verb[-2]:
        verb = verb[:-1]
    return verb


class VerbStampRegistry:
    """Set of verb stamps built from a verb list."""

    def __init__(self, verbs: Iterable[str]):
        self.stamps = {normalize_verb(verb) for verb in verbs}
        self.stamps.discard('')
        logger.debug(f"Verb stamp registry built with {len(self.stamps)} stamps")

    def __len__(self) -> int:
        return len(self.stamps)

    def __contains__(self, stem: str) -> bool:
        return self.is_verb_stamp(stem)

    def is_verb_stamp(self, stem: str) -> bool:
        """Check whether a stem normalizes to a known verb stamp."""
        return normalize_verb(stem) in self.stamps
