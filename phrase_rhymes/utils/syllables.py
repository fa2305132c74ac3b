"""Orthographic syllable estimation for words missing from the dictionary."""

from __future__ import annotations

import re
from typing import FrozenSet, Pattern, Tuple


__all__ = [
    "estimate_syllable_count",
    "EXCEPTIONS_ONE",
    "SYLLABLE_ADJUSTMENTS",
]


_CONSONANT_RUN_PATTERN = re.compile(r"[^aeiouy]+")

# Patterns where the vowel-group count overshoots: split vowel digraphs and
# silent endings such as a trailing "e".
_SUBTRACT_PATTERNS = (
    r"cial", r"tia", r"cius", r"cious", r"uiet", r"gious", r"geous",
    r"priest", r"giu", r"dge", r"ion", r"iou", r"sia$",
    r".che$", r".ched$", r".abe$", r".ace$", r".ade$", r".age$", r".aged$",
    r".ake$", r".ale$", r".aled$", r".ales$", r".ane$", r".ame$", r".ape$",
    r".are$", r".ase$", r".ashed$", r".asque$", r".ate$", r".ave$", r".azed$",
    r".awe$", r".aze$", r".aped$", r".athe$", r".athes$", r".ece$", r".ese$",
    r".esque$", r".esques$", r".eze$", r".gue$", r".ibe$", r".ice$", r".ide$",
    r".ife$", r".ike$", r".ile$", r".ime$", r".ine$", r".ipe$", r".iped$",
    r".ire$", r".ise$", r".ished$", r".ite$", r".ive$", r".ize$", r".obe$",
    r".ode$", r".oke$", r".ole$", r".ome$", r".one$", r".ope$", r".oque$",
    r".ore$", r".ose$", r".osque$", r".osques$", r".ote$", r".ove$", r".pped$",
    r".sse$", r".ssed$", r".ste$", r".ube$", r".uce$", r".ude$", r".uge$",
    r".uke$", r".ule$", r".ules$", r".uled$", r".ume$", r".une$", r".upe$",
    r".ure$", r".use$", r".ushed$", r".ute$", r".ved$", r".we$", r".wes$",
    r".wed$", r".yse$", r".yze$", r".rse$", r".red$", r".rce$", r".rde$",
    r".ily$", r".ely$", r".des$", r".gged$", r".kes$", r".ced$", r".ked$",
    r".med$", r".mes$", r".ned$", r".[sz]ed$", r".nce$", r".rles$", r".nes$",
    r".pes$", r".tes$", r".res$", r".ves$", r"ere$",
)

# Patterns where a single vowel group is pronounced as two syllables.
_ADD_PATTERNS = (
    r"ia", r"riet", r"dien", r"ien", r"iet", r"iu", r"iest", r"io", r"ii",
    r"ily", r".oala$", r".iara$", r".ying$", r".earest", r".arer", r".aress",
    r".eate$", r".eation$", r"[aeiouym]bl$", r"[aeiou]{3}", r"^mc", r"ism",
    r"asm", r"([^aeiouy])\1l$", r"[^l]lien", r"^coa[dglx].", r"[^gq]ua[^auieo]",
    r"dnt$",
)

SYLLABLE_ADJUSTMENTS: Tuple[Tuple[Pattern[str], int], ...] = tuple(
    [(re.compile(pattern), -1) for pattern in _SUBTRACT_PATTERNS]
    + [(re.compile(pattern), 1) for pattern in _ADD_PATTERNS]
)

# Monosyllables the pattern tables still count as two.
EXCEPTIONS_ONE: FrozenSet[str] = frozenset(
    {
        "blithe",
        "clothe",
        "clothes",
        "lithe",
        "scythe",
        "seethe",
        "sieve",
        "soothe",
        "teethe",
        "tithe",
        "writhe",
    }
)


def estimate_syllable_count(word: str) -> int:
    """Estimate the number of syllables in ``word`` from its spelling alone.

    The count starts from the number of vowel groups (``y`` counts as a
    vowel) and is then nudged by :data:`SYLLABLE_ADJUSTMENTS`, where every
    matching pattern contributes its weight once, and by
    :data:`EXCEPTIONS_ONE`. This is a best-effort guess for unknown words;
    dictionary entries always carry their recorded count instead.
    """

    normalized = (word or "").lower()
    base_groups = sum(
        1 for chunk in _CONSONANT_RUN_PATTERN.split(normalized) if chunk
    )

    adjustment = 0
    for pattern, weight in SYLLABLE_ADJUSTMENTS:
        if pattern.search(normalized):
            adjustment += weight

    if normalized in EXCEPTIONS_ONE:
        adjustment -= 1

    syllable_count = base_groups + adjustment
    return syllable_count if syllable_count > 0 else 1
