"""
Grammatical gender inference for Polish given names.

Only used to pick the right verb form in praise ("znalazłeś" / "znalazłaś").
The rule chain is ordered and the order matters: a name that fits several
rules gets the first one.
"""
import re
from enum import Enum

class Gender(Enum):
    MALE = "male"
    FEMALE = "female"

# Male names ending in a vowel
MALE_EXCEPTIONS = frozenset({
    "kuba", "barnaba", "bonawentura", "kosma", "jarema", "dyzma",
    "zawisza", "sasza", "nikita", "luca", "andrea", "ilja", "kosta",
    "jona", "juda", "aleksa",
})

# Female names that do not end in "a"
FEMALE_EXCEPTIONS = frozenset({
    "noemi", "beatrycze", "miriam", "rut", "ruth", "nel", "abigail",
    "karmen", "carmen", "ingrid", "dagmar", "iris", "ester", "estera",
    "nicole", "inez", "mercedes", "doris", "elizabeth", "zoe", "rachel",
})

_NON_LETTERS = re.compile(r"[^a-ząćęłńóśźż\s]")

def normalize_name(raw_name: str) -> str:
    """Lowercase, drop everything but Polish letters and whitespace, trim."""
    return _NON_LETTERS.sub("", (raw_name or "").lower()).strip()

def predict_gender(raw_name: str) -> Gender:
    """
    Guess the grammatical gender of a given name.

    Unanalyzable or empty names come out MALE.
    """
    words = normalize_name(raw_name).split()
    if not words:
        return Gender.MALE
    # Only the first name decides; "Ala Kot" is judged as "Ala"
    name = words[0]

    if name in MALE_EXCEPTIONS:
        return Gender.MALE
    if name in FEMALE_EXCEPTIONS:
        return Gender.FEMALE
    # Vocative address form, e.g. "Adasiu", "Jasiu"
    if name.endswith("u"):
        return Gender.MALE
    if name.endswith("a"):
        return Gender.FEMALE
    return Gender.MALE
