"""Polish prompts and praise shown or spoken to the player."""
from typing import Optional

from color_hunt.text.gender import Gender

# OpenCV's Hershey fonts only cover ASCII
_ASCII_FOLD = str.maketrans("ąćęłńóśźżĄĆĘŁŃÓŚŹŻ", "acelnoszzACELNOSZZ")

FOUND_VERB = {
    Gender.MALE: "Znalazłeś",
    Gender.FEMALE: "Znalazłaś",
}

def prompt_text(target_label: str) -> str:
    return f"Znajdź kolor {target_label}"

def praise_text(player_name: Optional[str], gender: Gender, target_label: str) -> str:
    """
    Build the success message for a found color.

    Args:
        player_name: Name as entered by the player, may be empty
        gender: Inferred gender, selects the verb form
        target_label: Polish label of the color that was found
    """
    name = (player_name or "").strip()
    if not name:
        return "Brawo! To ten kolor!"
    return f"Brawo, {name}! {FOUND_VERB[gender]} kolor {target_label}!"

def ascii_fold(text: str) -> str:
    return text.translate(_ASCII_FOLD)
