"""
Unit tests for feedback messages.
"""
from color_hunt.text.feedback import ascii_fold, praise_text, prompt_text
from color_hunt.text.gender import Gender

class TestFeedbackText:
    """Test cases for prompts and praise."""

    def test_prompt(self):
        assert prompt_text("czerwony") == "Znajdź kolor czerwony"

    def test_praise_female(self):
        assert praise_text("Ala", Gender.FEMALE, "czerwony") == "Brawo, Ala! Znalazłaś kolor czerwony!"

    def test_praise_male(self):
        assert praise_text("Piotr", Gender.MALE, "zielony") == "Brawo, Piotr! Znalazłeś kolor zielony!"

    def test_praise_without_name(self):
        assert praise_text("", Gender.MALE, "zielony") == "Brawo! To ten kolor!"
        assert praise_text(None, Gender.FEMALE, "zielony") == "Brawo! To ten kolor!"
        assert praise_text("   ", Gender.FEMALE, "zielony") == "Brawo! To ten kolor!"

    def test_ascii_fold(self):
        assert ascii_fold("Znajdź kolor żółty") == "Znajdz kolor zolty"
        assert ascii_fold("ŁĄKA") == "LAKA"
