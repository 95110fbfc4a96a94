"""
Color Hunt Unit Tests

Tests for:
- Vision (HSL conversion, color matching, frame classification, confidence)
- Text (gender inference, feedback messages)
- Game engine, configuration, storage and speech collaborators
"""
