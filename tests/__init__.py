"""
Color Hunt Test Suite

- unit/: Unit tests for individual components
- integration/: End-to-end tests through the engine and the CLI tools
"""
