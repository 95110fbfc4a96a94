"""
Color Hunt vision components:
- HSL conversion
- Color catalog and matching
- Frame classification and confidence accumulation
"""
