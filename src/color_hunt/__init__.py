"""
Color Hunt

A "find the color" camera game. The center of a live video feed is classified
against a target color and sustained correct framing builds up a confidence
score that ends in a success event.

Author: Color Hunt Team
"""

__version__ = "0.1.0"
