#!/usr/bin/env python3
"""
Color Hunt - Main Runner Script

Quick launcher for the live camera game.

Usage:
    python run_color_hunt.py [--name Ala] [--camera 0] [--no-speech]

Controls:
- Q: Quit
- N: Skip the current color
- SPACE: Pause/unpause
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from color_hunt.live import main

if __name__ == "__main__":
    print("🎨 Launching Color Hunt...")
    print("📋 Controls: Q=Quit | N=Skip | SPACE=Pause")
    print("=" * 50)
    main()
