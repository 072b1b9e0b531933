#!/usr/bin/env python3
"""
Render Engine - Main entry point.

Runs the command line renderer from a source checkout.
"""

import os
import sys

# Add the render engine to the path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

from render_engine.main import main

if __name__ == "__main__":
    sys.exit(main())
