"""Shared test setup."""

import os

# Widgets and timers need a platform plugin even on headless machines
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
