# src/nemid/__main__.py
"""Module entry point: python -m nemid"""
import sys

from nemid.app import main

sys.exit(main())
