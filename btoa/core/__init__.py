"""Core conversion modules.

WHY: The core package holds the parts that decide what the generated
fragment looks like — identifier derivation and the emitter. The CLI
only wires streams into them.

HOW: identifier.py turns a file name into symbol names, emitter.py
streams bytes into assembly text for a given dialect profile.

RULES:
- No argument parsing, file opening or exit handling here
- Errors are raised as btoa.errors exceptions, never printed
"""
