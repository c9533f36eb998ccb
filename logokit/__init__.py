"""
logokit — deterministic brand identity / logo kit generator.

Three palettes, 24 vector logos (3 patterns × 2 layouts × 4 modes),
PNG/JPEG renders, guideline documents and a ZIP kit, all derived
reproducibly from a short service brief.
"""

__version__ = "0.1.0"
