"""Identity and academic document verification.

Classifies noisy OCR text from scanned Indian identity cards and
marksheets and pulls structured fields out of it with line-oriented
keyword and layout heuristics.
"""

__version__ = "1.0.0"
