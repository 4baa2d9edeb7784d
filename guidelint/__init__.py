"""
guidelint - Markdown stil rehberi denetimi ve satir bazli kural degerlendirici.
"""

__version__ = "1.0.0"
