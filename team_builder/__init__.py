"""
Team Builder: spreadsheet of three name lists → random teams of 3+1+1 → PDF.
"""

__version__ = "0.1.0"
