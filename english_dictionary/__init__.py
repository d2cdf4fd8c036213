"""
English Dictionary - Word Lookup Widget

Looks up English words through the Free Dictionary API and shows
pronunciation, meaning, example usage, synonyms, and audio playback.
"""

__version__ = "1.0.0"
__author__ = "English Dictionary Contributors"
