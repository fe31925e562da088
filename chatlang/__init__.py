"""
Language identification for the trilingual (French / Khmer / English) chatbot.
"""

__version__ = "1.0.0"
