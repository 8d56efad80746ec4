"""
Presentation layer - terminal prompts and console output.
"""
