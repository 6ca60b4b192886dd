"""Lexing and expansion of the terms inside a range expression."""
