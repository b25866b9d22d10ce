"""Sections of the calculator card: input form, result and category legend."""
