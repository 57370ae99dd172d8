"""
Genee habit diary.

Keeps a date-indexed record of which habit categories were done on each
day, stored either as a CSV file or as a SQLite database, and computes
range counts, untracked dates and the most frequent combinations.
"""
__version__ = "0.3.0"
