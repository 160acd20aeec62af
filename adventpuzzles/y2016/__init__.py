"""Puzzle solutions for 2016, days 1 to 5."""