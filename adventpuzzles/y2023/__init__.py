"""Puzzle solutions for 2023, days 1 to 9, 11 to 13, 15 to 18, 22 and 25."""