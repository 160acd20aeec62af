"""Puzzle solutions for 2015, days 1 to 12 and 14 to 25."""