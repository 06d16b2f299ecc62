"""Allow running the anagram solver with `python -m anagram_solver`."""

from anagram_solver import main

main()
