"""
Game state, events and the reducer that folds one into the other.
"""
