"""Solveurs TSP exacts et heuristiques, avec outillage de benchmark."""
