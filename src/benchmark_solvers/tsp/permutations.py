import math
from typing import Iterator, List, MutableSequence, Tuple


def next_permutation(seq: MutableSequence[int], start: int = 0) -> bool:
    """
    Remplace seq[start:] par la permutation suivante dans l'ordre lexicographique.

    Renvoie False (et laisse seq inchangée) si seq[start:] est déjà la dernière.
    """
    i = len(seq) - 1
    while i > start and seq[i - 1] >= seq[i]:
        i -= 1
    if i <= start:
        return False

    j = len(seq) - 1
    while seq[j] <= seq[i - 1]:
        j -= 1
    seq[i - 1], seq[j] = seq[j], seq[i - 1]

    seq[i:] = seq[i:][::-1]
    return True


class PermutationEngine:
    """
    Tours candidats pour la recherche exhaustive : la ville 0 reste en tête,
    les villes 1..n-1 sont permutées dans l'ordre lexicographique croissant.

    Fixer la ville de départ supprime les n rotations équivalentes d'un même tour.
    Chaque itération repart de la première permutation.
    """

    def __init__(self, n: int):
        if n < 1:
            raise ValueError(f"Il faut au moins une ville, reçu n={n}.")
        self.n = n

    def __len__(self) -> int:
        return math.factorial(self.n - 1)

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        tour: List[int] = list(range(self.n))
        yield tuple(tour)
        while next_permutation(tour, start=1):
            yield tuple(tour)
