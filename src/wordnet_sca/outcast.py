"""Pick the noun least related to the rest of a group."""

from collections.abc import Iterable

from .wordnet import WordNet


class Outcast:
    """Finds outcasts using WordNet distances."""

    def __init__(self, wordnet: WordNet) -> None:
        self.wordnet = wordnet

    def distance_sums(self, nouns: Iterable[str]) -> dict[str, int]:
        """Sum of distances from each noun to every other noun in the group.

        Duplicate nouns are counted once. Each pair is queried once.
        """
        group = list(dict.fromkeys(nouns))
        sums = dict.fromkeys(group, 0)
        for i, first in enumerate(group):
            for second in group[i + 1 :]:
                distance = self.wordnet.distance(first, second)
                sums[first] += distance
                sums[second] += distance
        return sums

    def outcast(self, nouns: Iterable[str]) -> str | None:
        """Return the noun with the strictly largest distance sum.

        Returns None for groups of fewer than three distinct nouns, or when
        the largest sum is shared by more than one noun.
        """
        group = list(dict.fromkeys(nouns))
        if len(group) <= 2:
            return None

        sums = self.distance_sums(group)
        best = max(sums.values())
        leaders = [noun for noun, total in sums.items() if total == best]
        if len(leaders) > 1:
            return None
        return leaders[0]
