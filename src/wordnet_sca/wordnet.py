"""WordNet noun database backed by the hypernym digraph."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .ancestor import AncestorFinder
from .digraph import IndexedDigraph
from .parse_records import read_hypernyms, read_synsets


class UnknownNounError(KeyError):
    """Raised when a query names a noun that is not in the database."""

    def __str__(self) -> str:
        return f"'{self.args[0]}' is not a WordNet noun"


@dataclass(frozen=True)
class Synset:
    """A set of synonymous nouns with its definition."""

    id: int
    nouns: tuple[str, ...]
    gloss: str


class WordNet:
    """Nouns, glosses and the hypernym graph built from two record streams.

    Args:
        synsets: Lines of ``id,noun1 noun2 ...,gloss`` records.
        hypernyms: Lines of ``id,hypernym_id,...`` records.
    """

    def __init__(self, synsets: Iterable[str], hypernyms: Iterable[str]) -> None:
        self._synsets: dict[int, Synset] = {}
        self._noun_ids: dict[str, list[int]] = {}
        self.graph = IndexedDigraph()

        for synset_id, nouns, gloss in read_synsets(synsets):
            self._synsets[synset_id] = Synset(synset_id, tuple(nouns), gloss)
            for noun in nouns:
                self._noun_ids.setdefault(noun, []).append(synset_id)

        self.graph.reserve(len(self._synsets))
        for synset_id in self._synsets:
            self.graph.add_vertex(synset_id)
        for synset_id, hypernym_ids in read_hypernyms(hypernyms):
            for referenced in [synset_id, *hypernym_ids]:
                if referenced not in self._synsets:
                    raise ValueError(f"hypernym record names unknown synset id {referenced}")
            for hypernym_id in hypernym_ids:
                self.graph.add_edge(synset_id, hypernym_id)

        self._finder = AncestorFinder(self.graph)

    @classmethod
    def from_files(cls, synsets_path: Path, hypernyms_path: Path) -> "WordNet":
        """Load a database from a synsets file and a hypernyms file."""
        with open(synsets_path, encoding="utf-8") as synsets, open(
            hypernyms_path, encoding="utf-8"
        ) as hypernyms:
            return cls(synsets, hypernyms)

    def __len__(self) -> int:
        return len(self._synsets)

    def nouns(self) -> Iterator[str]:
        return iter(self._noun_ids)

    def is_noun(self, word: str) -> bool:
        return word in self._noun_ids

    def synsets_of(self, noun: str) -> list[int]:
        """Ids of every synset containing ``noun``."""
        try:
            return list(self._noun_ids[noun])
        except KeyError:
            raise UnknownNounError(noun) from None

    def synset(self, synset_id: int) -> Synset:
        return self._synsets[synset_id]

    def gloss(self, synset_id: int) -> str:
        return self._synsets[synset_id].gloss

    def _ancestor_length(self, noun1: str, noun2: str) -> tuple[int, int]:
        return self._finder.ancestor_length(self.synsets_of(noun1), self.synsets_of(noun2))

    def distance(self, noun1: str, noun2: str) -> int:
        """Length of the shortest ancestral path between any synsets of two nouns."""
        return self._ancestor_length(noun1, noun2)[1]

    def sca_synset(self, noun1: str, noun2: str) -> Synset:
        return self._synsets[self._ancestor_length(noun1, noun2)[0]]

    def sca(self, noun1: str, noun2: str) -> str:
        """Gloss of the shortest common ancestor of two nouns."""
        return self.sca_synset(noun1, noun2).gloss

    def path(self, noun1: str, noun2: str) -> list[int]:
        """Synset ids from ``noun1`` up through the SCA and down to ``noun2``."""
        return self._finder.ancestor_path(self.synsets_of(noun1), self.synsets_of(noun2))
