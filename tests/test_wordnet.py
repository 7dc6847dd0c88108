"""Tests for wordnet.py module."""

import pytest

from wordnet_sca.ancestor import NoCommonAncestorError
from wordnet_sca.wordnet import Synset, UnknownNounError, WordNet


class TestLoading:
    """Tests for building a WordNet from records."""

    def test_counts(self, wordnet):
        assert len(wordnet) == 27
        assert wordnet.graph.vertex_count() == 27
        assert wordnet.graph.edge_count() == 26

    def test_nouns(self, wordnet):
        nouns = set(wordnet.nouns())

        assert {"entity", "dog", "Canis_familiaris", "CT", "car"} <= nouns
        assert wordnet.is_noun("automobile")
        assert not wordnet.is_noun("unicorn")

    def test_noun_in_several_synsets(self, wordnet):
        assert wordnet.synsets_of("cat") == [15, 26]

    def test_synset_record(self, wordnet):
        assert wordnet.synset(25) == Synset(
            25, ("car", "auto", "automobile"), "a motor vehicle with four wheels"
        )
        assert wordnet.gloss(14).endswith("mammals, many with retractile claws")

    def test_from_files(self, wordnet_files):
        synsets, hypernyms = wordnet_files
        wordnet = WordNet.from_files(synsets, hypernyms)

        assert len(wordnet) == 27
        assert wordnet.distance("dog", "cat") == 4

    def test_isolated_synset_is_queryable(self):
        """A synset with no hypernym record still gets a vertex."""
        wordnet = WordNet(["0,entity,the root"], [])

        assert 0 in wordnet.graph
        assert wordnet.distance("entity", "entity") == 0


class TestQueries:
    """Tests for distance, sca and path."""

    def test_distance(self, wordnet):
        assert wordnet.distance("dog", "cat") == 4
        assert wordnet.distance("dog", "fish") == 6
        assert wordnet.distance("dog", "car") == 17
        assert wordnet.distance("fish", "car") == 15

    def test_distance_takes_closest_synset(self, wordnet):
        """cat the scan is closer to car (via entity) than cat the animal."""
        assert wordnet.distance("cat", "car") == 13
        assert wordnet.sca_synset("cat", "car").id == 0

    def test_distance_is_symmetric(self, wordnet):
        for a, b in [("dog", "car"), ("cat", "fish"), ("vehicle", "beast")]:
            assert wordnet.distance(a, b) == wordnet.distance(b, a)

    def test_same_noun(self, wordnet):
        assert wordnet.distance("dog", "dog") == 0
        assert wordnet.distance("cat", "cat") == 0
        assert wordnet.sca("dog", "dog") == wordnet.gloss(13)

    def test_synonyms_have_distance_zero(self, wordnet):
        assert wordnet.distance("car", "automobile") == 0

    def test_sca(self, wordnet):
        assert wordnet.sca("dog", "cat") == "a terrestrial or aquatic flesh-eating mammal"
        assert wordnet.sca_synset("dog", "fish").nouns == ("vertebrate", "craniate")

    def test_path(self, wordnet):
        assert wordnet.path("dog", "cat") == [13, 12, 11, 14, 15]

    def test_unknown_noun(self, wordnet):
        with pytest.raises(UnknownNounError, match="unicorn"):
            wordnet.distance("dog", "unicorn")
        with pytest.raises(KeyError):
            wordnet.sca("unicorn", "dog")

    def test_no_common_ancestor(self):
        wordnet = WordNet(
            ["0,a,first root", "1,b,second root", "2,c,under a", "3,d,under b"],
            ["2,0", "3,1"],
        )
        with pytest.raises(NoCommonAncestorError):
            wordnet.distance("c", "d")


class TestHypernymValidation:
    """Hypernym records must only name known synsets."""

    def test_unknown_hypernym_rejected(self):
        with pytest.raises(ValueError, match="unknown synset id 9"):
            WordNet(["1,a,first", "2,b,second"], ["1,9", "2,9"])

    def test_unknown_record_id_rejected(self):
        with pytest.raises(ValueError, match="unknown synset id 7"):
            WordNet(["1,a,first"], ["7,1"])

    def test_root_record_checked(self):
        with pytest.raises(ValueError, match="unknown synset id 3"):
            WordNet(["1,a,first"], ["3"])
