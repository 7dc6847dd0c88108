"""Pytest fixtures for wordnet-sca tests."""

from pathlib import Path

import pytest

from wordnet_sca.digraph import IndexedDigraph
from wordnet_sca.wordnet import WordNet

# A small slice of the noun hierarchy. "cat" also names a medical scan that
# hangs off "abstraction", so it belongs to two synsets.
SYNSETS = """\
0,entity,that which is perceived or known or inferred to have its own distinct existence
1,physical_entity,an entity that has physical existence
2,abstraction abstract_entity,a general concept formed by extracting common features from specific examples
3,object physical_object,a tangible and visible entity; an entity that can cast a shadow
4,whole unit,an assemblage of parts that is regarded as a single entity
5,living_thing animate_thing,a living (or once living) entity
6,organism being,a living thing that has (or can develop) the ability to act or function independently
7,animal animate_being beast,a living organism characterized by voluntary movement
8,chordate,any animal of the phylum Chordata having a notochord or spinal column
9,vertebrate craniate,animals having a bony or cartilaginous skeleton with a segmented spinal column
10,mammal,any warm-blooded vertebrate having the skin more or less covered with hair
11,carnivore,a terrestrial or aquatic flesh-eating mammal
12,canine canid,any of various fissiped mammals with nonretractile claws
13,dog domestic_dog Canis_familiaris,a member of the genus Canis
14,feline felid,any of various lithe-bodied roundheaded fissiped mammals, many with retractile claws
15,cat true_cat,feline mammal usually having thick soft fur and no ability to roar
16,aquatic_vertebrate,animal living wholly or chiefly in or on water
17,fish,any of various mostly cold-blooded aquatic vertebrates usually having scales
18,artifact artefact,a man-made object taken as a whole
19,instrumentality instrumentation,an artifact that is instrumental in accomplishing some end
20,conveyance transport,something that serves as a means of transportation
21,vehicle,a conveyance that transports people or objects
22,wheeled_vehicle,a vehicle that moves on wheels
23,self-propelled_vehicle,a wheeled vehicle that carries in itself a means of propulsion
24,motor_vehicle automotive_vehicle,a self-propelled wheeled vehicle that does not run on rails
25,car auto automobile,a motor vehicle with four wheels
26,cat computerized_tomography CT,a method of examining body organs by scanning them with X rays
"""

HYPERNYMS = """\
0
1,0
2,0
3,1
4,3
5,4
6,5
7,6
8,7
9,8
10,9
11,10
12,11
13,12
14,11
15,14
16,9
17,16
18,4
19,18
20,19
21,20
22,21
23,22
24,23
25,24
26,2
"""


@pytest.fixture
def wordnet() -> WordNet:
    """WordNet built from the in-memory records above."""
    return WordNet(SYNSETS.splitlines(), HYPERNYMS.splitlines())


@pytest.fixture
def wordnet_files(tmp_path: Path) -> tuple[Path, Path]:
    """The same records written to disk."""
    synsets = tmp_path / "synsets.txt"
    hypernyms = tmp_path / "hypernyms.txt"
    synsets.write_text(SYNSETS)
    hypernyms.write_text(HYPERNYMS)
    return synsets, hypernyms


@pytest.fixture
def shared_root() -> IndexedDigraph:
    """Two leaves under one root: 1 -> 0, 2 -> 0."""
    graph = IndexedDigraph()
    graph.add_edge(1, 0)
    graph.add_edge(2, 0)
    return graph


@pytest.fixture
def chain() -> IndexedDigraph:
    """Chain 2 -> 1 -> 0, so 1 is an ancestor of 2."""
    graph = IndexedDigraph()
    graph.add_edge(1, 0)
    graph.add_edge(2, 1)
    return graph


@pytest.fixture
def forest() -> IndexedDigraph:
    """Two disjoint trees: 1 -> 0 and 3 -> 2."""
    graph = IndexedDigraph()
    graph.add_edge(1, 0)
    graph.add_edge(3, 2)
    return graph


@pytest.fixture
def uneven_depths() -> IndexedDigraph:
    """Graph whose first colour contact is not the shortest path.

    a=1, b=2, p=3, q=4, t=5, r=0 with edges a->p, b->q, b->t, p->r, q->r, t->p.
    BFS first meets at r (a->p->r<-q<-b, length 4) and only later at p
    (a->p<-t<-b, length 3).
    """
    graph = IndexedDigraph()
    for source, target in [(1, 3), (2, 4), (2, 5), (3, 0), (4, 0), (5, 3)]:
        graph.add_edge(source, target)
    return graph
