"""
NEAT Link Gene Module

This module implements the LinkGene class for the
NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    LinkGene: Gene encoding a weighted link between two neurons
"""

from functools import total_ordering

from neatgenes.genotype.gene   import Gene
from neatgenes.genotype.traits import TraitBag

@total_ordering
class LinkGene(Gene):
    """
    A gene describing a weighted link between two neurons in a Neural Network.

    Each link gene represents a directed edge in the network graph, from a source
    neuron to a destination neuron. Link genes are uniquely identified by their
    innovation ID, a historical marker assigned by an external registry which
    enables aligning genes of different genomes during crossover.

    Equality, hashing and ordering depend on the innovation ID only, never on
    the endpoints or the weight, so genomes can sort, align and deduplicate
    their links by innovation.

    The endpoints, the innovation ID and the recurrence flag are fixed at
    construction. The weight and the traits are the only mutable state.

    Public Attributes:
        traits: The gene's traits (see Gene)

    Public Properties:
        from_id:             ID of the source neuron
        to_id:               ID of the destination neuron
        innovation_id:       Innovation ID uniquely identifying this link
        is_recurrent:        Whether the link is recurrent
        weight:              Weight of the link (settable)

    Public Methods:
        is_looped_recurrent(): Whether the link connects a neuron to itself
    """

    def __init__(self,
                 from_id      : int,
                 to_id        : int,
                 innovation_id: int,
                 weight       : float,
                 is_recurrent : bool = False,
                 traits       : TraitBag | None = None):
        """
        Initialize a link gene.

        Parameters:
            from_id:       ID of the source neuron
            to_id:         ID of the destination neuron
            innovation_id: Number uniquely and globally identifying this link
            weight:        Weight of the link
            is_recurrent:  Whether the link is recurrent
            traits:        Initial traits (empty if not specified)
        """
        super().__init__(traits)
        self._from_id      : int   = from_id
        self._to_id        : int   = to_id
        self._innovation_id: int   = innovation_id
        self._is_recurrent : bool  = is_recurrent
        self._weight       : float = weight

    @property
    def from_id(self) -> int:
        return self._from_id

    @property
    def to_id(self) -> int:
        return self._to_id

    @property
    def innovation_id(self) -> int:
        return self._innovation_id

    @property
    def is_recurrent(self) -> bool:
        return self._is_recurrent

    def is_looped_recurrent(self) -> bool:
        """
        Whether the link connects a neuron to itself.
        """
        return self._from_id == self._to_id

    @property
    def weight(self) -> float:
        return self._weight

    @weight.setter
    def weight(self, value: float) -> None:
        self._weight = value

    def __eq__(self, other):
        if not isinstance(other, LinkGene):
            return NotImplemented
        return self._innovation_id == other._innovation_id

    def __lt__(self, other):
        if not isinstance(other, LinkGene):
            return NotImplemented
        return self._innovation_id < other._innovation_id

    def __hash__(self):
        return hash(self._innovation_id)

    def __repr__(self):
        return (f"LinkGene(from_id={self._from_id:03d}, to_id={self._to_id:03d}, "
                f"innovation_id={self._innovation_id:03d}, weight={self._weight:+.6f}, "
                f"is_recurrent={self._is_recurrent}, traits={self.traits!r})")

    def __str__(self):
        s  = f"[{self._innovation_id:03d},{'R' if self._is_recurrent else 'F'},"
        s += f"{self._from_id:02d}=>{self._to_id:02d},{self._weight:+.02f}]"
        return s
