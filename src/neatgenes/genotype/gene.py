"""
NEAT Gene Module

This module implements the behavior shared by link and neuron genes:
ownership of a bag of traits and the trait variation operators.

Classes:
    Gene: Base class for all genes, owning a TraitBag
"""

import copy
from collections.abc import Mapping

from neatgenes.genotype.traits import TraitBag, TraitSpec

class Gene:
    """
    Base class for genes.

    A gene owns exactly one TraitBag holding its auxiliary traits, and
    exposes the four trait variation operators over it. Which traits exist
    and how they vary is entirely determined by the trait specification
    table passed in by the caller.

    Copying a gene (copy.copy or 'copy()') gives it its own trait bag, so
    mutating the copy's traits never affects the original.

    Public Attributes:
        traits: The gene's traits

    Public Methods:
        init_traits(specs, rng):   Randomize all traits described by 'specs'
        mate_traits(other, rng):   Cross traits with those of another gene
        mutate_traits(specs, rng): Stochastically mutate the traits
        trait_distances(other):    Per-trait distances to another gene
        copy():                    Copy of the gene with independent traits
    """

    def __init__(self, traits: TraitBag | None = None):
        self.traits: TraitBag = traits if traits is not None else TraitBag()

    def init_traits(self, specs: Mapping[str, TraitSpec], rng) -> None:
        self.traits.initialize(specs, rng)

    def mate_traits(self, other: 'Gene | Mapping', rng) -> None:
        """
        Merge the traits of another parent into this gene's traits.

        Parameters:
            other: The other parent gene (or directly its traits)
            rng:   Random number generator

        Raises:
            TraitKindMismatch: If the parents disagree on the kind of a trait
        """
        self.traits.merge(_traits_of(other), rng)

    def mutate_traits(self, specs: Mapping[str, TraitSpec], rng) -> None:
        self.traits.mutate(specs, rng)

    def trait_distances(self, other: 'Gene | Mapping') -> dict[str, float]:
        """
        Compute the distance between each pair of matching traits.

        Parameters:
            other: The gene (or traits) to compare with

        Returns:
            Trait name => distance

        Raises:
            TraitKindMismatch: If two matching traits differ in kind
        """
        return self.traits.distance(_traits_of(other))

    def copy(self) -> 'Gene':
        return copy.copy(self)

    def __copy__(self):
        cls = self.__class__
        new = cls.__new__(cls)
        new.__dict__.update(self.__dict__)
        new.traits = self.traits.copy()
        return new

def _traits_of(other: 'Gene | Mapping') -> Mapping:
    return other.traits if isinstance(other, Gene) else other
