"""
neatgenes - the genetic encoding layer of NEAT (NeuroEvolution of Augmenting Topologies).

This package defines what a gene is and how its payload varies: link and
neuron genes, each carrying identity fields plus an open-ended, per-run
configurable set of typed "traits", and the operators that randomize, mate,
mutate and compare those traits.

Main components:
- genotype: Genes, traits and the trait variation operators
- activations: Activation function families selectable by neuron genes
- run: Configuration (trait specification tables)
- rng: The seedable random number generator passed to every operator

Example:
    >>> from neatgenes import Config, LinkGene, RNG
    >>> config = Config("config.ini")
    >>> rng    = RNG(seed=42)
    >>> link   = LinkGene(from_id=0, to_id=3, innovation_id=7, weight=0.5)
    >>> link.init_traits(config.link_traits, rng)
    >>> link.mutate_traits(config.link_traits, rng)
"""

__version__ = "0.1.0"

from neatgenes.rng import RNG
from neatgenes.run.config import Config
from neatgenes.activations import ActivationFunction
from neatgenes.genotype.traits import (TraitKind, TraitValue, TraitBag,
                                       IntTraitSpec, BoolTraitSpec, RealTraitSpec, EnumTraitSpec,
                                       TraitKindMismatch, TraitConfigError)
from neatgenes.genotype.gene import Gene
from neatgenes.genotype.link_gene import LinkGene
from neatgenes.genotype.neuron_gene import NeuronType, NeuronGene
from neatgenes.logging_config import configure_logging

__all__ = [
    "RNG",
    "Config",
    "ActivationFunction",
    "TraitKind",
    "TraitValue",
    "TraitBag",
    "IntTraitSpec",
    "BoolTraitSpec",
    "RealTraitSpec",
    "EnumTraitSpec",
    "TraitKindMismatch",
    "TraitConfigError",
    "Gene",
    "LinkGene",
    "NeuronType",
    "NeuronGene",
    "configure_logging",
]
