"""
NEAT Genotype Package

This package implements the genes of the NEAT (NeuroEvolution of Augmenting
Topologies) algorithm and the variation of the auxiliary traits they carry.

There are two types of genes, both carrying a bag of traits:
- Neuron genes: Encode individual neurons with their role, depth and activation
- Link genes:   Encode weighted links between neurons, identified by innovation ID

Modules:
    traits:      Trait kinds, values, specifications and the TraitBag
    gene:        Gene base class
    link_gene:   LinkGene class
    neuron_gene: NeuronType enumeration and NeuronGene class
    batch:       Trait operators applied to many genes at once

Exported Classes:
    TraitKind, TraitValue, TraitBag:                          Trait representation
    IntTraitSpec, BoolTraitSpec, RealTraitSpec, EnumTraitSpec: Trait specifications
    TraitKindMismatch, TraitConfigError:                      Errors
    Gene:       Base class of all genes
    LinkGene:   Gene encoding a link between neurons
    NeuronType: Enumeration for neuron roles
    NeuronGene: Gene encoding a single neuron
"""

from neatgenes.genotype.batch       import init_genes, mutate_genes
from neatgenes.genotype.gene        import Gene
from neatgenes.genotype.link_gene   import LinkGene
from neatgenes.genotype.neuron_gene import NeuronType, NeuronGene
from neatgenes.genotype.traits      import (TraitKind,
                                            TraitValue,
                                            TraitBag,
                                            IntTraitSpec,
                                            BoolTraitSpec,
                                            RealTraitSpec,
                                            EnumTraitSpec,
                                            TraitKindMismatch,
                                            TraitConfigError,
                                            make_trait_spec)

__all__ = ['BoolTraitSpec',
           'EnumTraitSpec',
           'Gene',
           'IntTraitSpec',
           'LinkGene',
           'NeuronGene',
           'NeuronType',
           'RealTraitSpec',
           'TraitBag',
           'TraitConfigError',
           'TraitKind',
           'TraitKindMismatch',
           'TraitValue',
           'init_genes',
           'make_trait_spec',
           'mutate_genes']
