"""
NEAT Gene Batch Module

This module applies the trait operators to many genes at once, optionally
spreading the work over several threads with joblib.

Every gene gets its own RNG stream, spawned from the caller's RNG, and is
handled by exactly one worker. The outcome therefore depends only on the
caller's RNG state, never on 'num_jobs' or on thread scheduling.

Functions:
    init_genes(genes, specs, rng, num_jobs):   Randomize the traits of all genes
    mutate_genes(genes, specs, rng, num_jobs): Mutate the traits of all genes
"""

import logging
from collections.abc import Mapping, Sequence
from joblib          import Parallel, delayed

from neatgenes.genotype.gene   import Gene
from neatgenes.genotype.traits import TraitSpec
from neatgenes.rng             import RNG

logger = logging.getLogger(__name__)

def init_genes(genes   : Sequence[Gene],
               specs   : Mapping[str, TraitSpec],
               rng     : RNG,
               num_jobs: int = 1) -> None:
    """
    Randomize the traits of every gene.

    Parameters:
        genes:    The genes to initialize (modified in place)
        specs:    Trait name => trait specification
        rng:      Parent random number generator (one child stream per gene)
        num_jobs: Number of parallel workers (1 = serial, -1 = all CPU cores)
    """
    _apply(Gene.init_traits, genes, specs, rng, num_jobs)

def mutate_genes(genes   : Sequence[Gene],
                 specs   : Mapping[str, TraitSpec],
                 rng     : RNG,
                 num_jobs: int = 1) -> None:
    """
    Mutate the traits of every gene.

    Parameters:
        genes:    The genes to mutate (modified in place)
        specs:    Trait name => trait specification
        rng:      Parent random number generator (one child stream per gene)
        num_jobs: Number of parallel workers (1 = serial, -1 = all CPU cores)
    """
    _apply(Gene.mutate_traits, genes, specs, rng, num_jobs)

def _apply(operation, genes, specs, rng, num_jobs):
    if len(set(map(id, genes))) != len(genes):
        raise ValueError("Each gene may appear only once in a batch")

    streams = rng.spawn(len(genes))
    logger.debug("Applying %s to %d genes (num_jobs=%d)", operation.__name__, len(genes), num_jobs)

    if num_jobs == 1:
        for gene, stream in zip(genes, streams):
            operation(gene, specs, stream)
    else:
        # Threads, so that genes are modified in place
        Parallel(n_jobs=num_jobs, prefer="threads")(
            delayed(operation)(gene, specs, stream) for gene, stream in zip(genes, streams))
