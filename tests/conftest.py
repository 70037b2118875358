"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

# Add the project's source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """Provide a seeded random number generator."""
    from neatgenes.rng import RNG
    return RNG(seed=42)


@pytest.fixture
def trait_specs():
    """Provide a trait table with one trait of every kind."""
    from neatgenes.genotype.traits import IntTraitSpec, BoolTraitSpec, RealTraitSpec, EnumTraitSpec
    return {
        'layers'    : IntTraitSpec(min=1, max=8, mutation_probability=0.5,
                                   replace_probability=0.2, mutation_power=2),
        'plastic'   : BoolTraitSpec(mutation_probability=0.3),
        'aggression': RealTraitSpec(min=0.0, max=1.0, mutation_probability=0.8,
                                    replace_probability=0.25, mutation_power=0.1),
        'color'     : EnumTraitSpec(candidates=('red', 'green', 'blue'),
                                    weights=(1.0, 1.0, 2.0), mutation_probability=0.4),
    }
