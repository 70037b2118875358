"""
Shared fixtures for integration tests.
"""

import pytest
from textwrap import dedent

from neatgenes.run.config import Config


CONFIG_TEXT = dedent("""
    [LINK_TRAIT:delay]
    type           = int
    min            = 0
    max            = 4
    mutation_prob  = 0.5
    replace_prob   = 0.2
    mutation_power = 2

    [LINK_TRAIT:plastic]
    type          = bool
    mutation_prob = 0.2

    [NEURON_TRAIT:aggression]
    type           = float
    min            = 0.0
    max            = 1.0
    mutation_prob  = 1.0
    mutation_power = 0.05

    [NEURON_TRAIT:color]
    type          = string
    set           = red, green, blue
    probs         = 1, 1, 2
    mutation_prob = 0.3
    """)


@pytest.fixture
def config_file(tmp_path):
    """Write the integration test configuration to a temporary file."""
    path = tmp_path / "genes.ini"
    path.write_text(CONFIG_TEXT)
    return str(path)


@pytest.fixture
def config(config_file):
    """Provide a Config loaded from the integration test configuration."""
    return Config(config_file)
