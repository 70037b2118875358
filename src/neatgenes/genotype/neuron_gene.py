"""
NEAT Neuron Gene Module.

This module implements the NeuronGene class and NeuronType enumeration
for the NEAT (NeuroEvolution of Augmenting Topologies) algorithm.

Classes:
    NeuronType: Enumeration for neuron roles (NONE, INPUT, BIAS, HIDDEN, OUTPUT)
    NeuronGene: Gene encoding a single network neuron with its parameters
"""

from functools import partial
from enum      import Enum
from typing    import Callable

from neatgenes.activations     import ActivationFunction, activations, activation_codes
from neatgenes.genotype.gene   import Gene
from neatgenes.genotype.traits import TraitBag

class NeuronType(Enum):
    """
    The role of a neuron in the network.
    """
    NONE   = 0
    INPUT  = 1
    BIAS   = 2
    HIDDEN = 3
    OUTPUT = 4

_type_codes = {
    NeuronType.NONE  : "N",
    NeuronType.INPUT : "I",
    NeuronType.BIAS  : "B",
    NeuronType.HIDDEN: "H",
    NeuronType.OUTPUT: "O",
}

class NeuronGene(Gene):
    """
    A gene describing a neuron in a Neural Network.

    The ID, the role and the split depth are fixed at construction. The split
    depth is the neuron's topological depth in the network (inputs at 0.0,
    outputs at 1.0, hidden neurons in between), used for layering and
    feed-forward ordering.

    The activation parameters are set once, when the neuron is created, with
    'initialize_activation()'; afterwards genome-level operators may change
    them individually. The trait operators never touch them.

    Parameter usage depends on the activation function:
        sigmoid : a, b (slope, shift)
        step    : b    (threshold)
        gauss   : a, b (sharpness, center)
        abs     : b    (shift)
        sine    : a, b (frequency, phase)
        linear  : b    (shift)
    'time_constant' and 'bias' are used by leaky-integrator neurons.

    Public Attributes:
        traits:              The gene's traits (see Gene)
        display_x:           Horizontal drawing coordinate (cosmetic)
        display_y:           Vertical drawing coordinate (cosmetic)
        param_a:             Activation slope/frequency
        param_b:             Activation shift
        time_constant:       Time constant for leaky-integrator mode
        bias:                Bias for leaky-integrator mode
        activation_kind:     The activation function family

    Public Properties:
        id:                  Unique identifier for this neuron within its genome
        role:                The neuron's role (see NeuronType)
        split_depth:         Topological depth of the neuron
        activation_function: Callable activation bound to 'param_a' and 'param_b'

    Public Methods:
        initialize_activation(...): Set all activation parameters at once
    """

    def __init__(self,
                 role       : NeuronType,
                 neuron_id  : int,
                 split_depth: float,
                 traits     : TraitBag | None = None):
        """
        Initialize a neuron gene.

        The activation parameters start at zero with an unsigned sigmoid
        activation, until 'initialize_activation()' is called.

        Parameters:
            role:        The neuron's role (INPUT, BIAS, HIDDEN, OUTPUT or NONE)
            neuron_id:   Unique identifier for this neuron
            split_depth: Topological depth of the neuron
            traits:      Initial traits (empty if not specified)
        """
        super().__init__(traits)
        self._id         : int        = neuron_id
        self._role       : NeuronType = role
        self._split_depth: float      = split_depth

        self.display_x: int = 0
        self.display_y: int = 0

        self.param_a        : float              = 0.0
        self.param_b        : float              = 0.0
        self.time_constant  : float              = 0.0
        self.bias           : float              = 0.0
        self.activation_kind: ActivationFunction = ActivationFunction.UNSIGNED_SIGMOID

    @property
    def id(self) -> int:
        return self._id

    @property
    def role(self) -> NeuronType:
        return self._role

    @property
    def split_depth(self) -> float:
        return self._split_depth

    def initialize_activation(self,
                              param_a        : float,
                              param_b        : float,
                              time_constant  : float,
                              bias           : float,
                              activation_kind: ActivationFunction) -> None:
        """
        Set the activation parameters of the neuron in one go.

        Parameters:
            param_a:         Activation slope/frequency
            param_b:         Activation shift
            time_constant:   Time constant for leaky-integrator mode
            bias:            Bias for leaky-integrator mode
            activation_kind: The activation function family
        """
        if not isinstance(activation_kind, ActivationFunction):
            raise ValueError(f"Invalid activation function '{activation_kind}'")

        self.param_a         = param_a
        self.param_b         = param_b
        self.time_constant   = time_constant
        self.bias            = bias
        self.activation_kind = activation_kind

    @property
    def activation_function(self) -> Callable | None:
        """
        Get the activation function for this neuron.

        Returns:
           The activation function with 'param_a' and 'param_b' bound
           (None for INPUT and BIAS neurons, which do not activate).
        """
        if self._role in (NeuronType.INPUT, NeuronType.BIAS):
            return None
        return partial(activations[self.activation_kind], a=self.param_a, b=self.param_b)

    def __repr__(self):
        return (f"NeuronGene(role=NeuronType.{self._role.name}, neuron_id={self._id}, "
                f"split_depth={self._split_depth}, activation_kind={self.activation_kind.name}, "
                f"param_a={self.param_a}, param_b={self.param_b}, "
                f"time_constant={self.time_constant}, bias={self.bias}, traits={self.traits!r})")

    def __str__(self):
        code = _type_codes[self._role]
        if self._role in (NeuronType.INPUT, NeuronType.BIAS):
            return f"[{code}{self._id}]"
        else:
            act_code = activation_codes[self.activation_kind]
            return f"[{code}{self._id},{act_code},d={self._split_depth:.2f},a={self.param_a:.2f},b={self.param_b:.2f}]"
