import autograd.numpy as np  # type: ignore
from enum import Enum

class ActivationFunction(Enum):
    """
    The activation function families a neuron can use.
    """
    SIGNED_SIGMOID   = 0
    UNSIGNED_SIGMOID = 1
    TANH             = 2
    TANH_CUBIC       = 3
    SIGNED_STEP      = 4
    UNSIGNED_STEP    = 5
    SIGNED_GAUSS     = 6
    UNSIGNED_GAUSS   = 7
    ABS              = 8
    SIGNED_SINE      = 9
    UNSIGNED_SINE    = 10
    LINEAR           = 11
    RELU             = 12
    SOFTPLUS         = 13

# In all functions below 'a' scales the input (slope or frequency)
# and 'b' shifts it.

def unsigned_sigmoid_activation(z, a=1.0, b=0.0):
    Z = a * z + b
    Z = np.clip(Z, -100, 100)   # to prevent under/overflow when calculating exp
    return 1.0 / (1.0 + np.exp(-Z))

def signed_sigmoid_activation(z, a=1.0, b=0.0):
    return 2.0 * unsigned_sigmoid_activation(z, a, b) - 1.0

def tanh_activation(z, a=1.0, b=0.0):
    return np.tanh(a * z + b)

def tanh_cubic_activation(z, a=1.0, b=0.0):
    # Clip input to avoid overflow (±1e102 cubed stays within float64 range)
    z_clipped = np.clip(z, -1e102, 1e102)
    return np.tanh(a * z_clipped ** 3 + b)

def signed_step_activation(z, a=1.0, b=0.0):
    return np.where(z > b, 1.0, -1.0)

def unsigned_step_activation(z, a=1.0, b=0.0):
    return np.where(z > b, 1.0, 0.0)

def unsigned_gauss_activation(z, a=1.0, b=0.0):
    Z = np.clip(a * (z - b) ** 2, 0, 100)
    return np.exp(-Z)

def signed_gauss_activation(z, a=1.0, b=0.0):
    return 2.0 * unsigned_gauss_activation(z, a, b) - 1.0

def abs_activation(z, a=1.0, b=0.0):
    return np.abs(z + b)

def signed_sine_activation(z, a=1.0, b=0.0):
    return np.sin(a * z + b)

def unsigned_sine_activation(z, a=1.0, b=0.0):
    return (np.sin(a * z + b) + 1.0) / 2.0

def linear_activation(z, a=1.0, b=0.0):
    return z + b

def relu_activation(z, a=1.0, b=0.0):
    return np.maximum(0.0, z + b)

def softplus_activation(z, a=1.0, b=0.0):
    # log(1 + exp(x)) computed without overflow for large x
    Z = z + b
    return np.logaddexp(0.0, Z)

activations = {
    ActivationFunction.SIGNED_SIGMOID  : signed_sigmoid_activation,
    ActivationFunction.UNSIGNED_SIGMOID: unsigned_sigmoid_activation,
    ActivationFunction.TANH            : tanh_activation,
    ActivationFunction.TANH_CUBIC      : tanh_cubic_activation,
    ActivationFunction.SIGNED_STEP     : signed_step_activation,
    ActivationFunction.UNSIGNED_STEP   : unsigned_step_activation,
    ActivationFunction.SIGNED_GAUSS    : signed_gauss_activation,
    ActivationFunction.UNSIGNED_GAUSS  : unsigned_gauss_activation,
    ActivationFunction.ABS             : abs_activation,
    ActivationFunction.SIGNED_SINE     : signed_sine_activation,
    ActivationFunction.UNSIGNED_SINE   : unsigned_sine_activation,
    ActivationFunction.LINEAR          : linear_activation,
    ActivationFunction.RELU            : relu_activation,
    ActivationFunction.SOFTPLUS        : softplus_activation
    }

# 3-letter identifiers for each activation function
activation_codes = {
    ActivationFunction.SIGNED_SIGMOID  : "SSG",
    ActivationFunction.UNSIGNED_SIGMOID: "USG",
    ActivationFunction.TANH            : "TNH",
    ActivationFunction.TANH_CUBIC      : "TNC",
    ActivationFunction.SIGNED_STEP     : "SST",
    ActivationFunction.UNSIGNED_STEP   : "UST",
    ActivationFunction.SIGNED_GAUSS    : "SGS",
    ActivationFunction.UNSIGNED_GAUSS  : "UGS",
    ActivationFunction.ABS             : "ABS",
    ActivationFunction.SIGNED_SINE     : "SSN",
    ActivationFunction.UNSIGNED_SINE   : "USN",
    ActivationFunction.LINEAR          : "LIN",
    ActivationFunction.RELU            : "RLU",
    ActivationFunction.SOFTPLUS        : "SFP"
    }
