"""
NEAT Traits Module

This module implements the auxiliary, run-time configurable "traits" carried
by every gene, and the variation operators acting on them.

A trait is a named, typed value. The set of trait names and their types is
not known statically: it is described per run by a table of trait
specifications (trait name => spec), usually loaded from the configuration
file. Four kinds of traits are supported: integers, booleans, reals and
enumerated strings.

Classes:
    TraitKind:         Enumeration of the supported trait types
    TraitValue:        Immutable, kind-tagged trait value
    IntTraitSpec:      Specification of an integer trait
    BoolTraitSpec:     Specification of a boolean trait
    RealTraitSpec:     Specification of a real-valued trait
    EnumTraitSpec:     Specification of an enumerated (string) trait
    TraitBag:          Mapping from trait name to TraitValue, owned by a gene
    TraitKindMismatch: Raised when two values for the same trait have different kinds
    TraitConfigError:  Raised when a trait specification is invalid

Functions:
    make_trait_spec(kind, **params): Build a trait specification from a kind name
"""

import logging
import math
import numbers
import numpy as np
from collections.abc import Iterator, Mapping, MutableMapping
from dataclasses     import dataclass
from enum            import Enum
from typing          import Any, Union

logger = logging.getLogger(__name__)

class TraitConfigError(ValueError):
    """
    A trait specification (or the configuration describing it) is invalid.
    """

class TraitKind(Enum):
    """
    Traits come in four kinds. The values are the type names
    used in configuration files.
    """
    INT  = "int"
    BOOL = "bool"
    REAL = "float"
    ENUM = "string"

    @classmethod
    def parse(cls, name: str) -> 'TraitKind':
        """
        Resolve a type name as written in a configuration file.

        Besides the canonical names, "real" and "enum" are accepted.

        Raises:
            TraitConfigError: If the name does not denote a known trait kind
        """
        key = str(name).strip().lower()
        key = _KIND_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            known = ", ".join(k.value for k in cls)
            raise TraitConfigError(f"Unknown trait type '{name}' (expected one of: {known})") from None

    @property
    def is_numeric(self) -> bool:
        return self in (TraitKind.INT, TraitKind.REAL)

_KIND_ALIASES = {"real": "float", "enum": "string"}

class TraitKindMismatch(TypeError):
    """
    Two values for the same trait name have different kinds.

    Raised by merge and distance when the two bags being compared disagree
    on the type of a shared trait, and by mutate when a stored value does
    not match its specification. Values are never coerced.

    Public Attributes:
        name:     The trait name
        expected: Kind of the value (or spec) on the receiving side
        actual:   Kind of the offending value
    """

    def __init__(self, name: str, expected: TraitKind, actual: TraitKind):
        self.name    : str       = name
        self.expected: TraitKind = expected
        self.actual  : TraitKind = actual
        super().__init__(f"Kinds of trait '{name}' do not match: {expected.value} vs {actual.value}")

@dataclass(frozen=True)
class TraitValue:
    """
    An immutable trait value tagged with its kind.

    Mutation never modifies a TraitValue in place, it replaces it with a new one.
    The payload is validated (and normalized) against the kind on construction:
    booleans are not accepted as integers, and integers are widened to float
    for real traits.

    Public Attributes:
        kind:  The trait kind
        value: The payload (int, bool, float or str, according to 'kind')
    """
    kind : TraitKind
    value: Any

    def __post_init__(self):
        kind, value = self.kind, self.value
        is_bool = isinstance(value, (bool, np.bool_))

        if kind is TraitKind.INT and isinstance(value, numbers.Integral) and not is_bool:
            object.__setattr__(self, 'value', int(value))
        elif kind is TraitKind.BOOL and is_bool:
            object.__setattr__(self, 'value', bool(value))
        elif kind is TraitKind.REAL and isinstance(value, numbers.Real) and not is_bool:
            object.__setattr__(self, 'value', float(value))
        elif kind is TraitKind.ENUM and isinstance(value, str):
            pass
        else:
            raise TypeError(f"Invalid payload {value!r} for a trait of kind '{kind.value}'")

    @classmethod
    def of_int(cls, value: int) -> 'TraitValue':
        return cls(TraitKind.INT, value)

    @classmethod
    def of_bool(cls, value: bool) -> 'TraitValue':
        return cls(TraitKind.BOOL, value)

    @classmethod
    def of_real(cls, value: float) -> 'TraitValue':
        return cls(TraitKind.REAL, value)

    @classmethod
    def of_enum(cls, value: str) -> 'TraitValue':
        return cls(TraitKind.ENUM, value)

    @classmethod
    def infer(cls, value: Any) -> 'TraitValue':
        """
        Wrap a plain Python value, deducing its kind from its type.

        Raises:
            TypeError: If the value is of no supported type
        """
        if isinstance(value, TraitValue):
            return value
        if isinstance(value, (bool, np.bool_)):
            return cls(TraitKind.BOOL, value)
        if isinstance(value, numbers.Integral):
            return cls(TraitKind.INT, value)
        if isinstance(value, numbers.Real):
            return cls(TraitKind.REAL, value)
        if isinstance(value, str):
            return cls(TraitKind.ENUM, value)
        raise TypeError(f"Cannot use a value of type {type(value).__name__} as a trait")

    def __str__(self):
        return f"{self.kind.value}:{self.value}"

# ============================================================================
# Trait specifications
# ============================================================================

def _check_probability(label: str, p: float) -> None:
    if not 0.0 <= p <= 1.0:
        raise TraitConfigError(f"'{label}' must lie in [0, 1], got {p}")

def _check_power(power: float) -> None:
    if not (math.isfinite(power) and power >= 0):
        raise TraitConfigError(f"'mutation_power' must be finite and non-negative, got {power}")

def _check_integral(label: str, value: Any) -> None:
    if not isinstance(value, numbers.Integral) or isinstance(value, (bool, np.bool_)):
        raise TraitConfigError(f"'{label}' of an integer trait must be an integer, got {value!r}")

def _check_bounds(lo: float, hi: float) -> None:
    if not (math.isfinite(lo) and math.isfinite(hi)):
        raise TraitConfigError(f"Trait bounds must be finite, got [{lo}, {hi}]")
    if lo > hi:
        raise TraitConfigError(f"Trait minimum {lo} exceeds maximum {hi}")

@dataclass(frozen=True)
class IntTraitSpec:
    """
    Specification of an integer trait.

    New values are drawn uniformly from [min, max]. A mutation either replaces
    the value (probability 'replace_probability') or adds a uniform integer
    from [-mutation_power, +mutation_power] and clamps the result into [min, max].
    """
    min                 : int
    max                 : int
    mutation_probability: float = 0.0
    replace_probability : float = 0.0
    mutation_power      : int   = 1

    kind = TraitKind.INT

    def __post_init__(self):
        for label in ('min', 'max', 'mutation_power'):
            _check_integral(label, getattr(self, label))
        _check_bounds(self.min, self.max)
        _check_probability("mutation_probability", self.mutation_probability)
        _check_probability("replace_probability",  self.replace_probability)
        _check_power(self.mutation_power)

    def draw(self, rng) -> TraitValue:
        return TraitValue.of_int(rng.uniform_int(self.min, self.max))

    def perturb(self, current: TraitValue, rng) -> TraitValue:
        value = current.value + rng.uniform_int(-self.mutation_power, self.mutation_power)
        return TraitValue.of_int(max(self.min, min(self.max, value)))   # Clip it

@dataclass(frozen=True)
class BoolTraitSpec:
    """
    Specification of a boolean trait.

    New values are fair coin flips. A triggered mutation negates the value.
    """
    mutation_probability: float = 0.0

    kind = TraitKind.BOOL

    def __post_init__(self):
        _check_probability("mutation_probability", self.mutation_probability)

    def draw(self, rng) -> TraitValue:
        return TraitValue.of_bool(rng.uniform_float() < 0.5)

@dataclass(frozen=True)
class RealTraitSpec:
    """
    Specification of a real-valued trait.

    New values are drawn uniformly from [min, max] by scaling a unit-uniform
    draw into the bounds. A mutation either replaces the value (probability
    'replace_probability') or adds a symmetric uniform delta of magnitude up
    to 'mutation_power' and clamps the result into [min, max].
    """
    min                 : float
    max                 : float
    mutation_probability: float = 0.0
    replace_probability : float = 0.0
    mutation_power      : float = 0.0

    kind = TraitKind.REAL

    def __post_init__(self):
        _check_bounds(self.min, self.max)
        _check_probability("mutation_probability", self.mutation_probability)
        _check_probability("replace_probability",  self.replace_probability)
        _check_power(self.mutation_power)

    def draw(self, rng) -> TraitValue:
        x = rng.uniform_float()
        return TraitValue.of_real(self.min + x * (self.max - self.min))

    def perturb(self, current: TraitValue, rng) -> TraitValue:
        value = current.value + rng.signed_uniform_float() * self.mutation_power
        return TraitValue.of_real(float(np.clip(value, self.min, self.max)))

@dataclass(frozen=True)
class EnumTraitSpec:
    """
    Specification of an enumerated trait, whose values are strings.

    New values are picked from 'candidates' with probability proportional to
    the parallel 'weights'. Mutation simply picks again the same way; the new
    pick may coincide with the current value.

    'mutation_probability' defaults to 1.0, i.e. the trait is re-picked
    every time the gene is mutated.
    """
    candidates          : tuple[str, ...]
    weights             : tuple[float, ...]
    mutation_probability: float = 1.0

    kind = TraitKind.ENUM

    def __post_init__(self):
        object.__setattr__(self, 'candidates', tuple(self.candidates))
        object.__setattr__(self, 'weights',    tuple(float(w) for w in self.weights))

        if not self.candidates:
            raise TraitConfigError("An enumerated trait needs at least one candidate value")
        if len(self.weights) != len(self.candidates):
            raise TraitConfigError(f"Got {len(self.weights)} selection weights "
                                   f"for {len(self.candidates)} candidate values")
        if not all(math.isfinite(w) and w >= 0 for w in self.weights) or sum(self.weights) <= 0:
            raise TraitConfigError(f"Selection weights must be finite, non-negative "
                                   f"with a positive sum, got {list(self.weights)}")
        _check_probability("mutation_probability", self.mutation_probability)

    def draw(self, rng) -> TraitValue:
        return TraitValue.of_enum(self.candidates[rng.weighted_pick(self.weights)])

TraitSpec = Union[IntTraitSpec, BoolTraitSpec, RealTraitSpec, EnumTraitSpec]

_SPEC_CLASSES = {
    TraitKind.INT : IntTraitSpec,
    TraitKind.BOOL: BoolTraitSpec,
    TraitKind.REAL: RealTraitSpec,
    TraitKind.ENUM: EnumTraitSpec,
}

def make_trait_spec(kind: TraitKind | str, **params) -> TraitSpec:
    """
    Build a trait specification.

    Parameters:
        kind:   A TraitKind, or its name as written in a configuration file
        params: Keyword arguments of the spec class matching 'kind'

    Returns:
        The trait specification

    Raises:
        TraitConfigError: If 'kind' is unknown or 'params' do not fit it
    """
    if not isinstance(kind, TraitKind):
        kind = TraitKind.parse(kind)
    spec_class = _SPEC_CLASSES[kind]
    try:
        return spec_class(**params)
    except TypeError as e:
        raise TraitConfigError(f"Invalid parameters for a trait of type '{kind.value}': {e}") from e

def _validate_spec(name: str, spec: Any) -> None:
    if not isinstance(spec, tuple(_SPEC_CLASSES.values())):
        raise TraitConfigError(f"Trait '{name}' has an unsupported specification: {spec!r}")

# ============================================================================
# Trait bag
# ============================================================================

class TraitBag(MutableMapping):
    """
    The traits of a single gene: a mapping from trait name to TraitValue.

    Assigning a plain Python value wraps it into a TraitValue (see
    'TraitValue.infer'). In a well-formed run the set of names equals the
    set of names in the trait specification table used to initialize the bag.

    Every operation needing randomness takes the RNG as a parameter. Draws
    are consumed in a fixed order (specs or bag entries in iteration order),
    so a seeded RNG makes every operation reproducible.

    Public Methods:
        initialize(specs, rng): Draw a fresh value for every trait in 'specs'
        merge(other, rng):      Cross this bag with another parent's bag
        mutate(specs, rng):     Stochastically mutate the traits in 'specs'
        distance(other):        Per-trait distance to another bag
        copy():                 Independent copy of the bag

    Class Methods:
        from_specs(specs, rng): Create a new, randomly initialized bag
    """

    def __init__(self, values: Mapping[str, Any] | None = None):
        """
        Initialize a trait bag.

        Parameters:
            values: Initial entries (TraitValues or plain Python values)
        """
        self._values: dict[str, TraitValue] = {}
        if values is not None:
            for name, value in values.items():
                self[name] = value

    @classmethod
    def from_specs(cls, specs: Mapping[str, TraitSpec], rng) -> 'TraitBag':
        return cls().initialize(specs, rng)

    def __getitem__(self, name: str) -> TraitValue:
        return self._values[name]

    def __setitem__(self, name: str, value: Any) -> None:
        if not isinstance(name, str):
            raise TypeError(f"Trait names must be strings, got {name!r}")
        self._values[name] = TraitValue.infer(value)

    def __delitem__(self, name: str) -> None:
        del self._values[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def copy(self) -> 'TraitBag':
        bag = TraitBag()
        bag._values = dict(self._values)   # values are immutable
        return bag

    def initialize(self, specs: Mapping[str, TraitSpec], rng) -> 'TraitBag':
        """
        Draw a fresh value for each trait specification.

        Integers and reals are uniform in their bounds, booleans are fair coin
        flips and enumerated values are picked by weight. Existing entries of
        the same names are overwritten.

        Parameters:
            specs: Trait name => trait specification
            rng:   Random number generator

        Returns:
            This bag

        Raises:
            TraitConfigError: If a specification is of an unsupported type
        """
        for name, spec in specs.items():
            _validate_spec(name, spec)
            self._values[name] = spec.draw(rng)
        return self

    def merge(self, other: Mapping[str, Any], rng) -> 'TraitBag':
        """
        Cross this bag's traits with those of another parent, in place.

        For each trait of 'other', a coin flip decides between picking one of
        the two parents' values (each with probability 1/2) and blending them:
        integers blend to the floor of their mean, reals to their exact mean.
        Booleans and enumerated values cannot be blended, so for them both
        branches pick one parent's value.

        A trait of 'other' missing from this bag is inherited as-is.

        Parameters:
            other: The other parent's traits
            rng:   Random number generator

        Returns:
            This bag

        Raises:
            TraitKindMismatch: If the parents' values for a trait differ in kind
        """
        for name, theirs in other.items():
            theirs = TraitValue.infer(theirs)
            mine   = self._values.get(name)

            if mine is None:
                logger.warning("Trait '%s' missing from the receiving parent, inheriting %s", name, theirs)
                self._values[name] = theirs
                continue

            if mine.kind is not theirs.kind:
                raise TraitKindMismatch(name, mine.kind, theirs.kind)

            if rng.uniform_float() < 0.5 or not mine.kind.is_numeric:
                self._values[name] = mine if rng.uniform_float() < 0.5 else theirs
            elif mine.kind is TraitKind.INT:
                self._values[name] = TraitValue.of_int((mine.value + theirs.value) // 2)
            else:
                self._values[name] = TraitValue.of_real((mine.value + theirs.value) / 2.0)

        return self

    def mutate(self, specs: Mapping[str, TraitSpec], rng) -> 'TraitBag':
        """
        Stochastically mutate the traits, in place.

        Each trait mutates with its spec's 'mutation_probability'. A mutating
        boolean is negated and a mutating enumerated value is picked anew.
        A mutating integer or real is replaced by a fresh value with
        probability 'replace_probability', otherwise it is perturbed by a
        random delta scaled by 'mutation_power' and clamped to its bounds.

        Parameters:
            specs: Trait name => trait specification
            rng:   Random number generator

        Returns:
            This bag

        Raises:
            KeyError:          If a trait needing its current value is missing
            TraitKindMismatch: If a stored value does not match its spec's kind
            TraitConfigError:  If a specification is of an unsupported type
        """
        for name, spec in specs.items():
            _validate_spec(name, spec)

            if rng.uniform_float() >= spec.mutation_probability:
                continue

            if spec.kind is TraitKind.BOOL:
                new_value = TraitValue.of_bool(not self._current(name, spec.kind).value)
            elif spec.kind is TraitKind.ENUM:
                new_value = spec.draw(rng)
            elif rng.uniform_float() < spec.replace_probability:
                new_value = spec.draw(rng)
            else:
                new_value = spec.perturb(self._current(name, spec.kind), rng)

            logger.debug("Trait '%s' mutated: %s -> %s", name, self._values.get(name), new_value)
            self._values[name] = new_value

        return self

    def distance(self, other: Mapping[str, Any]) -> dict[str, float]:
        """
        Compute the distance between each pair of matching traits.

        Integers and reals are at their absolute difference, booleans and
        enumerated values at 0 when equal and 1 otherwise. Traits of 'other'
        missing from this bag are skipped. Aggregating the per-trait
        distances into a single number is left to the caller.

        Parameters:
            other: The traits to compare with

        Returns:
            Trait name => distance

        Raises:
            TraitKindMismatch: If two matching values differ in kind
        """
        distances: dict[str, float] = {}
        for name, theirs in other.items():
            theirs = TraitValue.infer(theirs)
            mine   = self._values.get(name)
            if mine is None:
                continue

            if mine.kind is not theirs.kind:
                raise TraitKindMismatch(name, mine.kind, theirs.kind)

            if mine.kind.is_numeric:
                distances[name] = float(abs(mine.value - theirs.value))
            else:
                distances[name] = 0.0 if mine.value == theirs.value else 1.0

        return distances

    def _current(self, name: str, kind: TraitKind) -> TraitValue:
        try:
            value = self._values[name]
        except KeyError:
            raise KeyError(f"Trait '{name}' has no current value to mutate") from None
        if value.kind is not kind:
            raise TraitKindMismatch(name, kind, value.kind)
        return value

    def __repr__(self):
        entries = ", ".join(f"{name!r}: {value}" for name, value in self._values.items())
        return f"TraitBag({{{entries}}})"
