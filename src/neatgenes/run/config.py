import configparser
import logging
import os
from collections.abc import Mapping
from types           import MappingProxyType

from neatgenes.genotype.traits import TraitConfigError, TraitKind, TraitSpec, make_trait_spec

logger = logging.getLogger(__name__)

# Section name prefixes (a section '[LINK_TRAIT:aggression]' describes the link trait 'aggression')
LINK_TRAIT_PREFIX   = "LINK_TRAIT"
NEURON_TRAIT_PREFIX = "NEURON_TRAIT"

class Config:

    # Keys allowed in a trait section, per trait type
    _ALLOWED_KEYS = {
        TraitKind.INT : {'type', 'mutation_prob', 'replace_prob', 'min', 'max', 'mutation_power'},
        TraitKind.BOOL: {'type', 'mutation_prob'},
        TraitKind.REAL: {'type', 'mutation_prob', 'replace_prob', 'min', 'max', 'mutation_power'},
        TraitKind.ENUM: {'type', 'mutation_prob', 'set', 'probs'},
    }

    @staticmethod
    def _freeze_trait_table(table: Mapping[str, TraitSpec]) -> Mapping[str, TraitSpec]:
        """
        Validate a trait table and make it read-only.

        Parameters:
            table: Trait name => trait specification

        Returns:
            A read-only view of a copy of the table (preserving its order)
        """
        if isinstance(table, MappingProxyType):
            return table

        frozen = {}
        for name, spec in table.items():
            if not isinstance(name, str) or not name:
                raise TraitConfigError(f"Invalid trait name {name!r}")
            if not hasattr(spec, 'kind') or spec.kind not in Config._ALLOWED_KEYS:
                raise TraitConfigError(f"Trait '{name}' has an unsupported specification: {spec!r}")
            frozen[name] = spec
        return MappingProxyType(frozen)

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create an empty Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates an empty Config for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.link_traits   = {}
            self.neuron_traits = {}
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser(interpolation=None)
        parser.read(config_file)

        # [LINK_TRAIT:<name>]

        # Traits carried by every link gene, one section per trait.
        self.link_traits = self._parse_trait_sections(parser, LINK_TRAIT_PREFIX)

        # [NEURON_TRAIT:<name>]

        # Traits carried by every neuron gene, one section per trait.
        self.neuron_traits = self._parse_trait_sections(parser, NEURON_TRAIT_PREFIX)

        logger.info("Loaded '%s': %d link traits, %d neuron traits",
                    config_file, len(self.link_traits), len(self.neuron_traits))

    @classmethod
    def _parse_trait_sections(cls, parser: configparser.ConfigParser, prefix: str) -> dict[str, TraitSpec]:
        """
        Build the trait table from all sections named '<prefix>:<trait name>'.
        """
        table = {}
        for section in parser.sections():
            head, sep, name = section.partition(':')
            if head.strip().upper() != prefix:
                continue

            name = name.strip()
            if not sep or not name:
                raise TraitConfigError(f"Section '[{section}]' must be written as '[{prefix}:<trait name>]'")
            if name in table:
                raise TraitConfigError(f"Trait '{name}' is defined more than once")

            table[name] = cls._parse_trait_section(parser, section)
        return table

    @classmethod
    def _parse_trait_section(cls, parser: configparser.ConfigParser, section: str) -> TraitSpec:
        """
        Build a single trait specification from its section.

        Parameters:
            parser:  The parsed configuration file
            section: The name of the section describing the trait

        Returns:
            The trait specification

        Raises:
            TraitConfigError: On unknown types, missing, unknown or malformed keys
        """

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(key, value_type, default=_NO_DEFAULT):
            if not parser.has_option(section, key):
                if default is not _NO_DEFAULT:
                    return default
                raise TraitConfigError(f"Missing key '{key}' in section '[{section}]'")

            raw_value = parser.get(section, key)
            try:
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == list:
                    return [item.strip() for item in raw_value.split(',') if item.strip()]
                return raw_value.strip()
            except ValueError:
                raise TraitConfigError(f"Invalid value '{raw_value}' for key '{key}' "
                                       f"in section '[{section}]'") from None

        # The trait's type: "int", "bool", "float" (or "real"), "string" (or "enum").
        kind = TraitKind.parse(get_value('type', str))

        unknown = set(parser.options(section)) - cls._ALLOWED_KEYS[kind]
        if unknown:
            raise TraitConfigError(f"Unknown keys {sorted(unknown)} in section '[{section}]' "
                                   f"for a trait of type '{kind.value}'")

        if kind == TraitKind.BOOL:
            # The probability that mutation will flip the value.
            return make_trait_spec(kind, mutation_probability=get_value('mutation_prob', float))

        if kind == TraitKind.ENUM:
            # The candidate values, their (relative) selection weights, and
            # the probability that mutation will select a value anew.
            weights = get_value('probs', list)
            try:
                weights = [float(w) for w in weights]
            except ValueError:
                raise TraitConfigError(f"Invalid selection weights {weights} in section '[{section}]'") from None
            return make_trait_spec(kind,
                                   candidates           = get_value('set', list),
                                   weights              = weights,
                                   mutation_probability = get_value('mutation_prob', float, default=1.0))

        # Integer and real traits:
        #   min, max:       bounds for new values; mutated values are clamped to them
        #   mutation_prob:  the probability that mutation will change the value
        #   replace_prob:   the probability that a mutation replaces the value by a new
        #                   random one, rather than perturbing it
        #   mutation_power: the largest perturbation magnitude
        number = int if kind == TraitKind.INT else float
        return make_trait_spec(kind,
                               min                  = get_value('min', number),
                               max                  = get_value('max', number),
                               mutation_probability = get_value('mutation_prob', float),
                               replace_probability  = get_value('replace_prob', float, default=0.0),
                               mutation_power       = get_value('mutation_power', number))

    def __setattr__(self, name, value):
        """
        Override 'setattr' to validate trait tables and make them read-only when set.
        This allows users to write config.link_traits = {...} for manual setup.
        """
        if name in ('link_traits', 'neuron_traits'):
            value = self._freeze_trait_table(value)
        super().__setattr__(name, value)
