import configparser
import os
from neatsynapse.activations import activation_names

class Config:
    """
    Parameters used when networks are built from topology descriptions.

    A Config is read from the [NETWORK] section of an INI file; every key is
    optional and falls back to the default used by 'Config()'.
    """

    # Defaults, also used when no configuration file is given
    _DEFAULTS = {
        'network_depth'      : 1,
        'snapshot'           : False,
        'activation'         : 'sigmoid',
        'activation_response': 1.0,
    }

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, all parameters take their default value.

        Raises:
            FileNotFoundError: If 'config_file' does not exist
            ValueError:        If a parameter has an invalid value
        """
        if config_file is None:
            for key, value in self._DEFAULTS.items():
                setattr(self, key, value)
            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Helper function to safely parse values
        def get_value(section, key, value_type):
            default = self._DEFAULTS[key]
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                return default

        # [NETWORK]

        # Number of sweeps through the network when evaluating in snapshot mode.
        # Deeper or more recurrent topologies need more sweeps to settle.
        self.network_depth = get_value('NETWORK', 'network_depth', int)

        # Whether to evaluate in snapshot mode: sweep 'network_depth' times and
        # clear all neuron outputs afterwards. If False, a single sweep is made
        # and neuron outputs persist between calls (recurrent memory).
        self.snapshot = get_value('NETWORK', 'snapshot', bool)

        # Activation function applied to every hidden and output neuron.
        # Options: "softmax" or a basic kernel (see 'basic_activations.py').
        self.activation = get_value('NETWORK', 'activation', str)

        # Default divisor applied to a neuron's weighted input before activation,
        # for neurons that do not specify their own.
        self.activation_response = get_value('NETWORK', 'activation_response', float)

        self._validate()

    def _validate(self) -> None:
        if self.network_depth is None or self.network_depth < 1:
            raise ValueError(f"network_depth must be >= 1, got {self.network_depth}")
        if self.activation not in activation_names:
            raise ValueError(f"Invalid activation function '{self.activation}'")
        if self.activation_response is None:
            raise ValueError("activation_response must be a number")

    def __repr__(self):
        return (f"Config(network_depth={self.network_depth}, snapshot={self.snapshot}, "
                f"activation={self.activation!r}, activation_response={self.activation_response})")
