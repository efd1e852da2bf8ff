import configparser
import os
from activation_viewer.activations import activations, parametric_activations

class Config:

    @staticmethod
    def _parse_activation_options(raw_options):
        """
        Parse activation_options from string to list.

        Parameters:
            raw_options: Either "all", "unary", a comma-separated list, or already a list

        Returns:
            List of activation function names
        """
        # If already a list, return as-is
        if isinstance(raw_options, list):
            return raw_options

        if not isinstance(raw_options, str):
            raise ValueError(f"activation_options must be a string or a list, got {raw_options!r}")

        # Parse string values
        if raw_options == 'all':
            return list(activations.keys()) + list(parametric_activations.keys())
        elif raw_options == 'unary':
            return list(activations.keys())  # excludes parametric functions
        else:
            # Parse comma-separated list
            parsed = [opt.strip() for opt in raw_options.split(',')]
            all_valid = list(activations.keys()) + list(parametric_activations.keys())
            for opt in parsed:
                if opt not in all_valid:
                    raise ValueError(f"Invalid activation function '{opt}' in activation_options")
            return parsed

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a Config holding the reference sampling
                         setup (2000 points on [-2, 2], every activation).
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.xmin       = -2.0
            self.xmax       =  2.0
            self.resolution = 2000

            self.activation_options    = 'all'
            self.parametric_relu_slope = 0.25

            self.num_jobs = 1

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                # every key here needs a value; "None" is not accepted
                if raw_value.lower() == 'none':
                    raise ValueError(f"[{section}] {key} must have a value, got '{raw_value}'")
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [SAMPLING]

        # The interval over which the activation functions are sampled.
        # The grid starts at 'xmin' and stops one step short of 'xmax'.
        self.xmin = get_value('SAMPLING', 'xmin', float)
        self.xmax = get_value('SAMPLING', 'xmax', float)

        # The number of samples taken on the interval.
        self.resolution = get_value('SAMPLING', 'resolution', int)

        # [ACTIVATIONS]

        # Which activation functions to sample.
        # Options: "all" (every function), "unary" (excludes parametric functions),
        #          or comma-separated list of names (see 'catalogue.py')
        raw_options = get_value('ACTIVATIONS', 'activation_options', str, default='all')
        self.activation_options = raw_options

        # The negative-side slope passed to the parametric ReLU.
        self.parametric_relu_slope = get_value('ACTIVATIONS', 'parametric_relu_slope', float, default=0.25)

        # [PARALLEL] (optional section)

        # Number of parallel processes used to sample the activation functions.
        #    1 = serial (default)
        #   -1 = use all available CPU cores
        #   >1 = use specified number of processes
        self.num_jobs = get_value('PARALLEL', 'num_jobs', int, default=1)

    def __setattr__(self, name, value):
        """
        Override 'setattr' to automatically parse activation_options when set.
        This allows users to write config.activation_options = "unary" and have it
        automatically converted to the list of unary activation names.
        """
        if name == 'activation_options':
            value = self._parse_activation_options(value)
        super().__setattr__(name, value)
