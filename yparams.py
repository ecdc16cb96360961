import yaml


class YParams:
    """
    Parameters from yaml config file.
    Parameters of the config file are saved as object attributes over default values.

    Parameters
    ----------
    `filepath` : str
        Path to config file with parameters
    `defaults` : dict, optional
        Values of parameters missing in config file
    """
    def __init__(self, filepath, defaults : dict = None):
        self.filepath = filepath
        self.defaults = dict(defaults or {})
        self._load_params()

    def _load_params(self):
        """
        Load parameters from config file
        """
        with open(self.filepath) as f:
            params = yaml.load(f, Loader=yaml.FullLoader)
        if params is None:
            params = {}
        if not isinstance(params, dict):
            raise ValueError(f'Config file {self.filepath} must contain a mapping of parameters, got {type(params).__name__}')
        self.kw = dict(self.defaults)
        self.kw.update(params)
        for param_name, param_value in self.kw.items():
            setattr(self, param_name, param_value)

    def get(self, param_name : str, default=None):
        return self.kw.get(param_name, default)

    def display(self, log_function=print):
        for param_name, param_value in self.kw.items():
            log_function(f'{param_name}: {param_value}')
