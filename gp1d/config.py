# gp1d/config.py
import os
import logging

# Read version from VERSION file
_version_file = os.path.join(os.path.dirname(__file__), "..", "VERSION")
try:
    with open(os.path.abspath(_version_file), "r") as f:
        __version__ = f.read().strip()
except FileNotFoundError:
    __version__ = "0.0.0"


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ("0", "false", "no", "off", "")


class _GP1DConfig:
    def __init__(self):
        self.version = __version__
        self.dtype = float
        # raise on a non-positive Cholesky pivot instead of propagating NaN
        self.check_positive_definite = _env_flag("GP1D_CHECK_PD", True)
        # logger lives in config
        self.logger = logging.getLogger("gp1d")
        if not self.logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
            self.logger.addHandler(h)
        self.logger.setLevel(logging.INFO)

    def __str__(self):
        return (
            f"GP1DConfig("
            f"version={self.version}, "
            f"dtype={self.dtype}, "
            f"check_positive_definite={self.check_positive_definite})"
        )

    def __repr__(self):
        return (
            f"<GP1DConfig "
            f"version={self.version!r}, "
            f"dtype={self.dtype!r}, "
            f"check_positive_definite={self.check_positive_definite!r}>"
        )

    def update(self, **kwargs):
        for k, v in kwargs.items():
            if not hasattr(self, k):
                raise AttributeError(f"unknown configuration entry '{k}'")
            setattr(self, k, v)
        return self


_config = _GP1DConfig()


def get_config():
    return _config


def set_check_positive_definite(flag: bool):
    """Raise (True) or propagate NaN (False) on a non-positive Cholesky pivot."""
    _config.check_positive_definite = bool(flag)


def get_check_positive_definite():
    return _config.check_positive_definite


def get_logger():
    return _config.logger


def set_log_level(level):
    _config.logger.setLevel(level)
