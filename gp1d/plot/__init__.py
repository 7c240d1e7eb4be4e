# gp1d/plot/__init__.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
GP1D plotting utilities.
"""

from .plotutils import Figure

__all__ = ["Figure", "plotutils"]

from . import plotutils
