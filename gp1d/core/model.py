# gp1d/core/model.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
"""
Gaussian Process model class.
"""
import warnings
import gp1d.num as gnp

from . import kriging
from . import likelihood
from gp1d.kernel.squared_exponential import bandwidth_to_precision
from gp1d.kernel.gram import noise_variance
from gp1d.kernel.parameter_selection import optimize


class Model:
    """Gaussian Process (GP) Model Class.

    Zero-mean GP on the real line with covariance

    .. math::
        k(x, y) = \\exp(-t\\,(x - y)^2)

    observed through additive Gaussian noise of variance 1/beta.

    Attributes
    ----------
    t : float
        Kernel precision.
    beta : float
        Noise precision.

    Public API (methods)
    --------------------
    from_bandwidth
        Build a model from the bandwidth h = 1/t.
    predict
        Posterior mean/variance at target points.
    negative_log_likelihood
        Negative log-likelihood of the data.
    select_parameters
        Gradient ascent on the likelihood with respect to t.

    Examples
    --------
    >>> import gp1d as gp
    >>> import gp1d.num as gnp
    >>> xi = gnp.array([0.0, 1.0, 2.0])
    >>> zi = gnp.array([0.0, 1.0, 0.0])
    >>> xt = gnp.linspace(0.0, 2.0, 5)
    >>> model = gp.Model(t=1.0, beta=30.0)
    >>> zt_mean, zt_var = model.predict(xi, zi, xt)
    """

    def __init__(self, t=3.0, beta=30.0):
        """
        Parameters
        ----------
        t : float, optional
            Kernel precision.
        beta : float, optional
            Noise precision. Must be positive; ``inf`` gives interpolation.
        """
        noise_variance(beta)
        self.t = float(t)
        self.beta = float(beta)

    @classmethod
    def from_bandwidth(cls, h=3.0, beta=30.0):
        """Build a model with kernel exp(-(x - y)^2 / h)."""
        return cls(t=bandwidth_to_precision(h), beta=beta)

    def __repr__(self):
        output = str("<gp1d.core.Model object> " + hex(id(self)))
        return output

    def __str__(self):
        return (
            f"GP Model:\n"
            f"  Covariance Function: squared exponential\n"
            f"  Precision t: {self.t}\n"
            f"  Noise Precision beta: {self.beta}"
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def predict(self, xi, zi, xt, zero_neg_variances=False):
        """Performs a prediction at target points xt given the data (xi, zi).

        Parameters
        ----------
        xi : array_like, shape (ni,)
            Observation points.
        zi : array_like, shape (ni,)
            Observed values at the observation points.
        xt : array_like, shape (nt,)
            Target points where predictions are to be made.
        zero_neg_variances : bool, optional
            Whether to replace negative posterior variances with zeros,
            by default False. Negative variances can only come from
            rounding errors.

        Returns
        -------
        z_posterior_mean : gnp.array, shape (nt,)
            Posterior mean predictions at target points.
        z_posterior_variance : gnp.array, shape (nt,)
            Posterior variance at target points, noise included.
        """
        zt_posterior_mean, zt_posterior_variance = kriging.predict(
            xi, zi, xt, t=self.t, beta=self.beta
        )
        if gnp.any(zt_posterior_variance < 0.0):
            warnings.warn(
                "Negative variances detected. The Gram matrix is probably ill-conditioned.",
                RuntimeWarning,
            )
            if zero_neg_variances:
                zt_posterior_variance = gnp.maximum(zt_posterior_variance, 0.0)
        return zt_posterior_mean, zt_posterior_variance

    def negative_log_likelihood(self, xi, zi):
        """Negative log-likelihood of (xi, zi) at the current parameters."""
        return likelihood.negative_log_likelihood(xi, zi, self.t, self.beta)

    def select_parameters(self, xi, zi, iterations=100, learning_rate=0.05):
        """Run the gradient ascent from the current t and keep the result.

        Returns
        -------
        t : float
            The selected precision, also stored in ``self.t``.
        """
        self.t = optimize(
            xi,
            zi,
            beta=self.beta,
            iterations=iterations,
            learning_rate=learning_rate,
            t0=self.t,
        )
        return self.t
