'''
Gaussian process regression in 1D with noisy evaluations.

The observations are noisy values of a smooth function. The GP has zero
mean, squared-exponential covariance exp(-(x - y)^2 / h) with bandwidth
h, and noise precision beta. The posterior variance returned by the
predictor is the variance of a new noisy observation: it never falls
below 1/beta.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2025, CentraleSupelec
License: GPLv3 (see LICENSE)
'''
import numpy as np
import gp1d as gp


def generate_data(noise_std, seed=0):
    """Create a 1D dataset with noisy observed values."""
    rng = np.random.default_rng(seed)
    xt = np.linspace(-4.0, 4.0, 200)
    zt = np.sin(xt) + 0.3 * xt
    xi = np.array([-3.5, -2.6, -1.2, -0.4, 0.3, 1.1, 2.0, 3.4])
    zi = np.sin(xi) + 0.3 * xi + noise_std * rng.standard_normal(xi.shape[0])
    return xt, zt, xi, zi


def main():
    """Predict on a grid with the bandwidth form of the kernel."""
    noise_std = 0.1
    xt, zt, xi, zi = generate_data(noise_std)

    h = 3.0
    beta = 1.0 / noise_std**2
    zpm, zpv = gp.regress(xi, zi, xt, h=h, beta=beta)
    return xt, zt, xi, zi, zpm, zpv


def visualize(xt, zt, xi, zi, zpm, zpv):
    """Plot reference function, observations, and GP posterior."""
    import gp1d.plot

    fig = gp1d.plot.Figure(isinteractive=True)
    fig.plot(xt, zt, 'C0', linestyle=(0, (5, 5)), linewidth=1)
    fig.plotdata(xi, zi)
    fig.plotgp(xt, zpm, zpv)
    fig.xylabels('x', 'z')
    fig.title('GP regression with noisy evaluations')
    fig.show(grid=True)


if __name__ == "__main__":
    xt, zt, xi, zi, zpm, zpv = main()
    visualize(xt, zt, xi, zi, zpm, zpv)
