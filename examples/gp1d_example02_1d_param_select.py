'''
Selection of the kernel precision by gradient ascent on the likelihood,
followed by prediction with the selected parameter.

The kernel is exp(-t (x - y)^2). Starting from t = 1, a fixed number of
gradient steps is taken on the log-likelihood; the negative
log-likelihood before and after is printed.

----
Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
Copyright (c) 2022-2025, CentraleSupelec
License: GPLv3 (see LICENSE)
'''
import numpy as np
import gp1d as gp


def generate_data(seed=1):
    """Noisy observations of a slowly varying function."""
    rng = np.random.default_rng(seed)
    xi = np.linspace(-2.0, 2.0, 9)
    zi = np.cos(0.8 * xi) + 0.05 * rng.standard_normal(xi.shape[0])
    xt = np.linspace(-2.5, 2.5, 101)
    return xi, zi, xt


def main():
    """Select t, then predict."""
    xi, zi, xt = generate_data()

    model = gp.Model(t=1.0, beta=30.0)
    nll_init = model.negative_log_likelihood(xi, zi)
    model.select_parameters(xi, zi, iterations=10, learning_rate=1e-3)
    nll_final = model.negative_log_likelihood(xi, zi)
    print(model)
    print(f"negative log-likelihood: {nll_init:.4f} -> {nll_final:.4f}")

    zpm, zpv = model.predict(xi, zi, xt)
    return xi, zi, xt, zpm, zpv, model


def visualize(xi, zi, xt, zpm, zpv, model):
    """Plot observations and GP posterior with the selected precision."""
    import gp1d.plot

    fig = gp1d.plot.Figure(isinteractive=True)
    fig.plotdata(xi, zi)
    fig.plotgp(xt, zpm, zpv)
    fig.xylabels('x', 'z')
    fig.title(f'GP posterior, selected precision t = {model.t:.3g}')
    fig.show(grid=True)


if __name__ == "__main__":
    xi, zi, xt, zpm, zpv, model = main()
    visualize(xi, zi, xt, zpm, zpv, model)
