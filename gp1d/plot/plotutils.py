# gp1d/plot/plotutils.py
# --------------------------------------------------------------
# Author: Emmanuel Vazquez <emmanuel.vazquez@centralesupelec.fr>
# Copyright (c) 2022-2026, CentraleSupelec
# License: GPLv3 (see LICENSE)
# --------------------------------------------------------------
import sys
import numpy as np
import scipy.stats as stats
import matplotlib.pyplot as plt
from matplotlib import interactive


class Figure:
    """Figures manager class.

    Thin wrapper around a matplotlib figure with one set of axes, used to
    display data and GP posteriors on the real line.
    """

    def __init__(self, isinteractive=True, boxoff=True, **kargs):
        # Check if we run in interpreter mode
        self.interpreter = False
        try:
            if sys.ps1:
                self.interpreter = True
        except AttributeError:
            self.interpreter = False
            if sys.flags.interactive:
                self.interpreter = True

        if isinteractive & self.interpreter:
            interactive(True)

        self.fig = plt.figure(**kargs)
        self.ax = self.fig.add_subplot(1, 1, 1)
        if boxoff:
            self.set_boxoff()

    def set_boxoff(self):
        self.ax.spines["right"].set_visible(False)
        self.ax.spines["top"].set_visible(False)
        self.ax.tick_params(direction="in")

    def show(self, grid=None, legend=None, xlim=None):
        if grid:
            self.grid()
        if legend:
            self.legend()
        if xlim is not None:
            self.xlim(xlim)
        plt.show()

    def savefig(self, fname, **kwargs):
        self.fig.savefig(fname, **kwargs)

    def close(self):
        plt.close(self.fig)

    def plot(self, x, z, *args, **kargs):
        self.ax.plot(x, z, *args, **kargs)

    def plotdata(self, x, z, label="data"):
        self.ax.plot(x, z, "rs", markerfacecolor="none", markersize=6, label=label)

    def xylabels(self, sx="", sy=""):
        self.ax.set_xlabel(sx)
        self.ax.set_ylabel(sy)

    def title(self, s):
        self.ax.set_title(s)

    def legend(self, **kwargs):
        self.ax.legend(**kwargs)

    def grid(self, visible=True, which="major", linestyle=(0, (1, 5)), linewidth=0.5, **kwargs):
        self.ax.grid(visible, which, linestyle=linestyle, linewidth=linewidth, **kwargs)

    def xlim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_xlim()
        self.ax.set_xlim(new_limits)
        return new_limits

    def ylim(self, new_limits=None):
        if new_limits is None:
            return self.ax.get_ylim()
        self.ax.set_ylim(new_limits)
        return new_limits

    def plotgp(
        self,
        x,
        mean,
        variance,
        mean_label="posterior mean",
        ci=(0.95, 0.99, 0.999),
        ci_labels=("CI 95%", "CI 99%", "CI 99.9%"),
        fillcol=("#BFBFBF", "#D8D8D8", "#F2F2F2"),
        alpha=0.8,
    ):
        """Posterior mean and coverage intervals.

        The interval of level p is mean +/- q sqrt(variance) with
        q = norminv((1 + p) / 2):

        norminv (1 - 0.05/2)  = 1.959964
        norminv (1 - 0.01/2)  = 2.575829
        norminv (1 - 0.001/2) = 3.290527

        Negative variances are clipped to zero.
        """
        x = np.asarray(x).flatten()
        mean = np.asarray(mean).flatten()
        std = np.sqrt(np.maximum(np.asarray(variance).flatten(), 0.0))

        delta0 = [stats.norm.ppf((1 + level) / 2) for level in ci]

        # widest interval first so that narrower ones are drawn on top
        order = np.argsort(delta0)[::-1]
        for i in order:
            lower = mean - delta0[i] * std
            upper = mean + delta0[i] * std
            self.ax.fill(
                np.hstack((x, x[::-1])),
                np.hstack((upper, lower[::-1])),
                color=fillcol[i % len(fillcol)],
                label=ci_labels[i],
                alpha=alpha,
                linewidth=0.5,
            )

        self.ax.plot(x, mean, "#F2404C", linewidth=2.0, label=mean_label)
