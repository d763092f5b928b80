import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt

from orthorect import decompose
from orthorect.geometry import ShapeGenerator
from orthorect.utils.plotting import plot_decomposition


def test_plot_decomposition_draws_every_rectangle():
    poly = ShapeGenerator.create_u_shape()
    rects = decompose(poly)

    ax = plot_decomposition(poly, rects, title="U")
    assert len(ax.patches) == len(rects)
    assert ax.get_title() == "U"
    plt.close(ax.figure)


def test_plot_on_existing_axes():
    fig, ax = plt.subplots()
    poly = ShapeGenerator.create_rectangle()
    assert plot_decomposition(poly, [], ax=ax) is ax
    assert len(ax.patches) == 0
    plt.close(fig)
