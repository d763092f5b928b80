# examples/02_compare_shapes.py
import matplotlib.pyplot as plt

from orthorect import try_decompose
from orthorect.geometry import ShapeGenerator
from orthorect.utils.plotting import plot_decomposition


def main():
    shapes = {
        "U": ShapeGenerator.create_u_shape(),
        "T": ShapeGenerator.create_t_shape(),
        "Staircase": ShapeGenerator.create_staircase(steps=4),
        "Slotted": ShapeGenerator.create_slotted_shape(),
    }

    fig, axes = plt.subplots(1, len(shapes), figsize=(4 * len(shapes), 4))
    for ax, (name, shape) in zip(axes, shapes.items()):
        result = try_decompose(shape)
        if result.ok:
            plot_decomposition(shape, result.rectangles, ax=ax, title=f"{name}: {len(result.rectangles)}")
        else:
            plot_decomposition(shape, [], ax=ax, title=f"{name}: {type(result.error).__name__}")
            print(f"{name}: {result.error}")

    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
