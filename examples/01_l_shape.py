# examples/01_l_shape.py
import matplotlib.pyplot as plt

from orthorect import decompose, DecompositionAnalyzer
from orthorect.geometry import ShapeGenerator
from orthorect.utils.plotting import plot_decomposition


def main():
    shape = ShapeGenerator.create_l_shape()
    rectangles = decompose(shape)

    metrics = DecompositionAnalyzer.evaluate(shape, rectangles)
    print(f"{metrics['rectangle_count']} rectangles, area {metrics['covered_area']} "
          f"of {metrics['input_area']}")

    plot_decomposition(shape, rectangles, title="L-shape decomposition")
    plt.show()


if __name__ == "__main__":
    main()
