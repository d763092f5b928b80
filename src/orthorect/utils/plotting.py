import matplotlib.pyplot as plt

COLORS = ['tab:red', 'tab:green', 'tab:blue', 'tab:orange', 'tab:purple', 'tab:cyan']


def plot_decomposition(polygon, rectangles, ax=None, title=None):
    """
    Draws the polygon outline and fills each rectangle with its own colour.
    Returns the matplotlib Axes.
    """
    if ax is None:
        _, ax = plt.subplots(figsize=(6, 6))

    for i, rect in enumerate(rectangles):
        x, y = rect.exterior.xy
        ax.fill(x, y, alpha=0.5, fc=COLORS[i % len(COLORS)], ec='black', label=f'Rect {i + 1}')

    x, y = polygon.exterior.xy
    ax.plot(x, y, color='black', linewidth=2)

    ax.set_aspect('equal')
    ax.grid(True)
    if title:
        ax.set_title(title)
    if rectangles:
        ax.legend(loc='upper right', fontsize='small')
    return ax
