from shapely.geometry import Polygon


class ShapeGenerator:
    """
    Orthogonal shapes for tests and demos. All exteriors are counter-clockwise.
    """

    @staticmethod
    def create_rectangle(width=4.0, height=3.0):
        coords = [(0, 0), (width, 0), (width, height), (0, height), (0, 0)]
        return Polygon(coords)

    @staticmethod
    def create_l_shape():
        # 4x2 base with a 2x2 block on its left half
        coords = [(0, 0), (4, 0), (4, 2), (2, 2), (2, 4), (0, 4)]
        return Polygon(coords)

    @staticmethod
    def create_u_shape():
        coords = [(0, 0), (6, 0), (6, 4), (4, 4), (4, 2), (2, 2), (2, 4), (0, 4)]
        return Polygon(coords)

    @staticmethod
    def create_t_shape():
        # Upside-down T: 6x2 base, 2x2 stem centred on top
        coords = [(0, 0), (6, 0), (6, 2), (4, 2), (4, 4), (2, 4), (2, 2), (0, 2)]
        return Polygon(coords)

    @staticmethod
    def create_staircase(steps=3, size=1.0):
        """Staircase descending to the right, `steps` treads of `size`."""
        coords = [(0, 0), (steps * size, 0)]
        for k in range(1, steps):
            coords.append(((steps - k + 1) * size, k * size))
            coords.append(((steps - k) * size, k * size))
        coords.append((size, steps * size))
        coords.append((0, steps * size))
        return Polygon(coords)

    @staticmethod
    def create_slotted_shape():
        """
        10x4 base with a tower on top that has a slot reaching down into the
        base. Orthogonal, but the greedy cut overlaps the slot.
        """
        coords = [(0, 0), (10, 0), (10, 4), (8, 4), (8, 10), (6, 10),
                  (6, 2), (4, 2), (4, 10), (0, 10)]
        return Polygon(coords)

    @staticmethod
    def create_frame():
        """Square with a square hole."""
        shell = [(0, 0), (6, 0), (6, 6), (0, 6), (0, 0)]
        hole = [(2, 2), (2, 4), (4, 4), (4, 2), (2, 2)]
        return Polygon(shell, [hole])
