import logging

import numpy as np

from igessurf.iges_generator import encode


def wigley_hull_control_points(L: float = 1.0, B: float = 0.1, T: float = 0.0625):
    """Control points of a quadratic 3x3 B-spline approximation of the Wigley hull of length L, beam B, draft T"""
    return np.array([
        [[-L / 2, 0., 0.], [-L / 2, 0., T / 2], [-L / 2, 0., T]],
        [[0., B, 0.], [0., B, T / 2], [0., 0., T]],
        [[L / 2, 0., 0.], [L / 2, 0., T / 2], [L / 2, 0., T]],
    ])


def main():
    logging.basicConfig(level=logging.INFO)
    file_name = "Wigley.igs"
    knots_u = [0., 0., 0., 1., 1., 1.]
    knots_v = [0., 0., 0., 1., 1., 1.]
    encode(file_name, knots_u, knots_v, wigley_hull_control_points())


if __name__ == "__main__":
    main()
