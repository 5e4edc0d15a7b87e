import logging
import typing

import numpy as np

from igessurf.entity import Entity
from igessurf.errors import InvalidDegreeError, MalformedInputError
from igessurf.iges_param import IGESParam

logger = logging.getLogger(__name__)


class RationalBSplineSurfaceIGES(Entity):
    """
    IGES Entity #128
    """
    def __init__(self, knots_u, knots_v, control_points_XYZ, weights=None, closed_u: bool = True,
                 closed_v: bool = True, polynomial_flag: bool = True, periodic_u: bool = False,
                 periodic_v: bool = False, parameter_range: typing.Sequence[float] = None, form_number: int = 0,
                 line_font: str = "solid", color: str = "black"):
        """
        Tensor-product rational B-spline surface. The degree in each parametric direction is derived from the
        knot count and the control point count in that direction.

        Parameters
        ==========
        knots_u
          Knot vector in the :math:`u`-direction (length :math:`M_u + p_u + 1`)

        knots_v
          Knot vector in the :math:`v`-direction (length :math:`M_v + p_v + 1`)

        control_points_XYZ
          Array-like of shape :math:`M_u \\times M_v \\times 3`. ``control_points_XYZ[i][j]`` is the
          :math:`(i,j)`-th control point

        weights
          Array-like of shape :math:`M_u \\times M_v`, parallel to the control point grid. If ``None``, every
          weight is written as the integer ``1``

        closed_u, closed_v, polynomial_flag, periodic_u, periodic_v: bool
          The PROP1-PROP5 flags of the entity. These are written as given and are not checked against the geometry

        parameter_range: typing.Sequence[float]
          Optional :math:`(u_0, u_1, v_0, v_1)`. When given, the four values are appended after the control points

        form_number: int
          Directory Entry form number

        line_font, color: str
          Line font pattern and color written in the Directory Entry, as keys of ``Entity.line_fonts`` and
          ``Entity.color_numbers``
        """
        self.knots_u = self._as_real_array(knots_u, "knots_u", ndim=1)
        self.knots_v = self._as_real_array(knots_v, "knots_v", ndim=1)
        self.control_points = self._as_control_point_grid(control_points_XYZ)

        n_cp_u, n_cp_v = self.control_points.shape[:2]
        self.upper_index_u = n_cp_u - 1
        self.upper_index_v = n_cp_v - 1
        self.degree_u = len(self.knots_u) - n_cp_u - 1
        self.degree_v = len(self.knots_v) - n_cp_v - 1
        if self.degree_u < 1 or self.degree_v < 1:
            raise InvalidDegreeError(
                f"Degrees derived from the knot and control point counts must be at least 1. Found degree "
                f"{self.degree_u} in u ({len(self.knots_u)} knots, {n_cp_u} control points) and degree "
                f"{self.degree_v} in v ({len(self.knots_v)} knots, {n_cp_v} control points).")

        if weights is None:
            self.weights = None
        else:
            self.weights = self._as_real_array(weights, "weights", ndim=2)
            if self.weights.shape != (n_cp_u, n_cp_v):
                raise MalformedInputError(f"weights must have shape {(n_cp_u, n_cp_v)} to match the control point "
                                          f"grid. Found shape {self.weights.shape}.")
            if np.any(self.weights <= 0.0):
                raise MalformedInputError("Every weight must be strictly positive")

        if parameter_range is None:
            self.parameter_range = None
        else:
            self.parameter_range = self._as_real_array(parameter_range, "parameter_range", ndim=1)
            if len(self.parameter_range) != 4:
                raise MalformedInputError(f"parameter_range must contain exactly 4 values (u0, u1, v0, v1). "
                                          f"Found {len(self.parameter_range)}.")

        self.flag1 = int(closed_u)
        self.flag2 = int(closed_v)
        self.flag3 = int(polynomial_flag)
        self.flag4 = int(periodic_u)
        self.flag5 = int(periodic_v)

        logger.debug(f"Rational B-spline surface with {n_cp_u}x{n_cp_v} control points, "
                     f"degree ({self.degree_u}, {self.degree_v})")

        # Weights and control points are written with the u-index varying fastest
        if self.weights is None:
            weight_params = [IGESParam(1, "int") for _ in range(n_cp_u * n_cp_v)]
        else:
            weight_params = [IGESParam(w, "real") for w in self.weights.T.flatten()]

        parameter_data = [
            IGESParam(self.upper_index_u, "int"),
            IGESParam(self.upper_index_v, "int"),
            IGESParam(self.degree_u, "int"),
            IGESParam(self.degree_v, "int"),
            IGESParam(self.flag1, "int"),
            IGESParam(self.flag2, "int"),
            IGESParam(self.flag3, "int"),
            IGESParam(self.flag4, "int"),
            IGESParam(self.flag5, "int"),
            *[IGESParam(k, "real") for k in self.knots_u],
            *[IGESParam(k, "real") for k in self.knots_v],
            *weight_params,
            *[IGESParam(xyz, "real") for xyz in self.control_points.transpose((1, 0, 2)).flatten()],
        ]
        if self.parameter_range is not None:
            parameter_data.extend([IGESParam(t, "real") for t in self.parameter_range])

        super().__init__(128, parameter_data, n_header_params=9, form_number=form_number,
                         line_font=line_font, color=color)

    @staticmethod
    def _as_real_array(values, name: str, ndim: int):
        try:
            arr = np.asarray(values, dtype=float)
        except (TypeError, ValueError) as e:
            raise MalformedInputError(f"{name} could not be read as a rectangular array of reals: {e}") from e
        if arr.ndim != ndim:
            raise MalformedInputError(f"{name} must be {ndim}-dimensional. Found shape {arr.shape}.")
        if not np.all(np.isfinite(arr)):
            raise MalformedInputError(f"{name} contains NaN or infinite values")
        return arr

    @staticmethod
    def _as_control_point_grid(control_points_XYZ):
        try:
            P = np.asarray(control_points_XYZ, dtype=float)
        except (TypeError, ValueError) as e:
            raise MalformedInputError(f"The control point grid is not rectangular or contains non-numeric "
                                      f"values: {e}") from e
        if P.size == 0:
            raise MalformedInputError("The control point grid is empty")
        if P.ndim != 3 or P.shape[2] != 3:
            raise MalformedInputError(f"The control point grid must have shape (Mu, Mv, 3). Found shape {P.shape}.")
        if not np.all(np.isfinite(P)):
            raise MalformedInputError("The control point grid contains NaN or infinite values")
        return P

    def max_coordinate(self):
        """Largest absolute coordinate value among the control points"""
        return float(np.max(np.abs(self.control_points)))
