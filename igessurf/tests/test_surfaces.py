import unittest

import numpy as np

from igessurf.errors import InvalidDegreeError, MalformedInputError, FieldOverflowError
from igessurf.surfaces import RationalBSplineSurfaceIGES

linear_knots = [0., 0., 1., 1.]
bilinear_patch = [[[0., 0., 0.], [0., 1., 0.]], [[1., 0., 0.], [1., 1., 1.]]]


def data_fields(surface: RationalBSplineSurfaceIGES, **kwargs):
    return [line[:71].rstrip() for line in surface.write_data_lines(1, 1, **kwargs)]


class SurfaceShapeTests(unittest.TestCase):

    def test_degrees_and_upper_indices(self):
        surface = RationalBSplineSurfaceIGES([0., 0., 0., 0.5, 1., 1., 1.], linear_knots,
                                             np.zeros((4, 2, 3)))
        self.assertEqual(3, surface.upper_index_u)
        self.assertEqual(1, surface.upper_index_v)
        self.assertEqual(2, surface.degree_u)
        self.assertEqual(1, surface.degree_v)

    def test_invalid_degree(self):
        self.assertRaises(InvalidDegreeError, RationalBSplineSurfaceIGES, [0., 0., 1., 1.], linear_knots,
                          np.zeros((3, 2, 3)))
        self.assertRaises(InvalidDegreeError, RationalBSplineSurfaceIGES, linear_knots, [0., 1., 1.],
                          bilinear_patch)

    def test_malformed_grids(self):
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots, [])
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots, [[], []])
        ragged = [[[0., 0., 0.], [0., 1., 0.]], [[1., 0., 0.]]]
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots, ragged)
        two_component = [[[0., 0.], [0., 1.]], [[1., 0.], [1., 1.]]]
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots,
                          two_component)
        not_a_number = [[[0., 0., "z"], [0., 1., 0.]], [[1., 0., 0.], [1., 1., 1.]]]
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots,
                          not_a_number)

    def test_non_finite_values(self):
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, [0., 0., np.nan, 1.], linear_knots,
                          bilinear_patch)
        patch = np.array(bilinear_patch)
        patch[1, 1, 2] = np.inf
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots, patch)

    def test_knot_vector_must_be_flat(self):
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, [[0., 0.], [1., 1.]], linear_knots,
                          bilinear_patch)


class SurfaceParameterDataTests(unittest.TestCase):

    def test_default_layout(self):
        surface = RationalBSplineSurfaceIGES(linear_knots, linear_knots, bilinear_patch)
        self.assertEqual([
            "128,1,1,1,1,1,1,1,0,0,",
            "0.000000,", "0.000000,", "1.000000,", "1.000000,",
            "0.000000,", "0.000000,", "1.000000,", "1.000000,",
            "1,", "1,", "1,", "1,",
            "0.000000,", "0.000000,", "0.000000,",
            "1.000000,", "0.000000,", "0.000000,",
            "0.000000,", "1.000000,", "0.000000,",
            "1.000000,", "1.000000,", "1.000000;",
        ], data_fields(surface))

    def test_flags(self):
        surface = RationalBSplineSurfaceIGES(linear_knots, linear_knots, bilinear_patch, closed_u=False,
                                             closed_v=False, polynomial_flag=False, periodic_u=True,
                                             periodic_v=True)
        self.assertEqual("128,1,1,1,1,0,0,0,1,1,", data_fields(surface)[0])

    def test_weights_written_with_u_fastest(self):
        weights = [[1.0, 0.5], [2.0, 0.25]]
        surface = RationalBSplineSurfaceIGES(linear_knots, linear_knots, bilinear_patch, weights=weights)
        self.assertEqual(["1.000000,", "2.000000,", "0.500000,", "0.250000,"], data_fields(surface)[9:13])

    def test_bad_weights(self):
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots,
                          bilinear_patch, weights=[1.0, 1.0, 1.0, 1.0])
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots,
                          bilinear_patch, weights=[[1.0, 1.0], [0.0, 1.0]])

    def test_parameter_range(self):
        surface = RationalBSplineSurfaceIGES(linear_knots, linear_knots, bilinear_patch,
                                             parameter_range=(0.0, 1.0, 0.0, 0.5))
        fields = data_fields(surface)
        self.assertEqual(25 + 4, len(fields))
        self.assertEqual("1.000000,", fields[24])
        self.assertEqual(["0.000000,", "1.000000,", "0.000000,", "0.500000;"], fields[-4:])

    def test_bad_parameter_range(self):
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots,
                          bilinear_patch, parameter_range=(0.0, 1.0))

    def test_form_number(self):
        surface = RationalBSplineSurfaceIGES(linear_knots, linear_knots, bilinear_patch, form_number=1)
        entity_lines = surface.write_entity_lines(1, 1, 25)
        self.assertEqual("       1", entity_lines[1][32:40])

    def test_line_font_and_color(self):
        default_lines = RationalBSplineSurfaceIGES(linear_knots, linear_knots, bilinear_patch).write_entity_lines(
            1, 1, 25)
        self.assertEqual("       1", default_lines[0][24:32])
        self.assertEqual("       1", default_lines[1][16:24])
        surface = RationalBSplineSurfaceIGES(linear_knots, linear_knots, bilinear_patch, line_font="dashed",
                                             color="cyan")
        entity_lines = surface.write_entity_lines(1, 1, 25)
        self.assertEqual("       2", entity_lines[0][24:32])
        self.assertEqual("       7", entity_lines[1][16:24])
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots,
                          bilinear_patch, color="mauve")
        self.assertRaises(MalformedInputError, RationalBSplineSurfaceIGES, linear_knots, linear_knots,
                          bilinear_patch, line_font="wavy")

    def test_back_pointer_shrinks_field_area(self):
        surface = RationalBSplineSurfaceIGES(linear_knots, linear_knots, bilinear_patch)
        lines = surface.write_data_lines(11, 7)
        self.assertEqual("128,1,1,1,1,1,1,1,0,0," + " " * 48 + "11P      7", lines[0])
        self.assertTrue(all(len(line) == 80 for line in lines))

    def test_field_overflow(self):
        surface = RationalBSplineSurfaceIGES(linear_knots, linear_knots, [[[1e70, 0., 0.], [0., 1., 0.]],
                                                                          [[1., 0., 0.], [1., 1., 1.]]])
        self.assertRaises(FieldOverflowError, surface.write_data_lines, 1, 1)
        self.assertRaises(FieldOverflowError, surface.write_packed_data_lines, 1, 1)
        self.assertEqual(25, len(surface.write_data_lines(1, 1, real_format=".12E")))

    def test_max_coordinate(self):
        surface = RationalBSplineSurfaceIGES(linear_knots, linear_knots, np.array(bilinear_patch) * -3.0)
        self.assertEqual(3.0, surface.max_coordinate())


if __name__ == "__main__":
    unittest.main()
