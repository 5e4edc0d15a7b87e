r"""
Welcome
=======
To the documentation page for igessurf, a small Python 3 package that writes tensor-product B-spline surfaces to
the IGES (Initial Graphics Exchange Specification) file format as Entity Type 128 (Rational B-Spline Surface).


Usage
=====
A surface is described by two knot vectors and a grid of 3-D control points, ``control_points[i][j]`` being the
:math:`(i,j)`-th control point (:math:`i` along :math:`u`, :math:`j` along :math:`v`). The degree in each direction
is derived from the knot and control point counts: :math:`p = K - M - 1`. The one-line entry point is
``igessurf.encode()``:

.. code-block:: python

    import igessurf

    igessurf.encode("surface.igs", [0, 0, 0, 1, 1, 1], [0, 0, 1, 1], control_points)

For several surfaces in one file, or for finer control of the output, build
``igessurf.surfaces.RationalBSplineSurfaceIGES`` objects and pass them to ``igessurf.iges_generator.IGESGenerator``
together with an ``igessurf.settings.IGESSettings`` object.


Output layout
=============
By default, every field of the Parameter Data section is written on its own line and the Global section is left
blank. Packed free-format Parameter Data and a populated Global section can be switched on through
``IGESSettings``.
"""

# Width of the data area of a line (columns 1-72). Columns 73-80 hold the section letter and sequence number.
global_section_col_width = 72

# Width of the free-format parameter area in a packed Parameter Data line (columns 1-64)
data_section_col_width = 64

# Total width of every line in an IGES file, line terminator excluded
iges_line_width = 80

parameter_delimiter = ","
record_delimiter = ";"

from igessurf.version import __version__
from igessurf.errors import (IGESEncodeError, InvalidDegreeError, MalformedInputError, FieldOverflowError,
                             IGESFileWriteError)
from igessurf.settings import IGESSettings
from igessurf.surfaces import RationalBSplineSurfaceIGES
from igessurf.iges_generator import IGESGenerator, encode
