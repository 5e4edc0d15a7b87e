import logging
import os
import typing

from igessurf import iges_line_width
from igessurf.entity import Entity, MultiEntityContainer
from igessurf.errors import FieldOverflowError, IGESEncodeError, IGESFileWriteError, MalformedInputError
from igessurf.global_params import GlobalParams
from igessurf.settings import IGESSettings
from igessurf.start_end_section import StartSection, EndSection, wrap_section_text
from igessurf.surfaces import RationalBSplineSurfaceIGES

logger = logging.getLogger(__name__)


class IGESGenerator:
    """Generates IGES files using a list of IGES entities"""
    def __init__(self, entities: typing.List[Entity], settings: IGESSettings = None):
        self.entities = entities
        self.settings = IGESSettings() if settings is None else settings
        self.start = StartSection(self.settings.start_comment)
        self.globals = None
        self.entity_container = MultiEntityContainer(self.entities)
        self.end_section = None

    def write_iges_lines(self, file_name: str = ""):
        """
        Builds every line of the IGES file in memory.

        Parameters
        ==========
        file_name: str
          Only used to fill in the file name field of a populated Global section

        Returns
        =======
        typing.List[str]
          The 80-column lines of the Start, Global, Directory Entry, Parameter Data, and Terminate sections, in
          order and without line terminators
        """
        if len(self.entities) == 0:
            raise MalformedInputError("An IGES file needs at least one entity")

        start_section_lines = self.start.write_start_section_lines()

        if self.settings.populate_globals:
            max_coord = max((entity.max_coordinate() for entity in self.entities
                             if isinstance(entity, RationalBSplineSurfaceIGES)), default=0.0)
            self.globals = GlobalParams(file_name=os.path.basename(file_name), product_id=self.settings.product_id,
                                        units=self.settings.units, author_name=self.settings.author_name,
                                        author_org=self.settings.author_org,
                                        approx_max_coord_value=max(max_coord, 1.0),
                                        real_format=self.settings.real_format)
            global_section_lines = self.globals.write_global_lines()
        else:
            global_section_lines = wrap_section_text("", "G")

        entity_section_lines, data_section_lines = self.entity_container.write_all_entity_and_data_lines(
            real_format=self.settings.real_format, pack_parameter_data=self.settings.pack_parameter_data)

        self.end_section = EndSection(n_start_lines=len(start_section_lines),
                                      n_global_lines=len(global_section_lines),
                                      n_entity_lines=len(entity_section_lines),
                                      n_data_lines=len(data_section_lines))
        end_section_lines = [self.end_section.write_end_section_string()]

        logger.debug(f"IGES sections: S={len(start_section_lines)}, G={len(global_section_lines)}, "
                     f"D={len(entity_section_lines)}, P={len(data_section_lines)}, T={len(end_section_lines)}")

        iges_lines = start_section_lines + global_section_lines + entity_section_lines + \
            data_section_lines + end_section_lines

        for line_idx, line in enumerate(iges_lines):
            if not (line.isascii() and line.isprintable()):
                raise MalformedInputError(f"Line {line_idx + 1} of the IGES file contains characters that are not "
                                          f"printable ASCII: {line!r}")
            if len(line) != iges_line_width:
                raise FieldOverflowError(f"Line {line_idx + 1} of the IGES file is {len(line)} columns wide "
                                         f"instead of {iges_line_width}: '{line}'")

        return iges_lines

    def write_iges_string(self, file_name: str = ""):
        line_ending = self.settings.line_ending
        return "".join([line + line_ending for line in self.write_iges_lines(file_name)])

    def generate(self, file_name: str):
        """
        Generates an IGES file containing all the information for the entities. The whole file is built and
        checked before anything is written, and the target file is only replaced once the write has succeeded.

        Parameters
        ==========
        file_name: str
          File where the IGES data will be saved. The extension is used as given.

        Returns
        =======
        str
          The IGES data in Python string format
        """
        iges_string = self.write_iges_string(file_name)

        temp_file_name = f"{file_name}.tmp"
        try:
            with open(temp_file_name, "w", newline="", encoding="ascii") as f:
                f.write(iges_string)
            os.replace(temp_file_name, file_name)
        except (OSError, UnicodeError) as e:
            if os.path.exists(temp_file_name):
                os.remove(temp_file_name)
            raise IGESFileWriteError(f"Could not write the IGES file {file_name}: {e}") from e

        logger.info(f"Wrote {len(self.entities)} entities to IGES file {file_name}")

        return iges_string


def encode(file_name: str, knots_u, knots_v, control_points, weights=None, settings: IGESSettings = None,
           **surface_kwargs):
    """
    Writes the B-spline surface defined by ``knots_u``, ``knots_v``, and ``control_points`` to ``file_name`` in
    IGES format, as a single Entity Type 128.

    Parameters
    ==========
    file_name: str
      Path of the IGES file, extension included (e.g., ``"surface.igs"``)

    knots_u
      ``knots_u[i]`` is the :math:`i`-th knot in the :math:`u`-direction

    knots_v
      ``knots_v[i]`` is the :math:`i`-th knot in the :math:`v`-direction

    control_points
      ``control_points[i][j]`` is the :math:`(i,j)`-th control point, given as :math:`(x, y, z)`

    weights
      Optional grid of weights parallel to ``control_points``. All weights are 1 if not given

    settings: IGESSettings
      Output options. Defaults to one field per line with six-decimal reals

    surface_kwargs
      Passed on to ``igessurf.surfaces.RationalBSplineSurfaceIGES`` (flags, ``parameter_range``, ``form_number``)

    Returns
    =======
    bool
      ``True`` once the file is written. Every failure raises a subclass of ``igessurf.errors.IGESEncodeError``
    """
    try:
        surface = RationalBSplineSurfaceIGES(knots_u, knots_v, control_points, weights=weights, **surface_kwargs)
        IGESGenerator([surface], settings=settings).generate(file_name)
    except IGESEncodeError as e:
        logger.warning(f"Could not encode the B-spline surface to {file_name}: {e}")
        raise
    return True
