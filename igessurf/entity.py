import logging
import typing

from igessurf import (global_section_col_width, data_section_col_width, parameter_delimiter, record_delimiter)
from igessurf.errors import FieldOverflowError, MalformedInputError
from igessurf.iges_param import IGESParam

logger = logging.getLogger(__name__)


class Entity:

    line_fonts = {
        "no_pattern": 0,
        "solid": 1,
        "dashed": 2,
        "phantom": 3,
        "centerline": 4,
        "dotted": 5,
    }

    color_numbers = {
        "no_color": 0,
        "black": 1,
        "red": 2,
        "green": 3,
        "blue": 4,
        "yellow": 5,
        "magenta": 6,
        "cyan": 7,
        "white": 8,
    }

    def __init__(self, ID: int, parameter_data: typing.List[IGESParam], n_header_params: int = 0,
                 form_number: int = 0, line_font: str = "solid", color: str = "black"):
        """
        Base class for an IGES entity: one two-line Directory Entry record plus a block of Parameter Data.

        Parameters
        ==========
        ID: int
          IGES entity type number

        parameter_data: typing.List[IGESParam]
          Parameter Data fields following the entity type number

        n_header_params: int
          Number of leading fields written on the same line as the entity type number when one field per line is
          written

        form_number: int
          Directory Entry form number

        line_font: str
          Key of ``Entity.line_fonts`` written as the line font pattern

        color: str
          Key of ``Entity.color_numbers`` written as the color number
        """
        if line_font not in self.line_fonts:
            raise MalformedInputError(f"line_font must be one of {list(self.line_fonts.keys())}. Found {line_font}.")
        if color not in self.color_numbers:
            raise MalformedInputError(f"color must be one of {list(self.color_numbers.keys())}. Found {color}.")
        self.entity_ID = IGESParam(ID, "int")
        self.pd_pointer = IGESParam(1, "int")  # First parameter data line for this entity
        self.structure = IGESParam(0, "int")
        self.line_font_pattern = IGESParam(self.line_fonts[line_font], "int")
        self.level = IGESParam(0, "int")
        self.view = IGESParam(0, "int")
        self.transformation_matrix_pointer = IGESParam(0, "int")
        self.label_display_associativity = IGESParam(0, "int")
        self.status_number = IGESParam(1, "int")
        self.line_weight_number = IGESParam(0, "int")
        self.color_number = IGESParam(self.color_numbers[color], "int")
        self.parameter_line_count = IGESParam(1, "int")
        self.form_number = IGESParam(form_number, "int")
        self.reserved = IGESParam(0, "int")
        self.entity_label = IGESParam(0, "int")
        self.subscript_number = IGESParam(0, "int")
        self.parameter_data = parameter_data
        self.n_header_params = n_header_params
        self.param_delimiter = parameter_delimiter
        self.record_delimiter = record_delimiter

    def write_entity_lines(self, entity_starting_line: int, data_starting_line: int, data_string_lines: int):

        def write_line_string(line: typing.List[IGESParam]):
            line_string = ""
            for iges_param in line:
                if iges_param.dtype != "int":
                    raise TypeError(f"For an entity, every Directory Entry field must have type 'int'. Found an "
                                    f"IGESParam with type {iges_param.dtype}.")
                line_string += f"{iges_param.value:8d}"
            return line_string

        self.pd_pointer.value = data_starting_line
        self.parameter_line_count.value = data_string_lines

        line1 = [self.entity_ID, self.pd_pointer, self.structure, self.line_font_pattern, self.level, self.view,
                 self.transformation_matrix_pointer, self.label_display_associativity, self.status_number]
        line2 = [self.entity_ID, self.line_weight_number, self.color_number, self.parameter_line_count,
                 self.form_number, self.reserved, self.reserved, self.entity_label, self.subscript_number]

        return [write_line_string(line1) + f"D{entity_starting_line:7d}",
                write_line_string(line2) + f"D{entity_starting_line + 1:7d}"]

    def _write_field_tokens(self, real_format: str):
        """Every Parameter Data field followed by its delimiter, the entity type number included"""
        fields = [self.entity_ID.write_value_to_python_str()] + [
            p.write_value_to_python_str(real_format) for p in self.parameter_data]
        if len(fields) < 2:
            raise MalformedInputError(f"Entity {self.entity_ID.value} has no parameter data to write")
        return [f + self.param_delimiter for f in fields[:-1]] + [fields[-1] + self.record_delimiter]

    def write_data_lines(self, entity_entry_line: int, data_starting_line: int, real_format: str = "f"):
        """
        Writes the Parameter Data of this entity with one field per line. The fields in the header (the entity
        type number plus the first ``n_header_params`` parameters) share the first line. The back pointer to the
        Directory Entry ends in column 72, and the field area takes up every column before it.

        Returns
        =======
        typing.List[str]
          The Parameter Data lines, without line terminators
        """
        tokens = self._write_field_tokens(real_format)
        n_header = self.n_header_params + 1
        logical_lines = ["".join(tokens[:n_header])] + tokens[n_header:]

        back_pointer = str(entity_entry_line)
        field_width = global_section_col_width - len(back_pointer)

        data_lines = []
        for line_idx, logical_line in enumerate(logical_lines):
            if len(logical_line) > field_width:
                raise FieldOverflowError(f"Parameter Data field '{logical_line}' is {len(logical_line)} characters "
                                         f"long and does not fit in the {field_width} columns available")
            data_lines.append(f"{logical_line:<{field_width}}{back_pointer}P{data_starting_line + line_idx:7d}")
        return data_lines

    def write_packed_data_lines(self, entity_entry_line: int, data_starting_line: int, real_format: str = "f"):
        """
        Writes the Parameter Data of this entity in IGES free format: as many whole fields per line as fit in
        columns 1-64, with the back pointer to the Directory Entry right-justified in columns 65-72.

        Returns
        =======
        typing.List[str]
          The Parameter Data lines, without line terminators
        """
        packed_lines = []
        current_line = ""
        for token in self._write_field_tokens(real_format):
            if len(token) > data_section_col_width:
                raise FieldOverflowError(f"Parameter Data field '{token}' is {len(token)} characters long and "
                                         f"does not fit in the {data_section_col_width} free-format columns")
            if len(current_line) + len(token) > data_section_col_width:
                packed_lines.append(current_line)
                current_line = ""
            current_line += token
        packed_lines.append(current_line)

        return [f"{line:<{data_section_col_width}}{entity_entry_line:8d}P{data_starting_line + line_idx:7d}"
                for line_idx, line in enumerate(packed_lines)]


class MultiEntityContainer:
    def __init__(self, entities: typing.List[Entity]):
        self.entities = entities

    def write_all_entity_and_data_lines(self, real_format: str = "f", pack_parameter_data: bool = False):

        full_entity_lines = []
        full_data_lines = []
        data_starting_lines = [1]
        data_line_counts = []

        # First pass loop to generate the data lines and the data line numbers
        for entity_idx, entity in enumerate(self.entities):
            entity_entry_line = 1 + 2 * entity_idx
            if pack_parameter_data:
                data_lines = entity.write_packed_data_lines(entity_entry_line, data_starting_lines[-1],
                                                            real_format=real_format)
            else:
                data_lines = entity.write_data_lines(entity_entry_line, data_starting_lines[-1],
                                                     real_format=real_format)
            data_starting_lines.append(data_starting_lines[-1] + len(data_lines))
            data_line_counts.append(len(data_lines))
            logger.debug(f"Entity {entity.entity_ID.value} at DE line {entity_entry_line}: "
                         f"{len(data_lines)} Parameter Data lines")

            full_data_lines.extend(data_lines)

        # Second pass loop to use the data line numbers to generate the entity lines
        for entity_idx, entity in enumerate(self.entities):
            entity_entry_line = 1 + 2 * entity_idx
            full_entity_lines.extend(entity.write_entity_lines(entity_entry_line, data_starting_lines[entity_idx],
                                                               data_string_lines=data_line_counts[entity_idx]))

        return full_entity_lines, full_data_lines
