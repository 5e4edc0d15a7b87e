from datetime import datetime

from igessurf import parameter_delimiter, record_delimiter
from igessurf.iges_param import IGESParam
from igessurf.start_end_section import wrap_section_text
from igessurf.version import __version__


class GlobalParams:
    """Global parameter section setup for the IGES file format containing defaults for each value"""

    units_indicators = {
        "inches": (1, "INCH"),
        "millimeters": (2, "MM"),
        "feet": (4, "FT"),
        "miles": (5, "MI"),
        "meters": (6, "M"),
        "kilometers": (7, "KM"),
        "mils": (8, "MIL"),
        "microns": (9, "UM"),
        "centimeters": (10, "CM"),
        "microinches": (11, "UIN"),
    }

    def __init__(self, file_name: str = "", product_id: str = "bspline_surfaces", units: str = "millimeters",
                 author_name: str = "", author_org: str = "", approx_max_coord_value: float = 100000.0,
                 real_format: str = "f"):
        if units not in self.units_indicators:
            raise ValueError(f"Units must be one of {list(self.units_indicators.keys())}. Found {units}.")
        self.real_format = real_format
        self.parameter_delimiter_char = IGESParam(parameter_delimiter, "string")
        self.record_delimiter_char = IGESParam(record_delimiter, "string")
        self.product_id_sender = IGESParam(product_id, "string")
        self.file_name = IGESParam(file_name, "string" if file_name else "none")
        self.native_system_id = IGESParam(f"igessurf {__version__}", "string")
        self.preprocessor_version = IGESParam(f"igessurf {__version__}", "string")
        self.binary_bits_int = IGESParam(32, "int")
        self.max_power_sp = IGESParam(38, "int")  # single-precision
        self.sig_digits_sp = IGESParam(6, "int")  # single-precision
        self.max_power_dp = IGESParam(308, "int")  # double-precision
        self.sig_digits_dp = IGESParam(15, "int")  # double-precision
        self.product_id_receiver = IGESParam(product_id, "string")
        self.model_space_scale = IGESParam(1.0, "real")
        self.units_flag = IGESParam(self.units_indicators[units][0], "int")
        self.units_name = IGESParam(self.units_indicators[units][1], "string")
        self.max_line_weight_gradations = IGESParam(1, "int")
        self.width_max_line_weight = IGESParam(1.0, "real")
        self.date_and_time_file_generation = IGESParam(datetime.now(), "datetime")
        self.min_model_resolution = IGESParam(1.0e-5, "real")
        self.approx_max_coord_value = IGESParam(approx_max_coord_value, "real")
        self.author_name = IGESParam(author_name, "string" if author_name else "none")
        self.author_org = IGESParam(author_org, "string" if author_org else "none")
        self.spec_compliance_flag = IGESParam(11, "int")
        self.spec_drafting_flag = IGESParam(0, "int")
        self.date_time_last_modification = IGESParam(datetime.now(), "datetime")

    def global_params(self):
        return [v for v in vars(self).values() if isinstance(v, IGESParam)]

    def write_globals_string(self):
        gp_list = [v.write_value_to_python_str(self.real_format) for v in self.global_params()]
        gp_string = self.parameter_delimiter_char.value.join(gp_list)
        gp_string += self.record_delimiter_char.value
        return gp_string

    def write_global_lines(self):
        return wrap_section_text(self.write_globals_string(), "G")
