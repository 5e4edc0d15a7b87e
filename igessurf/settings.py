import json

from igessurf.global_params import GlobalParams


class IGESSettings:
    """
    Output options for ``igessurf.iges_generator.IGESGenerator``. The defaults are six-decimal reals, bare
    newlines, one Parameter Data field per line, and blank Start and Global sections.
    """

    allowed_line_endings = ["\n", "\r\n"]

    def __init__(self, real_format: str = "f", line_ending: str = "\n", pack_parameter_data: bool = False,
                 populate_globals: bool = False, units: str = "millimeters", product_id: str = "bspline_surfaces",
                 author_name: str = "", author_org: str = "", start_comment: str = ""):
        try:
            float(format(1.0, real_format))
        except ValueError as e:
            raise ValueError(f"real_format '{real_format}' does not give a readable real number") from e
        if line_ending not in self.allowed_line_endings:
            raise ValueError(f"line_ending must be one of {self.allowed_line_endings}. Found {line_ending!r}.")
        if units not in GlobalParams.units_indicators:
            raise ValueError(f"units must be one of {list(GlobalParams.units_indicators.keys())}. Found {units}.")
        for name, text in [("product_id", product_id), ("author_name", author_name), ("author_org", author_org),
                           ("start_comment", start_comment)]:
            # IGES lines are fixed-column ASCII, and Hollerith counts are character counts
            if not (isinstance(text, str) and text.isascii() and text.isprintable()):
                raise ValueError(f"{name} must be a string of printable ASCII characters. Found {text!r}.")
        self.real_format = real_format
        self.line_ending = line_ending
        self.pack_parameter_data = pack_parameter_data
        self.populate_globals = populate_globals
        self.units = units
        self.product_id = product_id
        self.author_name = author_name
        self.author_org = author_org
        self.start_comment = start_comment

    def to_dict(self):
        return dict(vars(self))

    @classmethod
    def from_dict(cls, settings_dict: dict):
        unknown_keys = set(settings_dict.keys()) - set(cls().to_dict().keys())
        if unknown_keys:
            raise ValueError(f"Unknown IGES settings: {sorted(unknown_keys)}")
        return cls(**settings_dict)

    def to_json(self, file_name: str):
        with open(file_name, "w") as f:
            json.dump(self.to_dict(), f, indent=4)

    @classmethod
    def from_json(cls, file_name: str):
        with open(file_name, "r") as f:
            return cls.from_dict(json.load(f))
