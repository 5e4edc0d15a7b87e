from datetime import datetime


class IGESParam:
    allowed_dtypes = ["string", "int", "real", "datetime", "none"]

    def __init__(self, value, dtype: str):
        self.value = value
        self.dtype = dtype
        if self.dtype == "datetime" and not isinstance(self.value, datetime):
            raise TypeError(f"datetime was selected as the dtype for IGESParam with value {self.value}, but "
                            f"the type was {type(self.value)}. 'value' must be of type datetime.datetime.")
        if self.dtype not in self.allowed_dtypes:
            raise ValueError(f"IGESParam dtype must be one of {self.allowed_dtypes}. Chosen value was {self.dtype}.")

    def write_value_to_python_str(self, real_format: str = "f"):
        """
        Converts the parameter to its IGES free-format text.

        Parameters
        ==========
        real_format: str
          Python format specification used for reals. The default, ``"f"``, gives six decimals (``0.031250``).

        Returns
        =======
        str
          The field text, without delimiter
        """
        if self.dtype == "int":
            return str(int(self.value))
        elif self.dtype == "real":
            return format(float(self.value), real_format)
        elif self.dtype == "string":
            return f"{len(self.value)}H{self.value}"  # Hollerith format string
        elif self.dtype == "datetime":
            return f"15H{self.value.strftime('%Y%m%d.%H%M%S')}"
        elif self.dtype == "none":
            return ""
