from igessurf import global_section_col_width


def wrap_section_text(text: str, section_letter: str):
    """
    Splits ``text`` into 72-column chunks and tags each with the section letter and sequence number. Empty text
    still gives one blank line.
    """
    n_lines = max(1, -(-len(text) // global_section_col_width))
    section_lines = []
    for line_idx in range(n_lines):
        chunk = text[line_idx * global_section_col_width:(line_idx + 1) * global_section_col_width]
        section_lines.append(f"{chunk:<{global_section_col_width}}{section_letter}{line_idx + 1:7d}")
    return section_lines


class StartSection:
    def __init__(self, comment: str = ""):
        self.comment = comment

    def write_start_section_lines(self):
        return wrap_section_text(self.comment, "S")


class EndSection:
    def __init__(self, n_start_lines, n_global_lines, n_entity_lines, n_data_lines, n_end_lines: int = 1):
        self.n_start_lines = n_start_lines
        self.n_global_lines = n_global_lines
        self.n_entity_lines = n_entity_lines
        self.n_data_lines = n_data_lines
        self.n_end_lines = n_end_lines

    def write_end_section_string(self):
        end_section_string = \
            f"S{self.n_start_lines:7d}G{self.n_global_lines:7d}D{self.n_entity_lines:7d}P{self.n_data_lines:7d}"
        end_section_string += " " * (global_section_col_width - len(end_section_string))
        end_section_string += f"T{self.n_end_lines:7d}"
        return end_section_string
