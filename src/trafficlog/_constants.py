"""Internal constants shared across the library."""

MOTORWAY_CATEGORY = "A"
OTHER_CATEGORY = "S"

#: Accumulator value meaning "no journey has contributed yet".
UNSET_DISTANCE = -1

# ------------------------------------------------------------------
# Fixed-point distances  ("12,3" -> 123)
# ------------------------------------------------------------------

DISTANCE_SCALE = 10
DISTANCE_SEPARATOR = ","
MAX_WHOLE_DIGITS = 8

# ------------------------------------------------------------------
# Line grammar fragments
# ------------------------------------------------------------------

PLATE_PATTERN = r"[A-Za-z0-9]{3,11}"
ROAD_NUMBER_PATTERN = r"[1-9][0-9]{0,2}"
DISTANCE_PATTERN = r"0,[0-9]|[1-9][0-9]{0,7},[0-9]"
QUERY_MARK = "?"
MAX_ROAD_NUMBER = 999

ERROR_LINE_FORMAT = "Error in line {line_number}: {line}"


def format_error_line(line_number: int, line: str) -> str:
    """Render the diagnostic written to the error stream for *line_number*."""
    return ERROR_LINE_FORMAT.format(line_number=line_number, line=line)
