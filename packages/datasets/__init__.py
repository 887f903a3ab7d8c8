from .validator import validate_attempts_file, pretty_summary
from .io import read_lines, write_lines, load_attempts, write_keys

__all__ = [
    "validate_attempts_file", "pretty_summary",
    "read_lines", "write_lines", "load_attempts", "write_keys",
]
