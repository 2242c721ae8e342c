"""
isort:skip_file
"""

from .eachline import each_line as each_line
from .eachline import readlines as readlines
from .eachline import LineIterator as LineIterator
from .eachline import IteratorState as IteratorState
from .eachline import DEFAULT_SEPARATOR as DEFAULT_SEPARATOR
from .eachline import DEFAULT_CHUNK_SIZE as DEFAULT_CHUNK_SIZE

from .validation import ValidationError as ValidationError
from .validation import InvalidArgument as InvalidArgument

from .each_line_in_path import each_line_in_path as each_line_in_path

from .cli import cli as cli
