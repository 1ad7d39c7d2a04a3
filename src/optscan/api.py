## optscan — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from .types import OptionDescriptor, ParsedValue, ScanResult, LONG, SHORT, NONE, REQUIRED
from .errors import *
from .options import Options
from .scanner import ScanEngine

_OPTIONS = Options()

# Forwards reads only; change the convention with `configure(dos_mode=...)`.
def __getattr__(name):
    return getattr(_OPTIONS, name)
