"""
live-validation - declarative validation for interactive input fields

Describe a field with an ordered set of named rules once, then evaluate the
current value on every change to get:
- the overall verdict (`valid`: True / False / None for "nothing entered yet")
- per-rule feedback lines, shown only while the field is focused
- an optional summary of what a valid value looks like

Rendering the feedback is left to the caller.
"""

__version__ = "0.1.0"
__author__ = "Patrik Mojzis"
__email__ = "patrikm53@gmail.com"
__license__ = "MIT"

from .app_provider import boot
from .contracts import *  # noqa: F401,F403
from .core import *  # noqa: F401,F403
from .core.localization import __, set_locale, get_locale, trans, trans_choice, trans_text
from .decorators import *  # noqa: F401,F403
from .exceptions import *  # noqa: F401,F403
from .utils.value_utils import is_empty
