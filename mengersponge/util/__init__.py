from .geometry import *
from .color import *
from .misc import *
