from . import util

from .sponge import generate, Scene, Sponge

from .rendering import *

# pylama:ignore=W0611
