from .city import *
