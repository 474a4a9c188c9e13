"""
Schema module initialization.
Exports all request body schemas for convenient imports.
"""
from .auth import *
from .forum import *
