# -*- coding: utf-8 -*-
"""Version of package 'bigfraction'."""

__version__ = version = '0.9.0'
__version_tuple__ = version_tuple = (0, 9, 0)
