"""
Social Manager - theme supports

Reads the options a theme registers for the plugin and tells the rest of
the plugin which of them are enabled: a theme stylesheet, a custom
attribute prefix and the share buttons mode.
"""

__version__ = "1.1.0"
__author__ = "NineCodes"
