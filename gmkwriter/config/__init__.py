"""
Config Package

Project .ini parsing for .gmk builds.
"""

from .project_config import ProjectConfig, parse_bool, parse_moment
