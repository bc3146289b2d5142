"""
RPG character demo package.

This package contains the modules for the interactive character demo,
including attack composition, character preparation, and the console session.
"""
