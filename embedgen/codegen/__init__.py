"""
Text generators for embedded-data headers.

Pure functions only: nothing in this package touches the filesystem.
"""
