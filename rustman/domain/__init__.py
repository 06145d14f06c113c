"""Domain layer for rustman.

Pure data structures and functions with no I/O:

- shared: Result type for explicit error handling
- project: the Project record built by the scanner
- menu: selection parsing and menu states
"""
