"""ghcs: find GitHub codespaces and connect to, start, or stop them.

See `ghcs --help` for details.
"""
