"""wish-shell - a small command interpreter with parallel jobs and output redirection"""

__version__ = "0.1.0"
