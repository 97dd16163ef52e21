"""Bitbucket issue poster - create tracker issues from the command line."""

__version__ = "0.1.0"
