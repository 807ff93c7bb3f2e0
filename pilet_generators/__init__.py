"""Pilet generators -- scaffold starter pilets as compressed archives.

A generator declares typed input steps, validates a candidate input
mapping, synthesizes the pilet's files in memory and packages them into a
single gzip-compressed tar buffer.
"""

__version__ = "0.1.0"
