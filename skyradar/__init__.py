"""Air traffic simulation logic: scripts, planes, towers, crashes, medals, skins and saves."""

__version__ = "0.1.0"