"""pick a branch of a github repository"""

try:
    from importlib.metadata import version

    __version__ = version("branchpick")
except Exception:
    __version__ = "0.0.0"
