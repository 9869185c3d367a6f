"""Building blocks for PCB toolpaths: units, drills, tool settings, tiling, path trimming and arc sampling."""

__version__ = "2.5.0"