"""hueframe.

Drive hue lamps through the bridge's REST API as the pixels of an LED
device: RGB colors are mapped into each lamp's gamut, and the lamps are
handed back in their previous state once control ends.
"""

__version__ = "0.1.0"
