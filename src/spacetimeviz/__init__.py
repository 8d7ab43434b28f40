"""
spacetimeviz: toy spacetime curvature and warp bubble sampler

Turns a handful of slider parameters into plottable points for three
analytic models:
- time: curvature centred on the time value t
- tensor: curvature scaled by the stress-energy value T
- warp: simplified Alcubierre-style bubble shape

The engine (spacetimeviz.core) is pure. The presentation layer
(spacetimeviz.controls, spacetimeviz.viz) owns UI state and drawing.
"""

__version__ = "0.1.0"
