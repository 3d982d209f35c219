"""BioForge: synthesize fictional organisms with generative models.

A trait editor collects a concept, the synthesis pipeline turns it into a
specimen record (structured biology text plus one image) and the archive keeps
every specimen on local disk for browsing.
"""

__version__ = "0.3.0"
