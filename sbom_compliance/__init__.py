"""
SBOM Compliance Engine
======================
Maps evaluated SBOM quality checks onto the TR-03183-2 (Cyber Resilience
Requirements, Part 2: SBOM) requirements catalog and produces JSON,
detailed table and one-line summary reports from the same figures.
"""

__version__ = "1.0.0"
__author__ = "SBOM Compliance Engine"
