"""TSDoc README Generator.

Extracts method, property and event documentation from TypeScript
sources and splices a generated API table into each package README.
"""

__version__ = "0.1.0"
